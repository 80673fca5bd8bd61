"""``deployzzz iam`` commands."""

from typing import Optional

import typer
from InquirerPy.separator import Separator

from deployzzz import display, validators
from deployzzz.commands._common import PROJECT_HELP, ask_email, fail, handle_errors, select_project
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.types import ADMIN_ROLES
from deployzzz.workflows import iam as iam_workflow

app = typer.Typer(help="Manage IAM roles on a project", no_args_is_help=True)

EMAIL_HELP = "User email (interactive if not provided)"
CUSTOM_ROLE = "__custom_role__"


def _role_choices() -> list:
    return [
        *({"name": role.label(), "value": role.name} for role in iam_workflow.common_roles()),
        Separator(),
        {"name": "Enter custom role", "value": CUSTOM_ROLE},
    ]


def _ask_role(role: Optional[str]) -> str:
    role = resolve(role, Param(message="Select role:", kind=PromptKind.SELECT, choices=_role_choices))
    if role == CUSTOM_ROLE:
        role = resolve(
            None,
            Param(
                message="Enter role (e.g. roles/run.admin):",
                validate=validators.is_role,
                invalid_message=validators.ROLE_MESSAGE,
            ),
        )
    return role


@app.command("add-role")
def add_role(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    email: Optional[str] = typer.Option(None, "--email", "-e", help=EMAIL_HELP),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Role to grant (interactive if not provided)"),
):
    """
    Grant a role to a user on a project.

    Examples:
        deployzzz iam add-role
        deployzzz iam add-role -p my-proj -e alice@example.com -r roles/viewer
    """
    with handle_errors("adding role"):
        display.command_title("Add IAM Role")
        project_id = select_project(project_id)
        email = ask_email(email)
        role = _ask_role(role)

        confirm_or_abort(f'Grant "{role}" to {email} on project "{project_id}"')

        with display.spinner("Adding role..."):
            success = iam_workflow.add_role(project_id, email, role)

        if not success:
            fail(f'Failed to add role "{role}"')
        display.success(f'Granted "{role}" to {email}')


@app.command("remove-role")
def remove_role(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    email: Optional[str] = typer.Option(None, "--email", "-e", help=EMAIL_HELP),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Role to remove (interactive if not provided)"),
):
    """Remove a role from a user on a project."""
    with handle_errors("removing role"):
        display.command_title("Remove IAM Role")
        project_id = select_project(project_id)
        email = ask_email(email)
        role = resolve(
            role,
            Param(
                message="Select role to remove:",
                kind=PromptKind.SELECT,
                choices=lambda: iam_workflow.list_user_roles(project_id, email),
                empty_message=f'No roles found for {email} on project "{project_id}"',
            ),
        )

        confirm_or_abort(f'Remove "{role}" from {email} on project "{project_id}"')

        with display.spinner("Removing role..."):
            success = iam_workflow.remove_role(project_id, email, role)

        if not success:
            fail(f'Failed to remove role "{role}"')
        display.success(f'Removed "{role}" from {email}')


@app.command("list-roles")
def list_roles(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    email: Optional[str] = typer.Option(None, "--email", "-e", help=EMAIL_HELP),
):
    """List the roles a user holds on a project."""
    with handle_errors("listing roles"):
        display.command_title("List IAM Roles")
        project_id = select_project(project_id)
        email = ask_email(email)

        with display.spinner("Fetching roles..."):
            roles = iam_workflow.list_user_roles(project_id, email)

        if not roles:
            display.info(f'No roles found for {email} on project "{project_id}"')
            return

        display.numbered_list(f"Roles for {email}", roles)


@app.command("apply-admin")
def apply_admin(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    email: Optional[str] = typer.Option(None, "--email", "-e", help=EMAIL_HELP),
):
    """Grant the admin role bundle to a user."""
    with handle_errors("applying admin roles"):
        display.command_title("Apply Admin Roles")
        project_id = select_project(project_id)
        email = ask_email(email)

        display.numbered_list("Roles to grant", list(ADMIN_ROLES))
        confirm_or_abort(f'{email} will receive administrative access to project "{project_id}"')

        with display.spinner("Applying admin roles..."):
            success = iam_workflow.apply_admin_roles(project_id, email)

        if not success:
            fail("Failed to apply all admin roles")
        display.success(f"Admin roles applied to {email}")
