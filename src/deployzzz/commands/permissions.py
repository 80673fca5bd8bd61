"""``deployzzz permissions`` commands."""

from typing import Optional

import typer

from deployzzz import display, validators
from deployzzz.commands._common import PROJECT_HELP, handle_errors, select_project
from deployzzz.resolver import Param, PromptKind, resolve
from deployzzz.workflows import iam as iam_workflow
from deployzzz.workflows import permissions as permissions_workflow

app = typer.Typer(help="Inspect your permissions on a project", no_args_is_help=True)


def _split(permissions: Optional[str]) -> Optional[list[str]]:
    if permissions is None:
        return None
    return [item.strip() for item in permissions.split(",") if item.strip()]


@app.command("list")
def list_permissions(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """List the current account's roles on a project."""
    with handle_errors("listing permissions"):
        display.command_title("List Permissions")
        project_id = select_project(project_id)

        with display.spinner("Fetching permissions..."):
            permissions = permissions_workflow.list_permissions(project_id)

        if not permissions:
            display.info(f'No permissions found on project "{project_id}"')
            return

        display.numbered_list(f'Permissions on "{project_id}"', permissions)


@app.command("check")
def check(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    permissions: Optional[str] = typer.Option(
        None,
        "--permissions",
        help="Comma-separated roles to check (interactive if not provided)",
    ),
):
    """
    Check whether the current account holds the given roles.

    Examples:
        deployzzz permissions check -p my-proj --permissions roles/owner,roles/viewer
    """
    with handle_errors("checking permissions"):
        display.command_title("Check Permissions")
        project_id = select_project(project_id)

        selected = resolve(
            _split(permissions),
            Param(
                message="Select permissions to check:",
                kind=PromptKind.CHECKBOX,
                choices=lambda: [
                    {"name": role.label(), "value": role.name} for role in iam_workflow.common_roles()
                ],
                validate=validators.is_nonempty_selection,
                invalid_message=validators.SELECTION_MESSAGE,
            ),
        )

        with display.spinner("Checking permissions..."):
            results = permissions_workflow.check_permissions(project_id, selected)

        display.table(
            ["Permission", "Status"],
            [[name, "Granted" if granted else "Denied"] for name, granted in results.items()],
            empty_message="No permissions to check",
        )
