"""``deployzzz project`` commands."""

from typing import Optional

import typer

from deployzzz import display, validators
from deployzzz.commands._common import PROJECT_HELP, ask_project_id, fail, handle_errors, select_project
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.workflows import projects as project_workflow

app = typer.Typer(help="Manage GCP projects", no_args_is_help=True)


@app.command("list")
def list_projects():
    """List all accessible projects."""
    with handle_errors("listing projects"):
        display.command_title("List Projects")
        with display.spinner("Fetching projects..."):
            projects = project_workflow.list_projects()

        if not projects:
            display.info("No projects found")
            display.info("You may need to create a new project or request access to existing ones")
            return

        display.numbered_list("Available Projects", projects)


@app.command("create")
def create(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Project display name (interactive if not provided)",
    ),
    organization: Optional[str] = typer.Option(
        None,
        "--organization",
        "-o",
        help="Parent organization ID (interactive if not provided)",
    ),
):
    """
    Create a new GCP project.

    If any option is missing you'll be prompted for it. The organization
    prompt is skipped when no organization is visible to your account.

    Examples:
        deployzzz project create
        deployzzz project create -p my-proj-1 -n "My Project" -o 123456789
    """
    with handle_errors("creating project"):
        display.command_title("Create New Project")

        project_id = ask_project_id(project_id)
        name = resolve(
            name,
            Param(
                message="Enter project display name:",
                validate=validators.is_project_name,
                invalid_message=validators.PROJECT_NAME_MESSAGE,
            ),
        )

        def organizations() -> list[dict]:
            return [
                {"name": org.label(), "value": org.id}
                for org in project_workflow.list_organizations()
            ]

        organization = resolve(
            organization,
            Param(
                message="Select organization:",
                kind=PromptKind.SELECT,
                choices=organizations,
                required=False,
                section="Available Organizations",
            ),
        )

        confirm_or_abort("Creating a new project may incur costs")

        success = project_workflow.create_project(project_id, name, organization)

        if not success:
            fail("Failed to create project")

        display.success(f'Successfully created project "{project_id}"')
        display.table(
            ["Property", "Value"],
            [
                ["Project ID", project_id],
                ["Display Name", name],
                ["Organization", organization or "None"],
                ["Status", "Created"],
            ],
        )


@app.command("delete")
def delete(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """Delete a GCP project."""
    with handle_errors("deleting project"):
        display.command_title("Delete Project")
        project_id = select_project(project_id, "Select project to delete:")

        confirm_or_abort(f'You are about to delete project "{project_id}". This action cannot be undone.')

        success = project_workflow.delete_project(project_id)

        if not success:
            fail(f'Failed to delete project "{project_id}"')
        display.success(f'Successfully deleted project "{project_id}"')


@app.command("info")
def info(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """Get project information."""
    with handle_errors("fetching project information"):
        display.command_title("Project Information")
        project_id = select_project(project_id, "Select project:")

        with display.spinner("Fetching project information..."):
            project = project_workflow.get_project(project_id)

        if project is None:
            fail(f'Project "{project_id}" not found')

        display.section(f'Project Details for "{project_id}"')
        display.table(
            ["Property", "Value"],
            [
                ["Project ID", project.project_id],
                ["Name", project.name],
                ["Project Number", project.project_number],
                ["Parent", project.parent_label()],
                ["Organization", project.organization_id or "None"],
                ["Created", project.create_time or "N/A"],
                ["State", project.lifecycle_state or "N/A"],
                ["Number of APIs Enabled", str(len(project.enabled_apis))],
            ],
        )

        if project.enabled_apis:
            display.numbered_list("Enabled APIs", project.enabled_apis)
