"""``deployzzz auth`` commands."""

from typing import Optional

import typer
from InquirerPy.separator import Separator

from deployzzz import display
from deployzzz.commands._common import PROJECT_HELP, ask_project_id, fail, handle_errors
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.workflows import auth as auth_workflow
from deployzzz.workflows import projects as project_workflow

app = typer.Typer(help="Manage GCP authentication", no_args_is_help=True)

ADD_ACCOUNT = "__add_account__"


@app.command("check")
def check():
    """Check if user is authenticated."""
    with handle_errors("checking authentication"):
        display.command_title("Check Authentication Status")
        with display.spinner("Checking authentication status..."):
            authenticated = auth_workflow.is_authenticated()

        if not authenticated:
            display.error("You are not authenticated with GCP")
            display.info('Run "deployzzz auth login" to authenticate')
            raise typer.Exit(code=1)

        display.success("You are authenticated with GCP")
        account = auth_workflow.get_current_account()
        if account:
            display.table(["Property", "Value"], [["Active Account", account]])


@app.command("login")
def login(
    project_id: Optional[str] = typer.Option(
        None,
        "--project-id",
        "-p",
        help="Project to make the default after login (interactive if not provided)",
    ),
):
    """Login to GCP through the browser and pick a default project."""
    with handle_errors("during authentication"):
        display.command_title("GCP Authentication")

        if not auth_workflow.authenticate():
            fail("Failed to authenticate with GCP")

        project_id = resolve(
            project_id,
            Param(
                message="Select default project:",
                kind=PromptKind.SELECT,
                choices=project_workflow.list_projects,
                required=False,
                section="Available Projects",
            ),
        )
        if project_id and not project_workflow.set_active_project(project_id):
            display.warning(f'Could not make "{project_id}" the default project')

        display.success("Successfully authenticated with GCP")
        display.table(
            ["Property", "Value"],
            [
                ["Account", auth_workflow.get_current_account() or "Unknown"],
                ["Project ID", project_id or "None"],
                ["Status", "Authenticated"],
            ],
        )


@app.command("list-accounts")
def list_accounts():
    """List all connected accounts."""
    with handle_errors("listing accounts"):
        display.command_title("Connected Accounts")
        with display.spinner("Fetching accounts..."):
            accounts = auth_workflow.list_accounts()

        if not accounts:
            display.info("No accounts connected")
            display.info('Run "deployzzz auth login" to connect an account')
            return

        current = auth_workflow.get_current_account()
        display.numbered_list(
            "Connected Accounts",
            [f"{account} (active)" if account == current else account for account in accounts],
        )


@app.command("list-projects")
def list_projects():
    """List all accessible projects."""
    with handle_errors("listing projects"):
        display.command_title("Accessible Projects")
        with display.spinner("Fetching projects..."):
            projects = project_workflow.list_projects()

        if not projects:
            display.info("No projects found")
            display.info("You may need to create a new project or request access to existing ones")
            return

        display.numbered_list("Available Projects", projects)


@app.command("create-project")
def create_project(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """Create a new GCP project."""
    with handle_errors("creating project"):
        display.command_title("Create New Project")
        project_id = ask_project_id(project_id)

        confirm_or_abort("Creating a new project may incur costs")

        success = project_workflow.create_project(project_id)

        if not success:
            fail("Failed to create project")

        display.success(f'Successfully created project "{project_id}"')
        display.table(["Property", "Value"], [["Project ID", project_id], ["Status", "Created"]])


@app.command("switch")
def switch(
    account: Optional[str] = typer.Option(
        None,
        "--account",
        "-a",
        help="Account email to switch to (interactive if not provided)",
    ),
):
    """Switch the active account, or add a new one."""
    with handle_errors("switching account"):
        display.command_title("Switch Account")

        if account is None:
            others = auth_workflow.list_accounts(exclude_current=True)
            if not others:
                display.info("No other accounts connected")
                display.info('Run "deployzzz auth login" to connect another account')
                return

            current = auth_workflow.get_current_account()
            if current:
                display.info(f"Current account: {current}")
            account = resolve(
                None,
                Param(
                    message="Select account:",
                    kind=PromptKind.SELECT,
                    choices=[*others, Separator(), {"name": "Add a new account", "value": ADD_ACCOUNT}],
                ),
            )

        if account == ADD_ACCOUNT:
            if not auth_workflow.add_account():
                fail("Failed to add account")
            display.success("Successfully added a new account")
            return

        if not auth_workflow.switch_account(account):
            fail(f'Failed to switch to account "{account}"')
        display.success(f'Switched to account "{account}"')


@app.command("logout")
def logout():
    """Revoke credentials for every connected account."""
    with handle_errors("logging out"):
        display.command_title("Logout")
        confirm_or_abort("This will revoke credentials for all connected accounts")

        if not auth_workflow.logout():
            fail("Failed to logout")
        display.success("Successfully logged out of all accounts")
