"""``deployzzz billing`` commands."""

from typing import Optional

import typer

from deployzzz import display
from deployzzz.commands._common import PROJECT_HELP, fail, handle_errors, select_project
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.workflows import billing as billing_workflow

app = typer.Typer(help="Manage billing account links", no_args_is_help=True)


@app.command("list-accounts")
def list_accounts():
    """List available billing accounts."""
    with handle_errors("listing billing accounts"):
        display.command_title("Billing Accounts")
        with display.spinner("Fetching billing accounts..."):
            accounts = billing_workflow.list_billing_accounts()

        display.table(
            ["ID", "Name", "Status"],
            [[account.id, account.display_name, account.status] for account in accounts],
            empty_message="No billing accounts found",
        )


@app.command("link")
def link(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    billing_account: Optional[str] = typer.Option(
        None,
        "--billing-account",
        "-b",
        help="Billing account ID (interactive if not provided)",
    ),
):
    """Link a billing account to a project."""
    with handle_errors("linking billing account"):
        display.command_title("Link Billing Account")
        project_id = select_project(project_id)

        def open_accounts() -> list[dict]:
            return [
                {"name": f"{account.display_name} ({account.id})", "value": account.id}
                for account in billing_workflow.list_billing_accounts()
                if account.open
            ]

        billing_account = resolve(
            billing_account,
            Param(
                message="Select billing account:",
                kind=PromptKind.SELECT,
                choices=open_accounts,
                empty_message="No open billing accounts found",
            ),
        )

        confirm_or_abort(
            f'Billing account "{billing_account}" will be charged for resources in project "{project_id}"'
        )

        if not billing_workflow.link_billing_account(project_id, billing_account):
            fail(f'Failed to link billing account to project "{project_id}"')
        display.success(f'Billing account "{billing_account}" linked to project "{project_id}"')


@app.command("check")
def check(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """Check whether billing is enabled for a project."""
    with handle_errors("checking billing status"):
        display.command_title("Check Billing Status")
        project_id = select_project(project_id)

        with display.spinner("Checking billing status..."):
            enabled = billing_workflow.is_billing_enabled(project_id)

        if enabled:
            display.success(f'Billing is enabled for project "{project_id}"')
        else:
            display.warning(f'Billing is not enabled for project "{project_id}"')
            display.info('Run "deployzzz billing link" to link a billing account')
