"""``deployzzz org-policy`` commands."""

from typing import Optional

import typer

from deployzzz import display, validators
from deployzzz.commands._common import PROJECT_HELP, fail, handle_errors, select_policy, select_project
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.workflows import org_policy as org_policy_workflow

app = typer.Typer(help="Configure organization policies on a project", no_args_is_help=True)

POLICY_HELP = "Constraint name, e.g. constraints/compute.vmExternalIpAccess (interactive if not provided)"


@app.command("list")
def list_policies(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """List organization policies set on a project."""
    with handle_errors("listing policies"):
        display.command_title("Organization Policies")
        project_id = select_project(project_id)

        with display.spinner("Fetching policies..."):
            policies = org_policy_workflow.list_policies(project_id)

        display.table(
            ["Policy Name", "Enforcement", "Has Exceptions"],
            [
                [policy.name, policy.enforcement_label, "Yes" if policy.exceptions else "No"]
                for policy in policies
            ],
            empty_message=f'No policies found on project "{project_id}"',
        )


@app.command("get")
def get_policy(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    policy_name: Optional[str] = typer.Option(None, "--policy-name", "-n", help=POLICY_HELP),
):
    """Show the details of one policy."""
    with handle_errors("fetching policy"):
        display.command_title("Policy Details")
        project_id = select_project(project_id)
        policy_name = select_policy(project_id, policy_name)

        with display.spinner("Fetching policy..."):
            policy = org_policy_workflow.get_policy(project_id, policy_name)

        if policy is None:
            fail(f'Policy "{policy_name}" not found')

        display.table(
            ["Property", "Value"],
            [
                ["Name", policy.name],
                ["Enforcement", policy.enforcement_label],
                ["Last Updated", policy.update_time or "N/A"],
                ["Exceptions", str(len(policy.exceptions))],
            ],
        )
        if policy.exceptions:
            display.numbered_list("Exceptions", policy.exceptions)


@app.command("set-enforcement")
def set_enforcement(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    policy_name: Optional[str] = typer.Option(None, "--policy-name", "-n", help=POLICY_HELP),
    enforce: Optional[bool] = typer.Option(
        None,
        "--enforce/--no-enforce",
        help="Enforce or stop enforcing the policy (asked if not provided)",
    ),
):
    """Turn enforcement of a boolean policy on or off."""
    with handle_errors("updating policy enforcement"):
        display.command_title("Set Policy Enforcement")
        project_id = select_project(project_id)
        policy_name = select_policy(project_id, policy_name)
        enforce = resolve(
            enforce,
            Param(message="Enforce this policy?", kind=PromptKind.CONFIRM, default=True),
        )

        state = "enforced" if enforce else "not enforced"
        confirm_or_abort(f'Policy "{policy_name}" will be {state} on project "{project_id}"')

        success = org_policy_workflow.set_enforcement(project_id, policy_name, enforce)

        if not success:
            fail(f'Failed to update policy "{policy_name}"')
        display.success(f'Policy "{policy_name}" is now {state}')


@app.command("add-exception")
def add_exception(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    policy_name: Optional[str] = typer.Option(None, "--policy-name", "-n", help=POLICY_HELP),
    resource: Optional[str] = typer.Option(
        None,
        "--resource",
        "-r",
        help="Resource path to allow, starting with // (interactive if not provided)",
    ),
):
    """Allow a resource as an exception to a list policy."""
    with handle_errors("adding policy exception"):
        display.command_title("Add Policy Exception")
        project_id = select_project(project_id)
        policy_name = select_policy(project_id, policy_name)
        resource = resolve(
            resource,
            Param(
                message="Enter resource path:",
                validate=validators.is_resource_path,
                invalid_message=validators.RESOURCE_PATH_MESSAGE,
            ),
        )

        confirm_or_abort(f'"{resource}" will be exempt from policy "{policy_name}"')

        success = org_policy_workflow.add_exception(project_id, policy_name, resource)

        if not success:
            fail(f'Failed to add exception to policy "{policy_name}"')
        display.success(f'Added exception for "{resource}" to policy "{policy_name}"')
