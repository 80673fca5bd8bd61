"""Helpers shared by the command groups."""

from contextlib import contextmanager
from typing import Iterator, Optional

import typer

from deployzzz import display, validators
from deployzzz.resolver import Param, PromptKind, resolve
from deployzzz.types import GCloudError
from deployzzz.workflows import org_policy as org_policy_workflow
from deployzzz.workflows import projects as project_workflow
from deployzzz.workflows import storage as storage_workflow

PROJECT_HELP = "GCP project ID (interactive if not provided)"


@contextmanager
def handle_errors(action: str) -> Iterator[None]:
    """Turn exceptions escaping a command body into exit codes.

    Interrupts end the command silently with code 0. gcloud errors and
    unexpected exceptions are reported and end it with code 1.
    """
    try:
        yield
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        raise typer.Exit(code=0)
    except GCloudError as e:
        display.error(f"Error {action}: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        display.error(f"Unexpected error {action}: {e}")
        raise typer.Exit(code=1)


def fail(message: str) -> None:
    """Report a failed operation and exit with code 1."""
    display.error(message)
    raise typer.Exit(code=1)


def select_project(project_id: Optional[str], message: str = "Select a project:") -> str:
    return resolve(
        project_id,
        Param(
            message=message,
            kind=PromptKind.SELECT,
            choices=project_workflow.list_projects,
            empty_message="No projects found",
        ),
    )


def ask_email(email: Optional[str]) -> str:
    return resolve(
        email,
        Param(
            message="Enter user email:",
            validate=validators.is_email,
            invalid_message=validators.EMAIL_MESSAGE,
        ),
    )


def ask_project_id(project_id: Optional[str]) -> str:
    return resolve(
        project_id,
        Param(
            message="Enter project ID:",
            validate=validators.is_project_id,
            invalid_message=validators.PROJECT_ID_MESSAGE,
        ),
    )


def select_bucket(project_id: str, bucket_name: Optional[str]) -> str:
    return resolve(
        bucket_name,
        Param(
            message="Select a bucket:",
            kind=PromptKind.SELECT,
            choices=lambda: storage_workflow.list_buckets(project_id),
            empty_message="No buckets found",
        ),
    )


def select_policy(project_id: str, policy_name: Optional[str]) -> str:
    def choices() -> list[dict]:
        return [
            {"name": f"{policy.name} ({policy.enforcement_label})", "value": policy.name}
            for policy in org_policy_workflow.list_policies(project_id)
        ]

    return resolve(
        policy_name,
        Param(
            message="Select policy:",
            kind=PromptKind.SELECT,
            choices=choices,
            empty_message="No policies found",
        ),
    )
