"""``deployzzz storage`` commands."""

from typing import Optional

import typer

from deployzzz import display, validators
from deployzzz.commands._common import PROJECT_HELP, fail, handle_errors, select_bucket, select_project
from deployzzz.resolver import Param, PromptKind, confirm_or_abort, resolve
from deployzzz.types import BUCKET_LOCATIONS, STORAGE_CLASSES
from deployzzz.workflows import storage as storage_workflow

app = typer.Typer(help="Manage Cloud Storage buckets", no_args_is_help=True)

BUCKET_HELP = "Bucket name (interactive if not provided)"


def _access_label(is_public: bool) -> str:
    return "Enabled" if is_public else "Disabled"


@app.command("create-bucket")
def create_bucket(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    bucket_name: Optional[str] = typer.Option(None, "--bucket-name", "-n", help=BUCKET_HELP),
    location: Optional[str] = typer.Option(
        None,
        "--location",
        "-l",
        help=f"Bucket location, e.g. {', '.join(BUCKET_LOCATIONS)} (interactive if not provided)",
    ),
    storage_class: Optional[str] = typer.Option(
        None,
        "--storage-class",
        "-s",
        help=f"Default storage class: {', '.join(STORAGE_CLASSES)} (interactive if not provided)",
    ),
    public: Optional[bool] = typer.Option(
        None,
        "--public/--private",
        help="Grant public read access to the bucket's objects (asked if not provided)",
    ),
):
    """
    Create a new Cloud Storage bucket.

    Examples:
        deployzzz storage create-bucket
        deployzzz storage create-bucket -p my-proj -n my-assets -l us-east1 -s STANDARD --private
    """
    with handle_errors("creating bucket"):
        display.command_title("Create Storage Bucket")

        project_id = select_project(project_id)
        bucket_name = resolve(
            bucket_name,
            Param(
                message="Enter bucket name:",
                validate=validators.is_bucket_name,
                invalid_message=validators.BUCKET_NAME_MESSAGE,
            ),
        )
        location = resolve(
            location,
            Param(
                message="Select bucket location:",
                kind=PromptKind.SELECT,
                choices=list(BUCKET_LOCATIONS),
                default=BUCKET_LOCATIONS[0],
            ),
        )
        storage_class = resolve(
            storage_class,
            Param(
                message="Select storage class:",
                kind=PromptKind.SELECT,
                choices=[
                    {"name": f"{name} - {description}", "value": name}
                    for name, description in STORAGE_CLASSES.items()
                ],
                default="STANDARD",
            ),
        )
        public = resolve(
            public,
            Param(message="Make bucket public?", kind=PromptKind.CONFIRM, default=False),
        )

        warning = f'You are about to create bucket "{bucket_name}" in project "{project_id}"'
        if public:
            warning += ". Its objects will be readable by anyone on the internet."
        confirm_or_abort(warning)

        success = storage_workflow.create_bucket(bucket_name, project_id, location, storage_class, public)

        if not success:
            fail(f'Failed to create bucket "{bucket_name}"')

        display.success(f'Successfully created bucket "{bucket_name}"')
        display.table(
            ["Property", "Value"],
            [
                ["Name", bucket_name],
                ["Project", project_id],
                ["Location", location],
                ["Storage Class", storage_class],
                ["Public Access", _access_label(public)],
            ],
        )


@app.command("list")
def list_buckets(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
):
    """List buckets in a project."""
    with handle_errors("listing buckets"):
        display.command_title("List Storage Buckets")
        project_id = select_project(project_id)

        with display.spinner("Fetching buckets..."):
            buckets = storage_workflow.list_buckets(project_id)

        if not buckets:
            display.info(f'No buckets found in project "{project_id}"')
            return

        display.numbered_list(f'Buckets in "{project_id}"', buckets)


@app.command("make-public")
def make_public(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    bucket_name: Optional[str] = typer.Option(None, "--bucket-name", "-n", help=BUCKET_HELP),
):
    """Grant public read access to a bucket."""
    with handle_errors("making bucket public"):
        display.command_title("Make Bucket Public")
        project_id = select_project(project_id)
        bucket_name = select_bucket(project_id, bucket_name)

        confirm_or_abort(f'Objects in bucket "{bucket_name}" will be readable by anyone on the internet')

        with display.spinner("Updating bucket access..."):
            success = storage_workflow.make_bucket_public(bucket_name, project_id)

        if not success:
            fail(f'Failed to make bucket "{bucket_name}" public')
        display.success(f'Bucket "{bucket_name}" is now public')


@app.command("make-private")
def make_private(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    bucket_name: Optional[str] = typer.Option(None, "--bucket-name", "-n", help=BUCKET_HELP),
):
    """Remove public read access from a bucket."""
    with handle_errors("making bucket private"):
        display.command_title("Make Bucket Private")
        project_id = select_project(project_id)
        bucket_name = select_bucket(project_id, bucket_name)

        confirm_or_abort(f'Public read access to bucket "{bucket_name}" will be removed')

        with display.spinner("Updating bucket access..."):
            success = storage_workflow.make_bucket_private(bucket_name, project_id)

        if not success:
            fail(f'Failed to make bucket "{bucket_name}" private')
        display.success(f'Bucket "{bucket_name}" is now private')


@app.command("check-public")
def check_public(
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help=PROJECT_HELP),
    bucket_name: Optional[str] = typer.Option(None, "--bucket-name", "-n", help=BUCKET_HELP),
):
    """Check whether a bucket is publicly readable."""
    with handle_errors("checking bucket access"):
        display.command_title("Check Bucket Access")
        project_id = select_project(project_id)
        bucket_name = select_bucket(project_id, bucket_name)

        with display.spinner("Checking bucket access..."):
            is_public = storage_workflow.is_bucket_public(bucket_name, project_id)

        display.table(
            ["Property", "Value"],
            [["Bucket", bucket_name], ["Public Access", _access_label(is_public)]],
        )
