"""CLI entry point for deployzzz."""

import sys
from typing import Optional

import click
import typer

from deployzzz import config, display
from deployzzz.commands import auth, billing, iam, org_policy, permissions, project, storage
from deployzzz.log import setup_logging
from deployzzz.types import ConfigError

app = typer.Typer(
    help="Deploy and administer Google Cloud projects from the terminal",
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth")
app.add_typer(project.app, name="project")
app.add_typer(storage.app, name="storage")
app.add_typer(billing.app, name="billing")
app.add_typer(iam.app, name="iam")
app.add_typer(permissions.app, name="permissions")
app.add_typer(org_policy.app, name="org-policy")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output and echo every gcloud command",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """
    Deploy and administer Google Cloud projects from the terminal.

    Every command prompts for the options you leave out.
    """
    try:
        settings = config.load_settings()
    except ConfigError as e:
        display.error(str(e))
        raise typer.Exit(code=1)

    settings = settings.with_overrides(verbose=verbose, log_level=log_level)
    config.set_settings(settings)
    setup_logging(settings.log_level)
    display.banner()


@app.command("version")
def version():
    """Show the version of deployzzz."""
    from deployzzz import __version__

    display.console.print(f"deployzzz version: [bold green]{__version__}[/bold green]")


def main():
    """Main entry point for the CLI.

    Runs the app outside click's standalone mode so that the process exits
    with 0 or 1 only. An interrupt anywhere, the root callback included, ends
    the tool silently with 0.
    """
    try:
        result = app(standalone_mode=False)
    except click.exceptions.Abort:
        sys.exit(0)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    sys.exit(1 if isinstance(result, int) and result != 0 else 0)


if __name__ == "__main__":
    main()
