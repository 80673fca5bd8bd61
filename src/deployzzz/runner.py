"""Run gcloud as a subprocess.

All service modules go through a :class:`GCloudRunner`. The process-wide
default is created lazily from the active settings; tests install their own
runner with :func:`set_runner`.
"""

import json
import logging
import shlex
import signal
import subprocess
from typing import Any, Optional, Sequence

from rich.console import Console

from deployzzz.config import get_settings
from deployzzz.types import CommandInterrupted, GCloudError

logger = logging.getLogger(__name__)
console = Console()

_INTERRUPTED_RETURN_CODES = (-signal.SIGINT, 128 + signal.SIGINT)

_runner: Optional["GCloudRunner"] = None


class GCloudRunner:
    """Execute gcloud commands.

    Args:
        executable: Name or path of the gcloud binary
        verbose: If True, print every command before running it
    """

    def __init__(self, executable: str = "gcloud", verbose: bool = False):
        self.executable = executable
        self.verbose = verbose

    def command_line(self, args: Sequence[str]) -> list[str]:
        return [self.executable, *args]

    def run(self, args: Sequence[str], *, capture: bool = True) -> str:
        """Run a gcloud command and return output.

        Args:
            args: List of arguments to pass to gcloud
            capture: If True, capture and return stdout. If False, the command
                inherits the terminal so its own prompts reach the user.

        Returns:
            Stripped stdout if capture=True, an empty string otherwise

        Raises:
            GCloudError: If the command exits non-zero or cannot be started
            CommandInterrupted: If the command was stopped by the interrupt key
        """
        cmd = self.command_line(args)
        text = shlex.join(cmd)
        logger.debug("Running: %s", text)
        if self.verbose:
            console.print(f"[dim]$ {text}[/dim]", highlight=False)

        try:
            result = subprocess.run(cmd, capture_output=capture, text=True)
        except OSError as e:
            raise GCloudError(f"Could not run {cmd[0]}: {e}") from e

        if result.returncode in _INTERRUPTED_RETURN_CODES:
            raise CommandInterrupted(text)
        if result.returncode != 0:
            stderr = (result.stderr or "").strip() if capture else ""
            message = f"Command failed: {text}"
            if stderr:
                message = f"{message}\n{stderr}"
            logger.error("Command failed: %s", text)
            raise GCloudError(message)

        return result.stdout.strip() if capture else ""

    def run_json(self, args: Sequence[str]) -> Any:
        """Run a captured command with ``--format=json`` and parse its output.

        Returns:
            The decoded JSON value, or None when the command printed nothing

        Raises:
            GCloudError: If the command fails
            ValueError: If the output is not valid JSON
        """
        output = self.run([*args, "--format=json"])
        if not output:
            return None
        return json.loads(output)


def get_runner() -> GCloudRunner:
    """Return the process-wide runner, creating it from settings on first use."""
    global _runner
    if _runner is None:
        settings = get_settings()
        _runner = GCloudRunner(settings.gcloud_path, verbose=settings.verbose)
    return _runner


def set_runner(runner: Optional[GCloudRunner]) -> None:
    """Install the process-wide runner (``None`` resets to the default)."""
    global _runner
    _runner = runner
