"""Logging setup for the deployzzz CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "deployzzz"


class CLIHandler(RichHandler):
    """Rich handler writing compact, colored log lines to stderr."""

    def __init__(self) -> None:
        super().__init__(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
            markup=False,
        )


def setup_logging(level: str = "WARNING") -> None:
    """Attach a rich handler to the package logger.

    The handler is added once; later calls only change the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not any(isinstance(h, CLIHandler) for h in logger.handlers):
        logger.addHandler(CLIHandler())
