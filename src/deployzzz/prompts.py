"""Thin wrappers around InquirerPy prompts.

Commands never call InquirerPy directly so tests can replace these functions
with scripted answers.
"""

from typing import Any, Callable, Optional, Sequence

from InquirerPy import inquirer


def select(message: str, choices: Sequence[Any], default: Optional[Any] = None) -> Any:
    return inquirer.select(message=message, choices=list(choices), default=default).execute()


def checkbox(
    message: str,
    choices: Sequence[Any],
    validate: Optional[Callable[[list], bool]] = None,
    invalid_message: str = "Invalid input",
) -> list:
    return inquirer.checkbox(
        message=message,
        choices=list(choices),
        validate=validate,
        invalid_message=invalid_message,
    ).execute()


def text(
    message: str,
    validate: Optional[Callable[[str], bool]] = None,
    invalid_message: str = "Invalid input",
) -> str:
    return inquirer.text(message=message, validate=validate, invalid_message=invalid_message).execute()


def confirm(message: str, default: bool = False) -> bool:
    return inquirer.confirm(message=message, default=default).execute()
