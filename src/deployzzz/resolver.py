"""Resolve command parameters from flags or interactive prompts.

Each subcommand describes its missing parameters with :class:`Param` and
passes the flag value through :func:`resolve`. A value given on the command
line is used as-is; otherwise the user is asked, picking from a list fetched
from gcloud when the parameter has a finite set of options.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

import typer

from deployzzz import display, prompts

Choices = Union[Sequence[Any], Callable[[], Sequence[Any]]]


class PromptKind(str, Enum):
    SELECT = "select"
    CHECKBOX = "checkbox"
    TEXT = "text"
    CONFIRM = "confirm"


@dataclass
class Param:
    """How to ask for one parameter.

    Attributes:
        message: Prompt text
        kind: Prompt type
        choices: Options for select/checkbox prompts, or a callable that
            fetches them (called only when the flag is missing)
        validate: Validator for text and checkbox answers
        invalid_message: Shown when ``validate`` rejects an answer
        empty_message: Shown when ``choices`` turns out to be empty
        required: If False, an empty choice list resolves to None instead of
            terminating the command
        default: Default answer for select and confirm prompts
        section: Optional section header printed before the prompt
    """

    message: str
    kind: PromptKind = PromptKind.TEXT
    choices: Optional[Choices] = None
    validate: Optional[Callable[[Any], bool]] = None
    invalid_message: str = "Invalid input"
    empty_message: str = "Nothing available to select"
    required: bool = True
    default: Any = None
    section: Optional[str] = None


def _load_choices(param: Param) -> list:
    if param.choices is None:
        return []
    if callable(param.choices):
        return list(param.choices())
    return list(param.choices)


def resolve(value: Any, param: Param) -> Any:
    """Return ``value`` if it was supplied, otherwise ask the user.

    Raises:
        typer.Exit: With code 1 when a required choice list is empty
    """
    if value is not None:
        return value

    if param.kind in (PromptKind.SELECT, PromptKind.CHECKBOX):
        choices = _load_choices(param)
        if not choices:
            if not param.required:
                return None
            display.error(param.empty_message)
            raise typer.Exit(code=1)

        if param.section:
            display.section(param.section)
        if param.kind is PromptKind.CHECKBOX:
            return prompts.checkbox(
                param.message,
                choices,
                validate=param.validate,
                invalid_message=param.invalid_message,
            )
        return prompts.select(param.message, choices, default=param.default)

    if param.section:
        display.section(param.section)
    if param.kind is PromptKind.CONFIRM:
        return prompts.confirm(param.message, default=bool(param.default))
    return prompts.text(param.message, validate=param.validate, invalid_message=param.invalid_message)


def confirm_or_abort(warning: str) -> None:
    """Show ``warning`` and require an explicit yes before continuing.

    Raises:
        typer.Exit: With code 0 when the user declines
    """
    display.warning(warning)
    if not prompts.confirm("Are you sure you want to continue?", default=False):
        display.info("Operation cancelled")
        raise typer.Exit(code=0)
