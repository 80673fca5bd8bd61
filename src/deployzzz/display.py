"""Terminal output: banners, message panels, tables and lists."""

from contextlib import contextmanager
from typing import Iterator, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

console = Console()

PRIMARY = "blue"

_MESSAGE_STYLES = {
    "success": ("✓", "green"),
    "error": ("✗", "red"),
    "warning": ("⚠", "yellow"),
    "info": ("ℹ", "blue"),
}


def banner() -> None:
    console.print(
        Panel.fit(
            "[bold blue]DeployZzz[/bold blue]\n[dim]Guided workflows for Google Cloud[/dim]",
            border_style=PRIMARY,
        )
    )


def command_title(title: str) -> None:
    console.print(Panel.fit(Text(title, style="bold cyan"), border_style=PRIMARY, padding=(1, 2)))


def section(title: str) -> None:
    console.print()
    console.rule(Text(title, style=f"bold {PRIMARY}"), style=PRIMARY)
    console.print()


def _message(kind: str, message: str) -> None:
    glyph, color = _MESSAGE_STYLES[kind]
    console.print(
        Panel(
            Text.assemble((f"{glyph} ", color), message),
            border_style=color,
            box=box.ROUNDED,
            expand=False,
        )
    )


def success(message: str) -> None:
    _message("success", message)


def error(message: str) -> None:
    _message("error", message)


def warning(message: str) -> None:
    _message("warning", message)


def info(message: str) -> None:
    _message("info", message)


def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]], padding: int = 2) -> list[int]:
    """Width of each column: the longest of header and cells, plus padding."""
    widths = []
    for index, header in enumerate(headers):
        cells = [len(str(row[index])) for row in rows if index < len(row)]
        widths.append(max([len(header), *cells]) + padding)
    return widths


def table(headers: Sequence[str], rows: Sequence[Sequence[str]], empty_message: str = "No data found") -> None:
    """Print a bordered table, or an info message when there are no rows."""
    if not rows:
        info(empty_message)
        return

    widths = column_widths(headers, rows)
    grid = Table(box=box.SQUARE, show_header=True, header_style=f"bold {PRIMARY}", padding=0)
    for header, width in zip(headers, widths):
        grid.add_column(header, min_width=width, no_wrap=True)
    for row in rows:
        grid.add_row(*(str(cell) for cell in row))

    console.print(grid)
    console.print()


def numbered_list(title: str, items: Sequence[str], empty_message: str = "No items found") -> None:
    """Print a section header followed by ``1. item`` lines."""
    if not items:
        info(empty_message)
        return

    section(title)
    for index, item in enumerate(items, start=1):
        console.print(Text.assemble((f"{index}.", PRIMARY), " ", str(item)))
    console.print()


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a transient spinner around captured gcloud commands.

    Commands that inherit the terminal must not run inside it: the live
    display redraws over their output and prompts.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description=message, total=None)
        yield
