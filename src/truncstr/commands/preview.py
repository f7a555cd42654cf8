"""Preview command - show how a string truncates at several widths."""

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..utils import truncate, is_truncated

console = Console()


def default_widths(text: str) -> list[int]:
    """Pick widths around the text length: 0, 1, and a few near len(text)."""
    length = len(text)
    widths = {0, 1, max(length - 2, 0), max(length - 1, 0), length, length + 1}
    return sorted(widths)


@click.command()
@click.argument("text")
@click.option("--width", "-w", "widths", type=click.IntRange(min=0), multiple=True,
              help="Width to preview (repeatable)")
def preview(text, widths):
    """Preview truncation of TEXT at several widths."""
    widths = sorted(set(widths)) if widths else default_widths(text)

    table = Table(title=Text(f"Truncation of {text!r} (length {len(text)})"))
    table.add_column("Width", style="bold", justify="right")
    table.add_column("Result", style="cyan")
    table.add_column("Length", justify="right")
    table.add_column("Truncated")

    for width in widths:
        result = truncate(text, width)
        cut_off = is_truncated(text, width)
        table.add_row(
            str(width),
            Text(repr(result)),
            str(len(result)),
            "[yellow]yes[/yellow]" if cut_off else "[green]no[/green]",
        )

    console.print(table)
