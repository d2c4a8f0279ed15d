"""Calendar command for printing a year or a single month."""

import sys
import tomllib

from rich.console import Console
from rich.markup import escape

from gregcal.config import get_config_path, load_settings
from gregcal.domain.year import render_month, render_year

console = Console()
err_console = Console(stderr=True)


def print_lines(lines: list[str]) -> None:
    """Write calendar lines exactly as rendered."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def calendar_command(
    year: int | None,
    month: int | None = None,
    per_row: int | None = None,
) -> None:
    """Print the calendar for a year, or one month of it."""
    if year is None:
        err_console.print("[red]Invalid args.[/red]", style="bold")
        err_console.print("[dim]Usage: gregcal YEAR[/dim]")
        sys.exit(1)

    try:
        if month is not None:
            print_lines(render_month(year, month))
            return

        if per_row is None:
            per_row = load_settings().months_per_row

        print_lines(render_year(year, per_row))

    except tomllib.TOMLDecodeError as e:
        err_console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        err_console.print(f"[dim]Config: {get_config_path()}[/dim]")
        sys.exit(1)
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
