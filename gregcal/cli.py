"""CLI entry point for gregcal."""

import typer

from gregcal.commands.calendar import calendar_command

app = typer.Typer(
    name="gregcal",
    help="Print a Gregorian calendar for a year",
    add_completion=False,
)


@app.command()
def main(
    year: int = typer.Argument(None, help="Year to display (1 or later)"),
    month: int = typer.Option(None, "--month", "-m", help="Show only this month (1-12)"),
    per_row: int = typer.Option(None, "--per-row", "-r", help="Months side by side (overrides config)"),
) -> None:
    """Print the calendar for a year, three months to a row."""
    calendar_command(year, month, per_row)


if __name__ == "__main__":
    app()
