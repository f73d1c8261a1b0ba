"""Report command for weekly and monthly spending charts."""

import sys

from rich.markup import escape

from spendr.commands.session import console, get_settings, open_tracker
from spendr.errors import PersistenceWriteError
from spendr.rendering import render_monthly_chart, render_totals, render_weekly_chart


def report_command(store_path: str | None = None) -> None:
    """Show weekly spend across all history and this month's spend by category."""
    settings = get_settings(store_path)

    try:
        tracker = open_tracker(settings)
    except PersistenceWriteError as e:
        console.print(f"[red]Failed to save demo data: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    # Aggregates always cover the full list, independent of table filters
    weekly = tracker.weekly()
    monthly = tracker.monthly()

    render_weekly_chart(console, weekly, settings.currency)
    render_monthly_chart(console, monthly, settings.currency)
    render_totals(console, weekly, monthly, settings.currency)
