"""Terminal rendering of the expense table, charts and totals."""

from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from spendr.dates import format_display_date
from spendr.domain.aggregation import (
    CategoryReport,
    WeeklyReport,
    calculate_bar_length,
    calculate_share,
    round_money,
)
from spendr.domain.filtering import summary_text
from spendr.domain.models import CATEGORY_PRESETS, Expense, category_preset

WEEKLY_BAR_COLOR = "#2563eb"
BAR_WIDTH = 30
SHORT_ID_LENGTH = 8
EMPTY_STATE = "No expenses match the current filters."


def format_money(amount: Decimal, currency: str) -> str:
    return f"{currency}{round_money(amount):.2f}"


def category_badge(category_id: str) -> Text:
    preset = category_preset(category_id)
    return Text(f" {preset.label} ", style=f"bold {preset.color}")


def build_expense_table(expenses: Sequence[Expense], currency: str, title: str | None = None) -> Table:
    """Build the expense table for an already filtered and sorted view.

    Args:
        expenses: Rows to show, in display order.
        currency: Currency symbol.
        title: Optional table title.

    Returns:
        Rich table captioned with the expense count. Empty views get no rows;
        callers print EMPTY_STATE.
    """
    table = Table(title=title, caption=summary_text(len(expenses)))
    table.add_column("Id", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Category")
    table.add_column("Notes", style="white")
    table.add_column("Amount", justify="right")

    for expense in expenses:
        table.add_row(
            expense.id[:SHORT_ID_LENGTH],
            format_display_date(expense.date),
            category_badge(expense.category),
            Text(expense.notes or "—"),
            format_money(expense.amount, currency),
        )

    return table


def render_weekly_chart(console: Console, report: WeeklyReport, currency: str) -> None:
    """Render weekly totals as horizontal bars."""
    console.print("[bold]Weekly spend[/bold]\n")

    points = report.chart_points()
    if not points:
        console.print("  [dim]No expenses yet[/dim]\n")
        return

    max_amount = max(value for _, value in points)
    label_width = max(len(label) for label, _ in points)
    for label, value in points:
        bar = "█" * calculate_bar_length(value, max_amount, BAR_WIDTH)
        console.print(
            f"  {label:<{label_width}} {format_money(value, currency):>12} [{WEEKLY_BAR_COLOR}]{bar}[/{WEEKLY_BAR_COLOR}]"
        )
    console.print()


def render_monthly_chart(console: Console, report: CategoryReport, currency: str) -> None:
    """Render this month's category totals, one coloured bar per category."""
    console.print("[bold]This month by category[/bold]\n")

    points = report.chart_points()
    if not points:
        console.print("  [dim]No expenses this month[/dim]\n")
        return

    max_amount = max(value for _, value in points)
    label_width = max(len(category_preset(category).label) for category, _ in points)
    for category, value in points:
        preset = category_preset(category)
        bar = "█" * calculate_bar_length(value, max_amount, BAR_WIDTH)
        share = calculate_share(value, report.total)
        console.print(
            f"  {escape(preset.label):<{label_width}} {format_money(value, currency):>12} "
            f"[dim]{share:5.1f}%[/dim] [{preset.color}]{bar}[/{preset.color}]"
        )
    console.print()


def render_totals(console: Console, weekly: WeeklyReport, monthly: CategoryReport, currency: str) -> None:
    console.print(f"[bold]Total (all weeks):[/bold] {format_money(weekly.total, currency)}")
    console.print(f"[bold]Total (this month):[/bold] {format_money(monthly.total, currency)}")


def build_category_table() -> Table:
    table = Table(title="Categories")
    table.add_column("Id", style="cyan")
    table.add_column("Label")
    table.add_column("Colour", style="dim")
    for preset in CATEGORY_PRESETS.values():
        table.add_row(preset.id, category_badge(preset.id), preset.color)
    return table
