"""Pure functions for weekly and monthly spending aggregates.

This module contains the functional core for the charts:
- No I/O operations (no store, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Totals accumulate at full Decimal precision. Rounding to two places happens
only when values are handed to a renderer.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from spendr.dates import month_of, parse_iso_date, week_number
from spendr.domain.models import Amount, CategoryId, Expense

CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round an amount to two decimal places for display."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class WeekTotal:
    """Immutable spending total for one week bucket."""

    year: int
    week: int
    total: Amount

    @property
    def label(self) -> str:
        return f"Week {self.week}"


@dataclass(frozen=True)
class WeeklyReport:
    """Immutable weekly spending report, ordered by (year, week)."""

    weeks: list[WeekTotal]
    total: Amount

    @property
    def spans_years(self) -> bool:
        return len({w.year for w in self.weeks}) > 1

    def chart_points(self) -> list[tuple[str, Decimal]]:
        """Get (label, rounded total) pairs for a chart.

        Labels carry the year when the report spans more than one year.
        """
        with_year = self.spans_years
        return [
            (f"{w.year} {w.label}" if with_year else w.label, round_money(w.total))
            for w in self.weeks
        ]


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable spending total for one category."""

    category: CategoryId
    total: Amount


@dataclass(frozen=True)
class CategoryReport:
    """Immutable per-category report, in first-encountered order."""

    categories: list[CategoryTotal]
    total: Amount

    def chart_points(self) -> list[tuple[CategoryId, Decimal]]:
        return [(c.category, round_money(c.total)) for c in self.categories]


def week_key(expense_date: str) -> tuple[int, int]:
    """Calculate the (year, week) bucket key for an ISO date.

    Raises:
        ValueError: If the date isn't a valid ISO date.
    """
    day = parse_iso_date(expense_date)
    return day.year, week_number(day)


def group_by_week(expenses: Iterable[Expense]) -> WeeklyReport:
    """Sum every expense into its week bucket.

    Filters are ignored: the weekly view always covers the full history.
    Buckets are ordered numerically, so "Week 10" comes after "Week 9".

    Args:
        expenses: All expenses.

    Returns:
        WeeklyReport with one WeekTotal per non-empty week.
    """
    buckets: dict[tuple[int, int], Decimal] = {}
    for expense in expenses:
        key = week_key(expense.date)
        buckets[key] = buckets.get(key, Decimal(0)) + expense.amount

    weeks = [WeekTotal(year=year, week=week, total=Amount(total)) for (year, week), total in sorted(buckets.items())]

    return WeeklyReport(weeks=weeks, total=Amount(sum((w.total for w in weeks), Decimal(0))))


def group_current_month_by_category(
    expenses: Iterable[Expense],
    today: date | None = None,
) -> CategoryReport:
    """Sum this month's expenses per category.

    Args:
        expenses: All expenses.
        today: Reference date for "this month". If None, uses the current date.

    Returns:
        CategoryReport with categories in the order they were first seen.
    """
    if today is None:
        today = date.today()
    current_month = month_of(today)

    buckets: dict[CategoryId, Decimal] = {}
    for expense in expenses:
        if expense.date.startswith(current_month):
            buckets[expense.category] = buckets.get(expense.category, Decimal(0)) + expense.amount

    categories = [CategoryTotal(category=cat, total=Amount(total)) for cat, total in buckets.items()]

    return CategoryReport(categories=categories, total=Amount(sum((c.total for c in categories), Decimal(0))))


def calculate_share(part: Decimal, total: Decimal) -> float:
    """Calculate a bucket's percentage of the total (0-100)."""
    if total <= 0:
        return 0.0
    return float(part / total * 100)


def calculate_bar_length(amount: Decimal, max_amount: Decimal, bar_width: int) -> int:
    """Calculate chart bar length in characters.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in the dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int(abs(amount) / max_amount * bar_width)
