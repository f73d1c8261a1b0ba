"""Pure functions for the filtered expense table."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from spendr.dates import is_month
from spendr.domain.models import CATEGORY_IDS, Expense, is_known_category
from spendr.errors import ValidationError

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class ViewState:
    """Immutable table filter state.

    category is "all" or a category id; month is YYYY-MM or "" for no month filter.
    """

    category: str = ALL_CATEGORIES
    month: str = ""

    def with_category(self, category: str) -> "ViewState":
        if category != ALL_CATEGORIES and not is_known_category(category):
            choices = ", ".join((ALL_CATEGORIES, *CATEGORY_IDS))
            raise ValidationError(f"Unknown category '{category}' (choose from: {choices})")
        return replace(self, category=category)

    def with_month(self, month: str) -> "ViewState":
        if month and not is_month(month):
            raise ValidationError(f"Invalid month '{month}' (expected YYYY-MM)")
        return replace(self, month=month)


def matches(expense: Expense, view: ViewState) -> bool:
    """Check whether an expense passes both filters."""
    matches_category = view.category == ALL_CATEGORIES or expense.category == view.category
    matches_month = not view.month or expense.date.startswith(view.month)
    return matches_category and matches_month


def apply_filters(expenses: Iterable[Expense], view: ViewState) -> list[Expense]:
    """Filter expenses and sort them newest first.

    ISO dates sort chronologically as strings. The sort is stable, so entries
    sharing a date keep their stored order.

    Args:
        expenses: All expenses.
        view: Active filters.

    Returns:
        Matching expenses, date descending.
    """
    return sorted((e for e in expenses if matches(e, view)), key=lambda e: e.date, reverse=True)


def summary_text(count: int) -> str:
    """Format the table summary, e.g. "2 expenses recorded"."""
    return f"{count} expense{'' if count == 1 else 's'} recorded"
