"""Demo data for first-run and post-reset sessions."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from spendr.dates import format_iso, subtract_days
from spendr.domain.form import generate_id
from spendr.domain.models import Amount, CategoryId, Expense, ExpenseId

# (days ago, category, amount, notes)
DEMO_SAMPLES: tuple[tuple[int, str, str, str], ...] = (
    (1, "food", "12.5", "Lunch"),
    (2, "fuel", "40", "Gas refill"),
    (4, "travel", "18", "Metro card"),
    (6, "shopping", "55", "Groceries"),
    (8, "other", "20", "Gym"),
)


def seed_demo_expenses(
    today: date | None = None,
    new_id: Callable[[], ExpenseId] = generate_id,
) -> list[Expense]:
    """Create the demo expense list relative to a given day.

    Args:
        today: Reference date. If None, uses the current date.
        new_id: Id generator.

    Returns:
        Five expenses spanning the eight days before today.
    """
    if today is None:
        today = date.today()

    return [
        Expense(
            id=new_id(),
            date=format_iso(subtract_days(today, days_ago)),
            category=CategoryId(category),
            amount=Amount(Decimal(amount)),
            notes=notes,
        )
        for days_ago, category, amount, notes in DEMO_SAMPLES
    ]
