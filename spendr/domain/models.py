"""Domain type definitions for spendr.

These NewTypes provide semantic clarity and help with type checking:
- ExpenseId: Opaque unique identifier of an expense
- IsoDate: Calendar date in YYYY-MM-DD format
- Month: Month in YYYY-MM format
- CategoryId: Identifier of an expense category (normally a Category value)
- Amount: Positive decimal amount, kept at full precision
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, NewType

ExpenseId = NewType("ExpenseId", str)

# Dates are always ISO 8601 without a time component (e.g., "2025-01-15")
IsoDate = NewType("IsoDate", str)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

CategoryId = NewType("CategoryId", str)

# Amounts are Decimals so that summing many small entries doesn't drift
Amount = NewType("Amount", Decimal)


class Category(str, Enum):
    """The fixed set of expense categories."""

    FUEL = "fuel"
    FOOD = "food"
    TRAVEL = "travel"
    SHOPPING = "shopping"
    OTHER = "other"


@dataclass(frozen=True)
class CategoryPreset:
    """Display label and colour for a category."""

    id: CategoryId
    label: str
    color: str


CATEGORY_PRESETS: dict[Category, CategoryPreset] = {
    Category.FUEL: CategoryPreset(CategoryId("fuel"), "Fuel", "#f79009"),
    Category.FOOD: CategoryPreset(CategoryId("food"), "Food", "#16a34a"),
    Category.TRAVEL: CategoryPreset(CategoryId("travel"), "Travel", "#2563eb"),
    Category.SHOPPING: CategoryPreset(CategoryId("shopping"), "Shopping", "#7c3aed"),
    Category.OTHER: CategoryPreset(CategoryId("other"), "Other", "#0f172a"),
}

FALLBACK_COLOR = "#cbd5f5"

CATEGORY_IDS: tuple[CategoryId, ...] = tuple(CategoryId(c.value) for c in Category)


def is_known_category(category_id: str) -> bool:
    """Check whether an id belongs to the fixed category set."""
    return category_id in CATEGORY_IDS


def category_preset(category_id: str) -> CategoryPreset:
    """Get the preset for a category id.

    Unknown ids (e.g. hand-edited storage) get a preset labelled with the raw
    id and the fallback colour.

    Args:
        category_id: Category identifier.

    Returns:
        CategoryPreset for display.
    """
    try:
        return CATEGORY_PRESETS[Category(category_id)]
    except ValueError:
        return CategoryPreset(CategoryId(category_id), category_id, FALLBACK_COLOR)


def category_label(category_id: str) -> str:
    return category_preset(category_id).label


def category_color(category_id: str) -> str:
    return category_preset(category_id).color


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: ExpenseId
    date: IsoDate
    category: CategoryId
    amount: Amount
    notes: str = ""


def parse_amount(value: Any) -> Amount:
    """Parse a stored or typed amount into a Decimal.

    Args:
        value: int, float, str or Decimal.

    Returns:
        Amount at full precision.

    Raises:
        ValueError: If the value isn't a finite number.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a number: {value!r}")
    try:
        # str() first so floats keep their shortest repr (12.5, not 12.4999...)
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return Amount(amount)


def amount_to_json(amount: Decimal) -> int | float | str:
    """Convert an amount to a JSON value without losing digits.

    Whole amounts become ints and amounts a float holds exactly become floats.
    Anything more precise is kept as its decimal string, which parse_amount
    reads back unchanged.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    number = float(amount)
    if Decimal(repr(number)) == amount:
        return number
    return str(amount)


def expense_to_record(expense: Expense) -> dict[str, Any]:
    """Convert an expense to its stored JSON shape."""
    return {
        "id": expense.id,
        "date": expense.date,
        "category": expense.category,
        "amount": amount_to_json(expense.amount),
        "notes": expense.notes,
    }


def expense_from_record(record: Any) -> Expense:
    """Build an expense from its stored JSON shape.

    Args:
        record: Mapping with id, date, category, amount and optional notes.

    Returns:
        Expense instance.

    Raises:
        ValueError: If the record is not a mapping, misses a field or has a bad amount.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expense record must be an object, got {type(record).__name__}")

    missing = [key for key in ("id", "date", "category", "amount") if key not in record]
    if missing:
        raise ValueError(f"Expense record missing fields: {', '.join(missing)}")

    return Expense(
        id=ExpenseId(str(record["id"])),
        date=IsoDate(str(record["date"])),
        category=CategoryId(str(record["category"])),
        amount=parse_amount(record["amount"]),
        notes=str(record.get("notes") or ""),
    )
