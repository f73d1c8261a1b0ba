"""Validation and construction of new expenses from user input."""

import re
import uuid
from collections.abc import Callable
from typing import Any

import pandas as pd

from spendr.dates import is_iso_date
from spendr.domain.models import (
    CATEGORY_IDS,
    CategoryId,
    Expense,
    ExpenseId,
    IsoDate,
    is_known_category,
    parse_amount,
)
from spendr.errors import ValidationError

INVALID_INPUT_MESSAGE = "Please provide a valid date and positive amount."

# 2024-1-5, 2024/01/05: year first, so day-first parsing must not apply
YEAR_FIRST_PATTERN = re.compile(r"\d{4}[-/.]\d{1,2}[-/.]\d{1,2}", re.ASCII)


def generate_id() -> ExpenseId:
    return ExpenseId(uuid.uuid4().hex)


def normalize_date(value: str | None) -> IsoDate:
    """Normalize a typed date to zero-padded YYYY-MM-DD.

    ISO input is taken as is. Other formats (2024-1-5, DD/MM/YYYY,
    "3 Jan 2025", ...) go through pandas, day-first unless the year leads.

    Raises:
        ValidationError: If the date is empty or unparseable.
    """
    text = (value or "").strip()
    if not text:
        raise ValidationError(INVALID_INPUT_MESSAGE)

    if is_iso_date(text):
        return IsoDate(text)

    dayfirst = not YEAR_FIRST_PATTERN.fullmatch(text)
    try:
        parsed = pd.to_datetime(text, dayfirst=dayfirst)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(INVALID_INPUT_MESSAGE) from e
    if pd.isna(parsed):
        raise ValidationError(INVALID_INPUT_MESSAGE)
    return IsoDate(parsed.strftime("%Y-%m-%d"))


def validate_entry(entry: Expense) -> None:
    """Check the invariants every stored expense must hold.

    Raises:
        ValidationError: If a required field is empty, the date is not
            zero-padded ISO, or the amount is not positive.
    """
    if not entry.id or not entry.category or not entry.date:
        raise ValidationError("Expense is missing a required field")
    if not is_iso_date(entry.date):
        raise ValidationError(f"Invalid date '{entry.date}' (expected YYYY-MM-DD)")
    if not entry.amount.is_finite() or entry.amount <= 0:
        raise ValidationError("Amount must be positive")


def build_expense(
    date: str | None,
    category: str | None,
    amount: Any,
    notes: str | None = "",
    new_id: Callable[[], ExpenseId] = generate_id,
) -> Expense:
    """Validate form input and build a new expense.

    Args:
        date: Expense date as typed.
        category: Category id, one of the fixed set.
        amount: Positive number or numeric string.
        notes: Free text, trimmed. May be empty.
        new_id: Id generator.

    Returns:
        New Expense with a fresh id.

    Raises:
        ValidationError: With one user-facing message if any field is invalid.
    """
    iso_date = normalize_date(date)

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        raise ValidationError(INVALID_INPUT_MESSAGE) from e
    if parsed_amount <= 0:
        raise ValidationError(INVALID_INPUT_MESSAGE)

    if category is None or not is_known_category(category):
        raise ValidationError(f"Unknown category '{category}' (choose from: {', '.join(CATEGORY_IDS)})")

    return Expense(
        id=new_id(),
        date=iso_date,
        category=CategoryId(category),
        amount=parsed_amount,
        notes=(notes or "").strip(),
    )
