"""Tests for spendr.domain.models."""

from decimal import Decimal

import pytest

from spendr.domain.models import (
    CATEGORY_IDS,
    FALLBACK_COLOR,
    Amount,
    Category,
    CategoryId,
    Expense,
    ExpenseId,
    IsoDate,
    category_color,
    category_label,
    expense_from_record,
    expense_to_record,
    is_known_category,
    parse_amount,
)


class TestCategoryPresets:
    """Tests for category lookups."""

    def test_fixed_category_set(self) -> None:
        """Should expose exactly the five categories in order."""
        assert CATEGORY_IDS == ("fuel", "food", "travel", "shopping", "other")
        assert [c.value for c in Category] == list(CATEGORY_IDS)

    def test_known_category(self) -> None:
        """Should return the preset label and colour."""
        assert category_label("fuel") == "Fuel"
        assert category_color("fuel") == "#f79009"
        assert category_label("shopping") == "Shopping"
        assert category_color("other") == "#0f172a"
        assert is_known_category("travel")

    def test_unknown_category_falls_back(self) -> None:
        """Should label unknown ids with the raw id and the fallback colour."""
        assert category_label("snacks") == "snacks"
        assert category_color("snacks") == FALLBACK_COLOR
        assert not is_known_category("snacks")


class TestParseAmount:
    """Tests for parse_amount."""

    def test_float_keeps_short_repr(self) -> None:
        """Should not carry binary float noise into the Decimal."""
        assert parse_amount(0.1) == Decimal("0.1")
        assert parse_amount(12.5) == Decimal("12.5")

    def test_string_with_whitespace(self) -> None:
        """Should strip whitespace."""
        assert parse_amount(" 4.20 ") == Decimal("4.20")

    @pytest.mark.parametrize("value", ["abc", "", None, False, "nan", "-inf"])
    def test_rejects_non_numbers(self, value: object) -> None:
        """Should raise ValueError for anything that isn't a finite number."""
        with pytest.raises(ValueError):
            parse_amount(value)


class TestRecordConversion:
    """Tests for expense_to_record and expense_from_record."""

    def test_to_record_shape(self) -> None:
        """Should store amounts as JSON numbers."""
        expense = Expense(
            id=ExpenseId("abc"),
            date=IsoDate("2024-01-01"),
            category=CategoryId("food"),
            amount=Amount(Decimal("12.5")),
            notes="Lunch",
        )

        assert expense_to_record(expense) == {
            "id": "abc",
            "date": "2024-01-01",
            "category": "food",
            "amount": 12.5,
            "notes": "Lunch",
        }

    def test_whole_amount_stored_as_int(self) -> None:
        """Should store whole amounts without a fraction."""
        expense = Expense(ExpenseId("a"), IsoDate("2024-01-01"), CategoryId("fuel"), Amount(Decimal("40.00")))

        assert expense_to_record(expense)["amount"] == 40
        assert isinstance(expense_to_record(expense)["amount"], int)

    def test_high_precision_amount_stored_as_string(self) -> None:
        """Should keep digits a float would drop as an exact decimal string."""
        expense = Expense(
            ExpenseId("a"), IsoDate("2024-01-01"), CategoryId("other"), Amount(Decimal("0.12345678901234567891"))
        )

        record = expense_to_record(expense)

        assert record["amount"] == "0.12345678901234567891"
        assert expense_from_record(record) == expense

    def test_from_record(self) -> None:
        """Should read a stored record, defaulting missing notes."""
        expense = expense_from_record({"id": "x", "date": "2024-01-01", "category": "fuel", "amount": 40})

        assert expense == Expense(ExpenseId("x"), IsoDate("2024-01-01"), CategoryId("fuel"), Amount(Decimal("40")))

    def test_from_record_missing_field(self) -> None:
        """Should raise ValueError naming the missing fields."""
        with pytest.raises(ValueError, match="amount"):
            expense_from_record({"id": "x", "date": "2024-01-01", "category": "fuel"})

    def test_from_record_not_a_mapping(self) -> None:
        """Should raise ValueError for non-objects."""
        with pytest.raises(ValueError):
            expense_from_record(["x", "2024-01-01"])
