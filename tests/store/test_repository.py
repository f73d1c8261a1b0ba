"""Tests for spendr.store.repository."""

from datetime import date
from decimal import Decimal

import pytest

from spendr.domain.models import Amount, CategoryId, Expense, ExpenseId, IsoDate
from spendr.errors import ValidationError
from spendr.store.repository import ExpenseRepository
from spendr.store.storage import STORAGE_KEY, MemoryStore, load_expenses


def make_expense(expense_id: str, expense_date: str = "2024-01-01", amount: str = "10") -> Expense:
    return Expense(
        id=ExpenseId(expense_id),
        date=IsoDate(expense_date),
        category=CategoryId("food"),
        amount=Amount(Decimal(amount)),
        notes="",
    )


def fixed_seed(today: date | None = None) -> list[Expense]:
    return [make_expense("seed-1"), make_expense("seed-2", "2024-01-02")]


class TestAdd:
    """Tests for ExpenseRepository.add."""

    def test_appends_and_persists(self) -> None:
        """Should append in order and write the full list."""
        store = MemoryStore()
        repo = ExpenseRepository(store)

        repo.add(make_expense("a"))
        repo.add(make_expense("b"))

        assert [e.id for e in repo.expenses] == ["a", "b"]
        assert [e.id for e in load_expenses(store)] == ["a", "b"]

    @pytest.mark.parametrize(
        "entry",
        [
            make_expense("a", amount="0"),
            make_expense("a", amount="-1"),
            make_expense("a", expense_date=""),
            make_expense("a", expense_date="2024-13-01"),
            make_expense("a", expense_date="2024-1-5"),
            make_expense(""),
            Expense(ExpenseId("a"), IsoDate("2024-01-01"), CategoryId(""), Amount(Decimal("1"))),
        ],
    )
    def test_rejects_invalid_entries(self, entry: Expense) -> None:
        """Should raise ValidationError and leave list and store untouched."""
        store = MemoryStore()
        repo = ExpenseRepository(store)

        with pytest.raises(ValidationError):
            repo.add(entry)

        assert repo.expenses == ()
        assert STORAGE_KEY not in store.data

    def test_rejects_duplicate_id(self) -> None:
        """Should keep ids unique."""
        repo = ExpenseRepository(MemoryStore())
        repo.add(make_expense("a"))

        with pytest.raises(ValidationError, match="already exists"):
            repo.add(make_expense("a", amount="5"))

        assert len(repo) == 1


class TestDelete:
    """Tests for ExpenseRepository.delete."""

    def test_add_then_delete_restores_contents(self) -> None:
        """Should return the repository to its prior exact contents."""
        store = MemoryStore()
        repo = ExpenseRepository(store)
        repo.add(make_expense("a"))
        before = repo.expenses
        extra = Expense(
            ExpenseId("new"), IsoDate("2024-02-10"), CategoryId("shopping"), Amount(Decimal("55")), "x"
        )

        repo.add(extra)
        removed = repo.delete(extra.id)

        assert removed
        assert repo.expenses == before
        assert load_expenses(store) == list(before)

    def test_unknown_id_is_noop(self) -> None:
        """Should leave the list unchanged without raising."""
        repo = ExpenseRepository(MemoryStore())
        repo.add(make_expense("a"))

        removed = repo.delete(ExpenseId("missing"))

        assert not removed
        assert [e.id for e in repo.expenses] == ["a"]


class TestReplaceAll:
    """Tests for ExpenseRepository.replace_all."""

    def test_replaces_and_persists(self) -> None:
        """Should discard existing entries."""
        store = MemoryStore()
        repo = ExpenseRepository(store)
        repo.add(make_expense("old"))

        repo.replace_all([make_expense("x"), make_expense("y")])

        assert [e.id for e in repo.expenses] == ["x", "y"]
        assert [e.id for e in load_expenses(store)] == ["x", "y"]


class TestLoadOrSeed:
    """Tests for ExpenseRepository.load_or_seed."""

    def test_loads_existing(self) -> None:
        """Should load stored entries without seeding."""
        store = MemoryStore()
        ExpenseRepository(store).add(make_expense("a"))

        repo = ExpenseRepository(store, seed=fixed_seed)
        seeded = repo.load_or_seed()

        assert not seeded
        assert [e.id for e in repo.expenses] == ["a"]

    def test_seeds_empty_store_and_persists(self) -> None:
        """Should seed and write the seed immediately."""
        store = MemoryStore()
        repo = ExpenseRepository(store, seed=fixed_seed)

        seeded = repo.load_or_seed()

        assert seeded
        assert [e.id for e in repo.expenses] == ["seed-1", "seed-2"]
        assert [e.id for e in load_expenses(store)] == ["seed-1", "seed-2"]

    def test_seeds_corrupt_store(self) -> None:
        """Should fall back to the seed when stored data is corrupt."""
        store = MemoryStore({STORAGE_KEY: "garbage"})
        repo = ExpenseRepository(store, seed=fixed_seed)

        assert repo.load_or_seed()
        assert len(repo) == 2

    def test_default_seed_uses_given_day(self) -> None:
        """Should seed the demo data relative to the given day."""
        repo = ExpenseRepository(MemoryStore())

        repo.load_or_seed(date(2024, 3, 5))

        assert [e.date for e in repo.expenses][0] == "2024-03-04"
        assert len(repo) == 5

    def test_round_trip_in_fresh_session(self) -> None:
        """Should give a new session the same records after add."""
        store = MemoryStore()
        first = ExpenseRepository(store, seed=fixed_seed)
        first.load_or_seed()
        first.add(make_expense("mine", "2024-02-01", "3.33"))

        second = ExpenseRepository(store, seed=fixed_seed)
        second.load_or_seed()

        assert second.expenses == first.expenses

    def test_high_precision_amount_survives_fresh_session(self) -> None:
        """Should reload an amount with more digits than a float holds unchanged."""
        store = MemoryStore()
        first = ExpenseRepository(store, seed=fixed_seed)
        first.load_or_seed()
        first.add(make_expense("precise", "2024-02-01", "0.12345678901234567891"))

        second = ExpenseRepository(store, seed=fixed_seed)
        second.load_or_seed()

        assert second.get("precise").amount == Decimal("0.12345678901234567891")
        assert second.expenses == first.expenses


class TestFindByPrefix:
    """Tests for ExpenseRepository.find_by_prefix."""

    def test_exact_and_prefix(self) -> None:
        """Should match full ids and unique prefixes."""
        repo = ExpenseRepository(MemoryStore())
        repo.replace_all([make_expense("abc123"), make_expense("abd456")])

        assert repo.find_by_prefix("abc123").id == "abc123"
        assert repo.find_by_prefix("abd").id == "abd456"
        assert repo.find_by_prefix("zzz") is None
        assert repo.find_by_prefix("") is None

    def test_ambiguous_prefix_raises(self) -> None:
        """Should refuse to guess between several matches."""
        repo = ExpenseRepository(MemoryStore())
        repo.replace_all([make_expense("abc123"), make_expense("abd456")])

        with pytest.raises(ValidationError, match="ambiguous"):
            repo.find_by_prefix("ab")
