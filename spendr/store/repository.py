"""In-memory expense list, kept in sync with a key-value store."""

import logging
from collections.abc import Callable, Iterable
from datetime import date

from spendr.domain.form import validate_entry
from spendr.domain.models import Expense, ExpenseId
from spendr.domain.seed import seed_demo_expenses
from spendr.errors import ValidationError
from spendr.store.storage import KeyValueStore, load_expenses, save_expenses

logger = logging.getLogger(__name__)


class ExpenseRepository:
    """Ordered expense list for the session.

    Every mutation re-persists the full list before returning.
    """

    def __init__(
        self,
        store: KeyValueStore,
        seed: Callable[[date | None], list[Expense]] = seed_demo_expenses,
    ) -> None:
        self._store = store
        self._seed = seed
        self._expenses: list[Expense] = []

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def _persist(self) -> None:
        save_expenses(self._store, self._expenses)

    def get(self, expense_id: str) -> Expense | None:
        return next((e for e in self._expenses if e.id == expense_id), None)

    def find_by_prefix(self, prefix: str) -> Expense | None:
        """Find an expense by full id or unique id prefix.

        Returns:
            The matching expense, or None if nothing matches.

        Raises:
            ValidationError: If the prefix matches more than one expense.
        """
        exact = self.get(prefix)
        if exact is not None or not prefix:
            return exact
        found = [e for e in self._expenses if e.id.startswith(prefix)]
        if len(found) > 1:
            raise ValidationError(f"Id '{prefix}' is ambiguous ({len(found)} matches)")
        return found[0] if found else None

    def add(self, entry: Expense) -> None:
        """Append an expense and persist.

        Raises:
            ValidationError: If the entry is invalid or its id already exists.
            PersistenceWriteError: If the store can't be written.
        """
        validate_entry(entry)
        if self.get(entry.id) is not None:
            raise ValidationError(f"Expense {entry.id} already exists")

        self._expenses.append(entry)
        self._persist()
        logger.debug("Added expense %s", entry.id)

    def delete(self, expense_id: ExpenseId) -> bool:
        """Remove an expense by id and persist.

        Unknown ids leave the list unchanged.

        Returns:
            True if an expense was removed.
        """
        before = len(self._expenses)
        self._expenses = [e for e in self._expenses if e.id != expense_id]
        self._persist()

        removed = len(self._expenses) < before
        logger.debug("Delete %s: %s", expense_id, "removed" if removed else "not found")
        return removed

    def replace_all(self, entries: Iterable[Expense]) -> None:
        """Discard the current list, replace it wholesale and persist."""
        self._expenses = list(entries)
        self._persist()
        logger.debug("Replaced all expenses (%d)", len(self._expenses))

    def load_or_seed(self, today: date | None = None) -> bool:
        """Load stored expenses, falling back to the demo seed.

        Args:
            today: Reference date for the seed. If None, uses the current date.

        Returns:
            True if the demo seed was used.
        """
        self._expenses = load_expenses(self._store)
        if self._expenses:
            return False

        logger.info("No stored expenses, seeding demo data")
        self.replace_all(self._seed(today))
        return True
