"""Key-value persistence for the expense list."""

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from spendr.domain.form import validate_entry
from spendr.domain.models import Expense, expense_from_record, expense_to_record
from spendr.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)

STORAGE_KEY = "expense-tracker-entries"


class KeyValueStore(Protocol):
    """Minimal key-value store the repository persists through."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Dict-backed store for ephemeral sessions and tests."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class JsonFileStore:
    """Store holding every key in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceReadError(f"Can't read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceReadError(f"Can't read {self.path}: expected a JSON object")
        return data

    def get(self, key: str) -> Any | None:
        """Get a value.

        Returns:
            The stored value, or None if the file or key is missing.

        Raises:
            PersistenceReadError: If the file exists but can't be parsed.
        """
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        """Set a value, keeping any other keys already in the file.

        An unreadable existing file is replaced.

        Raises:
            PersistenceWriteError: If the file can't be written.
        """
        try:
            data = self._read_all()
        except PersistenceReadError:
            logger.warning("Overwriting unreadable store at %s", self.path)
            data = {}
        data[key] = value

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            raise PersistenceWriteError(f"Can't write {self.path}: {e}") from e


def decode_expenses(raw: Any) -> list[Expense]:
    """Decode the stored list.

    Raises:
        PersistenceReadError: If the value isn't a list of valid records.
    """
    if not isinstance(raw, list):
        raise PersistenceReadError(f"Expected a list of expenses, got {type(raw).__name__}")
    expenses = []
    seen_ids: set[str] = set()
    for index, record in enumerate(raw):
        try:
            expense = expense_from_record(record)
            validate_entry(expense)
        except ValueError as e:
            raise PersistenceReadError(f"Bad expense record #{index}: {e}") from e
        if expense.id in seen_ids:
            raise PersistenceReadError(f"Bad expense record #{index}: duplicate id '{expense.id}'")
        seen_ids.add(expense.id)
        expenses.append(expense)
    return expenses


def load_expenses(store: KeyValueStore) -> list[Expense]:
    """Load the expense list, treating missing or corrupt data as empty.

    Args:
        store: Store to read from.

    Returns:
        Stored expenses, or [] if there are none or they can't be read.
    """
    try:
        raw = store.get(STORAGE_KEY)
        if raw is None:
            logger.debug("No stored expenses")
            return []
        expenses = decode_expenses(raw)
    except PersistenceReadError as e:
        logger.error("Failed to parse expenses: %s", e)
        return []

    logger.debug("Loaded %d expenses", len(expenses))
    return expenses


def save_expenses(store: KeyValueStore, expenses: list[Expense]) -> None:
    """Persist the full expense list.

    Raises:
        PersistenceWriteError: If the store can't be written.
    """
    store.set(STORAGE_KEY, [expense_to_record(e) for e in expenses])
    logger.debug("Saved %d expenses", len(expenses))
