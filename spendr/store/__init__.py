"""Store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from spendr.store.repository import ExpenseRepository
from spendr.store.storage import (
    STORAGE_KEY,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    load_expenses,
    save_expenses,
)

__all__ = [
    # Repository
    "ExpenseRepository",
    # Storage
    "STORAGE_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "load_expenses",
    "save_expenses",
]
