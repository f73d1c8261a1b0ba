"""Shared setup for commands: settings, store and tracker."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from spendr.config import Settings, load_settings
from spendr.controller import ExpenseTracker
from spendr.errors import ConfigError
from spendr.store.repository import ExpenseRepository
from spendr.store.storage import JsonFileStore

console = Console()


def get_settings(store_path: str | None = None) -> Settings:
    """Load settings, exiting with an error message if the config is broken."""
    try:
        return load_settings(store_path=Path(store_path).expanduser() if store_path else None)
    except ConfigError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def open_tracker(settings: Settings) -> ExpenseTracker:
    """Create a tracker over the configured JSON store and load its expenses.

    A missing or unreadable store is seeded with demo data.
    """
    repository = ExpenseRepository(JsonFileStore(settings.store_path))
    tracker = ExpenseTracker(repository)
    if tracker.start():
        console.print("[dim]No saved expenses found, added demo data[/dim]")
    return tracker
