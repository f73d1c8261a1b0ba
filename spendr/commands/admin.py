"""Admin commands for init, reset and listing categories."""

import sys
from pathlib import Path

import typer
from rich.markup import escape

from spendr.commands.session import console, get_settings, open_tracker
from spendr.config import create_default_config, get_config_path
from spendr.domain.seed import seed_demo_expenses
from spendr.errors import PersistenceWriteError
from spendr.rendering import build_category_table
from spendr.store.repository import ExpenseRepository
from spendr.store.storage import JsonFileStore


def run_full_init(config_path: Path, store_path: str | None) -> None:
    """Write the default config and a demo-seeded store."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    settings = get_settings(store_path)
    console.print(f"[cyan]Seeding expense store at {settings.store_path}...[/cyan]")
    repository = ExpenseRepository(JsonFileStore(settings.store_path))
    repository.replace_all(seed_demo_expenses())
    console.print(f"[green]✓[/green] Added {len(repository)} demo expenses")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print(f"[dim]Store: {settings.store_path}[/dim]")


def init_command(force: bool = False, store_path: str | None = None) -> None:
    """Initialize spendr configuration and expense store."""
    config_path = get_config_path()
    target_store = Path(store_path).expanduser() if store_path else get_settings().store_path

    config_exists = config_path.exists()
    store_exists = target_store.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (config_exists or store_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        if store_exists:
            console.print(f"  Store already exists: {target_store}")
        console.print("\n[yellow]Use 'spendr init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        run_full_init(config_path, store_path)
    except PersistenceWriteError as e:
        console.print(f"[red]Store error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def reset_command(yes: bool = False, store_path: str | None = None) -> None:
    """Replace all saved expenses with demo data after confirmation."""
    settings = get_settings(store_path)

    if not yes and not typer.confirm("This will remove all saved expenses. Continue?", default=False):
        console.print("[dim]Reset cancelled[/dim]")
        return

    try:
        tracker = open_tracker(settings)
        seed = tracker.reset()
    except PersistenceWriteError as e:
        console.print(f"[red]Failed to save expenses: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Reset complete, {len(seed)} demo expenses added")


def categories_command() -> None:
    """List the expense categories."""
    console.print(build_category_table())
