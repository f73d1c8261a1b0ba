"""CLI entry point for spendr."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from spendr.commands.admin import categories_command, init_command, reset_command
from spendr.commands.expenses import add_command, delete_command, list_command
from spendr.commands.report import report_command
from spendr.domain.filtering import ALL_CATEGORIES

app = typer.Typer(
    name="spendr",
    help="spendr - A personal expense tracker",
    add_completion=False,
)

STORE_HELP = "Expense store file (overrides config)"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """spendr - A personal expense tracker."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config and store"),
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """Initialize spendr configuration and a demo expense store."""
    init_command(force, store)


@app.command()
def add(
    amount: str = typer.Argument(..., help="Positive amount, e.g. 12.50"),
    category: str = typer.Argument(..., help="fuel, food, travel, shopping or other"),
    date: str = typer.Option(None, "--date", "-d", help="Expense date (default: today)"),
    notes: str = typer.Option("", "--notes", "-n", help="Optional notes"),
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """Add an expense."""
    add_command(amount, category, date, notes, store)


@app.command()
def delete(
    expense_id: str = typer.Argument(..., help="Expense id or unique prefix (see 'spendr list')"),
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """Delete an expense."""
    delete_command(expense_id, store)


@app.command(name="list")
def list_expenses(
    category: str = typer.Option(ALL_CATEGORIES, "--category", "-c", help="Category id or 'all'"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM, default: current month)"),
    all_months: bool = typer.Option(False, "--all-months", "-a", help="Show every month"),
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """List your expenses, newest first."""
    list_command(category, month, all_months, store)


@app.command()
def report(
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """Show weekly spend and this month's spend by category."""
    report_command(store)


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
    store: str = typer.Option(None, "--store", help=STORE_HELP),
) -> None:
    """Replace all expenses with demo data."""
    reset_command(yes, store)


@app.command()
def categories() -> None:
    """List the expense categories."""
    categories_command()


if __name__ == "__main__":
    app()
