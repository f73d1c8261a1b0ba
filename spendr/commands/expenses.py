"""Expense commands (add, delete, list)."""

import sys
from datetime import date

from rich.markup import escape

from spendr.commands.session import console, get_settings, open_tracker
from spendr.domain.filtering import ALL_CATEGORIES
from spendr.domain.models import category_label
from spendr.errors import PersistenceWriteError, ValidationError
from spendr.rendering import EMPTY_STATE, build_expense_table, format_money


def add_command(
    amount: str,
    category: str,
    expense_date: str | None = None,
    notes: str = "",
    store_path: str | None = None,
) -> None:
    """Add an expense.

    Args:
        amount: Positive amount as typed.
        category: One of the fixed category ids.
        expense_date: Date (YYYY-MM-DD, DD/MM/YYYY, ...). Defaults to today.
        notes: Optional free text.
        store_path: Store override.
    """
    settings = get_settings(store_path)

    if expense_date is None:
        expense_date = date.today().isoformat()

    try:
        tracker = open_tracker(settings)
        expense = tracker.submit(expense_date, category, amount, notes)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except PersistenceWriteError as e:
        console.print(f"[red]Failed to save expense: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense saved:")
    console.print(f"  Id: {expense.id}")
    console.print(f"  Date: {expense.date}")
    console.print(f"  Category: {category_label(expense.category)}")
    console.print(f"  Amount: {format_money(expense.amount, settings.currency)}")
    if expense.notes:
        console.print(f"  Notes: {expense.notes}", markup=False)


def delete_command(expense_id: str, store_path: str | None = None) -> None:
    """Delete an expense by full id or unique id prefix.

    Args:
        expense_id: Id or prefix as shown by 'spendr list'.
        store_path: Store override.
    """
    settings = get_settings(store_path)

    try:
        tracker = open_tracker(settings)
        expense = tracker.repository.find_by_prefix(expense_id)
        if expense is None:
            console.print(f"[yellow]No expense with id '{escape(expense_id)}'[/yellow]")
            return

        tracker.delete(expense.id)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except PersistenceWriteError as e:
        console.print(f"[red]Failed to save expenses: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Deleted {expense.date} {escape(category_label(expense.category))} "
        f"{format_money(expense.amount, settings.currency)}"
    )


def list_command(
    category: str = ALL_CATEGORIES,
    month: str | None = None,
    all_months: bool = False,
    store_path: str | None = None,
) -> None:
    """List expenses matching the category and month filters.

    Args:
        category: Category id, or 'all'.
        month: Month (YYYY-MM). Defaults to the current month.
        all_months: Drop the month filter.
        store_path: Store override.
    """
    settings = get_settings(store_path)

    try:
        tracker = open_tracker(settings)
        tracker.filter_by_category(category)
        if all_months:
            tracker.filter_by_month("")
        elif month:
            tracker.filter_by_month(month)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except PersistenceWriteError as e:
        console.print(f"[red]Failed to save demo data: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    view = tracker.view
    period = view.month or "All months"
    scope = "All categories" if view.category == ALL_CATEGORIES else category_label(view.category)

    expenses = tracker.visible_expenses()
    console.print(build_expense_table(expenses, settings.currency, title=f"{scope} - {period}"))
    if not expenses:
        console.print(f"[dim]{EMPTY_STATE}[/dim]")
