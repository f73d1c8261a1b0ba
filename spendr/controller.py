"""Session state: the repository plus the active table filters."""

import logging
from datetime import date
from typing import Any

from spendr.dates import month_of
from spendr.domain.aggregation import (
    CategoryReport,
    WeeklyReport,
    group_by_week,
    group_current_month_by_category,
)
from spendr.domain.filtering import ViewState, apply_filters, summary_text
from spendr.domain.form import build_expense
from spendr.domain.models import Expense, ExpenseId
from spendr.domain.seed import seed_demo_expenses
from spendr.store.repository import ExpenseRepository

logger = logging.getLogger(__name__)


class ExpenseTracker:
    """Owns the expense list and view state for one session."""

    def __init__(self, repository: ExpenseRepository, view: ViewState | None = None) -> None:
        self.repository = repository
        self.view = view or ViewState()

    def start(self, today: date | None = None) -> bool:
        """Load or seed the expenses and filter the table to the current month.

        Returns:
            True if the demo seed was used.
        """
        if today is None:
            today = date.today()
        seeded = self.repository.load_or_seed(today)
        self.view = self.view.with_month(month_of(today))
        return seeded

    def submit(self, expense_date: str | None, category: str | None, amount: Any, notes: str | None = "") -> Expense:
        """Validate form input and add the resulting expense.

        Raises:
            ValidationError: If the input is invalid. Nothing is stored.
        """
        expense = build_expense(expense_date, category, amount, notes)
        self.repository.add(expense)
        return expense

    def delete(self, expense_id: ExpenseId) -> bool:
        return self.repository.delete(expense_id)

    def reset(self, today: date | None = None) -> list[Expense]:
        """Replace every expense with a fresh demo seed."""
        seed = seed_demo_expenses(today)
        self.repository.replace_all(seed)
        logger.info("Reset to demo data")
        return seed

    def filter_by_category(self, category: str) -> None:
        self.view = self.view.with_category(category)

    def filter_by_month(self, month: str) -> None:
        self.view = self.view.with_month(month)

    def visible_expenses(self) -> list[Expense]:
        return apply_filters(self.repository.expenses, self.view)

    def summary(self) -> str:
        return summary_text(len(self.visible_expenses()))

    def weekly(self) -> WeeklyReport:
        return group_by_week(self.repository.expenses)

    def monthly(self, today: date | None = None) -> CategoryReport:
        return group_current_month_by_category(self.repository.expenses, today)
