"""Domain models and types for spendr.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the store and the terminal
"""

from spendr.domain.models import Amount, Category, CategoryId, Expense, ExpenseId, IsoDate, Month

__all__ = ["Amount", "Category", "CategoryId", "Expense", "ExpenseId", "IsoDate", "Month"]
