from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Optional

from models.expense import Expense, ExpenseCategory, RecurringFrequency
from services.data_manager import DataManager
from utils.date_helpers import add_months_dt


class ExpenseTimeFilter(str, Enum):
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    @property
    def nominal_days(self) -> int:
        return NOMINAL_DAYS[self]

    def window_start(self, ref: datetime) -> datetime:
        if self is ExpenseTimeFilter.WEEK:
            return ref - timedelta(days=7)
        if self is ExpenseTimeFilter.MONTH:
            return add_months_dt(ref, -1)
        return add_months_dt(ref, -12)


NOMINAL_DAYS = {
    ExpenseTimeFilter.WEEK: 7,
    ExpenseTimeFilter.MONTH: 30,
    ExpenseTimeFilter.YEAR: 365,
}


class ExpenseService:
    def __init__(self, data_manager: DataManager):
        self._data = data_manager

    def _validate(self, title: str, amount: float) -> str:
        title = title.strip()
        if not title:
            raise ValueError("Expense title cannot be empty.")
        if amount <= 0:
            raise ValueError("Expense amount must be greater than zero.")
        return title

    def create(
        self,
        title: str,
        amount: float,
        date: datetime,
        category: ExpenseCategory,
        notes: str = "",
        is_recurring: bool = False,
        recurring_frequency: Optional[RecurringFrequency] = None,
    ) -> Expense:
        expense = Expense(
            title=self._validate(title, amount),
            amount=amount,
            date=date,
            category=category,
            notes=notes,
            is_recurring=is_recurring,
            recurring_frequency=recurring_frequency if is_recurring else None,
        )
        self._data.add_expense(expense)
        return expense

    def edit(
        self,
        expense_id: str,
        title: str,
        amount: float,
        date: datetime,
        category: ExpenseCategory,
        notes: str = "",
        is_recurring: bool = False,
        recurring_frequency: Optional[RecurringFrequency] = None,
    ) -> Expense:
        existing = self._data.get_expense(expense_id)
        if existing is None:
            raise ValueError("Expense no longer exists.")
        expense = Expense(
            id=expense_id,
            title=self._validate(title, amount),
            amount=amount,
            date=date,
            category=category,
            notes=notes,
            is_recurring=is_recurring,
            recurring_frequency=recurring_frequency if is_recurring else None,
            created_at=existing.created_at,
        )
        self._data.update_expense(expense)
        return expense

    def delete(self, expense_id: str):
        self._data.delete_expense(expense_id)

    def would_exceed_balance(self, amount: float) -> bool:
        """True when a balance is set and adding amount would spend past it."""
        total = self._data.total_amount
        if total is None:
            return False
        return total.amount < self._data.spent_amount() + amount

    def filter(
        self,
        search_text: str = "",
        time_filter: ExpenseTimeFilter = ExpenseTimeFilter.MONTH,
        ref: datetime | None = None,
    ) -> list[Expense]:
        """Expenses in the look-back window matching search_text, newest first."""
        ref = ref or datetime.now()
        needle = search_text.strip().lower()
        start = time_filter.window_start(ref)

        def matches(e: Expense) -> bool:
            if not needle:
                return True
            return (
                needle in e.title.lower()
                or needle in e.notes.lower()
                or needle in e.category.value.lower()
            )

        result = [e for e in self._data.expenses if matches(e) and e.date >= start]
        return sorted(result, key=lambda e: e.date, reverse=True)

    @staticmethod
    def total(expenses: Iterable[Expense]) -> float:
        return sum(e.amount for e in expenses)

    @staticmethod
    def grouped_by_category(expenses: Iterable[Expense]) -> dict[ExpenseCategory, float]:
        """Only categories that actually appear in expenses."""
        groups: dict[ExpenseCategory, float] = {}
        for e in expenses:
            groups[e.category] = groups.get(e.category, 0.0) + e.amount
        return groups

    def daily_average(self, expenses: Iterable[Expense], time_filter: ExpenseTimeFilter) -> float:
        return self.total(expenses) / time_filter.nominal_days

    def highest_spending_category(self, expenses: Iterable[Expense]) -> Optional[tuple[ExpenseCategory, float]]:
        groups = self.grouped_by_category(expenses)
        if not groups:
            return None
        return max(groups.items(), key=lambda kv: kv[1])
