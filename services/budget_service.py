from datetime import date
from typing import Optional

from models.budget import Budget, BudgetAnalysis, BudgetPeriod, BudgetStatus
from models.expense import ExpenseCategory
from services.data_manager import DataManager
from utils.date_helpers import month_range, quarter_range, today, week_range, year_range

_PERIOD_RANGES = {
    BudgetPeriod.WEEKLY: week_range,
    BudgetPeriod.MONTHLY: month_range,
    BudgetPeriod.QUARTERLY: quarter_range,
    BudgetPeriod.YEARLY: year_range,
}


class BudgetService:
    def __init__(self, data_manager: DataManager):
        self._data = data_manager

    @staticmethod
    def _validate(name: str, amount: float, start_date: date, end_date: date) -> str:
        name = name.strip()
        if not name:
            raise ValueError("Budget name cannot be empty.")
        if amount <= 0:
            raise ValueError("Budget amount must be greater than zero.")
        if end_date < start_date:
            raise ValueError("Budget end date must not be before its start date.")
        return name

    def create(
        self,
        name: str,
        amount: float,
        start_date: date,
        end_date: date,
        category: Optional[ExpenseCategory] = None,
    ) -> Budget:
        budget = Budget(
            name=self._validate(name, amount, start_date, end_date),
            amount=amount,
            start_date=start_date,
            end_date=end_date,
            category=category,
        )
        self._data.add_budget(budget)
        return budget

    def edit(
        self,
        budget_id: str,
        name: str,
        amount: float,
        start_date: date,
        end_date: date,
        category: Optional[ExpenseCategory] = None,
    ) -> Budget:
        existing = self._data.get_budget(budget_id)
        if existing is None:
            raise ValueError("Budget no longer exists.")
        budget = Budget(
            id=budget_id,
            name=self._validate(name, amount, start_date, end_date),
            amount=amount,
            start_date=start_date,
            end_date=end_date,
            category=category,
            created_at=existing.created_at,
        )
        self._data.update_budget(budget)
        return budget

    def delete(self, budget_id: str):
        self._data.delete_budget(budget_id)

    @staticmethod
    def period_range(period: BudgetPeriod, ref: date | None = None) -> Optional[tuple[date, date]]:
        """Date range for a preset period around ref; None for CUSTOM."""
        fn = _PERIOD_RANGES.get(period)
        if fn is None:
            return None
        return fn(ref or today())

    def status_summary(self) -> dict[BudgetStatus, list[BudgetAnalysis]]:
        summary: dict[BudgetStatus, list[BudgetAnalysis]] = {s: [] for s in BudgetStatus}
        for analysis in self._data.budget_analyses():
            summary[analysis.status].append(analysis)
        return summary
