from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional

from models.expense import Expense, ExpenseCategory, new_id
from utils.constants import BUDGET_WARNING_REMAINING_PCT, TOP_CATEGORY_LIMIT
from utils.date_helpers import days_until, now, today


class BudgetStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    EXCEEDED = "exceeded"

    @property
    def description(self) -> str:
        return STATUS_DESCRIPTIONS[self]


STATUS_DESCRIPTIONS = {
    BudgetStatus.GOOD: "On Track",
    BudgetStatus.WARNING: "Budget Running Low",
    BudgetStatus.EXCEEDED: "Budget Exceeded",
}


class BudgetPeriod(str, Enum):
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"
    CUSTOM = "Custom"


@dataclass(eq=False)
class Budget:
    name: str
    amount: float
    start_date: date
    end_date: date      # inclusive
    category: Optional[ExpenseCategory] = None  # None = all categories
    created_at: datetime = field(default_factory=now)
    id: str = field(default_factory=new_id)

    def __eq__(self, other):
        if not isinstance(other, Budget):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def covers(self, expense: Expense) -> bool:
        if not self.start_date <= expense.date.date() <= self.end_date:
            return False
        return self.category is None or expense.category == self.category

    def relevant_expenses(self, expenses: Iterable[Expense]) -> list[Expense]:
        return [e for e in expenses if self.covers(e)]

    def total_spent(self, expenses: Iterable[Expense]) -> float:
        return sum(e.amount for e in self.relevant_expenses(expenses))

    def remaining_amount(self, expenses: Iterable[Expense]) -> float:
        return max(0.0, self.amount - self.total_spent(expenses))

    def percentage_used(self, expenses: Iterable[Expense]) -> float:
        """Share of the budget consumed, derived from the clamped remaining
        amount, so it never goes above 100."""
        if self.amount <= 0:
            return 0.0
        remaining = self.remaining_amount(expenses)
        return (self.amount - remaining) / self.amount * 100

    def is_exceeded(self, expenses: Iterable[Expense]) -> bool:
        return self.remaining_amount(expenses) <= 0


@dataclass(frozen=True)
class CategorySpending:
    category: ExpenseCategory
    amount: float
    percentage: float   # of total spent


@dataclass(frozen=True)
class BudgetAnalysis:
    """Snapshot of a budget's spend at query time. Never persisted."""

    budget: Budget
    total_budget: float
    total_spent: float
    remaining_amount: float
    percentage_used: float
    expenses: tuple[Expense, ...] = ()

    @property
    def spending_by_category(self) -> list[CategorySpending]:
        totals: dict[ExpenseCategory, float] = {}
        for expense in self.expenses:
            totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount

        rows = []
        for category in ExpenseCategory:
            amount = totals.get(category, 0.0)
            if amount <= 0:
                continue
            rows.append(CategorySpending(category, amount, amount / self.total_spent * 100))
        return sorted(rows, key=lambda r: r.amount, reverse=True)

    @property
    def top_spending_categories(self) -> list[CategorySpending]:
        return self.spending_by_category[:TOP_CATEGORY_LIMIT]

    @property
    def status(self) -> BudgetStatus:
        if self.remaining_amount <= 0:
            return BudgetStatus.EXCEEDED
        if self.remaining_amount / self.total_budget * 100 < BUDGET_WARNING_REMAINING_PCT:
            return BudgetStatus.WARNING
        return BudgetStatus.GOOD

    @property
    def percentage_spent(self) -> float:
        """Unclamped spend as a percentage of the budget (can exceed 100)."""
        if self.total_budget <= 0:
            return 0.0
        return self.total_spent / self.total_budget * 100

    @property
    def overspent_amount(self) -> float:
        return max(0.0, self.total_spent - self.total_budget)

    def daily_allowance(self, ref_date: date | None = None) -> float:
        """Remaining budget spread over the days left until the end date."""
        ref = ref_date or today()
        if ref > self.budget.end_date or self.remaining_amount <= 0:
            return 0.0
        return self.remaining_amount / max(1, days_until(self.budget.end_date, ref))

    @classmethod
    def build(cls, budget: Budget, expenses: Iterable[Expense]) -> "BudgetAnalysis":
        relevant = budget.relevant_expenses(expenses)
        return cls(
            budget=budget,
            total_budget=budget.amount,
            total_spent=sum(e.amount for e in relevant),
            remaining_amount=budget.remaining_amount(relevant),
            percentage_used=budget.percentage_used(relevant),
            expenses=tuple(relevant),
        )
