"""In-memory cache of every collection, kept in step with storage.

Each mutation builds the new collection, writes it through its DAO and only
then swaps it into the cache, so a failed write leaves the cache untouched.
Derived queries read the cache and never touch storage.
"""
import logging
from typing import Callable, Optional

from database.budget_dao import BudgetDAO
from database.collection_dao import CollectionDAO
from database.expense_dao import ExpenseDAO
from database.interest_dao import InterestDAO
from database.reminder_dao import ReminderDAO
from database.total_amount_dao import TotalAmountDAO
from models.budget import Budget, BudgetAnalysis, BudgetStatus
from models.expense import Expense, ExpenseCategory, TotalAmount
from models.interest import InterestCalculation
from models.reminder import Reminder
from services.events import (
    BUDGETS_CHANGED,
    EXPENSES_CHANGED,
    INTEREST_CHANGED,
    REMINDERS_CHANGED,
    TOTAL_AMOUNT_CHANGED,
    ChangeEvent,
    EventBus,
)
from services.notification_service import NotificationService
from utils.constants import DEFAULT_TOTAL_DESCRIPTION, RECENT_EXPENSE_LIMIT, TOP_CATEGORY_LIMIT

logger = logging.getLogger(__name__)


class DataManager:
    def __init__(
        self,
        reminder_dao: ReminderDAO,
        expense_dao: ExpenseDAO,
        budget_dao: BudgetDAO,
        interest_dao: InterestDAO,
        total_amount_dao: TotalAmountDAO,
        notifications: NotificationService,
        events: EventBus | None = None,
    ):
        self._daos: dict[str, CollectionDAO] = {
            REMINDERS_CHANGED: reminder_dao,
            EXPENSES_CHANGED: expense_dao,
            BUDGETS_CHANGED: budget_dao,
            INTEREST_CHANGED: interest_dao,
        }
        self._total_amount_dao = total_amount_dao
        self._notifications = notifications
        self._events = events or EventBus()
        self._cache: dict[str, list] = {name: [] for name in self._daos}
        self._total_amount: Optional[TotalAmount] = None
        self.load_all()

    # ── Loading / observers ──────────────────────────────────────────────────

    def load_all(self):
        """Read every collection from storage. Missing or corrupt data loads as empty."""
        for name, dao in self._daos.items():
            self._cache[name] = dao.load()
        self._total_amount = self._total_amount_dao.load()
        logger.info(
            "Loaded %d reminders, %d expenses, %d budgets, %d interest calculations",
            len(self._cache[REMINDERS_CHANGED]),
            len(self._cache[EXPENSES_CHANGED]),
            len(self._cache[BUDGETS_CHANGED]),
            len(self._cache[INTEREST_CHANGED]),
        )

    def subscribe(self, handler: Callable[[ChangeEvent], None], collection: str | None = None):
        self._events.subscribe(handler, collection)

    def unsubscribe(self, handler: Callable[[ChangeEvent], None], collection: str | None = None):
        self._events.unsubscribe(handler, collection)

    # ── Cached collections (copies; mutate through the methods below) ────────

    @property
    def reminders(self) -> list[Reminder]:
        return list(self._cache[REMINDERS_CHANGED])

    @property
    def expenses(self) -> list[Expense]:
        return list(self._cache[EXPENSES_CHANGED])

    @property
    def budgets(self) -> list[Budget]:
        return list(self._cache[BUDGETS_CHANGED])

    @property
    def interest_calculations(self) -> list[InterestCalculation]:
        return list(self._cache[INTEREST_CHANGED])

    @property
    def total_amount(self) -> Optional[TotalAmount]:
        return self._total_amount

    # ── Generic write-through helpers ────────────────────────────────────────

    def _save(self, name: str, items: list) -> bool:
        items = list(items)
        if not self._daos[name].save(items):
            return False
        self._cache[name] = items
        self._events.publish(name, {"count": len(items)})
        return True

    def _add(self, name: str, item) -> bool:
        return self._save(name, self._cache[name] + [item])

    def _update(self, name: str, item) -> bool:
        items = list(self._cache[name])
        for i, existing in enumerate(items):
            if existing.id == item.id:
                items[i] = item
                return self._save(name, items)
        logger.debug("No %s entry with id %s to update", name, item.id)
        return False

    def _delete(self, name: str, item_id: str) -> bool:
        items = [i for i in self._cache[name] if i.id != item_id]
        if len(items) == len(self._cache[name]):
            logger.debug("No %s entry with id %s to delete", name, item_id)
            return False
        return self._save(name, items)

    def _find(self, name: str, item_id: str):
        return next((i for i in self._cache[name] if i.id == item_id), None)

    # ── Reminders ────────────────────────────────────────────────────────────

    def save_reminders(self, reminders: list[Reminder]) -> bool:
        return self._save(REMINDERS_CHANGED, reminders)

    def add_reminder(self, reminder: Reminder) -> bool:
        return self._add(REMINDERS_CHANGED, reminder)

    def get_reminder(self, reminder_id: str) -> Optional[Reminder]:
        return self._find(REMINDERS_CHANGED, reminder_id)

    def update_reminder(self, reminder: Reminder) -> bool:
        old = self.get_reminder(reminder.id)
        if old is None or not self._update(REMINDERS_CHANGED, reminder):
            return False

        if not old.is_completed and reminder.is_completed:
            self._notifications.cancel(reminder.id)
        elif old.due_date != reminder.due_date or (old.is_completed and not reminder.is_completed):
            self._notifications.schedule_reminder(reminder)
        return True

    def delete_reminder(self, reminder_id: str) -> bool:
        deleted = self._delete(REMINDERS_CHANGED, reminder_id)
        self._notifications.cancel(reminder_id)
        return deleted

    # ── Expenses ─────────────────────────────────────────────────────────────

    def save_expenses(self, expenses: list[Expense]) -> bool:
        return self._save(EXPENSES_CHANGED, expenses)

    def add_expense(self, expense: Expense) -> bool:
        return self._add(EXPENSES_CHANGED, expense)

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        return self._find(EXPENSES_CHANGED, expense_id)

    def update_expense(self, expense: Expense) -> bool:
        return self._update(EXPENSES_CHANGED, expense)

    def delete_expense(self, expense_id: str) -> bool:
        return self._delete(EXPENSES_CHANGED, expense_id)

    # ── Budgets ──────────────────────────────────────────────────────────────

    def save_budgets(self, budgets: list[Budget]) -> bool:
        return self._save(BUDGETS_CHANGED, budgets)

    def add_budget(self, budget: Budget) -> bool:
        return self._add(BUDGETS_CHANGED, budget)

    def get_budget(self, budget_id: str) -> Optional[Budget]:
        return self._find(BUDGETS_CHANGED, budget_id)

    def update_budget(self, budget: Budget) -> bool:
        return self._update(BUDGETS_CHANGED, budget)

    def delete_budget(self, budget_id: str) -> bool:
        return self._delete(BUDGETS_CHANGED, budget_id)

    # ── Interest calculations ────────────────────────────────────────────────

    def save_interest_calculations(self, calculations: list[InterestCalculation]) -> bool:
        return self._save(INTEREST_CHANGED, calculations)

    def add_interest_calculation(self, calculation: InterestCalculation) -> bool:
        return self._add(INTEREST_CHANGED, calculation)

    def update_interest_calculation(self, calculation: InterestCalculation) -> bool:
        return self._update(INTEREST_CHANGED, calculation)

    def delete_interest_calculation(self, calculation_id: str) -> bool:
        return self._delete(INTEREST_CHANGED, calculation_id)

    # ── Total amount ─────────────────────────────────────────────────────────

    def save_total_amount(self, total: TotalAmount) -> bool:
        if not self._total_amount_dao.save(total):
            return False
        self._total_amount = total
        self._events.publish(TOTAL_AMOUNT_CHANGED, {"amount": total.amount})
        return True

    def update_total_amount(self, amount: float, description: str = DEFAULT_TOTAL_DESCRIPTION) -> bool:
        """Replace the stored balance with a fresh record; no history is kept."""
        return self.save_total_amount(TotalAmount(amount=amount, description=description))

    def clear_total_amount(self) -> bool:
        if not self._total_amount_dao.clear():
            return False
        self._total_amount = None
        self._events.publish(TOTAL_AMOUNT_CHANGED, {"amount": None})
        return True

    def has_total_amount_set(self) -> bool:
        return self._total_amount is not None

    # ── Derived balance queries ──────────────────────────────────────────────

    def _expense_sum(self) -> float:
        return sum(e.amount for e in self._cache[EXPENSES_CHANGED])

    def total_after_expenses(self) -> float:
        if self._total_amount is None:
            return 0.0
        return max(0.0, self._total_amount.amount - self._expense_sum())

    def remaining_percentage(self) -> float:
        if self._total_amount is None or self._total_amount.amount <= 0:
            return 0.0
        return self.total_after_expenses() / self._total_amount.amount * 100

    def spent_amount(self) -> float:
        """Grand total of every recorded expense (not limited to any budget)."""
        if self._total_amount is None:
            return 0.0
        return self._expense_sum()

    def spent_percentage(self) -> float:
        if self._total_amount is None or self._total_amount.amount <= 0:
            return 0.0
        return self.spent_amount() / self._total_amount.amount * 100

    def expenses_by_category(self) -> dict[ExpenseCategory, float]:
        totals = {category: 0.0 for category in ExpenseCategory}
        for expense in self._cache[EXPENSES_CHANGED]:
            totals[expense.category] += expense.amount
        return totals

    def top_expense_categories(self, limit: int = TOP_CATEGORY_LIMIT) -> list[tuple[ExpenseCategory, float]]:
        ranked = sorted(self.expenses_by_category().items(), key=lambda kv: kv[1], reverse=True)
        return ranked[:limit]

    def can_cover_expense(self, amount: float) -> bool:
        if self._total_amount is None:
            return False
        return self.total_after_expenses() >= amount

    def recent_expenses(self, limit: int = RECENT_EXPENSE_LIMIT) -> list[Expense]:
        return sorted(self._cache[EXPENSES_CHANGED], key=lambda e: e.date, reverse=True)[:limit]

    # ── Budget analysis ──────────────────────────────────────────────────────

    def relevant_expenses_for_budget(self, budget: Budget) -> list[Expense]:
        return budget.relevant_expenses(self._cache[EXPENSES_CHANGED])

    def budget_analysis(self, budget: Budget) -> BudgetAnalysis:
        return BudgetAnalysis.build(budget, self._cache[EXPENSES_CHANGED])

    def budget_analyses(self) -> list[BudgetAnalysis]:
        return [self.budget_analysis(b) for b in self._cache[BUDGETS_CHANGED]]

    def over_budget_budgets(self) -> list[Budget]:
        return [a.budget for a in self.budget_analyses() if a.status == BudgetStatus.EXCEEDED]
