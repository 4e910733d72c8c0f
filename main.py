import logging
from dataclasses import dataclass

from database.db_manager import DatabaseManager
from database.reminder_dao import ReminderDAO
from database.expense_dao import ExpenseDAO
from database.budget_dao import BudgetDAO
from database.interest_dao import InterestDAO
from database.total_amount_dao import TotalAmountDAO

from services.data_manager import DataManager
from services.events import EventBus
from services.notification_service import (
    LoggingNotificationBackend,
    NotificationBackend,
    NotificationService,
)
from services.expense_service import ExpenseService
from services.budget_service import BudgetService
from services.reminder_service import ReminderService
from services.interest_service import InterestService

from utils.app_config import get_data_folder, get_log_level
from utils.constants import APP_NAME
from utils.currency import format_currency
from utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class App:
    db: DatabaseManager
    data: DataManager
    notifications: NotificationService
    expenses: ExpenseService
    budgets: BudgetService
    reminders: ReminderService
    interest: InterestService

    def close(self):
        self.db.close()


def build_app(data_folder: str, backend: NotificationBackend | None = None) -> App:
    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open_in_folder(data_folder)

    # ── Notifications ────────────────────────────────────────────────────────
    notifications = NotificationService(backend or LoggingNotificationBackend())

    # ── Data manager ─────────────────────────────────────────────────────────
    data = DataManager(
        reminder_dao=ReminderDAO(db),
        expense_dao=ExpenseDAO(db),
        budget_dao=BudgetDAO(db),
        interest_dao=InterestDAO(db),
        total_amount_dao=TotalAmountDAO(db),
        notifications=notifications,
        events=EventBus(),
    )

    # ── Services ─────────────────────────────────────────────────────────────
    return App(
        db=db,
        data=data,
        notifications=notifications,
        expenses=ExpenseService(data),
        budgets=BudgetService(data),
        reminders=ReminderService(data, notifications),
        interest=InterestService(data),
    )


def main():
    configure_logging(get_log_level())
    app = build_app(get_data_folder())
    try:
        scheduled = app.notifications.reschedule_all(app.data.reminders)
        symbol = app.db.get_setting("currency_symbol")
        logger.info(
            "%s ready: balance left %s, %d pending notifications, %d budgets over limit",
            APP_NAME,
            format_currency(app.data.total_after_expenses(), symbol),
            scheduled,
            len(app.data.over_budget_budgets()),
        )
    finally:
        app.close()


if __name__ == "__main__":
    main()
