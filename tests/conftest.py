import sqlite3
from datetime import datetime

import pytest

from database.db_manager import DatabaseManager
from database.reminder_dao import ReminderDAO
from database.expense_dao import ExpenseDAO
from database.budget_dao import BudgetDAO
from database.interest_dao import InterestDAO
from database.total_amount_dao import TotalAmountDAO
from services.data_manager import DataManager
from services.events import EventBus
from services.notification_service import NotificationService

NOW = datetime(2026, 1, 15, 12, 0)


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def schedule(self, identifier, title, body, trigger_at):
        self.calls.append(("schedule", identifier, title, body, trigger_at))

    def cancel(self, identifier):
        self.calls.append(("cancel", identifier))

    def actions(self):
        return [c[0] for c in self.calls]


class FailingWriteDB(DatabaseManager):
    """Reads work; every blob write fails."""

    fail_writes = False

    def save_blob(self, key, blob):
        if self.fail_writes:
            raise sqlite3.OperationalError("disk I/O error")
        super().save_blob(key, blob)


@pytest.fixture
def db(tmp_path):
    manager = FailingWriteDB(str(tmp_path / "test.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def notifications(backend):
    return NotificationService(backend, clock=lambda: NOW)


@pytest.fixture
def events():
    return EventBus()


def make_data_manager(db, notifications, events=None):
    return DataManager(
        reminder_dao=ReminderDAO(db),
        expense_dao=ExpenseDAO(db),
        budget_dao=BudgetDAO(db),
        interest_dao=InterestDAO(db),
        total_amount_dao=TotalAmountDAO(db),
        notifications=notifications,
        events=events,
    )


@pytest.fixture
def data(db, notifications, events):
    return make_data_manager(db, notifications, events)


@pytest.fixture
def reopen(db, notifications):
    """Build a fresh DataManager over the same store, as on app restart."""
    return lambda: make_data_manager(db, notifications)
