"""Local notifications for reminders.

The platform notification centre sits behind NotificationBackend; the core
only ever schedules or cancels by reminder id and never waits on the result.
"""
import logging
from datetime import datetime
from typing import Callable, Iterable, Protocol

from models.reminder import Reminder
from utils.constants import DEFAULT_REMINDER_BODY

logger = logging.getLogger(__name__)


class NotificationBackend(Protocol):
    def schedule(self, identifier: str, title: str, body: str, trigger_at: datetime) -> None: ...

    def cancel(self, identifier: str) -> None: ...


class LoggingNotificationBackend:
    """Default backend: records requests in the log instead of a device."""

    def __init__(self):
        self.pending: dict[str, datetime] = {}

    def schedule(self, identifier: str, title: str, body: str, trigger_at: datetime) -> None:
        self.pending[identifier] = trigger_at
        logger.info("Notification '%s' scheduled for %s", title, trigger_at.isoformat())

    def cancel(self, identifier: str) -> None:
        if self.pending.pop(identifier, None) is not None:
            logger.info("Notification %s cancelled", identifier)


class NotificationService:
    def __init__(self, backend: NotificationBackend, clock: Callable[[], datetime] = datetime.now):
        self._backend = backend
        self._clock = clock

    def schedule_reminder(self, reminder: Reminder) -> bool:
        """Replace any pending notification for the reminder.

        Returns True if a new notification was requested. Completed reminders
        and reminders due at or before now are only cancelled.
        """
        self.cancel(reminder.id)
        if reminder.is_completed or reminder.due_date <= self._clock():
            return False

        body = reminder.notes if reminder.notes else DEFAULT_REMINDER_BODY
        try:
            self._backend.schedule(reminder.id, reminder.title, body, reminder.due_date)
        except Exception:
            logger.exception("Error scheduling notification for reminder %s", reminder.id)
            return False
        return True

    def cancel(self, reminder_id: str) -> None:
        try:
            self._backend.cancel(reminder_id)
        except Exception:
            logger.exception("Error cancelling notification for reminder %s", reminder_id)

    def reschedule_all(self, reminders: Iterable[Reminder]) -> int:
        """Schedule every pending reminder; returns how many were scheduled."""
        return sum(1 for r in reminders if self.schedule_reminder(r))
