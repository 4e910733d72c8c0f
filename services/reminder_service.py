from dataclasses import replace
from datetime import datetime
from typing import Optional

from models.reminder import Reminder, ReminderCategory, ReminderFilter, ReminderPriority
from services.data_manager import DataManager
from services.notification_service import NotificationService


class ReminderService:
    def __init__(self, data_manager: DataManager, notifications: NotificationService):
        self._data = data_manager
        self._notifications = notifications

    def create(
        self,
        title: str,
        due_date: datetime,
        notes: str = "",
        priority: ReminderPriority = ReminderPriority.MEDIUM,
        category: ReminderCategory = ReminderCategory.PERSONAL,
    ) -> Reminder:
        """Store a new reminder and schedule its notification."""
        title = title.strip()
        if not title:
            raise ValueError("Reminder title cannot be empty.")
        reminder = Reminder(
            title=title,
            due_date=due_date,
            notes=notes,
            priority=priority,
            category=category,
        )
        if self._data.add_reminder(reminder):
            self._notifications.schedule_reminder(reminder)
        return reminder

    def edit(
        self,
        reminder_id: str,
        title: str,
        due_date: datetime,
        notes: str = "",
        priority: ReminderPriority = ReminderPriority.MEDIUM,
        category: ReminderCategory = ReminderCategory.PERSONAL,
    ) -> Reminder:
        existing = self._data.get_reminder(reminder_id)
        if existing is None:
            raise ValueError("Reminder no longer exists.")
        title = title.strip()
        if not title:
            raise ValueError("Reminder title cannot be empty.")
        reminder = replace(
            existing,
            title=title,
            due_date=due_date,
            notes=notes,
            priority=priority,
            category=category,
            last_modified=datetime.now(),
        )
        self._data.update_reminder(reminder)
        return reminder

    def toggle_completed(self, reminder_id: str) -> Optional[Reminder]:
        existing = self._data.get_reminder(reminder_id)
        if existing is None:
            return None
        reminder = replace(
            existing,
            is_completed=not existing.is_completed,
            last_modified=datetime.now(),
        )
        self._data.update_reminder(reminder)
        return reminder

    def delete(self, reminder_id: str):
        self._data.delete_reminder(reminder_id)

    def filter(
        self,
        reminder_filter: ReminderFilter = ReminderFilter.ALL,
        search_text: str = "",
        now: datetime | None = None,
    ) -> list[Reminder]:
        now = now or datetime.now()
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        needle = search_text.strip().lower()

        reminders = [
            r for r in self._data.reminders
            if not needle or needle in r.title.lower() or needle in r.notes.lower()
        ]
        if reminder_filter == ReminderFilter.TODAY:
            return [r for r in reminders if r.due_date.date() == now.date()]
        if reminder_filter == ReminderFilter.UPCOMING:
            return [r for r in reminders if not r.is_completed and r.due_date > start_of_day]
        if reminder_filter == ReminderFilter.COMPLETED:
            return [r for r in reminders if r.is_completed]
        return reminders

    def overdue(self, now: datetime | None = None) -> list[Reminder]:
        now = now or datetime.now()
        return sorted(
            (r for r in self._data.reminders if r.is_overdue_at(now)),
            key=lambda r: r.due_date,
        )
