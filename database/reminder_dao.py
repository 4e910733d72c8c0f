from database.collection_dao import CollectionDAO
from models.reminder import Reminder, ReminderCategory, ReminderPriority
from utils.constants import REMINDERS_KEY
from utils.date_helpers import format_datetime, parse_datetime


class ReminderDAO(CollectionDAO[Reminder]):
    key = REMINDERS_KEY

    def _model_to_record(self, r: Reminder) -> dict:
        return {
            "id": r.id,
            "title": r.title,
            "notes": r.notes,
            "due_date": format_datetime(r.due_date),
            "is_completed": r.is_completed,
            "priority": r.priority.value,
            "category": r.category.value,
            "created_at": format_datetime(r.created_at),
            "last_modified": format_datetime(r.last_modified),
        }

    def _record_to_model(self, row: dict) -> Reminder:
        return Reminder(
            id=row["id"],
            title=row["title"],
            notes=row.get("notes", ""),
            due_date=parse_datetime(row["due_date"]),
            is_completed=bool(row.get("is_completed", False)),
            priority=ReminderPriority(row.get("priority", ReminderPriority.MEDIUM.value)),
            category=ReminderCategory(row.get("category", ReminderCategory.PERSONAL.value)),
            created_at=parse_datetime(row["created_at"]),
            last_modified=parse_datetime(row["last_modified"]),
        )
