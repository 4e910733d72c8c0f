from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from models.expense import new_id
from utils.date_helpers import now


class ReminderPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ReminderCategory(str, Enum):
    PERSONAL = "Personal"
    WORK = "Work"
    HEALTH = "Health"
    FINANCE = "Finance"
    OTHER = "Other"


class ReminderFilter(str, Enum):
    ALL = "All"
    TODAY = "Today"
    UPCOMING = "Upcoming"
    COMPLETED = "Completed"


@dataclass
class Reminder:
    title: str
    due_date: datetime
    notes: str = ""
    is_completed: bool = False
    priority: ReminderPriority = ReminderPriority.MEDIUM
    category: ReminderCategory = ReminderCategory.PERSONAL
    created_at: datetime = field(default_factory=now)
    last_modified: datetime = field(default_factory=now)
    id: str = field(default_factory=new_id)

    @property
    def is_overdue(self) -> bool:
        return self.is_overdue_at(datetime.now())

    def is_overdue_at(self, moment: datetime) -> bool:
        return not self.is_completed and self.due_date < moment
