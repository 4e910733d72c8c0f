import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from utils.constants import DEFAULT_TOTAL_DESCRIPTION
from utils.date_helpers import now


class ExpenseCategory(str, Enum):
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    OTHER = "Other"

    @property
    def color_hex(self) -> str:
        return CATEGORY_COLORS[self]


CATEGORY_COLORS = {
    ExpenseCategory.FOOD:           "#FF9800",
    ExpenseCategory.TRANSPORTATION: "#2196F3",
    ExpenseCategory.HOUSING:        "#9C27B0",
    ExpenseCategory.UTILITIES:      "#9E9E9E",
    ExpenseCategory.ENTERTAINMENT:  "#E91E63",
    ExpenseCategory.SHOPPING:       "#4CAF50",
    ExpenseCategory.HEALTHCARE:     "#F44336",
    ExpenseCategory.EDUCATION:      "#00BCD4",
    ExpenseCategory.TRAVEL:         "#FFEB3B",
    ExpenseCategory.OTHER:          "#795548",
}


class RecurringFrequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Expense:
    title: str
    amount: float
    date: datetime
    category: ExpenseCategory
    notes: str = ""
    is_recurring: bool = False
    recurring_frequency: Optional[RecurringFrequency] = None
    created_at: datetime = field(default_factory=now)
    id: str = field(default_factory=new_id)

    # Identity is the identifier, not the field values
    def __eq__(self, other):
        if not isinstance(other, Expense):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass
class TotalAmount:
    amount: float
    description: str = DEFAULT_TOTAL_DESCRIPTION
    last_updated: datetime = field(default_factory=now)
    id: str = field(default_factory=new_id)
