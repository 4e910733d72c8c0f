from database.collection_dao import CollectionDAO
from models.expense import Expense, ExpenseCategory, RecurringFrequency
from utils.constants import EXPENSES_KEY
from utils.date_helpers import format_datetime, parse_datetime


class ExpenseDAO(CollectionDAO[Expense]):
    key = EXPENSES_KEY

    def _model_to_record(self, e: Expense) -> dict:
        return {
            "id": e.id,
            "title": e.title,
            "amount": float(e.amount),
            "date": format_datetime(e.date),
            "category": e.category.value,
            "notes": e.notes,
            "is_recurring": e.is_recurring,
            "recurring_frequency": e.recurring_frequency.value if e.recurring_frequency else None,
            "created_at": format_datetime(e.created_at),
        }

    def _record_to_model(self, r: dict) -> Expense:
        frequency = r.get("recurring_frequency")
        return Expense(
            id=r["id"],
            title=r["title"],
            amount=float(r["amount"]),
            date=parse_datetime(r["date"]),
            category=ExpenseCategory(r["category"]),
            notes=r.get("notes", ""),
            is_recurring=bool(r.get("is_recurring", False)),
            recurring_frequency=RecurringFrequency(frequency) if frequency else None,
            created_at=parse_datetime(r["created_at"]),
        )
