from datetime import date

from database.collection_dao import CollectionDAO
from models.budget import Budget
from models.expense import ExpenseCategory
from utils.constants import BUDGETS_KEY
from utils.date_helpers import format_date, format_datetime, parse_datetime


class BudgetDAO(CollectionDAO[Budget]):
    key = BUDGETS_KEY

    def _model_to_record(self, b: Budget) -> dict:
        return {
            "id": b.id,
            "name": b.name,
            "amount": float(b.amount),
            "category": b.category.value if b.category else None,
            "start_date": format_date(b.start_date),
            "end_date": format_date(b.end_date),
            "created_at": format_datetime(b.created_at),
        }

    def _record_to_model(self, r: dict) -> Budget:
        category = r.get("category")
        return Budget(
            id=r["id"],
            name=r["name"],
            amount=float(r["amount"]),
            category=ExpenseCategory(category) if category else None,
            start_date=date.fromisoformat(r["start_date"]),
            end_date=date.fromisoformat(r["end_date"]),
            created_at=parse_datetime(r["created_at"]),
        )
