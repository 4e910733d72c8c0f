import json
import logging
import sqlite3
from typing import Optional

from database.collection_dao import CODEC_ERRORS
from database.db_manager import DatabaseManager
from models.expense import TotalAmount
from utils.constants import TOTAL_AMOUNT_KEY
from utils.date_helpers import format_datetime, parse_datetime

logger = logging.getLogger(__name__)


class TotalAmountDAO:
    """Singleton record: at most one TotalAmount is stored at a time."""

    key = TOTAL_AMOUNT_KEY

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _model_to_record(self, t: TotalAmount) -> dict:
        return {
            "id": t.id,
            "amount": float(t.amount),
            "description": t.description,
            "last_updated": format_datetime(t.last_updated),
        }

    def _record_to_model(self, r: dict) -> TotalAmount:
        return TotalAmount(
            id=r["id"],
            amount=float(r["amount"]),
            description=r.get("description", ""),
            last_updated=parse_datetime(r["last_updated"]),
        )

    def save(self, total: TotalAmount) -> bool:
        try:
            blob = json.dumps(self._model_to_record(total))
        except CODEC_ERRORS:
            logger.exception("Could not encode total amount")
            return False
        try:
            self._db.save_blob(self.key, blob)
        except sqlite3.Error:
            logger.exception("Could not write total amount")
            return False
        return True

    def load(self) -> Optional[TotalAmount]:
        try:
            blob = self._db.load_blob(self.key)
        except sqlite3.Error:
            logger.exception("Could not read total amount")
            return None
        if blob is None:
            return None
        try:
            record = json.loads(blob)
            return self._record_to_model(record)
        except CODEC_ERRORS as exc:
            logger.warning("Discarding undecodable total amount: %s", exc)
            return None

    def clear(self) -> bool:
        try:
            self._db.delete_blob(self.key)
        except sqlite3.Error:
            logger.exception("Could not clear total amount")
            return False
        return True
