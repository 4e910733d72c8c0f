"""Base DAO for collections stored as a single JSON blob under one key.

Decode failure is treated the same as a missing blob: the caller gets an
empty collection. Encode or write failure leaves storage untouched and is
reported through the boolean return of save().
"""
import json
import logging
import sqlite3
from typing import Generic, Iterable, TypeVar

from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)

T = TypeVar("T")

CODEC_ERRORS = (TypeError, ValueError, KeyError, AttributeError)


class CollectionDAO(Generic[T]):
    key: str = ""

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _model_to_record(self, item: T) -> dict:
        raise NotImplementedError

    def _record_to_model(self, record: dict) -> T:
        raise NotImplementedError

    def encode(self, items: Iterable[T]) -> str:
        return json.dumps([self._model_to_record(i) for i in items])

    def decode(self, blob: str) -> list[T]:
        records = json.loads(blob)
        if not isinstance(records, list):
            raise ValueError(f"expected a list under '{self.key}', got {type(records).__name__}")
        return [self._record_to_model(r) for r in records]

    def save(self, items: Iterable[T]) -> bool:
        try:
            blob = self.encode(items)
        except CODEC_ERRORS:
            logger.exception("Could not encode '%s'", self.key)
            return False
        try:
            self._db.save_blob(self.key, blob)
        except sqlite3.Error:
            logger.exception("Could not write '%s'", self.key)
            return False
        return True

    def load(self) -> list[T]:
        try:
            blob = self._db.load_blob(self.key)
        except sqlite3.Error:
            logger.exception("Could not read '%s'", self.key)
            return []
        if blob is None:
            return []
        try:
            return self.decode(blob)
        except CODEC_ERRORS as exc:
            logger.warning("Discarding undecodable '%s' blob: %s", self.key, exc)
            return []
