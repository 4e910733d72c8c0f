import logging
import os
import sqlite3

from utils.constants import DB_FILE, DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Key-value blob store: one row per collection, plus app settings."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema and seed defaults."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS collections (
                key        TEXT PRIMARY KEY,
                blob       TEXT NOT NULL,
                updated_at TEXT NOT NULL DEFAULT (datetime('now'))
            );

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        defaults = [
            ("currency_symbol", DEFAULT_CURRENCY_SYMBOL),
        ]
        for key, value in defaults:
            conn.execute(
                "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )

    # ── Blobs ────────────────────────────────────────────────────────────────

    def save_blob(self, key: str, blob: str):
        """Write one collection blob. Raises sqlite3.Error on failure."""
        conn = self.get_connection()
        with conn:
            conn.execute(
                """INSERT INTO collections(key, blob, updated_at)
                   VALUES (?, ?, datetime('now'))
                   ON CONFLICT(key)
                   DO UPDATE SET blob = excluded.blob, updated_at = excluded.updated_at""",
                (key, blob),
            )

    def load_blob(self, key: str) -> str | None:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT blob FROM collections WHERE key = ?", (key,)
        ).fetchone()
        return row["blob"] if row else None

    def delete_blob(self, key: str):
        conn = self.get_connection()
        with conn:
            conn.execute("DELETE FROM collections WHERE key = ?", (key,))

    # ── Settings ─────────────────────────────────────────────────────────────

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    @staticmethod
    def open_in_folder(folder: str) -> "DatabaseManager":
        """Startup factory: creates the data folder if needed and opens rei.db in it."""
        os.makedirs(folder, exist_ok=True)
        db = DatabaseManager(os.path.join(folder, DB_FILE))
        db.initialize()
        logger.info("Opened data store at %s", db.db_path)
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
