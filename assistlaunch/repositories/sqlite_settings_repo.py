# Rev 1.0.0

"""SQLite repository for string-keyed application settings."""
from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from typing import Any, List, Optional


class SQLiteSettingsRepository:
    """Key/value store; values are JSON encoded so bools and text round-trip."""

    def __init__(self, db_or_conn) -> None:
        self._db = db_or_conn

    def _conn(self) -> sqlite3.Connection:
        if isinstance(self._db, sqlite3.Connection):
            return self._db
        if hasattr(self._db, "conn"):
            return self._db.conn
        raise RuntimeError("SQLiteSettingsRepository expects Database or Connection.")

    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        row = self._conn().execute(
            "SELECT value FROM settings WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return default
        return json.loads(row[0])

    def set(self, key: str, value: Any) -> None:
        conn = self._conn()
        with conn:
            conn.execute(
                """
                INSERT INTO settings(key, value, updated_at_utc) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at_utc = excluded.updated_at_utc
                """,
                (key, json.dumps(value), datetime.now(timezone.utc).isoformat()),
            )

    def delete(self, key: str) -> bool:
        conn = self._conn()
        with conn:
            cur = conn.execute("DELETE FROM settings WHERE key = ?", (key,))
            return cur.rowcount > 0

    def keys(self) -> List[str]:
        cur = self._conn().execute("SELECT key FROM settings ORDER BY key")
        return [row[0] for row in cur.fetchall()]
