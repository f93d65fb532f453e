# Rev 1.0.0

"""Print the stored assistant target and run an SQLite quick check."""
import sqlite3
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from assistlaunch.repositories.db import Database
from assistlaunch.repositories.sqlite_settings_repo import SQLiteSettingsRepository
from assistlaunch.utils.paths import SETTINGS_DB_PATH, ensure_runtime_dirs


def verify(db_path: Path) -> str:
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute("PRAGMA quick_check").fetchone()[0]
    finally:
        conn.close()


if __name__ == "__main__":
    ensure_runtime_dirs()
    if not SETTINGS_DB_PATH.exists():
        print(f"Settings database not found at {SETTINGS_DB_PATH}")
        raise SystemExit(1)
    print(f"Quick check: {verify(SETTINGS_DB_PATH)}")
    with Database(SETTINGS_DB_PATH) as db:
        db.run_migrations()
        settings = SQLiteSettingsRepository(db)
        for key in settings.keys():
            print(f"{key} = {settings.get(key)!r}")
