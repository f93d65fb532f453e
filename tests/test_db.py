# Rev 1.0.0

"""Settings database smoke tests covering migrations and persistence."""
from __future__ import annotations

from pathlib import Path

import pytest

import assistlaunch.repositories.db as db_module
from assistlaunch.repositories.db import Database
from assistlaunch.repositories.sqlite_settings_repo import SQLiteSettingsRepository
from assistlaunch.utils.paths import MIGRATIONS_DIR


def test_run_migrations_creates_settings_table(tmp_path: Path) -> None:
    db = Database(tmp_path / "settings.db")
    try:
        applied = db.run_migrations(MIGRATIONS_DIR)
        assert "0001_settings.sql" in applied

        tables = {
            row["name"]
            for row in db.conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        assert {"settings", "schema_migrations"}.issubset(tables)

        # Second run should be idempotent
        assert db.run_migrations(MIGRATIONS_DIR) == []
    finally:
        db.close()


def test_missing_migrations_dir_is_an_error(tmp_path: Path) -> None:
    with Database(tmp_path / "settings.db") as db:
        with pytest.raises(FileNotFoundError):
            db.run_migrations(tmp_path / "nope")


def test_migrations_ship_inside_the_package() -> None:
    package_dir = Path(db_module.__file__).resolve().parents[1]

    assert MIGRATIONS_DIR.parent == package_dir
    assert (MIGRATIONS_DIR / "0001_settings.sql").is_file()
    assert Database.run_migrations.__defaults__ == (MIGRATIONS_DIR,)


def test_values_survive_reopening_the_database(tmp_path: Path) -> None:
    path = tmp_path / "settings.db"
    with Database(path) as db:
        db.run_migrations(MIGRATIONS_DIR)
        SQLiteSettingsRepository(db).set("target_app_package", "firefox.desktop")

    with Database(path) as db:
        db.run_migrations(MIGRATIONS_DIR)
        assert SQLiteSettingsRepository(db).get("target_app_package") == "firefox.desktop"
