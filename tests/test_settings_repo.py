# Rev 1.0.0

from __future__ import annotations

import sqlite3

import pytest

from assistlaunch.repositories.sqlite_settings_repo import SQLiteSettingsRepository
from assistlaunch.services.selection_service import (
    FIRST_LAUNCH_KEY,
    TARGET_APP_KEY,
    SelectionService,
)


def test_get_missing_key_returns_default(db) -> None:
    settings = SQLiteSettingsRepository(db)
    assert settings.get("absent") is None
    assert settings.get("absent", True) is True


def test_set_then_get_keeps_types(db) -> None:
    settings = SQLiteSettingsRepository(db)
    settings.set("flag", False)
    settings.set("name", "org.example.notes")

    assert settings.get("flag", True) is False
    assert settings.get("name") == "org.example.notes"
    assert settings.keys() == ["flag", "name"]


def test_last_write_wins(db) -> None:
    settings = SQLiteSettingsRepository(db)
    settings.set(TARGET_APP_KEY, "a")
    settings.set(TARGET_APP_KEY, "b")

    assert settings.get(TARGET_APP_KEY) == "b"
    count = db.conn.execute("SELECT COUNT(*) FROM settings").fetchone()[0]
    assert count == 1


def test_delete_reports_whether_a_row_was_removed(db) -> None:
    settings = SQLiteSettingsRepository(db)
    settings.set("k", 1)
    assert settings.delete("k") is True
    assert settings.delete("k") is False


def test_accepts_raw_connection(db) -> None:
    settings = SQLiteSettingsRepository(db.conn)
    settings.set("k", "v")
    assert settings.get("k") == "v"


def test_rejects_other_objects() -> None:
    with pytest.raises(RuntimeError):
        SQLiteSettingsRepository(object()).get("k")


def test_selection_round_trip(selection: SelectionService) -> None:
    assert selection.target_identifier() is None
    selection.select("org.example.music")
    assert selection.target_identifier() == "org.example.music"
    selection.clear()
    assert selection.target_identifier() is None


def test_first_launch_flag_defaults_true_until_acknowledged(db, selection: SelectionService) -> None:
    assert selection.is_first_launch() is True
    selection.acknowledge_first_launch()
    assert selection.is_first_launch() is False
    assert SQLiteSettingsRepository(db).get(FIRST_LAUNCH_KEY) is False


def test_selection_visible_to_a_fresh_connection(db_path, selection: SelectionService) -> None:
    selection.select("org.example.browser")

    conn = sqlite3.connect(db_path)
    try:
        fresh = SelectionService(SQLiteSettingsRepository(conn))
        assert fresh.target_identifier() == "org.example.browser"
    finally:
        conn.close()
