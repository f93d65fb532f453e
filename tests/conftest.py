# Rev 1.0.0

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Keep runtime dirs out of the real home before the paths module is imported.
_RUNTIME_ROOT = Path(tempfile.mkdtemp(prefix="assistlaunch-tests-"))
os.environ.setdefault("ASSISTLAUNCH_DATA_DIR", str(_RUNTIME_ROOT / "data"))
os.environ.setdefault("ASSISTLAUNCH_STATE_DIR", str(_RUNTIME_ROOT / "state"))

from assistlaunch.catalogs.base import CatalogError, LaunchAction
from assistlaunch.models.app_entry import AppEntry
from assistlaunch.repositories.db import Database
from assistlaunch.repositories.sqlite_settings_repo import SQLiteSettingsRepository
from assistlaunch.services.selection_service import SelectionService
from assistlaunch.utils.paths import MIGRATIONS_DIR


class RecordingAction(LaunchAction):
    def __init__(self, identifier: str, launches: List[str]) -> None:
        super().__init__(identifier, ["true"])
        self._launches = launches

    def __call__(self) -> None:
        self._launches.append(self.identifier)


class FakeCatalog:
    """In-memory catalog; identifiers listed in ``unresolvable`` have no launch action."""

    def __init__(
        self,
        apps: Optional[List[AppEntry]] = None,
        *,
        unresolvable: Optional[set] = None,
        fail: bool = False,
        settings_available: bool = True,
    ) -> None:
        self.apps = list(apps or [])
        self.unresolvable = set(unresolvable or ())
        self.fail = fail
        self.settings_available = settings_available
        self.launches: List[str] = []
        self.list_calls = 0
        self.settings_opened = 0

    def list_launchable_apps(self) -> List[AppEntry]:
        self.list_calls += 1
        if self.fail:
            raise CatalogError("package query failed")
        return list(self.apps)

    def resolve_launch_action(self, identifier: str) -> Optional[LaunchAction]:
        known: Dict[str, AppEntry] = {app.identifier: app for app in self.apps}
        if identifier not in known or identifier in self.unresolvable:
            return None
        return RecordingAction(identifier, self.launches)

    def open_assistant_settings(self) -> bool:
        if self.settings_available:
            self.settings_opened += 1
        return self.settings_available


@pytest.fixture
def sample_apps() -> List[AppEntry]:
    return [
        AppEntry(name="Notes", identifier="org.example.notes", icon="notes"),
        AppEntry(name="Browser", identifier="org.example.browser", icon="browser"),
        AppEntry(name="Music", identifier="org.example.music"),
    ]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.db"


@pytest.fixture
def db(db_path: Path):
    database = Database(db_path)
    database.run_migrations(MIGRATIONS_DIR)
    yield database
    database.close()


@pytest.fixture
def selection(db: Database) -> SelectionService:
    return SelectionService(SQLiteSettingsRepository(db))


@pytest.fixture(scope="session")
def qcore_app():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
