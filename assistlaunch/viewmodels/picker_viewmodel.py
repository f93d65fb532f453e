# Rev 1.0.0

"""Picker ViewModel providing the app list, selection and first-run notice."""
from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from assistlaunch.catalogs.base import AppCatalog
from assistlaunch.models.app_entry import AppEntry
from assistlaunch.services.enumerator import enumerate_apps
from assistlaunch.services.selection_service import SelectionService


class PickerViewModel(QObject):
    """Coordinates the catalog and the saved selection for the picker window."""

    appsChanged = Signal(object)          # Emits list of AppEntry
    selectionChanged = Signal(str)        # Emits selected identifier ("" when cleared)
    permissionNoticeRequested = Signal()

    def __init__(self, *, catalog: AppCatalog, selection: SelectionService) -> None:
        super().__init__()
        self._catalog = catalog
        self._selection = selection
        self._apps: List[AppEntry] = []
        self._selected: Optional[str] = selection.target_identifier()

    # ---- data loading -------------------------------------------------
    def refresh(self) -> None:
        """Rescan installed apps and notify listeners."""
        self._apps = enumerate_apps(self._catalog)
        self.appsChanged.emit(list(self._apps))

    # ---- selection ----------------------------------------------------
    def select(self, identifier: str) -> None:
        if not identifier:
            return
        self._selected = identifier
        self._selection.select(identifier)
        self.selectionChanged.emit(identifier)

    def clear_selection(self) -> None:
        self._selected = None
        self._selection.clear()
        self.selectionChanged.emit("")

    def selected_identifier(self) -> Optional[str]:
        return self._selected

    def selected_entry(self) -> Optional[AppEntry]:
        for entry in self._apps:
            if entry.identifier == self._selected:
                return entry
        return None

    # ---- first run ----------------------------------------------------
    def check_first_launch(self) -> bool:
        """Request the permission notice if it has never been acknowledged."""
        if not self._selection.is_first_launch():
            return False
        self.permissionNoticeRequested.emit()
        return True

    def acknowledge_notice(self) -> None:
        self._selection.acknowledge_first_launch()

    # ---- system settings ---------------------------------------------
    def open_assistant_settings(self) -> bool:
        return self._catalog.open_assistant_settings()
