# Rev 1.0.0

"""List widget showing launchable apps with their icons."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QListWidget, QListWidgetItem

from assistlaunch.models.app_entry import AppEntry


def icon_for(entry: AppEntry) -> QIcon:
    if not entry.icon:
        return QIcon.fromTheme("application-x-executable")
    if Path(entry.icon).is_absolute():
        return QIcon(entry.icon)
    return QIcon.fromTheme(entry.icon, QIcon.fromTheme("application-x-executable"))


class AppsList(QListWidget):
    appChosen = Signal(str)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setIconSize(QSize(48, 48))
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setUniformItemSizes(True)
        self.setSpacing(4)
        self.itemClicked.connect(self._choose)
        self.itemActivated.connect(self._choose)
        self._selected: Optional[str] = None

    # ------------------------------------------------------------------
    def set_apps(self, apps: List[AppEntry]) -> None:
        self.clear()
        for entry in apps:
            item = QListWidgetItem(icon_for(entry), entry.name)
            item.setData(Qt.UserRole, entry.identifier)
            item.setToolTip(entry.identifier)
            item.setFlags(item.flags() & ~Qt.ItemIsUserCheckable)
            self.addItem(item)
        self.mark_selected(self._selected)

    def mark_selected(self, identifier: Optional[str]) -> None:
        self._selected = identifier or None
        for row in range(self.count()):
            item = self.item(row)
            checked = item.data(Qt.UserRole) == self._selected
            item.setCheckState(Qt.Checked if checked else Qt.Unchecked)
            if checked:
                self.setCurrentItem(item)
                self.scrollToItem(item, QListWidget.PositionAtCenter)

    # ------------------------------------------------------------------
    def _choose(self, item: QListWidgetItem) -> None:
        identifier = item.data(Qt.UserRole)
        if identifier:
            self.appChosen.emit(str(identifier))
