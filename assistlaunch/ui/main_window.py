# Rev 1.0.0

"""Main window: pick the app an assist invocation should open."""
from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QFont, QGuiApplication
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from assistlaunch.models.app_entry import AppEntry
from assistlaunch.ui.dialogs.permission_notice_dialog import PermissionNoticeDialog
from assistlaunch.ui.panels.apps_list import AppsList
from assistlaunch.viewmodels.picker_viewmodel import PickerViewModel


class MainWindow(QMainWindow):
    def __init__(self, *, viewmodel: PickerViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = viewmodel

        self._build_ui()
        self._connect_signals()

        self._vm.refresh()
        self._show_selection(self._vm.selected_identifier())

        screen = QGuiApplication.primaryScreen()
        if screen:
            rect = screen.availableGeometry()
            self.resize(min(520, rect.width()), int(rect.height() * 0.8))

        # Wait for the event loop so the notice is parented to a visible window.
        QTimer.singleShot(0, self._vm.check_first_launch)

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.setWindowTitle("AssistLaunch - Assistant Target")

        toolbar = QToolBar("Main", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        self._assistant_action = QAction("Set as default assistant", self)
        self._clear_action = QAction("Clear selection", self)
        self._refresh_action = QAction("Refresh", self)
        toolbar.addAction(self._assistant_action)
        toolbar.addAction(self._clear_action)
        toolbar.addAction(self._refresh_action)

        heading = QLabel("Choose the app to launch:", self)
        font = QFont(heading.font())
        font.setPointSize(font.pointSize() + 3)
        font.setBold(True)
        heading.setFont(font)

        self._current_label = QLabel(self)
        self._current_label.setWordWrap(True)
        self._apps_list = AppsList(self)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(heading)
        layout.addWidget(self._current_label)
        layout.addWidget(self._apps_list, 1)
        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self._assistant_action.triggered.connect(self._open_assistant_settings)
        self._clear_action.triggered.connect(self._vm.clear_selection)
        self._refresh_action.triggered.connect(self._vm.refresh)
        self._apps_list.appChosen.connect(self._vm.select)
        self._vm.appsChanged.connect(self._on_apps_changed)
        self._vm.selectionChanged.connect(self._show_selection)
        self._vm.permissionNoticeRequested.connect(self._show_permission_notice)

    # ------------------------------------------------------------------
    def _on_apps_changed(self, apps: List[AppEntry]) -> None:
        self._apps_list.set_apps(apps)
        self.statusBar().showMessage(f"{len(apps)} applications")

    def _show_selection(self, identifier: Optional[str]) -> None:
        self._apps_list.mark_selected(identifier)
        self._clear_action.setEnabled(bool(identifier))
        if not identifier:
            self._current_label.setText("No app selected yet.")
            return
        entry = self._vm.selected_entry()
        label = f"{entry.name} ({identifier})" if entry else identifier
        self._current_label.setText(f"Currently selected: {label}")

    def _show_permission_notice(self) -> None:
        dialog = PermissionNoticeDialog(self)
        if dialog.exec():
            self._vm.acknowledge_notice()

    def _open_assistant_settings(self) -> None:
        if not self._vm.open_assistant_settings():
            QMessageBox.information(
                self,
                "Assistant settings",
                "No assistant or keyboard-shortcut settings screen was found.\n"
                "Bind a shortcut to `assistlaunch --assist` in your desktop settings.",
            )
