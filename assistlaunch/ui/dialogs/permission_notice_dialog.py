# Rev 1.0.0

"""First-run notice explaining why the app reads the installed-apps list."""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QVBoxLayout


NOTICE_TITLE = "Permission notice"
NOTICE_TEXT = (
    "To list every application installed on this system so you can pick a "
    "launch target, AssistLaunch needs to query all installed applications.\n\n"
    "This information is only used to show the list inside this window. It is "
    "never uploaded or shared."
)


class PermissionNoticeDialog(QDialog):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle(NOTICE_TITLE)
        self.setModal(True)
        self.setWindowFlag(Qt.WindowCloseButtonHint, False)

        label = QLabel(NOTICE_TEXT, self)
        label.setWordWrap(True)

        buttons = QDialogButtonBox(self)
        buttons.addButton("I understand", QDialogButtonBox.AcceptRole)
        buttons.accepted.connect(self.accept)

        layout = QVBoxLayout(self)
        layout.addWidget(label)
        layout.addWidget(buttons)

    def reject(self) -> None:
        # Escape and window-manager close are ignored; only the button closes.
        pass
