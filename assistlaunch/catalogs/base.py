# Rev 1.0.0

"""Capability interface for querying and launching installed applications."""
from __future__ import annotations

import subprocess
from typing import List, Optional, Protocol, Sequence

from assistlaunch.models.app_entry import AppEntry


class CatalogError(Exception):
    """Raised when the host OS cannot be queried for applications."""


class LaunchAction:
    """A ready-to-run command that starts one application."""

    def __init__(self, identifier: str, argv: Sequence[str], *, cwd: Optional[str] = None) -> None:
        self.identifier = identifier
        self.argv = list(argv)
        self.cwd = cwd

    def describe(self) -> str:
        return " ".join(self.argv)

    def __call__(self) -> None:
        # Detach so the launched app outlives this process.
        subprocess.Popen(
            self.argv,
            cwd=self.cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    def __repr__(self) -> str:
        return f"LaunchAction({self.identifier!r}, {self.argv!r})"


class AppCatalog(Protocol):
    def list_launchable_apps(self) -> List[AppEntry]:
        ...

    def resolve_launch_action(self, identifier: str) -> Optional[LaunchAction]:
        ...

    def open_assistant_settings(self) -> bool:
        ...
