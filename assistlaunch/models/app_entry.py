# Rev 1.0.0

"""Typed representation of a launchable application."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppEntry:
    """One launchable application as reported by the host OS.

    ``identifier`` is the stable OS-assigned id (desktop-file id or Android
    package name). ``icon`` is an icon theme name or a file path; the view
    layer resolves it.
    """

    name: str
    identifier: str
    icon: Optional[str] = None
