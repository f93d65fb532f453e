# Rev 1.0.0

"""Pick an application catalog backend by name."""
from __future__ import annotations

import os
from typing import Optional

from assistlaunch.catalogs.adb import AdbCatalog
from assistlaunch.catalogs.base import AppCatalog
from assistlaunch.catalogs.desktop_entries import DesktopEntryCatalog


CATALOG_NAMES = ("desktop", "adb")
DEFAULT_CATALOG = "desktop"


def build_catalog(name: Optional[str] = None) -> AppCatalog:
    chosen = (name or os.environ.get("ASSISTLAUNCH_CATALOG") or DEFAULT_CATALOG).strip().lower()
    if chosen == "desktop":
        return DesktopEntryCatalog()
    if chosen == "adb":
        return AdbCatalog(serial=os.environ.get("ANDROID_SERIAL") or None)
    raise ValueError(f"Unknown catalog backend: {chosen!r} (expected one of {', '.join(CATALOG_NAMES)})")
