# Rev 1.0.0

"""Build the sorted list of launchable apps shown in the picker."""
from __future__ import annotations

import locale
import logging
from typing import List

from assistlaunch.catalogs.base import AppCatalog, CatalogError
from assistlaunch.models.app_entry import AppEntry


logger = logging.getLogger(__name__)


def sort_entries(entries: List[AppEntry]) -> List[AppEntry]:
    """Drop repeated identifiers (first wins) and order by display name."""
    unique: List[AppEntry] = []
    seen = set()
    for entry in entries:
        if entry.identifier in seen:
            continue
        seen.add(entry.identifier)
        unique.append(entry)
    return sorted(unique, key=lambda entry: (locale.strxfrm(entry.name), entry.identifier))


def enumerate_apps(catalog: AppCatalog) -> List[AppEntry]:
    """Full scan of the catalog; a failed OS query yields an empty list."""
    try:
        entries = catalog.list_launchable_apps()
    except (CatalogError, OSError) as exc:
        logger.warning("App enumeration failed: %s", exc)
        return []
    return sort_entries(list(entries))
