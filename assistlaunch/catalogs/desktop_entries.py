# Rev 1.0.0

"""Application catalog backed by freedesktop.org ``.desktop`` entries."""
from __future__ import annotations

import configparser
import logging
import os
import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from assistlaunch.catalogs.base import CatalogError, LaunchAction
from assistlaunch.models.app_entry import AppEntry


logger = logging.getLogger(__name__)

SECTION = "Desktop Entry"

# Field codes that expand to files/URLs; we never pass any, so they vanish.
_DROPPED_FIELD_CODES = {"%f", "%F", "%u", "%U", "%d", "%D", "%n", "%N", "%v", "%m"}

# Assistant/shortcut settings screens, first match wins.
SETTINGS_COMMANDS = (
    ("gnome-control-center", "keyboard"),
    ("systemsettings", "kcm_keys"),
    ("xfce4-keyboard-settings",),
)


@dataclass(frozen=True)
class DesktopEntry:
    desktop_id: str
    path: Path
    name: str
    exec_line: str
    icon: Optional[str]
    working_dir: Optional[str]
    launchable: bool


def default_search_dirs() -> List[Path]:
    """``applications`` dirs in XDG precedence order (user dir first)."""
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    roots = [data_home] + [d for d in data_dirs.split(":") if d]
    return [Path(root) / "applications" for root in roots]


def desktop_id_for(path: Path, base_dir: Path) -> str:
    return "-".join(path.relative_to(base_dir).parts)


def _locale_suffixes() -> List[str]:
    raw = os.environ.get("LC_ALL") or os.environ.get("LC_MESSAGES") or os.environ.get("LANG") or ""
    lang = raw.split(".", 1)[0].split("@", 1)[0]
    if not lang or lang in {"C", "POSIX"}:
        return []
    suffixes = [lang]
    if "_" in lang:
        suffixes.append(lang.split("_", 1)[0])
    return suffixes


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def parse_desktop_file(path: Path, desktop_id: str) -> Optional[DesktopEntry]:
    """Parse one entry file; returns None when it is unreadable or malformed."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case sensitive
    try:
        with path.open(encoding="utf-8") as fh:
            parser.read_file(fh)
    except (OSError, UnicodeDecodeError, configparser.Error) as exc:
        logger.debug("Skipping unreadable desktop entry %s: %s", path, exc)
        return None
    if not parser.has_section(SECTION):
        return None

    section = parser[SECTION]
    name = None
    for suffix in _locale_suffixes():
        name = section.get(f"Name[{suffix}]")
        if name:
            break
    name = (name or section.get("Name") or "").strip()
    exec_line = (section.get("Exec") or "").strip()

    launchable = bool(
        name
        and exec_line
        and section.get("Type", "").strip() == "Application"
        and not _is_true(section.get("NoDisplay"))
        and not _is_true(section.get("Hidden"))
    )
    try_exec = (section.get("TryExec") or "").strip()
    if launchable and try_exec and shutil.which(try_exec) is None:
        launchable = False

    return DesktopEntry(
        desktop_id=desktop_id,
        path=path,
        name=name,
        exec_line=exec_line,
        icon=(section.get("Icon") or "").strip() or None,
        working_dir=(section.get("Path") or "").strip() or None,
        launchable=launchable,
    )


def exec_argv(entry: DesktopEntry) -> List[str]:
    """Split an ``Exec`` line and expand its field codes for a no-argument launch."""
    try:
        tokens = shlex.split(entry.exec_line)
    except ValueError as exc:
        raise CatalogError(f"Malformed Exec line in {entry.path}: {exc}") from exc

    argv: List[str] = []
    for token in tokens:
        if token in _DROPPED_FIELD_CODES:
            continue
        if token == "%i":
            if entry.icon:
                argv.extend(["--icon", entry.icon])
            continue
        if token == "%c":
            argv.append(entry.name)
            continue
        if token == "%k":
            argv.append(str(entry.path))
            continue
        for code in _DROPPED_FIELD_CODES:
            token = token.replace(code, "")
        argv.append(token.replace("%%", "%"))
    return [arg for arg in argv if arg]


class DesktopEntryCatalog:
    """Lists and launches apps described by XDG desktop entries."""

    def __init__(self, search_dirs: Optional[Iterable[Path]] = None) -> None:
        self._search_dirs = list(search_dirs) if search_dirs is not None else default_search_dirs()

    def _scan(self) -> Dict[str, DesktopEntry]:
        entries: Dict[str, DesktopEntry] = {}
        for base_dir in self._search_dirs:
            if not base_dir.is_dir():
                continue
            for path in sorted(base_dir.rglob("*.desktop")):
                desktop_id = desktop_id_for(path, base_dir)
                if desktop_id in entries:
                    continue
                parsed = parse_desktop_file(path, desktop_id)
                if parsed is not None:
                    # Hidden entries still shadow lower-precedence files.
                    entries[desktop_id] = parsed
        return entries

    def list_launchable_apps(self) -> List[AppEntry]:
        try:
            scanned = self._scan()
        except OSError as exc:
            raise CatalogError(f"Could not scan application directories: {exc}") from exc
        return [
            AppEntry(name=entry.name, identifier=entry.desktop_id, icon=entry.icon)
            for entry in scanned.values()
            if entry.launchable
        ]

    def resolve_launch_action(self, identifier: str) -> Optional[LaunchAction]:
        try:
            entry = self._scan().get(identifier)
        except OSError as exc:
            logger.warning("Could not scan application directories: %s", exc)
            return None
        if entry is None or not entry.launchable:
            return None
        try:
            argv = exec_argv(entry)
        except CatalogError as exc:
            logger.warning("%s", exc)
            return None
        if not argv:
            return None
        return LaunchAction(identifier, argv, cwd=entry.working_dir)

    def open_assistant_settings(self) -> bool:
        for command in SETTINGS_COMMANDS:
            if shutil.which(command[0]):
                LaunchAction("settings", command)()
                return True
        return False
