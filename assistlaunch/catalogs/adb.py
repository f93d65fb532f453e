# Rev 1.0.0

"""Application catalog for an Android device reached through ``adb``."""
from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, List, Optional, Sequence

from assistlaunch.catalogs.base import CatalogError, LaunchAction
from assistlaunch.models.app_entry import AppEntry


logger = logging.getLogger(__name__)

ACTION_MAIN = "android.intent.action.MAIN"
CATEGORY_LAUNCHER = "android.intent.category.LAUNCHER"
ACTION_VOICE_INPUT_SETTINGS = "android.settings.VOICE_INPUT_SETTINGS"

Runner = Callable[[Sequence[str]], str]


def _run(argv: Sequence[str]) -> str:
    try:
        result = subprocess.run(
            list(argv),
            check=True,
            capture_output=True,
            text=True,
            timeout=30,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise CatalogError(f"adb command failed: {' '.join(argv)}: {exc}") from exc
    return result.stdout


def label_for_package(package: str) -> str:
    """Readable label from a package id, e.g. ``com.example.my_notes`` -> ``My notes``."""
    return package.rsplit(".", 1)[-1].replace("_", " ").capitalize()


def parse_launcher_activities(output: str) -> List[str]:
    """Package names from ``pm query-activities --brief`` output, in order, no repeats."""
    packages: List[str] = []
    seen = set()
    for line in output.splitlines():
        line = line.strip()
        if not line or " " in line or "/" not in line:
            continue
        package = line.split("/", 1)[0]
        if package and package not in seen:
            seen.add(package)
            packages.append(package)
    return packages


class AdbCatalog:
    """Lists launcher activities on a connected device and launches them."""

    def __init__(
        self,
        *,
        serial: Optional[str] = None,
        adb_path: Optional[str] = None,
        runner: Optional[Runner] = None,
    ) -> None:
        self._serial = serial
        self._adb = adb_path or shutil.which("adb") or "adb"
        self._runner = runner or _run

    def _adb_argv(self, *args: str) -> List[str]:
        argv = [self._adb]
        if self._serial:
            argv.extend(["-s", self._serial])
        argv.extend(args)
        return argv

    def _launcher_packages(self) -> List[str]:
        output = self._runner(
            self._adb_argv(
                "shell", "pm", "query-activities", "--brief",
                "-a", ACTION_MAIN, "-c", CATEGORY_LAUNCHER,
            )
        )
        return parse_launcher_activities(output)

    def list_launchable_apps(self) -> List[AppEntry]:
        return [
            AppEntry(name=label_for_package(package), identifier=package)
            for package in self._launcher_packages()
        ]

    def resolve_launch_action(self, identifier: str) -> Optional[LaunchAction]:
        try:
            packages = self._launcher_packages()
        except CatalogError as exc:
            logger.warning("%s", exc)
            return None
        if identifier not in packages:
            return None
        return LaunchAction(
            identifier,
            self._adb_argv("shell", "monkey", "-p", identifier, "-c", CATEGORY_LAUNCHER, "1"),
        )

    def open_assistant_settings(self) -> bool:
        try:
            self._runner(self._adb_argv("shell", "am", "start", "-a", ACTION_VOICE_INPUT_SETTINGS))
        except CatalogError as exc:
            logger.warning("%s", exc)
            return False
        return True
