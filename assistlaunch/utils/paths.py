# Rev 1.0.0

"""Filesystem path helpers for AssistLaunch."""
from __future__ import annotations

import os
from pathlib import Path


APP_NAME = "assistlaunch"

PACKAGE_DIR = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = PACKAGE_DIR / "migrations"


def _xdg_dir(env_var: str, default: Path) -> Path:
    value = os.environ.get(env_var)
    return Path(value) if value else default


def _resolve_data_home() -> Path:
    override = os.environ.get("ASSISTLAUNCH_DATA_DIR")
    if override:
        return Path(override)
    data_home = _xdg_dir("XDG_DATA_HOME", Path.home() / ".local" / "share")
    return data_home / APP_NAME


def _resolve_state_home() -> Path:
    override = os.environ.get("ASSISTLAUNCH_STATE_DIR")
    if override:
        return Path(override)
    state_home = _xdg_dir("XDG_STATE_HOME", Path.home() / ".local" / "state")
    return state_home / APP_NAME


DATA_HOME = _resolve_data_home()
STATE_HOME = _resolve_state_home()

SETTINGS_DB_PATH = DATA_HOME / "settings.db"
LOG_DIR = STATE_HOME / "logs"


def ensure_runtime_dirs() -> None:
    """Ensure user-writable directories exist before the app starts."""
    for path in (
        DATA_HOME,
        LOG_DIR,
        SETTINGS_DB_PATH.parent,
    ):
        path.mkdir(parents=True, exist_ok=True)
