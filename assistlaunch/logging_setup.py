# Rev 1.1.0

"""Logging setup helpers for AssistLaunch."""
from __future__ import annotations
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from assistlaunch.utils.paths import LOG_DIR, ensure_runtime_dirs


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(value: Optional[str] = None) -> int:
    """Level from ``ASSISTLAUNCH_LOG_LEVEL`` (name or number); INFO when unset or unknown."""
    raw = (value if value is not None else os.environ.get("ASSISTLAUNCH_LOG_LEVEL", "")).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper()) if raw else None
    return level if isinstance(level, int) else logging.INFO


def _make_handlers(logfile: Path, *, console: bool) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = RotatingFileHandler(
        logfile,
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [file_handler]

    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        handlers.append(stream)
    return handlers


def setup_logging(name: str = "assistlaunch", *, console: bool = True) -> logging.Logger:
    """Configure logging for the application and return the app logger.

    Assist invocations come from a shortcut with no terminal attached, so
    they pass ``console=False`` and log to the file only.
    """
    ensure_runtime_dirs()
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logfile = LOG_DIR / f"{name}.log"

    logger = logging.getLogger(name)
    logger.setLevel(resolve_level())

    if not logger.handlers:
        for handler in _make_handlers(logfile, console=console):
            logger.addHandler(handler)

    logger.debug("Logging ready at %s", logfile)
    return logger
