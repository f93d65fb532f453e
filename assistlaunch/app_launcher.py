# Rev 1.0.0

"""Launcher wrapper so `python -m assistlaunch.app_launcher --assist` works from a shortcut."""
from __future__ import annotations

from assistlaunch.main import main


if __name__ == "__main__":
    raise SystemExit(main())
