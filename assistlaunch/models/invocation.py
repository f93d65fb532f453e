# Rev 1.0.0

"""Startup purposes the process can be invoked with."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Purpose(Enum):
    MAIN = "main"
    ASSIST = "assist"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Purpose":
        """Map a raw purpose string to a Purpose; anything unknown is MAIN."""
        cleaned = (value or "").strip().lower()
        for purpose in cls:
            if purpose.value == cleaned:
                return purpose
        return cls.MAIN
