# Rev 1.0.0

"""The user's target-app choice and first-run flag on top of a settings store."""
from __future__ import annotations

from typing import Any, Optional, Protocol


TARGET_APP_KEY = "target_app_package"
FIRST_LAUNCH_KEY = "is_first_launch"


class SettingsStore(Protocol):
    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def delete(self, key: str) -> bool:
        ...


class SelectionService:
    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    def target_identifier(self) -> Optional[str]:
        value = self._store.get(TARGET_APP_KEY)
        return str(value) if value else None

    def select(self, identifier: str) -> None:
        self._store.set(TARGET_APP_KEY, identifier)

    def clear(self) -> None:
        self._store.delete(TARGET_APP_KEY)

    def is_first_launch(self) -> bool:
        return bool(self._store.get(FIRST_LAUNCH_KEY, True))

    def acknowledge_first_launch(self) -> None:
        self._store.set(FIRST_LAUNCH_KEY, False)
