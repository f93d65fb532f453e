# Rev 1.0.0

"""Route one invocation either to the picker UI or to the saved target app."""
from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from assistlaunch.catalogs.base import AppCatalog, CatalogError
from assistlaunch.models.invocation import Purpose
from assistlaunch.services.selection_service import SelectionService


logger = logging.getLogger(__name__)


class DispatchState(Enum):
    IDLE = "idle"
    CHECK_INVOCATION = "check_invocation"
    REDIRECTING = "redirecting"
    RENDERING = "rendering"


@dataclass(frozen=True)
class DispatchOutcome:
    state: DispatchState
    launched: Optional[str]
    exit_code: int


class Dispatcher:
    """Single-use state machine: Idle -> CheckInvocation -> {Redirecting, Rendering}.

    The redirect path never calls ``render``. A missing target, an
    identifier the catalog cannot resolve, or a launch that fails all end
    the same way: nothing is launched and the process exits normally.
    """

    def __init__(
        self,
        *,
        catalog: AppCatalog,
        selection: SelectionService,
        render: Callable[[], int],
    ) -> None:
        self._catalog = catalog
        self._selection = selection
        self._render = render
        self.state = DispatchState.IDLE

    def dispatch(self, purpose: Purpose) -> DispatchOutcome:
        if self.state is not DispatchState.IDLE:
            raise RuntimeError("Dispatcher already handled an invocation")

        self.state = DispatchState.CHECK_INVOCATION
        if purpose is Purpose.ASSIST:
            self.state = DispatchState.REDIRECTING
            launched = self._redirect()
            return DispatchOutcome(state=self.state, launched=launched, exit_code=0)

        self.state = DispatchState.RENDERING
        exit_code = self._render()
        return DispatchOutcome(state=self.state, launched=None, exit_code=exit_code)

    def _redirect(self) -> Optional[str]:
        try:
            return self._launch_target()
        except (OSError, ValueError, sqlite3.Error, CatalogError) as exc:
            logger.warning("Assist redirect failed: %s", exc)
            return None

    def _launch_target(self) -> Optional[str]:
        target = self._selection.target_identifier()
        if target is None:
            logger.info("Assist invocation with no target selected")
            return None

        action = self._catalog.resolve_launch_action(target)
        if action is None:
            logger.info("No launch action for %s", target)
            return None

        logger.info("Redirecting assist invocation to %s: %s", target, action.describe())
        action()
        return target
