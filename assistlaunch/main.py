# Rev 1.0.0

"""Entry point for the AssistLaunch desktop application."""
from __future__ import annotations

import argparse
import locale
import os
import sys
from typing import List, Optional

from assistlaunch.catalogs.base import AppCatalog
from assistlaunch.catalogs.factory import CATALOG_NAMES, DEFAULT_CATALOG, build_catalog
from assistlaunch.logging_setup import setup_logging
from assistlaunch.models.invocation import Purpose
from assistlaunch.repositories.db import Database
from assistlaunch.repositories.sqlite_settings_repo import SQLiteSettingsRepository
from assistlaunch.services.dispatcher import Dispatcher
from assistlaunch.services.selection_service import SelectionService
from assistlaunch.utils.paths import SETTINGS_DB_PATH, ensure_runtime_dirs


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="assistlaunch",
        description="Pick an app to open whenever the assistant shortcut is used.",
    )
    parser.add_argument(
        "--assist",
        action="store_true",
        help="invoked as the assistant handler: open the saved app and exit",
    )
    parser.add_argument(
        "--catalog",
        choices=CATALOG_NAMES,
        default=None,
        help="where installed apps come from (default: $ASSISTLAUNCH_CATALOG or desktop)",
    )
    # Qt consumes its own flags (e.g. -platform) from the remainder.
    args, _unknown = parser.parse_known_args(argv)
    return args


def resolve_purpose(args: argparse.Namespace) -> Purpose:
    if args.assist:
        return Purpose.ASSIST
    return Purpose.parse(os.environ.get("ASSISTLAUNCH_PURPOSE"))


def run_picker(catalog: AppCatalog, selection: SelectionService) -> int:
    """Boot the Qt application and show the picker window."""
    from PySide6.QtCore import QCoreApplication
    from PySide6.QtWidgets import QApplication

    from assistlaunch.ui.main_window import MainWindow
    from assistlaunch.viewmodels.picker_viewmodel import PickerViewModel

    app = QApplication.instance() or QApplication(sys.argv)
    QCoreApplication.setOrganizationName("assistlaunch")
    QCoreApplication.setApplicationName("AssistLaunch")

    viewmodel = PickerViewModel(catalog=catalog, selection=selection)
    window = MainWindow(viewmodel=viewmodel)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Check the invocation purpose, then redirect or render the picker."""
    args = parse_args(argv)
    purpose = resolve_purpose(args)
    ensure_runtime_dirs()
    logger = setup_logging(console=purpose is Purpose.MAIN)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Falling back to the C collation order")

    logger.info("AssistLaunch starting with purpose %s", purpose.value)

    try:
        catalog = build_catalog(args.catalog)
    except ValueError as exc:
        logger.warning("%s; using the %s catalog", exc, DEFAULT_CATALOG)
        catalog = build_catalog(DEFAULT_CATALOG)

    with Database(SETTINGS_DB_PATH) as db:
        applied = db.run_migrations()
        if applied:
            logger.info("Applied migrations: %s", ", ".join(applied))

        selection = SelectionService(SQLiteSettingsRepository(db))
        dispatcher = Dispatcher(
            catalog=catalog,
            selection=selection,
            render=lambda: run_picker(catalog, selection),
        )
        outcome = dispatcher.dispatch(purpose)

    logger.info("AssistLaunch exiting from %s with code %s", outcome.state.value, outcome.exit_code)
    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
