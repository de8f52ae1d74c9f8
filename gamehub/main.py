#!/usr/bin/env python3
"""Game Hub - Main Entry Point (PyQt6 Version)."""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

# Local imports
from gamehub.config import config
from gamehub.core.catalog import CatalogStore, load_catalog_file
from gamehub.core.exceptions import DataFormatError
from gamehub.core.game import GameRecord
from gamehub.core.logging import logger, setup_logging
from gamehub.utils.i18n import init_i18n, t
from gamehub.version import __app_name__, __version__

# PyQt6 imports (QtWebEngine must be loaded before the QApplication exists)
from gamehub.ui.main_window import MainWindow
from PyQt6.QtWidgets import QApplication

__all__ = ["main", "load_catalog"]


def load_catalog(path: Path) -> tuple[GameRecord, ...]:
    """Loads the dataset, degrading to an empty catalog if it is unusable.

    Per-entry problems are logged by the store; only a summary is logged
    here so the user sees the problem once at startup.

    Args:
        path: Location of the JSON dataset.

    Returns:
        The loaded records (possibly empty).
    """
    try:
        store = load_catalog_file(path)
    except DataFormatError as e:
        logger.error(t("logs.main.catalog_unusable", error=e))
        return CatalogStore().games

    if store.errors:
        logger.warning(t("logs.main.catalog_partial", count=len(store.errors)))
    return store.games


def main() -> None:
    """Main application execution flow."""
    # 1. Initialize language (BEFORE creating UI elements)
    init_i18n(config.UI_LANGUAGE)

    # 2. Setup logging
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    logger.info("=" * 60)
    logger.info("%s %s", __app_name__, __version__)
    logger.info("=" * 60)

    # 3. Load the catalog
    logger.info(t("logs.main.loading_catalog", path=config.CATALOG_FILE))
    catalog = load_catalog(config.CATALOG_FILE)

    # 4. Create QApplication
    app = QApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setApplicationVersion(__version__)

    try:
        window = MainWindow(catalog)
        window.show()

        if "--fullscreen" in sys.argv or config.START_FULLSCREEN:
            window.controller.toggle_fullscreen()

        sys.exit(app.exec())

    except Exception as e:
        logger.critical("%s: %s", t("common.error"), e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
