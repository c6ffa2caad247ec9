"""
Application Initialization
==========================
This module wires the loader, the scene engine and the window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Starts the background load of the records and the world outlines.
3. Builds the SceneDispatcher (the engine) once both have arrived.
4. Passes the dispatcher into the Main Window (View).
A load failure is fatal: an error dialog is shown and the process exits 1.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication, QMessageBox

from meteoritestory.config import DEFAULT_DATA_PATH, DEFAULT_VIEWPORT, DEFAULT_WORLD_PATH
from meteoritestory.controller.dispatcher import SceneDispatcher
from meteoritestory.controller.workers import DataLoader
from meteoritestory.logging_config import setup_logging
from meteoritestory.model.records import Boundary, Dataset
from meteoritestory.view.main_window import MainWindow, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="meteoritestory", description=VISIBLE_APP_NAME)
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="Meteorite landings CSV")
    parser.add_argument("--world", default=DEFAULT_WORLD_PATH, help="World countries GeoJSON")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)
    pg.setConfigOptions(antialias=True)

    # 3. Load both data sources; nothing renders before they join
    loader = DataLoader(args.data, args.world)
    windows: list[MainWindow] = []

    def on_loaded(records: Dataset, boundaries: list[Boundary]) -> None:
        dispatcher = SceneDispatcher(records, boundaries, viewport=DEFAULT_VIEWPORT)
        window = MainWindow(dispatcher)
        windows.append(window)
        window.start()

    def on_failed(message: str) -> None:
        logger.error(f"Startup failed: {message}")
        QMessageBox.critical(None, "Load Error", f"Could not load the data:\n{message}")
        app.exit(1)

    loader.loaded.connect(on_loaded)
    loader.failed.connect(on_failed)
    loader.start()

    # 4. Start Event Loop
    code = app.exec()
    loader.wait()
    return code


if __name__ == "__main__":
    sys.exit(main())
