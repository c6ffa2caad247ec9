"""
Background Workers (Threading)
==============================
QThread subclasses for the initial data load.

Why is this file needed?
------------------------
1. Responsiveness: Parsing the landings CSV and the world outlines happens
   off the GUI thread so the window can paint while they load.
2. Join: Nothing may render until BOTH sources are available. DataLoader
   starts the two workers and emits `loaded` only once each has reported.
   A failure in either one is fatal and reported once through `failed`.

Classes:
    RecordsWorker: Loads the landing records.
    BoundariesWorker: Loads the world outlines.
    DataLoader: Joins the two workers.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThread, Signal

from meteoritestory.model.io import IOManager
from meteoritestory.model.records import Boundary, Dataset

logger = logging.getLogger(__name__)


class RecordsWorker(QThread):
    records_ready = Signal(object)
    error_occurred = Signal(str)

    def __init__(self, filepath: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.filepath = filepath

    def run(self) -> None:
        try:
            self.records_ready.emit(IOManager.load_records(self.filepath))
        except Exception as e:
            logger.exception("Failed to load landing records")
            self.error_occurred.emit(str(e))


class BoundariesWorker(QThread):
    boundaries_ready = Signal(object)
    error_occurred = Signal(str)

    def __init__(self, filepath: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.filepath = filepath

    def run(self) -> None:
        try:
            self.boundaries_ready.emit(IOManager.load_boundaries(self.filepath))
        except Exception as e:
            logger.exception("Failed to load world outlines")
            self.error_occurred.emit(str(e))


class DataLoader(QObject):
    """Emits `loaded(records, boundaries)` after both sources resolve, or `failed(message)`."""
    loaded = Signal(object, object)
    failed = Signal(str)

    def __init__(self, data_path: str, world_path: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._records: Optional[Dataset] = None
        self._boundaries: Optional[list[Boundary]] = None
        self._done = False

        self.records_worker = RecordsWorker(data_path, self)
        self.records_worker.records_ready.connect(self.on_records_ready)
        self.records_worker.error_occurred.connect(self.on_error)

        self.boundaries_worker = BoundariesWorker(world_path, self)
        self.boundaries_worker.boundaries_ready.connect(self.on_boundaries_ready)
        self.boundaries_worker.error_occurred.connect(self.on_error)

    def start(self) -> None:
        logger.info("Starting data load...")
        self.records_worker.start()
        self.boundaries_worker.start()

    def wait(self) -> None:
        self.records_worker.wait()
        self.boundaries_worker.wait()

    def on_records_ready(self, records: Dataset) -> None:
        self._records = records
        self._try_finish()

    def on_boundaries_ready(self, boundaries: list[Boundary]) -> None:
        self._boundaries = boundaries
        self._try_finish()

    def on_error(self, message: str) -> None:
        if self._done:
            return
        self._done = True
        self.failed.emit(message)

    def _try_finish(self) -> None:
        if self._done or self._records is None or self._boundaries is None:
            return
        self._done = True
        logger.info(f"Data ready: {len(self._records)} records, {len(self._boundaries)} outlines.")
        self.loaded.emit(self._records, self._boundaries)
