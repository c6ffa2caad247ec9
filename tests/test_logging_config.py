import logging

import pytest

from meteoritestory.logging_config import setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    logger = setup_logging(level="debug", log_file=str(log_file))
    logging.getLogger("meteoritestory.test").debug("hello")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger("pyqtgraph").level == logging.WARNING


def test_setup_logging_replaces_handlers():
    setup_logging(logging.WARNING)
    logger = setup_logging(logging.INFO)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_unknown_level_name():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
