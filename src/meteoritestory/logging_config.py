"""
Logging Configuration
Console (and optional file) output for the 'meteoritestory' logger tree.
Every module logs through `logging.getLogger(__name__)`; nothing else in the
package adds handlers.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Third-party loggers that are chatty at DEBUG
QUIET_LOGGERS = ("pyqtgraph",)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'meteoritestory' namespace logger and return it.

    Args:
        level: A logging level or its name ("DEBUG", "INFO", ...), as given on the command line.
        log_file: Optional path; the file is overwritten on each start.
    """
    level = _resolve_level(level)
    logger = logging.getLogger("meteoritestory")
    logger.setLevel(level)

    # main() may run more than once in a process (tests, restarts)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
