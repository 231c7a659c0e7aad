"""Debug log file setup. The TUI owns the terminal, so logs go to a file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from storefront.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH

LOGGER_NAME = "storefront"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_debug_log_path() -> Path:
    """Return the debug log path, honoring the environment override."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)


def configure_logging(path: Path | str | None = None, level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach a file handler to the `storefront` logger.

    If the file cannot be opened the logger is left without a file handler;
    logging must never interfere with app flow.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    log_path = Path(path) if path is not None else resolve_debug_log_path()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_path):
            return logger

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return logger

    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger
