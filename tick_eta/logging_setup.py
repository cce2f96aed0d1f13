"""Logging setup for the progress CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOGGER_NAME = "tick_eta"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    log_file: Union[str, Path, None] = None,
) -> logging.Logger:
    """Route progress lines to stderr and, optionally, to ``log_file``.

    Missing parent directories of ``log_file`` are created. An unusable path
    raises ``OSError`` for the caller to report.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)
    return logger


__all__ = ["DEFAULT_LOGGER_NAME", "LOG_FORMAT", "configure_logging"]
