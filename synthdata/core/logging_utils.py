#!/usr/bin/env python3
"""Logging helpers shared by every synthdata module."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
_LOG_FILE_BACKUPS = 3
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(name: str) -> logging.Logger:
    """Logger ``synthdata.<name>`` with a stdout handler, configured once.

    Example:
        >>> logger = setup_logger("hash_codec")
    """
    full_name = name if name.startswith("synthdata") else f"synthdata.{name}"
    logger = logging.getLogger(full_name)
    if full_name in _CONFIGURED_LOGGERS:
        return logger

    logger.setLevel(_DEFAULT_LEVEL)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))
        logger.addHandler(handler)

    # Keep propagation on so pytest's caplog sees records
    logger.propagate = True
    _CONFIGURED_LOGGERS.add(full_name)
    return logger


def set_global_log_level(level: int | str):
    """Apply ``level`` (e.g. ``logging.DEBUG`` or ``"debug"``) to every synthdata logger.

    Unknown level names fall back to INFO.
    """
    global _DEFAULT_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def configure_file_logging(log_dir: str | Path, log_file: str = "synthdata.log"):
    """Also write every configured logger to a rotating file in ``log_dir``."""
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path / log_file,
        maxBytes=_LOG_FILE_MAX_BYTES,
        backupCount=_LOG_FILE_BACKUPS,
    )
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    for logger_name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(logger_name)
        if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            logger.addHandler(file_handler)


def log_event(logger: logging.Logger, event_name: str, data: dict[str, Any] | None = None):
    """Log ``[EVENT] name k=v ...`` at INFO."""
    data_str = ""
    if data:
        data_str = " " + " ".join(f"{k}={v}" for k, v in data.items())
    logger.info(f"[EVENT] {event_name}{data_str}")
