"""Logging for the ``letitsnow`` package.

Every module logs through a child of the package logger, which owns a
stderr handler and a single rolling ``letitsnow.log`` file.
"""

import logging
from functools import cache
from logging.handlers import RotatingFileHandler
from pathlib import Path

from letitsnow.utilities.env.parsing import _env_str

PACKAGE_LOGGER_NAME = "letitsnow"
LOG_FILE_NAME = "letitsnow.log"
DEFAULT_LOG_DIR = Path.home() / ".letitsnow" / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_path() -> Path:
    log_dir = Path(_env_str("LETITSNOW_LOG_DIR", default=str(DEFAULT_LOG_DIR)))
    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


@cache
def package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level_name = _env_str("LOG_LEVEL", default="INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False
    if logger.handlers:
        # Handlers installed by an embedding application win.
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (
        logging.StreamHandler(),
        RotatingFileHandler(_log_path(), maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT),
    ):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that reports through the package handlers."""

    package = package_logger()
    if name == PACKAGE_LOGGER_NAME:
        return package
    if name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return package.getChild(name)
