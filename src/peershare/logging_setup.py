"""
PeerShare - Logging configuration.

Created by orpheus497

Attaches handlers to the "peershare" logger according to the [logging]
section of the configuration. Modules only ever call
logging.getLogger(__name__); nothing logs key material, plaintext or tags.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Config
from .constants import LOG_BACKUP_COUNT, LOG_DATE_FORMAT, LOG_FORMAT, LOG_MAX_BYTES

PACKAGE_LOGGER = "peershare"


def setup_logging(config: Config, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger from config.

    Args:
        config: Loaded configuration
        level: Optional level name overriding the configured one

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level_name = (level or config.get("logging", "level", "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.propagate = False

    if config.get("logging", "console_logging", True):
        console = Console(stderr=True, no_color=not config.get("output", "color", True))
        logger.addHandler(RichHandler(console=console, show_path=False, rich_tracebacks=False))

    if config.get("logging", "file_logging", False):
        log_file = Path(config.get("logging", "log_file")).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
