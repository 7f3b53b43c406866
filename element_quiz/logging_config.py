"""
logging_config.py
======================

Logging setup for the app: console via basicConfig plus a rotating file
under the configured log directory.

Streamlit reruns app.py on every interaction, so setup_logging() must be
safe to call repeatedly.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from .config import AppConfig

LOGGER_NAME = "element_quiz"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(config: AppConfig) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(config.log_level)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    log_path = config.log_path.resolve()
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == str(log_path):
            return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    # console, also for other libraries
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return logger
