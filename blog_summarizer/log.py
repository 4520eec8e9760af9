"""Logger setup shared by the client, the controller and both surfaces."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from blog_summarizer.config import settings

LOGGER_NAME = "blog_summarizer"


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the named logger, attaching its handler on first use.

    Logs go to a rotating file when ``LOG_PATH`` is set, otherwise to stderr.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)

    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

        if settings.log_path is not None:
            settings.log_path.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = RotatingFileHandler(
                settings.log_path, maxBytes=5 * 1024 * 1024, backupCount=3
            )
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger


log = setup_logger()
