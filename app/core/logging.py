# File: app/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the "headhunter" logger hierarchy once.

    Uvicorn installs its own handlers on the root logger, so we only attach
    a handler to our namespace and stop propagation to avoid duplicates.
    """
    logger = logging.getLogger("headhunter")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
