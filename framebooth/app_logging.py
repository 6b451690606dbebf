"""Logging configuration helpers."""

import logging

from framebooth.config import settings


def configure_logging() -> None:
    """Configure the framebooth logger with a single stream handler."""
    logger = logging.getLogger("framebooth")
    logger.setLevel(settings.log_level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
