"""Console logging for the asciicam logger hierarchy."""

from __future__ import annotations

import logging

_LOGGER_NAME = "asciicam"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    logger.addHandler(stream_handler)
    return logger
