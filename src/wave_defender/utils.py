"""
Wave Defender utils
"""

from __future__ import annotations

import logging

logger = logging.getLogger("wave_defender")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the root handler and the package logger.

    :param level: Logging level, either a number or a level name.
    :type level: int | str

    :return: The package logger.
    :rtype: logging.Logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if value < lo else hi if value > hi else value
