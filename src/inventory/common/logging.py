"""Logging configuration for Inventory Store."""

from __future__ import annotations

import logging
import sys


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = "src.inventory",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        level: Logging level, as an int or a name such as "DEBUG".
        module_name: Name for the logger instance.

    Returns:
        Configured logger. Calling again for the same name returns the
        logger untouched.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
