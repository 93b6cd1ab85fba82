"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging across the prefixer modules and CLI
  - Configure loggers with standardized formatting
inputs:
  - Logger names
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for consistent logging across modules."""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "tw_prefixer"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with standardized formatting.

    Handlers are attached to the package root logger only, so module loggers
    (``tw_prefixer.core.rewriter`` etc.) propagate to a single handler.

    Args:
        name: Logger name (typically __name__).
        level: Optional logging level (default: WARNING for library use).

    Returns:
        Configured logger instance.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if not already configured (avoid duplicate handlers)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        if root.level == logging.NOTSET:
            root.setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of the package root logger.

    Args:
        level: Numeric level or level name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric
    get_logger(ROOT_LOGGER_NAME).setLevel(level)
