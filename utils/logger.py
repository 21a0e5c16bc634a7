"""
Shared logger utility for the customer-processing project.
Provides a consistent logger configuration for all modules.
"""

import logging
import os

LOG_LEVEL_ENV_VAR = "CUSTOMER_PROCESSING_LOG_LEVEL"


def _resolve_level(level: int | str | None) -> int:
    """Resolve an explicit level, the environment override, or INFO."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        # getLevelName returns "Level X" for unknown names
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def get_logger(name: str | None = None, level: int | str | None = None) -> logging.Logger:
    """
    Returns a logger with the specified name, configured with a standard format.
    The level defaults to INFO unless ``CUSTOMER_PROCESSING_LOG_LEVEL`` is set.
    If no name is provided, returns the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger
