"""
Centralized logging initialization to avoid circular imports.
Every chartwise module logs through the single ``chartwise`` logger created
here from the global settings.
"""

import logging
from typing import Optional

from chartwise.configs.custom_logging import format_pydantic, setup_logging
from chartwise.configs.settings_models import Settings

# Re-export format_pydantic for use by other modules
__all__ = ["logger", "initialize_loggers", "format_pydantic", "settings"]

settings = Settings()

logger = setup_logging("chartwise", level=settings.logging.verbosity_level)


def initialize_loggers(
    verbose: Optional[bool] = True,
    verbose_level: Optional[str] = None,
) -> logging.Logger:
    """
    Reconfigure the chartwise logger.

    Args:
        verbose: Boolean flag indicating whether verbose logging is enabled
        verbose_level: String indicating the verbosity level (DEBUG, INFO, etc.)
            If None, uses the level from settings.

    Returns:
        The configured logger instance
    """
    if verbose_level is None:
        verbose_level = settings.logging.verbosity_level

    if verbose is None:
        verbose = True

    # Same logger object; only its level and handlers change
    setup_logging("chartwise", level=verbose_level if verbose else "CRITICAL")

    return logger
