"""Logging for fpkit."""

from fpkit.logger.logger import (
    logger,
    setup_logger,
    get_logger,
    set_level,
    resolve_level,
)

__all__ = ["logger", "setup_logger", "get_logger", "set_level", "resolve_level"]
