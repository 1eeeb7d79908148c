"""Global logger configuration for the fpkit project."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "get_logger", "set_level", "resolve_level"]

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: str | int) -> int:
    """Translate a level name (any case) or number to a ``logging`` level.

    Raises:
        ValueError: If ``level`` is a name outside ``LEVEL_NAMES``.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(LEVEL_NAMES)}"
        )
    return getattr(logging, name)


def setup_logger(
    name: str = "fpkit",
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (defaults to the package name)
        level: Log level name or number; falls back to ``LOG_LEVEL`` then INFO
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # The stdout handler is attached once per logger name
    if not getattr(logger, "_fpkit_handler", None):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger._fpkit_handler = handler
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


logger = setup_logger()


def set_level(level: str | int, name: str = "fpkit") -> logging.Logger:
    """Change the level of an already configured logger.

    Used to apply ``Settings.LOG_LEVEL`` once configuration is loaded, so a
    level read from the config file wins over the import-time default.
    """
    target = logging.getLogger(name)
    target.setLevel(resolve_level(level))
    return target


def get_logger(module: str) -> logging.Logger:
    """Return a child of the package logger for ``module``.

    Children inherit the package handler, so ``get_logger("functional.lazy")``
    logs as ``fpkit.functional.lazy`` without further setup.
    """
    return logger.getChild(module)
