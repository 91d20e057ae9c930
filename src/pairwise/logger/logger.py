"""Logger configuration for the pairwise project.

The level comes from an explicit argument or, failing that, from
``PAIRWISE_LOG_LEVEL`` through :class:`pairwise.core.config.Settings`, so
there is a single validated source for it.
"""

import logging
import sys
import typing as tp

from pairwise.core.config import LOG_LEVELS, Settings

__all__ = ["logger", "setup_logger", "DEFAULT_FORMAT"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | None) -> str:
    if level is None:
        return Settings.load().LOG_LEVEL

    resolved = level.strip().upper()
    if resolved not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}."
        )
    return resolved


def setup_logger(
    name: str = "pairwise",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """Return the named logger with a single stream handler attached.

    Calling again for the same name keeps the existing handler and only
    updates the level.

    Args:
        name: Logger name.
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (any case).
            Defaults to the ``PAIRWISE_LOG_LEVEL`` setting.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        stream: Where records go, stdout when omitted.

    Raises:
        ValueError: If ``level`` is not a known level name.
        pydantic.ValidationError: If ``PAIRWISE_LOG_LEVEL`` is invalid.
    """
    resolved = _resolve_level(level)

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(resolved)

    return logger


logger = setup_logger()
