"""Logging for ``dkb_ynab``.

Everything the converter logs goes through child loggers of ``"dkb_ynab"``
obtained with :func:`get_logger`. Only the CLI installs an output handler,
via :func:`configure_logging`; used as a library the package stays silent
until the host application configures logging itself.

The level comes from the caller, else ``DKB_YNAB_LOG_LEVEL``, else
``WARNING``, so a successful conversion writes nothing to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "dkb_ynab"
_LEVEL_ENV_VAR = "DKB_YNAB_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        # "10", "debug" and "DEBUG" all name the same level.
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    env_val = os.getenv(_LEVEL_ENV_VAR)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``dkb_ynab`` log records to ``stream``; later calls are no-ops.

    Parameters
    ----------
    level:
        Threshold as a number or level name. ``None`` reads
        ``DKB_YNAB_LOG_LEVEL`` and falls back to ``WARNING``.
    fmt:
        ``logging.Formatter`` pattern; the default prefixes a timestamp, the
        logger name and the level.
    stream:
        Where records go; ``None`` means whatever ``sys.stderr`` is at call
        time (the CLI test runner swaps it).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # The placeholder from get_logger() would otherwise stay attached.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Undo :func:`configure_logging` so it can run again in the same process."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)`` for a ``dkb_ynab.*`` module.

    Before :func:`configure_logging` runs, a ``NullHandler`` on the package
    logger keeps Python's last-resort handler from printing warnings.
    """

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
