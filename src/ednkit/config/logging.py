# topmark:header:start
#
#   project      : EDNKit
#   file         : logging.py
#   file_relpath : src/ednkit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit logging: a TRACE level, a logger class that speaks it, and colored output.

Every EDNKit module logs through ``get_logger(__name__)``, so all records flow
through the ``ednkit`` package logger. `setup_logging` configures only that
logger: it never touches the root logger of an application embedding EDNKit.

Levels used by the encoder:
    - TRACE: renderer compilation in the encoder cache.
    - DEBUG: fallbacks (unresolvable type hints) and sink failures.
    - INFO: CLI summaries.

Records go to ``stderr`` so they never interleave with EDN written to ``stdout``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Final, cast

from yachalk import chalk

from ednkit.constants import LOG_LEVEL_ENV_VAR

#: Numeric value of the TRACE level, one step below DEBUG.
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Name of the logger every EDNKit module logger descends from.
PACKAGE_LOGGER: Final[str] = "ednkit"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class EdnkitLogger(logging.Logger):
    """Logger with a `trace` method for the level below DEBUG."""

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            **kwargs (Any): ``extra``, ``exc_info`` and friends, as for `logging.Logger.debug`.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(EdnkitLogger)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one the record reaches picks the color.
_LEVEL_STYLES: Final[tuple[tuple[int, Any], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and color it for its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored text.
        """
        text: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return cast("str", style(text))
        return cast("str", chalk.dim(text))


class _EdnkitHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker subclass so `setup_logging` can find and replace its own handlers."""


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or a numeric level (``"10"``).

    Args:
        value (str): The raw level text.

    Returns:
        int | None: The logging level, or None when the text is not a known level.
    """
    text: str = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``EDNKIT_LOG_LEVEL``, or None if unset or empty."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    return parse_log_level(raw) if raw else None


def setup_logging(level: int | None = None) -> None:
    """Configure the ``ednkit`` logger with a colored ``stderr`` handler.

    Calling it again replaces the handler installed by the previous call.
    Below INFO, records also show the logger name and line number.

    Args:
        level (int | None): The level to apply. When None, ``EDNKIT_LOG_LEVEL``
            decides, and CRITICAL applies if that is unset too.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for existing in [h for h in package_logger.handlers if isinstance(h, _EdnkitHandler)]:
        package_logger.removeHandler(existing)

    handler = _EdnkitHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> EdnkitLogger:
    """Return the `EdnkitLogger` called ``name`` (normally the module's ``__name__``)."""
    return cast("EdnkitLogger", logging.getLogger(name))
