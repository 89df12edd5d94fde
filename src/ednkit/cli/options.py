# topmark:header:start
#
#   project      : EDNKit
#   file         : options.py
#   file_relpath : src/ednkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for the EDNKit CLI.

Only verbosity is shared: ``-v`` (repeatable) and ``-q`` pick the log level of
the ``ednkit`` logger for one invocation. Commands stay free of option
plumbing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, ParamSpec, TypeVar

import click

from ednkit.cli.errors import EdnkitUsageError
from ednkit.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {
    "help_option_names": ["-h", "--help"],
}

# Level for -v, -vv and -vvv (or more).
_VERBOSE_LEVELS: Final[tuple[int, ...]] = (logging.INFO, logging.DEBUG, TRACE_LEVEL)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Translate ``-v`` / ``-q`` counts into a logging level.

    Args:
        verbose_count: How many times ``-v`` was given.
        quiet_count: How many times ``-q`` was given.

    Returns:
        INFO, DEBUG or TRACE for one, two or three-plus ``-v``; CRITICAL for any
        ``-q``; None when neither flag was given (``EDNKIT_LOG_LEVEL`` then
        applies).

    Raises:
        EdnkitUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise EdnkitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS)) - 1]
    if quiet_count:
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` to a command or group.

    Args:
        f: The Click callback to decorate.

    Returns:
        The decorated callback.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Log more to stderr: -v INFO, -vv DEBUG, -vvv TRACE.",
    )(f)
    return click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical errors.",
    )(f)
