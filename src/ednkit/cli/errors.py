# topmark:header:start
#
#   project      : EDNKit
#   file         : errors.py
#   file_relpath : src/ednkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the EDNKit CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click prints the message to stderr and exits with
    the class's ``exit_code``.
"""

from __future__ import annotations

import click

from ednkit.cli.exit_codes import ExitCode


class EdnkitCliError(click.ClickException):
    """Base class for all EDNKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class EdnkitUsageError(EdnkitCliError):
    """Error for invalid invocations and unparseable input documents."""

    exit_code = ExitCode.USAGE_ERROR


class EdnkitEncodingError(EdnkitCliError):
    """Error when an input value cannot be encoded to EDN."""

    exit_code = ExitCode.ENCODING_ERROR


class EdnkitFileNotFoundError(EdnkitCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EdnkitIOError(EdnkitCliError):
    """Error when reading input or writing output fails."""

    exit_code = ExitCode.IO_ERROR
