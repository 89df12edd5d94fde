# topmark:header:start
#
#   project      : EDNKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running EDNKit through Click's test runner.

EDN goes to STDOUT and log records go to STDERR, so tests assert on
``result.stdout`` for encoded output and on ``result.output`` for messages.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from ednkit.cli.exit_codes import ExitCode
from ednkit.cli.main import cli
from ednkit.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the suite-wide TRACE logging after each CLI run.

    The CLI reconfigures the ``ednkit`` logger with a handler bound to the runner's
    temporary STDERR, which does not outlive the invocation.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["encode", "doc.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["encode", "-"], input_text='{"a": 1}')
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
