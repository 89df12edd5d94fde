# topmark:header:start
#
#   project      : EDNKit
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from ednkit.constants import EDNKIT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_plain_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == EDNKIT_VERSION


def test_version_as_edn() -> None:
    """``--edn`` prints a one-entry EDN map."""
    result = run_cli(["version", "--edn"])

    assert_SUCCESS(result)
    assert result.stdout == f'{{:version "{EDNKIT_VERSION}"}}\n'
