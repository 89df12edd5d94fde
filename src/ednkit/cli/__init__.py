# topmark:header:start
#
#   project      : EDNKit
#   file         : __init__.py
#   file_relpath : src/ednkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit CLI package.

This package groups the Click command definitions and supporting utilities
for the EDNKit command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        ednkit = "ednkit.cli.main:cli"

All subcommands live in [`ednkit.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
