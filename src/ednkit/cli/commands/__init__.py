# topmark:header:start
#
#   project      : EDNKit
#   file         : __init__.py
#   file_relpath : src/ednkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit CLI subcommands."""

from __future__ import annotations
