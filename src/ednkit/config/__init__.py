# topmark:header:start
#
#   project      : EDNKit
#   file         : __init__.py
#   file_relpath : src/ednkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for EDNKit.

Encoding itself has no configuration surface. This package only holds the
runtime logging setup, which is driven by the ``EDNKIT_LOG_LEVEL`` environment
variable and the CLI verbosity flags.
"""

from __future__ import annotations
