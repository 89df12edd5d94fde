# topmark:header:start
#
#   project      : EDNKit
#   file         : __main__.py
#   file_relpath : src/ednkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running EDNKit via ``python -m ednkit``.

It delegates directly to :func:`ednkit.cli.main.cli`, the same entry point as
the ``ednkit`` console script.

Examples:
    Encode a TOML document to EDN::

        python -m ednkit encode pyproject.toml
"""

from __future__ import annotations

from ednkit.cli.main import cli

if __name__ == "__main__":
    cli()
