# topmark:header:start
#
#   project      : EDNKit
#   file         : version.py
#   file_relpath : src/ednkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit `version` command.

Prints the current EDNKit version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from ednkit.constants import EDNKIT_VERSION
from ednkit.encoder.session import dumps
from ednkit.types import KMap


@click.command(
    name="version",
    help="Show the current version of EDNKit.",
)
@click.option(
    "--edn",
    "as_edn",
    is_flag=True,
    default=False,
    help="Print the version as an EDN map ({:version \"...\"}).",
)
def version_command(*, as_edn: bool = False) -> None:
    """Show the current version of EDNKit.

    Args:
        as_edn (bool): Render the version as an EDN map instead of plain text.
    """
    if as_edn:
        click.echo(dumps(KMap(version=EDNKIT_VERSION)))
    else:
        click.echo(EDNKIT_VERSION)
