# topmark:header:start
#
#   project      : EDNKit
#   file         : main.py
#   file_relpath : src/ednkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit command-line interface.

Key ideas:
- Group-level options (verbosity) are resolved once and configure logging.
- Logging goes to STDERR so STDOUT carries only EDN.
- Subcommands live in [`ednkit.cli.commands`][].
"""

from __future__ import annotations

import click

from ednkit.cli.commands.encode import encode_command
from ednkit.cli.commands.version import version_command
from ednkit.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from ednkit.config.logging import (
    EdnkitLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: EdnkitLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level) on the Click context.

    CLI flags win over ``EDNKIT_LOG_LEVEL``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    level = level_cli if level_cli is not None else resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("log level set to %s", level)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="EDNKit CLI: encode structured data as EDN.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the EDNKit CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'ednkit encode [FILES...]' to encode documents.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(encode_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
