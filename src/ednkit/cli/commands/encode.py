# topmark:header:start
#
#   project      : EDNKit
#   file         : encode.py
#   file_relpath : src/ednkit/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit `encode` command.

Reads JSON, NDJSON or TOML documents from files (or STDIN) and writes each one
to STDOUT as a single line of EDN.

Examples:
    ednkit encode config.toml
    echo '{"answer": 42}' | ednkit encode --keywordize
    ednkit encode --from ndjson events.log
"""

from __future__ import annotations

import click

from ednkit.cli.errors import EdnkitEncodingError, EdnkitIOError
from ednkit.cli.io import InputFormat, keywordize, load_sources
from ednkit.config.logging import EdnkitLogger, get_logger
from ednkit.encoder.stream import StreamWriter
from ednkit.errors import EDNError, SinkError

logger: EdnkitLogger = get_logger(__name__)


@click.command(
    name="encode",
    help="Encode JSON, NDJSON or TOML documents as EDN, one value per line.",
)
@click.argument("sources", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--from",
    "input_format",
    type=click.Choice([f.value for f in InputFormat], case_sensitive=False),
    default=None,
    help="Input format. Default: by file suffix (.toml, .ndjson/.jsonl), else json.",
)
@click.option(
    "--keywordize",
    "keywordize_keys",
    is_flag=True,
    default=False,
    help="Encode string map keys as keywords (:key instead of \"key\").",
)
def encode_command(
    *,
    sources: tuple[str, ...],
    input_format: str | None,
    keywordize_keys: bool = False,
) -> None:
    """Encode input documents to EDN on STDOUT.

    Args:
        sources (tuple[str, ...]): Input paths; ``-`` or none reads STDIN.
        input_format (str | None): Explicit input format from ``--from``.
        keywordize_keys (bool): Encode string map keys as keywords.

    Raises:
        EdnkitEncodingError: If a document cannot be encoded to EDN.
        EdnkitIOError: If writing to STDOUT fails.
    """
    fmt: InputFormat | None = InputFormat(input_format.lower()) if input_format else None
    writer = StreamWriter(click.get_binary_stream("stdout"))

    count: int = 0
    for document in load_sources(sources, fmt):
        value = keywordize(document) if keywordize_keys else document
        try:
            writer.encode(value)
        except SinkError as exc:
            raise EdnkitIOError(str(exc)) from exc
        except EDNError as exc:
            raise EdnkitEncodingError(str(exc)) from exc
        count += 1

    logger.info("encoded %d document(s)", count)
