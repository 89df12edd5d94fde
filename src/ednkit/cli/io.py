# topmark:header:start
#
#   project      : EDNKit
#   file         : io.py
#   file_relpath : src/ednkit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loading for the ``encode`` command.

This module turns input sources (files or STDIN) into plain Python values:
- JSON: one document per source (standard-library ``json``).
- NDJSON: one document per non-empty line.
- TOML: one document per source (``tomlkit``, unwrapped to plain values, so
  TOML datetimes become ``datetime`` objects and encode as ``#inst``). Local
  times have no EDN form and become ISO 8601 strings (``"07:32:00"``).

Encoding the loaded values is the command's job, not this module's.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from datetime import time
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ednkit.cli.errors import EdnkitFileNotFoundError, EdnkitIOError, EdnkitUsageError
from ednkit.config.logging import EdnkitLogger, get_logger
from ednkit.types import KMap

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: EdnkitLogger = get_logger(__name__)

#: Path sentinel meaning "read STDIN".
STDIN_SENTINEL: str = "-"


class InputFormat(str, Enum):
    """Input document format for the ``encode`` command.

    Attributes:
        JSON: A single JSON document.
        NDJSON: One JSON document per line.
        TOML: A single TOML document.
    """

    JSON = "json"
    NDJSON = "ndjson"
    TOML = "toml"


_SUFFIX_FORMATS: dict[str, InputFormat] = {
    ".json": InputFormat.JSON,
    ".ndjson": InputFormat.NDJSON,
    ".jsonl": InputFormat.NDJSON,
    ".toml": InputFormat.TOML,
}


def detect_format(source: str, explicit: InputFormat | None = None) -> InputFormat:
    """Return the input format for a source.

    Args:
        source: A file path or the STDIN sentinel ``-``.
        explicit: Format given with ``--from``; wins when set.

    Returns:
        The explicit format, else the one implied by the file suffix, else JSON.
    """
    if explicit is not None:
        return explicit
    if source == STDIN_SENTINEL:
        return InputFormat.JSON
    return _SUFFIX_FORMATS.get(Path(source).suffix.lower(), InputFormat.JSON)


def read_source(source: str) -> str:
    """Read the full text of a file, or of STDIN for ``-``.

    Args:
        source: A file path or the STDIN sentinel ``-``.

    Returns:
        The decoded text.

    Raises:
        EdnkitFileNotFoundError: If the path does not exist.
        EdnkitIOError: If the path cannot be read.
        EdnkitUsageError: If the content is not valid UTF-8.
    """
    if source == STDIN_SENTINEL:
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise EdnkitFileNotFoundError(f"Input file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise EdnkitUsageError(f"{source}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise EdnkitIOError(f"Cannot read {source}: {exc.strerror or exc}") from exc


def _stringify_times(value: Any) -> Any:
    """Replace TOML local times (``datetime.time``) with their ISO 8601 text."""
    if isinstance(value, time):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _stringify_times(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_times(v) for v in value]
    return value


def parse_documents(text: str, fmt: InputFormat, *, source: str = "<input>") -> Iterator[Any]:
    """Parse ``text`` into one or more Python values.

    Args:
        text: The raw input text.
        fmt: How to parse it.
        source: Name used in error messages.

    Yields:
        Any: Each parsed document.

    Raises:
        EdnkitUsageError: If the text is not a valid document of ``fmt``.
    """
    if fmt is InputFormat.TOML:
        try:
            yield _stringify_times(tomlkit.parse(text).unwrap())
        except TOMLKitError as exc:
            raise EdnkitUsageError(f"{source}: invalid TOML: {exc}") from exc
        return

    if fmt is InputFormat.NDJSON:
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                raise EdnkitUsageError(f"{source}:{lineno}: invalid JSON: {exc.msg}") from exc
        return

    try:
        yield json.loads(text)
    except json.JSONDecodeError as exc:
        raise EdnkitUsageError(
            f"{source}:{exc.lineno}:{exc.colno}: invalid JSON: {exc.msg}"
        ) from exc


def keywordize(value: Any) -> Any:
    """Recursively turn mappings into `KMap` so their string keys encode as keywords.

    Args:
        value: A parsed document (or part of one).

    Returns:
        The same structure with every mapping replaced by a `KMap`.
    """
    if isinstance(value, Mapping):
        return KMap((k, keywordize(v)) for k, v in value.items())
    if isinstance(value, list):
        return [keywordize(v) for v in value]
    return value


def load_sources(
    sources: tuple[str, ...],
    explicit: InputFormat | None = None,
) -> Iterator[Any]:
    """Read and parse every source in order.

    Args:
        sources: File paths and/or ``-``; empty means STDIN.
        explicit: Format forced with ``--from``.

    Yields:
        Any: Each parsed document across all sources.
    """
    for source in sources or (STDIN_SENTINEL,):
        fmt: InputFormat = detect_format(source, explicit)
        logger.debug("loading %s as %s", source, fmt.value)
        yield from parse_documents(read_source(source), fmt, source=source)
