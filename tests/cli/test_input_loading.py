# topmark:header:start
#
#   project      : EDNKit
#   file         : test_input_loading.py
#   file_relpath : tests/cli/test_input_loading.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for input loading helpers in `ednkit.cli.io`."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import pytest

from ednkit.cli.errors import EdnkitFileNotFoundError, EdnkitUsageError
from ednkit.cli.io import (
    InputFormat,
    detect_format,
    keywordize,
    load_sources,
    parse_documents,
    read_source,
)
from ednkit.types import KMap
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    "source, explicit, expected",
    [
        ("-", None, InputFormat.JSON),
        ("doc.json", None, InputFormat.JSON),
        ("doc.TOML", None, InputFormat.TOML),
        ("events.ndjson", None, InputFormat.NDJSON),
        ("events.jsonl", None, InputFormat.NDJSON),
        ("notes.txt", None, InputFormat.JSON),
        ("doc.json", InputFormat.TOML, InputFormat.TOML),
    ],
)
def test_detect_format(source: str, explicit: InputFormat | None, expected: InputFormat) -> None:
    """``--from`` wins; otherwise the suffix decides, defaulting to JSON."""
    assert detect_format(source, explicit) is expected


def test_parse_ndjson_skips_blank_lines() -> None:
    """Blank lines between NDJSON documents are ignored."""
    docs = list(parse_documents('{"a": 1}\n\n  \n[2]\n', InputFormat.NDJSON))
    assert docs == [{"a": 1}, [2]]


def test_parse_toml_unwraps_to_plain_values() -> None:
    """TOML documents become plain dicts, lists and datetimes."""
    (doc,) = parse_documents("when = 2020-01-02T03:04:05Z\n[t]\nn = [1, 2]\n", InputFormat.TOML)
    assert type(doc) is dict
    assert doc["t"] == {"n": [1, 2]}
    assert isinstance(doc["when"], datetime)
    assert doc["when"] == datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_parse_toml_local_times_become_strings() -> None:
    """TOML local times, including nested ones, are loaded as ISO 8601 text."""
    (doc,) = parse_documents(
        "alarm = 07:32:00\n[shift]\nstarts = [08:00:00, 16:30:00]\n", InputFormat.TOML
    )
    assert doc == {"alarm": "07:32:00", "shift": {"starts": ["08:00:00", "16:30:00"]}}


def test_parse_errors_name_the_source() -> None:
    """Parse failures are usage errors that mention where the input came from."""
    with pytest.raises(EdnkitUsageError, match=r"^in\.json:1:1: invalid JSON"):
        list(parse_documents("", InputFormat.JSON, source="in.json"))


def test_keywordize_nested() -> None:
    """Every mapping, however deep, becomes a `KMap`; other values are kept."""
    value = keywordize({"a": [{"b": 1}, 2], "c": "d"})
    assert isinstance(value, KMap)
    assert isinstance(value["a"][0], KMap)
    assert value == {"a": [{"b": 1}, 2], "c": "d"}
    assert keywordize("plain") == "plain"


def test_read_source_missing(tmp_path: Path) -> None:
    """A missing file raises the file-not-found CLI error."""
    with pytest.raises(EdnkitFileNotFoundError):
        read_source(str(tmp_path / "missing.json"))


def test_read_source_rejects_invalid_utf8(tmp_path: Path) -> None:
    """Input must be UTF-8."""
    doc = tmp_path / "latin1.json"
    doc.write_bytes(b'"caf\xe9"')
    with pytest.raises(EdnkitUsageError, match="not valid UTF-8"):
        read_source(str(doc))


def test_load_sources_in_order(tmp_path: Path) -> None:
    """Documents from several sources are yielded source by source."""
    first = tmp_path / "a.ndjson"
    second = tmp_path / "b.json"
    first.write_text("1\n2\n", encoding="utf-8")
    second.write_text("[3]", encoding="utf-8")
    assert list(load_sources((str(first), str(second)))) == [1, 2, [3]]
