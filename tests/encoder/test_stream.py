# topmark:header:start
#
#   project      : EDNKit
#   file         : test_stream.py
#   file_relpath : tests/encoder/test_stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for newline-delimited EDN output via `ednkit.StreamWriter`."""

from __future__ import annotations

import errno
import io
from typing import Any

import pytest

from ednkit import EDNError, Set, SinkError, StreamWriter, UnsupportedValueError

# One of each EDN kind, followed by a value to show something can follow a map.
STREAM_VALUES: list[Any] = [
    0.1,
    "hello",
    42,
    None,
    Set().add_all(1, 2.0, 3.14),
    True,
    False,
    ["a", "b", "c"],
    {"K": "Kelvin", "ß": "long s"},
    3.14,
]

STREAM_LINES: list[str] = [
    "0.1",
    '"hello"',
    "42",
    "nil",
    "#{...}",
    "true",
    "false",
    '["a" "b" "c"]',
    '{"K" "Kelvin", "ß" "long s"}',
    "3.14",
]


class BrokenSink(io.RawIOBase):
    """Binary sink that fails every write and counts the attempts."""

    def __init__(self) -> None:
        super().__init__()
        self.attempts: int = 0

    def writable(self) -> bool:
        return True

    def write(self, b: Any) -> int:
        self.attempts += 1
        raise OSError(errno.EPIPE, "Broken pipe")


@pytest.mark.parametrize("count", range(1, len(STREAM_VALUES) + 1))
def test_each_value_is_one_line(count: int) -> None:
    """Every prefix of the value list encodes to the matching prefix of lines."""
    buf = io.BytesIO()
    writer = StreamWriter(buf)
    for value in STREAM_VALUES[:count]:
        writer.encode(value)

    text: str = buf.getvalue().decode("utf-8")
    assert text.endswith("\n")
    lines: list[str] = text[:-1].split("\n")
    assert len(lines) == count

    for line, expected in zip(lines, STREAM_LINES):
        if expected == "#{...}":
            assert line.startswith("#{") and line.endswith("}")
            assert sorted(line[2:-1].split(" ")) == ["1", "2.0", "3.14"]
        else:
            assert line == expected


def test_numbers_stay_separate() -> None:
    """Consecutive bare numbers are delimited by the line terminator."""
    buf = io.BytesIO()
    writer = StreamWriter(buf)
    writer.encode(1)
    writer.encode(2)
    assert buf.getvalue() == b"1\n2\n"


def test_encode_all_counts_values() -> None:
    """`encode_all` writes every value and reports how many."""
    buf = io.BytesIO()
    assert StreamWriter(buf).encode_all([1, "two", [3]]) == 3
    assert buf.getvalue() == b'1\n"two"\n[3]\n'


def test_encoding_error_writes_nothing_and_keeps_writer_usable() -> None:
    """An unencodable value leaves the sink untouched and the writer healthy."""
    buf = io.BytesIO()
    writer = StreamWriter(buf)
    with pytest.raises(UnsupportedValueError):
        writer.encode([1, float("nan")])
    assert buf.getvalue() == b""
    assert not writer.failed

    writer.encode(1)
    assert buf.getvalue() == b"1\n"


def test_sink_failure_is_sticky() -> None:
    """After the first sink failure every call re-raises it without writing."""
    sink = BrokenSink()
    writer = StreamWriter(sink)

    with pytest.raises(SinkError) as first:
        writer.encode(1)
    assert isinstance(first.value, EDNError)
    assert isinstance(first.value.cause, OSError)
    assert first.value.cause.errno == errno.EPIPE
    assert writer.failed
    assert writer.error is first.value

    with pytest.raises(SinkError) as second:
        writer.encode(2)
    assert second.value is first.value
    assert sink.attempts == 1


def test_sink_failure_precedes_encoding_errors() -> None:
    """A failed writer reports the sink error even for unencodable values."""
    writer = StreamWriter(BrokenSink())
    with pytest.raises(SinkError):
        writer.encode(0)
    with pytest.raises(SinkError):
        writer.encode(float("nan"))


def test_closed_sink_is_a_sink_failure() -> None:
    """Writing to a closed sink fails the writer like any other sink error."""
    sink = io.BytesIO()
    sink.close()
    writer = StreamWriter(sink)

    with pytest.raises(SinkError) as first:
        writer.encode(1)
    assert isinstance(first.value.cause, ValueError)
    assert writer.failed

    with pytest.raises(SinkError) as second:
        writer.encode(2)
    assert second.value is first.value
