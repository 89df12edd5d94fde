# topmark:header:start
#
#   project      : EDNKit
#   file         : test_encode_property.py
#   file_relpath : tests/encoder/test_encode_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for literal fidelity and determinism of the encoder.

Floats and integers must read back to the same number, string literals must
decode (with a JSON reader, whose escapes are a superset of ours) to the
original text, and encoding must not depend on anything but the value.
"""

from __future__ import annotations

import io
import json
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from ednkit import StreamWriter, dumps
from tests.conftest import mark_hypothesis_slow
from tests.strategies_ednkit import finite_floats, texts, values


@given(finite_floats)
def test_float_round_trips(value: float) -> None:
    """The float literal reads back to the identical float."""
    assert float(dumps(value)) == value


@given(st.integers(min_value=-(10**100), max_value=10**100))
def test_int_round_trips(value: int) -> None:
    """The integer literal is its decimal text."""
    assert int(dumps(value)) == value


@given(texts)
def test_string_literal_round_trips(value: str) -> None:
    """String literals decode back to the original text."""
    text: str = dumps(value)
    assert "\n" not in text
    assert json.loads(text) == value


@given(st.lists(st.integers(), max_size=10))
def test_tuple_and_list_encode_alike(items: list[int]) -> None:
    """Every sequence kind except deque is a vector."""
    assert dumps(tuple(items)) == dumps(items)


@mark_hypothesis_slow
@settings(max_examples=300, deadline=None)
@given(values)
def test_encoding_is_deterministic_and_single_line(value: Any) -> None:
    """Encoding twice gives the same single-line text."""
    first: str = dumps(value)
    assert dumps(value) == first
    assert "\n" not in first


@mark_hypothesis_slow
@settings(max_examples=100, deadline=None)
@given(st.lists(values, max_size=8))
def test_stream_writes_one_line_per_value(items: list[Any]) -> None:
    """A stream holds exactly one line per encoded value."""
    buf = io.BytesIO()
    StreamWriter(buf).encode_all(items)
    lines: list[bytes] = buf.getvalue().splitlines()
    assert [line.decode("utf-8") for line in lines] == [dumps(item) for item in items]
