# topmark:header:start
#
#   project      : EDNKit
#   file         : literals.py
#   file_relpath : src/ednkit/encoder/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal renderers: one primitive value in, its EDN text out.

Every renderer here has the [`Renderer`][ednkit.encoder.base.Renderer] signature
``(session, value) -> None`` and assumes ``value`` already matches its shape.

Conventions:
    - ``bool`` renders ``true`` / ``false``; ``int`` renders plain decimal digits.
    - ``float`` uses the shortest round-tripping form (``repr``); NaN and the
      infinities have no EDN literal and raise `UnsupportedValueError`.
    - Strings are double-quoted; ``"`` and ``\\`` are backslash-escaped, control
      characters use ``\\n``/``\\r``/``\\t`` or ``\\uXXXX``, everything else is
      emitted verbatim per code point.
    - Tagged literals (``#inst``, ``#uuid``, ``#base64``) wrap a string payload.
"""

from __future__ import annotations

import base64
import math
from typing import TYPE_CHECKING, Final

from ednkit.constants import TAG_BASE64, TAG_INST, TAG_UUID
from ednkit.errors import MarshalerError, UnsupportedValueError
from ednkit.types import to_utc

if TYPE_CHECKING:
    from datetime import date, datetime
    from uuid import UUID

    from ednkit.encoder.session import EncodeSession
    from ednkit.types import Instant, Keyword, Symbol, TextMarshaler


def _build_escape_table() -> dict[int, str]:
    table: dict[int, str] = {cp: f"\\u{cp:04x}" for cp in range(0x20)}
    table[0x7F] = "\\u007f"
    # Lone surrogates cannot be UTF-8 encoded; keep them as escapes.
    table.update({cp: f"\\u{cp:04x}" for cp in range(0xD800, 0xE000)})
    table.update(
        {
            ord('"'): '\\"',
            ord("\\"): "\\\\",
            ord("\n"): "\\n",
            ord("\r"): "\\r",
            ord("\t"): "\\t",
        }
    )
    return table


_ESCAPES: Final[dict[int, str]] = _build_escape_table()


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted EDN string literal.

    Args:
        text: The raw text.

    Returns:
        The quoted and escaped literal.
    """
    return '"' + text.translate(_ESCAPES) + '"'


def format_instant(moment: datetime, nanos: int = 0) -> str:
    """Format a UTC datetime in the RFC 3339 "nano" layout.

    The fraction carries up to nine digits with trailing zeros trimmed and is
    omitted entirely when zero, e.g. ``2014-03-14T15:59:59.123456789Z`` or
    ``2014-03-14T15:59:59Z``.

    Args:
        moment: An aware UTC datetime; its microseconds are ignored.
        nanos: Nanoseconds within the second (0-999_999_999).

    Returns:
        The formatted timestamp.
    """
    text: str = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + "Z"


def _write_tagged(session: EncodeSession, tag: str, payload: str) -> None:
    session.write(f"#{tag} {quote(payload)}")


def render_nil(session: EncodeSession, value: None) -> None:
    """Render ``None`` as ``nil``."""
    session.write("nil")


def render_bool(session: EncodeSession, value: bool) -> None:
    """Render a boolean."""
    session.write("true" if value else "false")


def render_int(session: EncodeSession, value: int) -> None:
    """Render an integer (``int`` subclasses such as ``IntEnum`` included)."""
    try:
        text: str = int.__repr__(value)
    except ValueError as exc:
        # Python caps int -> str conversion length (sys.set_int_max_str_digits).
        raise UnsupportedValueError(value, f"integer with {value.bit_length()} bits") from exc
    session.write(text)


def render_float(session: EncodeSession, value: float) -> None:
    """Render a finite float in its shortest round-tripping form.

    Args:
        session: The session to write to.
        value: The float to render.

    Raises:
        UnsupportedValueError: If the value is NaN or infinite.
    """
    number: float = float(value)
    if math.isnan(number) or math.isinf(number):
        raise UnsupportedValueError(value, repr(number))
    session.write(repr(number))


def render_string(session: EncodeSession, value: str) -> None:
    """Render a string literal."""
    session.write(quote(str.__str__(value)))


def render_symbol(session: EncodeSession, value: Symbol) -> None:
    """Render a symbol verbatim."""
    session.write(str.__str__(value))


def render_keyword(session: EncodeSession, value: Keyword | str) -> None:
    """Render a keyword, adding the ``:`` prefix only when missing."""
    name: str = str.__str__(value)
    session.write(name if name.startswith(":") else ":" + name)


def render_instant(session: EncodeSession, value: Instant) -> None:
    """Render an `Instant` as ``#inst "..."`` with nanosecond precision."""
    try:
        whole, nanos = value.split()
    except OverflowError as exc:
        raise UnsupportedValueError(value, f"instant out of range: {value.epoch_ns}ns") from exc
    _write_tagged(session, TAG_INST, format_instant(whole, nanos))


def render_datetime(session: EncodeSession, value: datetime | date) -> None:
    """Render a ``datetime`` (or ``date``) as ``#inst "..."``, normalized to UTC."""
    try:
        moment: datetime = to_utc(value)
    except OverflowError as exc:
        raise UnsupportedValueError(value, f"datetime out of UTC range: {value!r}") from exc
    _write_tagged(session, TAG_INST, format_instant(moment, moment.microsecond * 1_000))


def render_uuid(session: EncodeSession, value: UUID) -> None:
    """Render a UUID as ``#uuid "8-4-4-4-12"`` in lowercase hex."""
    _write_tagged(session, TAG_UUID, str(value))


def render_base64(session: EncodeSession, value: bytes | bytearray | memoryview) -> None:
    """Render a byte blob as ``#base64 "..."`` (standard alphabet, no wrapping)."""
    if isinstance(value, memoryview):
        # Strided views are not accepted by b64encode.
        value = value.tobytes()
    _write_tagged(session, TAG_BASE64, base64.b64encode(value).decode("ascii"))


def render_marshaler(session: EncodeSession, value: TextMarshaler) -> None:
    """Render a value through its ``marshal_text()`` hook as a string literal.

    Args:
        session: The session to write to.
        value: The value providing ``marshal_text()``.

    Raises:
        MarshalerError: If the hook raises or returns neither ``str`` nor ``bytes``.
    """
    try:
        text: object = value.marshal_text()
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        if not isinstance(text, str):
            raise TypeError(
                f"marshal_text() returned {type(text).__name__}, expected str or bytes"
            )
    except Exception as exc:
        raise MarshalerError(type(value), exc) from exc
    session.write(quote(text))
