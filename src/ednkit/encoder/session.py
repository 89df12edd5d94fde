# topmark:header:start
#
#   project      : EDNKit
#   file         : session.py
#   file_relpath : src/ednkit/encoder/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encode sessions and the one-shot `encode` / `dumps` entry points.

An [`EncodeSession`][ednkit.encoder.session.EncodeSession] is the output
accumulator of a single top-level encode. It is owned by one call, never
shared between threads, and dropped when the call returns or fails.

Any [`EDNError`][ednkit.errors.EDNError] raised while rendering aborts the whole
encode: the partial output is discarded and the error propagates to the
caller. There is no best-effort output.
"""

from __future__ import annotations

from typing import Any

from ednkit.encoder.cache import renderer_for
from ednkit.errors import UnsupportedValueError


class EncodeSession:
    """Append-only text buffer plus type dispatch for one encode call."""

    __slots__ = ("_chunks",)

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        """Append already-rendered EDN text."""
        self._chunks.append(text)

    def render(self, value: Any) -> None:
        """Render ``value`` with the renderer for its runtime type."""
        renderer_for(type(value))(self, value)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._chunks)

    def marshal(self, value: Any) -> str:
        """Render ``value`` into this session and return the session's text.

        Args:
            value: The value to encode.

        Returns:
            The EDN text.

        Raises:
            UnsupportedValueError: If the value is cyclic or nested too deeply
                to render.
        """
        try:
            self.render(value)
        except RecursionError as exc:
            raise UnsupportedValueError(value, "cyclic or too deeply nested value") from exc
        return self.getvalue()


def dumps(value: Any) -> str:
    """Return the EDN text of ``value``.

    Args:
        value: The value to encode.

    Returns:
        The compact EDN text, e.g. ``'[1 :two #{"three"}]'``.

    Raises:
        EDNError: If any part of the value cannot be encoded.
    """
    return EncodeSession().marshal(value)


def encode(value: Any) -> bytes:
    """Return the UTF-8 encoded EDN text of ``value``.

    Args:
        value: The value to encode.

    Returns:
        The EDN bytes.

    Raises:
        EDNError: If any part of the value cannot be encoded.
    """
    return dumps(value).encode("utf-8")
