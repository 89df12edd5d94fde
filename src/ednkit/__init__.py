# topmark:header:start
#
#   project      : EDNKit
#   file         : __init__.py
#   file_relpath : src/ednkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit package.

EDNKit converts in-memory Python values into the canonical compact form of EDN
(extensible data notation). Renderers are compiled once per value shape and
cached process-wide, so repeated encodes of the same shapes are cheap.

Typical usage:

    >>> from ednkit import K, Set, dumps
    >>> dumps([1, K("two"), Set().add_all("three")])
    '[1 :two #{"three"}]'
"""

from __future__ import annotations

from ednkit.encoder.session import EncodeSession, dumps, encode
from ednkit.encoder.stream import StreamWriter
from ednkit.errors import (
    EDNError,
    MarshalerError,
    SinkError,
    UnsupportedTypeError,
    UnsupportedValueError,
)
from ednkit.types import K, Instant, Keyword, KMap, S, Set, Symbol, TextMarshaler

__all__: list[str] = [
    "EDNError",
    "EncodeSession",
    "Instant",
    "K",
    "KMap",
    "Keyword",
    "MarshalerError",
    "S",
    "Set",
    "SinkError",
    "StreamWriter",
    "Symbol",
    "TextMarshaler",
    "UnsupportedTypeError",
    "UnsupportedValueError",
    "dumps",
    "encode",
]
