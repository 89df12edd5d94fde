# topmark:header:start
#
#   project      : EDNKit
#   file         : base.py
#   file_relpath : src/ednkit/encoder/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases for renderers.

A *renderer* writes one value of a known shape into an
[`EncodeSession`][ednkit.encoder.session.EncodeSession]. A *resolver* returns the
(cached) renderer for a shape; the classifier receives one so it can compile
renderers for element shapes without importing the cache.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from ednkit.encoder.session import EncodeSession

Renderer: TypeAlias = "Callable[[EncodeSession, Any], None]"
Resolver: TypeAlias = "Callable[[object], Renderer]"
