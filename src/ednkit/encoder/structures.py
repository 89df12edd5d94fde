# topmark:header:start
#
#   project      : EDNKit
#   file         : structures.py
#   file_relpath : src/ednkit/encoder/structures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural renderers: composite values that delegate to element renderers.

Each renderer is a small frozen dataclass holding the renderers of its parts,
compiled once by the classifier and then reused for every value of the shape.

| Renderer         | Output                     | Empty / ``None`` |
| ---------------- | -------------------------- | ---------------- |
| `VectorRenderer` | ``[a b c]``                | ``[]``           |
| `ListRenderer`   | ``(a b c)``                | ``()``           |
| `MapRenderer`    | ``{k v, k v}``             | ``{}``           |
| `SetRenderer`    | ``#{a b}``                 | ``#{}``          |
| `RecordRenderer` | ``{:field v, :field v}``   | n/a              |

Element order is the container's native iteration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from ednkit.encoder.literals import render_keyword
from ednkit.errors import UnsupportedTypeError, UnsupportedValueError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ednkit.encoder.base import Renderer
    from ednkit.encoder.session import EncodeSession


def render_dynamic(session: EncodeSession, value: Any) -> None:
    """Render a polymorphic slot by the concrete type of ``value`` at encode time."""
    session.render(value)


def render_keyword_key(session: EncodeSession, value: Any) -> None:
    """Render plain ``str`` map keys as keywords and anything else by its own type."""
    if type(value) is str:
        render_keyword(session, value)
    else:
        session.render(value)


@dataclass(frozen=True, slots=True)
class UnsupportedRenderer:
    """Renderer for shapes with no EDN production; always raises."""

    shape: object

    def __call__(self, session: EncodeSession, value: Any) -> None:
        raise UnsupportedTypeError(self.shape)


@dataclass(frozen=True, slots=True)
class _SequenceRenderer:
    """Space-separated elements between an opening and closing delimiter."""

    element: Renderer

    OPEN: ClassVar[str] = "["
    CLOSE: ClassVar[str] = "]"

    def __call__(self, session: EncodeSession, value: Iterable[Any] | None) -> None:
        session.write(self.OPEN)
        if value is not None:
            first = True
            for item in value:
                if not first:
                    session.write(" ")
                first = False
                self.element(session, item)
        session.write(self.CLOSE)


class VectorRenderer(_SequenceRenderer):
    """``[a b c]`` for lists, tuples and other sequences."""

    __slots__ = ()


class ListRenderer(_SequenceRenderer):
    """``(a b c)`` for ``collections.deque``."""

    __slots__ = ()

    OPEN: ClassVar[str] = "("
    CLOSE: ClassVar[str] = ")"


class SetRenderer(_SequenceRenderer):
    """``#{a b c}`` for sets; elements are separated by single spaces."""

    __slots__ = ()

    OPEN: ClassVar[str] = "#{"
    CLOSE: ClassVar[str] = "}"


@dataclass(frozen=True, slots=True)
class MapRenderer:
    """``{k v, k v}``; keys and values each use their own renderer."""

    key: Renderer
    value: Renderer

    def __call__(self, session: EncodeSession, value: Mapping[Any, Any] | None) -> None:
        session.write("{")
        if value is not None:
            first = True
            for k, v in value.items():
                if not first:
                    session.write(", ")
                first = False
                self.key(session, k)
                session.write(" ")
                self.value(session, v)
        session.write("}")


@dataclass(frozen=True, slots=True)
class RecordRenderer:
    """Render a dataclass instance as a map keyed by its field names as keywords.

    Attributes:
        fields: ``(attribute name, field renderer)`` pairs in declaration order.
    """

    fields: tuple[tuple[str, Renderer], ...]

    def __call__(self, session: EncodeSession, value: Any) -> None:
        session.write("{")
        first = True
        for name, render in self.fields:
            if not first:
                session.write(", ")
            first = False
            try:
                field_value: Any = getattr(value, name)
            except AttributeError as exc:
                raise UnsupportedValueError(value, f"unset field {name}") from exc
            session.write(":" + name + " ")
            render(session, field_value)
        session.write("}")


@dataclass(frozen=True, slots=True)
class OptionalRenderer:
    """``nil`` when absent, otherwise the referenced value's own production."""

    inner: Renderer

    def __call__(self, session: EncodeSession, value: Any) -> None:
        if value is None:
            session.write("nil")
        else:
            self.inner(session, value)


@dataclass(frozen=True, slots=True)
class SlotRenderer:
    """Renderer for a slot declared with a concrete type hint.

    Values whose type is exactly ``runtime`` use the precompiled ``typed``
    renderer. Anything else (subclasses, mismatched types) is rendered by its
    own type, so a given type always maps to the same renderer. ``None``
    renders as ``absent``: the empty container for container hints, ``nil``
    otherwise.

    Attributes:
        runtime: The runtime class the hint describes (``list`` for ``list[int]``).
        typed: The renderer compiled for the hint.
        absent: Text written for ``None``.
    """

    runtime: type
    typed: Renderer
    absent: str = "nil"

    def __call__(self, session: EncodeSession, value: Any) -> None:
        if value is None:
            session.write(self.absent)
        elif type(value) is self.runtime:
            self.typed(session, value)
        else:
            session.render(value)
