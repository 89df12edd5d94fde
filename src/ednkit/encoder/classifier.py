# topmark:header:start
#
#   project      : EDNKit
#   file         : classifier.py
#   file_relpath : src/ednkit/encoder/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape classifier: decide how values of a shape are rendered.

A *shape* is either a runtime class (``type(value)``) or a typing hint that
describes a slot (``list[Node]``, ``dict[str, int]``, ``Optional[Node]``,
``Any``). [`classify`][ednkit.encoder.classifier.classify] maps every shape to
exactly one renderer. It is total: shapes without an EDN production get a
renderer that raises [`UnsupportedTypeError`][ednkit.errors.UnsupportedTypeError].

Decision order (first match wins):

 1. ``NoneType`` → ``nil``.
 2. Reserved extension shapes: `Instant`, ``datetime``, ``date``, ``UUID``,
    `Keyword`, `Symbol`.
 3. Classes with a ``marshal_text()`` hook → string literal of its result.
 4. ``bool``, ``int``, ``float``, ``str``.
 5. ``Optional[X]`` → ``nil`` or the renderer for ``X``.
 6. Polymorphic slots (``Any``, unions, type variables, unresolved forward
    references) → dispatch on the value's type at encode time.
 7. Mappings → map (`KMap` keys as keywords); sets → set.
 8. ``bytes``, ``bytearray``, ``memoryview`` → ``#base64``.
 9. ``deque`` → list ``(...)``. It is a ``Sequence``, so it is matched first.
10. Other sequences (``list``, ``tuple``, ``range``, ``Sequence[X]``) → vector.
11. Dataclasses → record map with keyword keys.
12. Anything else → unsupported.

Element renderers are obtained through the ``resolve`` callable (the cache),
never by recursing into `classify` directly; that is what lets a dataclass
refer to itself through ``list[Node]``.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections import deque
from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from datetime import date, datetime
from typing import TYPE_CHECKING, Annotated, Any, Final, TypeVar, Union, get_args, get_origin
from uuid import UUID

from ednkit.config.logging import EdnkitLogger, get_logger
from ednkit.encoder.literals import (
    render_base64,
    render_bool,
    render_datetime,
    render_float,
    render_instant,
    render_int,
    render_keyword,
    render_marshaler,
    render_nil,
    render_string,
    render_symbol,
    render_uuid,
)
from ednkit.encoder.structures import (
    ListRenderer,
    MapRenderer,
    OptionalRenderer,
    RecordRenderer,
    SetRenderer,
    SlotRenderer,
    UnsupportedRenderer,
    VectorRenderer,
    render_dynamic,
    render_keyword_key,
)
from ednkit.types import Instant, Keyword, KMap, Symbol
from ednkit.utils.introspection import format_shape

if TYPE_CHECKING:
    from ednkit.encoder.base import Renderer, Resolver

logger: EdnkitLogger = get_logger(__name__)

NoneType: Final[type] = type(None)

BYTE_SHAPES: Final[tuple[type, ...]] = (bytes, bytearray, memoryview)

# Extension shapes matched before any structural rule; order matters because
# datetime is a subclass of date.
_EXTENSION_RENDERERS: Final[tuple[tuple[type, Renderer], ...]] = (
    (Instant, render_instant),
    (datetime, render_datetime),
    (date, render_datetime),
    (UUID, render_uuid),
    (Keyword, render_keyword),
    (Symbol, render_symbol),
)

_PRIMITIVE_RENDERERS: Final[tuple[tuple[type, Renderer], ...]] = (
    (bool, render_bool),
    (int, render_int),
    (float, render_float),
    (str, render_string),
)


def _is_union(hint: object) -> bool:
    origin = get_origin(hint)
    return origin is Union or origin is types.UnionType


def _strip_annotated(hint: object) -> object:
    while get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    return hint


def _absent_text(runtime: type) -> str:
    """Return what ``None`` renders as in a slot declared with ``runtime``."""
    if issubclass(runtime, (str, *BYTE_SHAPES)):
        return "nil"
    if issubclass(runtime, deque):
        return "()"
    if issubclass(runtime, Mapping):
        return "{}"
    if issubclass(runtime, AbstractSet):
        return "#{}"
    if issubclass(runtime, Sequence):
        return "[]"
    return "nil"


def slot_renderer(hint: object, resolve: Resolver) -> Renderer:
    """Return the renderer for a slot (element, key, value, field) declared as ``hint``.

    Concrete hints get a `SlotRenderer` guarding the precompiled renderer;
    polymorphic hints fall back to encode-time dispatch.

    Args:
        hint: The declared type of the slot.
        resolve: Returns the cached renderer for a shape.

    Returns:
        The slot renderer.
    """
    hint = _strip_annotated(hint)
    if hint is Any or hint is object:
        return render_dynamic
    if hint is None or hint is NoneType:
        return render_nil
    if _is_union(hint):
        return resolve(hint)
    runtime: object = hint if isinstance(hint, type) else get_origin(hint)
    if not isinstance(runtime, type):
        return resolve(hint)
    return SlotRenderer(runtime, resolve(hint), _absent_text(runtime))


def _classify_union(hint: object, resolve: Resolver) -> Renderer:
    members: tuple[object, ...] = get_args(hint)
    present: tuple[object, ...] = tuple(m for m in members if m is not NoneType)
    if len(present) == 1 and len(present) < len(members):
        return OptionalRenderer(slot_renderer(present[0], resolve))
    return render_dynamic


def _element_hint(args: tuple[object, ...], index: int = 0) -> object:
    return args[index] if len(args) > index else Any


def _classify_generic(hint: object, origin: type, resolve: Resolver) -> Renderer:
    """Classify a parameterized hint such as ``list[int]`` or ``dict[str, Node]``."""
    args: tuple[object, ...] = get_args(hint)
    if issubclass(origin, (str, *BYTE_SHAPES)):
        return resolve(origin)
    if issubclass(origin, Mapping):
        if issubclass(origin, KMap):
            return resolve(origin)
        return MapRenderer(
            slot_renderer(_element_hint(args, 0), resolve),
            slot_renderer(_element_hint(args, 1), resolve),
        )
    if issubclass(origin, AbstractSet):
        return SetRenderer(slot_renderer(_element_hint(args), resolve))
    if issubclass(origin, deque):
        return ListRenderer(slot_renderer(_element_hint(args), resolve))
    if issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return VectorRenderer(slot_renderer(args[0], resolve))
        # Fixed-shape tuples vary per position; dispatch each element by value.
        return VectorRenderer(render_dynamic)
    if issubclass(origin, Sequence):
        return VectorRenderer(slot_renderer(_element_hint(args), resolve))
    # User generics (``Box[int]``) and everything else: classify the origin class.
    return resolve(origin)


def _record_renderer(cls: type, resolve: Resolver) -> Renderer:
    """Compile a dataclass into a record renderer using its resolved field hints."""
    try:
        hints: dict[str, Any] = typing.get_type_hints(cls)
    except Exception as exc:  # unresolvable forward references, bad annotations
        logger.debug(
            "type hints of %s unavailable (%s); fields dispatch by value",
            format_shape(cls),
            exc,
        )
        hints = {}
    fields: tuple[tuple[str, Renderer], ...] = tuple(
        (f.name, slot_renderer(hints.get(f.name, Any), resolve))
        for f in dataclasses.fields(cls)
    )
    return RecordRenderer(fields)


def _classify_class(cls: type, resolve: Resolver) -> Renderer:
    """Classify a runtime class."""
    if cls is NoneType:
        return render_nil

    for ext_type, ext_renderer in _EXTENSION_RENDERERS:
        if issubclass(cls, ext_type):
            return ext_renderer

    if callable(getattr(cls, "marshal_text", None)):
        return render_marshaler

    for prim_type, prim_renderer in _PRIMITIVE_RENDERERS:
        if issubclass(cls, prim_type):
            return prim_renderer

    if issubclass(cls, Mapping):
        if issubclass(cls, KMap):
            return MapRenderer(render_keyword_key, render_dynamic)
        return MapRenderer(render_dynamic, render_dynamic)
    if issubclass(cls, AbstractSet):
        return SetRenderer(render_dynamic)

    if issubclass(cls, BYTE_SHAPES):
        return render_base64

    if issubclass(cls, deque):
        return ListRenderer(render_dynamic)
    if issubclass(cls, Sequence):
        return VectorRenderer(render_dynamic)

    if dataclasses.is_dataclass(cls):
        return _record_renderer(cls, resolve)

    return UnsupportedRenderer(cls)


def classify(shape: object, resolve: Resolver) -> Renderer:
    """Return the renderer for ``shape``.

    Args:
        shape: A runtime class or a typing hint.
        resolve: Returns the cached renderer for another shape. Element, key,
            value and field renderers are always obtained through it.

    Returns:
        The renderer for values of ``shape``.
    """
    hint: object = _strip_annotated(shape)
    if hint is Any or isinstance(hint, (TypeVar, str, typing.ForwardRef)):
        return render_dynamic
    if _is_union(hint):
        return _classify_union(hint, resolve)
    origin: object = get_origin(hint)
    if isinstance(origin, type):
        return _classify_generic(hint, origin, resolve)
    if isinstance(hint, type):
        return _classify_class(hint, resolve)
    # Literal[...], NewType, ParamSpec and other typing constructs.
    return render_dynamic
