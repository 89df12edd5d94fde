# topmark:header:start
#
#   project      : EDNKit
#   file         : cache.py
#   file_relpath : src/ednkit/encoder/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide encoder cache: shape → compiled renderer.

Each distinct shape is classified once and its renderer reused for the life of
the process. Entries are never evicted; the number of shapes is bounded by the
program's types, not by request volume.

Notes:
    * Lookups are plain dict reads without locking. Installs are serialized by
      a module-level `RLock`.
    * To compile a shape, a `_PendingRenderer` placeholder is published first,
      then the real renderer is built **outside** the lock. Recursive
      references to the shape (``Node`` → ``list[Node]`` → ``Node``) resolve
      to the placeholder instead of recursing forever.
    * A placeholder invoked before its renderer is ready blocks until it is.
      Classification never invokes renderers, so a compiling thread never
      waits on its own placeholder.
    * If compilation fails, the placeholder is withdrawn. Invoking it later
      (from a waiter, or from a renderer built during the failed attempt)
      looks the shape up again.
"""

from __future__ import annotations

from threading import Event, RLock
from typing import TYPE_CHECKING, Any

from ednkit.config.logging import EdnkitLogger, get_logger
from ednkit.encoder.classifier import classify
from ednkit.utils.introspection import format_shape

if TYPE_CHECKING:
    from ednkit.encoder.base import Renderer
    from ednkit.encoder.session import EncodeSession

logger: EdnkitLogger = get_logger(__name__)

_lock = RLock()
_renderers: dict[object, Renderer] = {}


class _PendingRenderer:
    """Indirection published while the real renderer for ``shape`` is compiled."""

    __slots__ = ("_error", "_ready", "_target", "shape")

    def __init__(self, shape: object) -> None:
        self.shape: object = shape
        self._ready = Event()
        self._target: Renderer | None = None
        self._error: BaseException | None = None

    def resolve(self, renderer: Renderer) -> None:
        self._target = renderer
        self._ready.set()

    def abandon(self, error: BaseException) -> None:
        self._error = error
        self._ready.set()

    def __call__(self, session: EncodeSession, value: Any) -> None:
        self._ready.wait()
        if self._target is None:
            # Abandoned: renderers compiled during the failed attempt still hold
            # this placeholder, so look the shape up again.
            logger.debug(
                "recompiling %s after failed compilation: %r",
                format_shape(self.shape),
                self._error,
            )
            self._target = renderer_for(self.shape)
        self._target(session, value)


def renderer_for(shape: object) -> Renderer:
    """Return the renderer for ``shape``, compiling and caching it on first use.

    Safe to call concurrently. Concurrent first requests for the same shape
    compile it once; later callers get the placeholder until the real renderer
    is published.

    Args:
        shape: A runtime class or a typing hint.

    Returns:
        The renderer (or, while compilation is in flight, its placeholder).
    """
    try:
        renderer: Renderer | None = _renderers.get(shape)
    except TypeError:
        # Unhashable hint (e.g. Annotated metadata); compile without caching.
        logger.trace("compiling uncacheable shape %s", format_shape(shape))
        return classify(shape, renderer_for)
    if renderer is not None:
        return renderer

    with _lock:
        renderer = _renderers.get(shape)
        if renderer is not None:
            return renderer
        pending = _PendingRenderer(shape)
        _renderers[shape] = pending

    try:
        renderer = classify(shape, renderer_for)
    except BaseException as exc:
        with _lock:
            if _renderers.get(shape) is pending:
                del _renderers[shape]
        pending.abandon(exc)
        raise

    with _lock:
        _renderers[shape] = renderer
    pending.resolve(renderer)
    logger.trace("compiled renderer for %s: %r", format_shape(shape), renderer)
    return renderer


def cached_shapes() -> tuple[object, ...]:
    """Return the shapes currently in the cache (placeholders included)."""
    with _lock:
        return tuple(_renderers)


def clear_cache() -> None:
    """Drop every cached renderer.

    Notes:
        - Intended for tests. Renderers already compiled keep references to the
          renderers of their parts, so clearing never breaks them.
    """
    with _lock:
        _renderers.clear()
