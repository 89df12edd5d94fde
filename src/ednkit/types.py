# topmark:header:start
#
#   project      : EDNKit
#   file         : types.py
#   file_relpath : src/ednkit/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDN extension value types.

Plain Python values already cover most of EDN (``None``, ``bool``, ``int``,
``float``, ``str``, ``list``, ``tuple``, ``dict``, ``set``, ``deque``,
``bytes``, ``uuid.UUID``, ``datetime``). This module adds the kinds Python has
no native spelling for:

- `Symbol` and `Keyword`: names, rendered bare (``foo/bar``) and with a
  leading colon (``:foo/bar``).
- `Set`: a ``set`` with chaining helpers.
- `KMap`: a ``dict`` whose string keys render as keywords.
- `Instant`: a UTC timestamp with nanosecond precision.
- `TextMarshaler`: the capability protocol for custom textual forms.

Symbols and keywords compare equal only to names of the same kind, so
``{"x": 1, K("x"): 2}`` keeps both entries.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Final, Protocol, runtime_checkable

UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

_NANOS_PER_SECOND: Final[int] = 1_000_000_000
_NANOS_PER_MICRO: Final[int] = 1_000


class _Name(str):
    """A ``str`` that is only equal to names of its own kind."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, str.__str__(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class Symbol(_Name):
    """An EDN symbol, emitted verbatim (``foo/bar``)."""

    __slots__ = ()


class Keyword(_Name):
    """An EDN keyword, emitted with a single leading ``:``.

    The stored name is kept as given: ``Keyword(":wow")`` and ``Keyword("wow")``
    are distinct values that both render as ``:wow``.
    """

    __slots__ = ()


def K(name: str) -> Keyword:  # noqa: N802
    """Return the keyword ``name``."""
    return Keyword(name)


def S(name: str) -> Symbol:  # noqa: N802
    """Return the symbol ``name``."""
    return Symbol(name)


class Set(set[Any]):
    """An EDN set.

    Builtin ``set`` and ``frozenset`` values are encoded as EDN sets too; this
    subclass only adds chaining helpers.

    Example:
        >>> Set().add_all(2, K("yolo"), 2).has(2)
        True
    """

    def add_all(self, *items: Any) -> Set:
        """Add every item and return the set itself."""
        self.update(items)
        return self

    def has(self, item: Any) -> bool:
        """Return True when ``item`` is a member."""
        return item in self


class KMap(dict[str, Any]):
    """A map whose ``str`` keys are encoded as keywords.

    Example: ``KMap(foo=45, bar=3.14)`` encodes to ``{:foo 45, :bar 3.14}``.
    Non-string keys are encoded by their own type.
    """


@runtime_checkable
class TextMarshaler(Protocol):
    """Capability for values that provide their own textual form.

    The returned text (``str``, or UTF-8 ``bytes``) is encoded as an EDN
    string literal. An exception raised by ``marshal_text`` aborts the encode
    with a [`MarshalerError`][ednkit.errors.MarshalerError].
    """

    def marshal_text(self) -> str | bytes:
        """Return the textual form of this value."""
        ...


@dataclass(frozen=True, order=True, slots=True)
class Instant:
    """A point in time, stored as nanoseconds since the Unix epoch (UTC).

    ``datetime`` only has microsecond precision; use `Instant` when the
    nanosecond digits matter.

    Attributes:
        epoch_ns: Nanoseconds since 1970-01-01T00:00:00Z (may be negative).
    """

    epoch_ns: int

    @classmethod
    def now(cls) -> Instant:
        """Return the current time."""
        return cls(time.time_ns())

    @classmethod
    def from_datetime(cls, moment: datetime | date, nanosecond: int = 0) -> Instant:
        """Build an instant from a ``datetime`` (or a ``date`` at midnight UTC).

        Naive datetimes are taken to be in UTC.

        Args:
            moment: The date or datetime to convert.
            nanosecond: Extra nanoseconds (0-999) below the microsecond.

        Returns:
            The corresponding instant.

        Raises:
            ValueError: If ``nanosecond`` is outside 0-999.
        """
        if not 0 <= nanosecond < _NANOS_PER_MICRO:
            raise ValueError(f"nanosecond must be in 0..999 (got {nanosecond})")
        delta: timedelta = to_utc(moment) - UNIX_EPOCH
        seconds: int = delta.days * 86_400 + delta.seconds
        return cls(
            seconds * _NANOS_PER_SECOND + delta.microseconds * _NANOS_PER_MICRO + nanosecond
        )

    def split(self) -> tuple[datetime, int]:
        """Return the whole-second UTC datetime and the nanosecond remainder."""
        seconds, nanos = divmod(self.epoch_ns, _NANOS_PER_SECOND)
        return UNIX_EPOCH + timedelta(seconds=seconds), nanos

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime, truncated to microseconds."""
        whole, nanos = self.split()
        return whole + timedelta(microseconds=nanos // _NANOS_PER_MICRO)


def to_utc(moment: datetime | date) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are assumed to already be in UTC; plain dates map to
    midnight UTC.
    """
    if not isinstance(moment, datetime):
        return datetime(moment.year, moment.month, moment.day, tzinfo=timezone.utc)
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
