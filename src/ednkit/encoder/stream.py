# topmark:header:start
#
#   project      : EDNKit
#   file         : stream.py
#   file_relpath : src/ednkit/encoder/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Newline-delimited EDN output over a binary sink.

Conventions:
- Each `StreamWriter.encode` call writes exactly one EDN value followed by
  ``\n``. The terminator keeps bare numbers unambiguous when values are
  concatenated (``1`` then ``2`` must not read as ``12``).
- Encoding errors propagate without touching the sink or the writer state.
- The first exception raised by the sink's ``write`` (``OSError``, or the
  ``ValueError`` of a closed file) is stored as a
  [`SinkError`][ednkit.errors.SinkError]; every later call re-raises that same
  error without writing.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from ednkit.config.logging import EdnkitLogger, get_logger
from ednkit.encoder.session import encode
from ednkit.errors import SinkError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: EdnkitLogger = get_logger(__name__)


class StreamWriter:
    """Write EDN values to a binary sink, one value per line.

    Example:
        >>> import io
        >>> buf = io.BytesIO()
        >>> writer = StreamWriter(buf)
        >>> writer.encode(42)
        >>> writer.encode([1, 2])
        >>> buf.getvalue()
        b'42\\n[1 2]\\n'
    """

    def __init__(self, sink: IO[bytes]) -> None:
        """Construct a writer.

        Args:
            sink (IO[bytes]): Binary writable that receives the encoded lines.
        """
        self._sink: IO[bytes] = sink
        self._error: SinkError | None = None

    @property
    def failed(self) -> bool:
        """Return True once the sink has rejected a write."""
        return self._error is not None

    @property
    def error(self) -> SinkError | None:
        """Return the stored sink failure, if any."""
        return self._error

    def encode(self, value: Any) -> None:
        """Encode ``value`` and write it to the sink followed by a newline.

        Args:
            value (Any): The value to encode.

        Raises:
            SinkError: If the sink rejects the write now or did so on an earlier call.
        """
        if self._error is not None:
            raise self._error

        data: bytes = encode(value) + b"\n"
        try:
            self._sink.write(data)
        except Exception as exc:
            self._error = SinkError(exc)
            logger.debug("sink write failed; writer is now closed: %s", exc)
            raise self._error from exc

    def encode_all(self, values: Iterable[Any]) -> int:
        """Encode every value in order, stopping at the first error.

        Args:
            values (Iterable[Any]): The values to write.

        Returns:
            int: The number of values written.
        """
        count: int = 0
        for value in values:
            self.encode(value)
            count += 1
        return count
