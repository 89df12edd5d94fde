# topmark:header:start
#
#   project      : EDNKit
#   file         : errors.py
#   file_relpath : src/ednkit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the EDNKit encoder.

Renderers raise these at the point of detection. They unwind straight to the
encode call (see [`ednkit.encoder.session`][ednkit.encoder.session]); no
renderer recovers from them or substitutes default output.

Hierarchy:
    EDNError
    ├── UnsupportedTypeError   - a shape has no EDN production
    ├── UnsupportedValueError  - the shape is fine but this value is not representable
    ├── MarshalerError         - a custom ``marshal_text()`` hook failed
    └── SinkError              - the output sink of a StreamWriter rejected a write
"""

from __future__ import annotations

from ednkit.utils.introspection import format_shape


class EDNError(Exception):
    """Base class for all EDNKit encoding errors."""


class UnsupportedTypeError(EDNError):
    """Raised when encoding a value whose shape has no EDN equivalent.

    Attributes:
        shape: The offending class or typing hint.
    """

    def __init__(self, shape: object) -> None:
        self.shape: object = shape
        super().__init__(f"edn: unsupported type: {format_shape(shape)}")


class UnsupportedValueError(EDNError):
    """Raised when a value of a supported shape cannot be represented (e.g. NaN).

    Attributes:
        value: The offending value.
        text: Textual form of the offending value.
    """

    def __init__(self, value: object, text: str) -> None:
        self.value: object = value
        self.text: str = text
        super().__init__(f"edn: unsupported value: {text}")


class MarshalerError(EDNError):
    """Raised when a value's ``marshal_text()`` hook fails.

    The underlying exception is also chained as ``__cause__``.

    Attributes:
        shape: The class whose hook failed.
        cause: The exception raised by (or describing the bad result of) the hook.
    """

    def __init__(self, shape: type, cause: BaseException) -> None:
        self.shape: type = shape
        self.cause: BaseException = cause
        super().__init__(
            f"edn: error calling marshal_text for type {format_shape(shape)}: {cause}"
        )


class SinkError(EDNError):
    """Raised when a StreamWriter's sink rejects a write.

    Terminal for the writer instance: every later call re-raises the same error.

    Attributes:
        cause: The exception raised by the sink (usually an ``OSError``).
    """

    def __init__(self, cause: Exception) -> None:
        self.cause: Exception = cause
        super().__init__(f"edn: write to output sink failed: {cause}")
