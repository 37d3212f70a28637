"""Exception hierarchy for the wire type system."""

from __future__ import annotations


class WireError(Exception):
    """
    Base exception for all wire-format errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class WireTypeError(WireError):
    """Base class for type-related errors."""


class WireTypeDefinitionError(WireTypeError):
    """
    Raised when a wire type class is incorrectly defined.

    Attributes:
        type_name: The name of the type with the definition error.
        missing_attr: The missing or invalid attribute name.
        detail: Additional context about the error.
    """

    def __init__(
        self,
        type_name: str,
        *,
        missing_attr: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.missing_attr = missing_attr
        self.detail = detail

        if missing_attr:
            msg = f"{type_name} must define {missing_attr}"
        elif detail:
            msg = f"{type_name}: {detail}"
        else:
            msg = f"{type_name} has an invalid type definition"

        super().__init__(msg)


class WireValueError(WireError):
    """
    Base class for value-related errors.

    Raised when a value is invalid for a wire operation, even if the type is correct.
    """


class ExcessiveCountError(WireValueError):
    """
    Raised when a single message would carry more elements than allowed.

    The count may come from a length prefix read off the wire or from the
    size of a list about to be sent.

    Attributes:
        type_name: The message or list type enforcing the bound.
        limit: The maximum number of elements (inclusive).
        count: The offending element count.
    """

    def __init__(self, type_name: str, *, limit: int, count: int) -> None:
        self.type_name = type_name
        self.limit = limit
        self.count = count

        super().__init__(f"{type_name} cannot exceed {limit} elements, got {count}")


class WireSerializationError(WireError):
    """Base class for serialization-related errors."""


class WireDecodeError(WireSerializationError):
    """
    Raised when decoding bytes to a value fails.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        offset: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class TruncatedInputError(WireDecodeError):
    """
    Raised when the stream ends before a complete value was read.

    Truncation is terminal for the value being decoded: the bytes that were
    consumed are not given back and no partial value is produced.

    Attributes:
        expected_bytes: Number of bytes the value needed.
        actual_bytes: Number of bytes the stream delivered.
    """

    def __init__(self, type_name: str, *, expected_bytes: int, actual_bytes: int) -> None:
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes

        super().__init__(
            type_name,
            f"stream ended prematurely: expected {expected_bytes} bytes, got {actual_bytes}",
        )


class WriteFailureError(WireSerializationError):
    """
    Raised when the underlying sink rejects or fails a write.

    The original exception, if any, is chained as `__cause__`.

    Attributes:
        type_name: The type being encoded when the write failed.
        detail: Description of the failure.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail

        super().__init__(f"Failed to write {type_name}: {detail}")
