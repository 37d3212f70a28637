"""Base classes and interfaces for all wire types."""

from __future__ import annotations

import errno
import io
from abc import ABC, abstractmethod
from typing import IO

from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import TruncatedInputError, WriteFailureError


class WireType(ABC):
    """
    Abstract base class for all wire types.

    This is the minimal interface that all wire types must implement.
    Use WireModel for Pydantic-based composite types.
    """

    @classmethod
    @abstractmethod
    def is_fixed_size(cls) -> bool:
        """
        Check if the type has a fixed size in bytes.

        Returns:
            bool: True if the size is fixed, False otherwise.
        """
        ...

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """
        Get the byte length of the type if it is fixed-size.

        Raises:
            WireTypeError: If the type is not fixed-size.

        Returns:
            int: The number of bytes.
        """
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Serializes the object and writes it to a binary stream.

        Args:
            stream (IO[bytes]): The stream to write the serialized data to.

        Returns:
            int: The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Deserializes an object from a binary stream within a given scope.

        Args:
            stream (IO[bytes]): The stream to read from.
            scope (int): The number of bytes available to read for this object.

        Returns:
            Self: An instance of the class.
        """
        ...

    def encode_bytes(self) -> bytes:
        """
        Serializes the object to a byte string.

        Returns:
            bytes: The serialized byte string.
        """
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserializes a byte string into an object.

        Args:
            data (bytes): The byte string to deserialize.

        Returns:
            Self: An instance of the class.
        """
        with io.BytesIO(data) as stream:
            return cls.deserialize(stream, len(data))


class WireModel(StrictBaseModel, WireType):
    """
    Base class for wire types that use Pydantic validation.

    This combines StrictBaseModel (Pydantic validation + immutability) with
    binary serialization. Use it for records and messages.

    For scalar types that need special inheritance (like int), use WireType directly.
    """

    def __repr__(self) -> str:
        """String representation showing the class name and field values."""
        field_strs = [f"{name}={getattr(self, name)!r}" for name in type(self).model_fields]
        return f"{self.__class__.__name__}({' '.join(field_strs)})"


def read_exact(stream: IO[bytes], size: int, type_name: str) -> bytes:
    """
    Read exactly `size` bytes from `stream`.

    Raw streams (unbuffered sockets and pipes) may return fewer bytes than
    asked for without being at end of stream, so reads are repeated until
    `size` bytes have arrived or a read returns `b""`. Errors raised by the
    stream itself propagate unchanged.

    Raises:
        TruncatedInputError: If the stream is exhausted before `size` bytes were read.
        BlockingIOError: If a non-blocking stream has no data available.
    """
    data = bytearray()
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if chunk is None:
            raise BlockingIOError(
                errno.EAGAIN, f"no data available while reading {type_name}", len(data)
            )
        if not chunk:
            raise TruncatedInputError(type_name, expected_bytes=size, actual_bytes=len(data))
        data += chunk
    return bytes(data)


def write_all(stream: IO[bytes], data: bytes, type_name: str) -> int:
    """
    Write all of `data` to `stream`.

    Raises:
        WriteFailureError: If the stream raises while writing, or reports
            that it accepted fewer bytes than given.
    """
    try:
        written = stream.write(data)
    except (OSError, ValueError) as e:
        raise WriteFailureError(type_name, str(e)) from e
    # Buffered streams return None or the full length; raw streams may write less.
    if written is not None and written != len(data):
        raise WriteFailureError(type_name, f"short write: {written} of {len(data)} bytes")
    return len(data)
