"""
Fixed-layout records: ordered heterogeneous collections of named fields.

A record is the wire equivalent of a C struct. Every field is a fixed-size
wire type, fields are laid out back-to-back in definition order and there
is no padding, length prefix or offset table.
"""

from __future__ import annotations

from typing import IO, Type, cast

from typing_extensions import Self

from .exceptions import WireDecodeError, WireTypeDefinitionError
from .wire_base import WireModel, WireType, write_all


class Record(WireModel):
    """
    A strict, ordered collection of fixed-size named fields.

    Example:
        >>> class Outpoint(Record):
        ...     hash: Bytes32
        ...     index: Uint32

    Serialization format:
        [field_1][field_2]...[field_n]
    """

    @classmethod
    def _field_types(cls) -> list[tuple[str, Type[WireType]]]:
        """Return (name, wire type) pairs in definition order."""
        return [
            (name, cast(Type[WireType], info.annotation)) for name, info in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A record is fixed-size when all of its fields are."""
        return all(field_type.is_fixed_size() for _, field_type in cls._field_types())

    @classmethod
    def get_byte_length(cls) -> int:
        """
        Total byte length of all fields summed together.

        Raises:
            WireTypeDefinitionError: If any field has a variable size.
        """
        if not cls.is_fixed_size():
            raise WireTypeDefinitionError(cls.__name__, detail="all fields must be fixed-size")
        return sum(field_type.get_byte_length() for _, field_type in cls._field_types())

    def encode_bytes(self) -> bytes:
        """Concatenate the encoding of each field in definition order."""
        return b"".join(getattr(self, name).encode_bytes() for name, _ in self._field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the whole record to `stream` in a single write.

        Args:
            stream: Binary stream to write serialized bytes to.

        Returns:
            Number of bytes written to the stream.

        Raises:
            WriteFailureError: If the stream fails or shortens the write.
        """
        return write_all(stream, self.encode_bytes(), type(self).__name__)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read each field in definition order.

        Args:
            stream: Binary stream to read from.
            scope: Total bytes available for this record.

        Raises:
            WireDecodeError: If `scope` differs from the record's byte length.
            TruncatedInputError: If the stream ends before the record is complete.
        """
        if scope != cls.get_byte_length():
            raise WireDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got scope {scope}"
            )
        fields = {
            name: field_type.deserialize(stream, field_type.get_byte_length())
            for name, field_type in cls._field_types()
        }
        return cls(**fields)
