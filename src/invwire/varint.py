"""
CompactSize variable-length integer encoding and decoding.

CompactSize is the length prefix used in front of every list in the peer
protocol. Small values (the common case) take a single byte; larger values
are announced by a marker byte followed by a fixed-width little-endian
integer::

    Value < 0xfd:                1 byte   [value]
    Value <= 0xffff:             3 bytes  [0xfd][uint16]
    Value <= 0xffffffff:         5 bytes  [0xfe][uint32]
    Value <= 0xffffffffffffffff: 9 bytes  [0xff][uint64]

Every value has exactly one valid encoding: the shortest one. Decoding
rejects longer forms so that two peers can never disagree on the bytes of
an otherwise identical message.
"""

from __future__ import annotations

from typing import IO, Final

from invwire.types import (
    BaseUint,
    TruncatedInputError,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    WireDecodeError,
    write_all,
)

_UINT16_MARKER: Final = 0xFD
_UINT32_MARKER: Final = 0xFE
_UINT64_MARKER: Final = 0xFF

_WIDTHS: Final[dict[int, tuple[type[BaseUint], int]]] = {
    _UINT16_MARKER: (Uint16, _UINT16_MARKER),
    _UINT32_MARKER: (Uint32, 0x10000),
    _UINT64_MARKER: (Uint64, 0x100000000),
}
"""Marker byte -> (integer type that follows, smallest value allowed in that form)."""

def compact_size_length(value: int) -> int:
    """Return the number of bytes `encode_compact_size(value)` produces."""
    if value < _UINT16_MARKER:
        return 1
    if value <= 0xFFFF:
        return 3
    if value <= 0xFFFFFFFF:
        return 5
    return 9


def encode_compact_size(value: int) -> bytes:
    """
    Encode an unsigned integer using the shortest CompactSize form.

    Raises:
        OverflowError: If value is negative or does not fit in 64 bits.
    """
    if value < 0:
        raise OverflowError("CompactSize must be non-negative")

    if value < _UINT16_MARKER:
        return Uint8(value).encode_bytes()
    if value <= 0xFFFF:
        return bytes([_UINT16_MARKER]) + Uint16(value).encode_bytes()
    if value <= 0xFFFFFFFF:
        return bytes([_UINT32_MARKER]) + Uint32(value).encode_bytes()
    return bytes([_UINT64_MARKER]) + Uint64(value).encode_bytes()


def read_compact_size(stream: IO[bytes]) -> int:
    """
    Read one CompactSize integer from `stream`.

    Raises:
        TruncatedInputError: If the stream ends inside the encoding.
        WireDecodeError: If the value was not encoded in its shortest form.
    """
    marker = int(Uint8.deserialize(stream, 1))
    if marker < _UINT16_MARKER:
        return marker

    width_type, minimum = _WIDTHS[marker]
    try:
        value = int(width_type.deserialize(stream, width_type.get_byte_length()))
    except TruncatedInputError as e:
        # Report the truncation against the whole CompactSize, not the tail.
        raise TruncatedInputError(
            "CompactSize",
            expected_bytes=1 + e.expected_bytes,
            actual_bytes=1 + e.actual_bytes,
        ) from e

    if value < minimum:
        raise WireDecodeError(
            "CompactSize", f"non-canonical encoding of {value} with marker {marker:#04x}"
        )
    return value


def write_compact_size(stream: IO[bytes], value: int) -> int:
    """Write `value` as a CompactSize and return the number of bytes written."""
    return write_all(stream, encode_compact_size(value), "CompactSize")
