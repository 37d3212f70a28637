"""
Stream codec for single inventory vectors.

Both functions take the protocol version negotiated with the peer. The
inventory vector layout has never changed between versions, so the value
is not inspected; it is part of the signature so that callers treat this
codec exactly like its version-dependent siblings.
"""

from __future__ import annotations

from typing import IO

from invwire.config import MAX_INV_VECT_PAYLOAD
from invwire.types import read_exact, write_all

from .vector import InventoryVector


def read_inventory_vector(stream: IO[bytes], protocol_version: int) -> InventoryVector:
    """
    Read one 36-byte inventory vector from `stream`.

    Errors raised by `stream.read` propagate unchanged.

    Raises:
        TruncatedInputError: If fewer than 36 bytes remain in the stream.
    """
    data = read_exact(stream, MAX_INV_VECT_PAYLOAD, InventoryVector.__name__)
    return InventoryVector.decode_bytes(data)


def write_inventory_vector(
    stream: IO[bytes], protocol_version: int, vector: InventoryVector
) -> int:
    """
    Write `vector` to `stream` as exactly 36 bytes.

    Returns:
        The number of bytes written (always 36).

    Raises:
        WriteFailureError: If the stream fails the write; the original
            exception is chained as the cause.
    """
    return write_all(stream, vector.encode_bytes(), InventoryVector.__name__)
