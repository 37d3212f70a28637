"""
Count-prefixed lists of inventory vectors and the per-message bound.

On the wire a list is a CompactSize element count followed by that many
36-byte vectors. The count is checked against `MAX_INV_PER_MSG` before any
element is read or written, so a hostile peer cannot make us allocate or
parse more than one message's worth of vectors.
"""

from __future__ import annotations

import logging
from typing import IO, Sequence

from invwire.config import MAX_INV_PER_MSG
from invwire.types import ExcessiveCountError
from invwire.varint import read_compact_size, write_compact_size

from .codec import read_inventory_vector, write_inventory_vector
from .vector import InventoryVector

logger = logging.getLogger(__name__)


def check_inventory_count(count: int, type_name: str = "InventoryList") -> None:
    """
    Enforce the per-message bound on inventory vectors.

    Args:
        count: Number of vectors, either read off the wire or about to be sent.
        type_name: Name of the list or message, used in the error.

    Raises:
        ExcessiveCountError: If `count` exceeds `MAX_INV_PER_MSG`.
    """
    if count > MAX_INV_PER_MSG:
        logger.debug(
            "Rejecting %s with %d inventory vectors (limit %d)", type_name, count, MAX_INV_PER_MSG
        )
        raise ExcessiveCountError(type_name, limit=MAX_INV_PER_MSG, count=count)


def read_inventory_list(
    stream: IO[bytes], protocol_version: int, *, type_name: str = "InventoryList"
) -> list[InventoryVector]:
    """
    Read a count-prefixed list of inventory vectors.

    Raises:
        ExcessiveCountError: If the count prefix exceeds `MAX_INV_PER_MSG`.
        TruncatedInputError: If the stream ends inside the prefix or any vector.
        WireDecodeError: If the count prefix is not canonically encoded.
    """
    count = read_compact_size(stream)
    check_inventory_count(count, type_name)
    return [read_inventory_vector(stream, protocol_version) for _ in range(count)]


def write_inventory_list(
    stream: IO[bytes],
    protocol_version: int,
    vectors: Sequence[InventoryVector],
    *,
    type_name: str = "InventoryList",
) -> int:
    """
    Write a count-prefixed list of inventory vectors.

    Nothing is written when the list is too long.

    Returns:
        The number of bytes written.

    Raises:
        ExcessiveCountError: If `vectors` holds more than `MAX_INV_PER_MSG` items.
        WriteFailureError: If the stream fails a write.
    """
    check_inventory_count(len(vectors), type_name)
    written = write_compact_size(stream, len(vectors))
    for vector in vectors:
        written += write_inventory_vector(stream, protocol_version, vector)
    return written
