"""The inventory vector: a kind tag plus the content hash of the data it names."""

from __future__ import annotations

from typing import Any, SupportsInt

from typing_extensions import Self

from invwire.types import Bytes32, Record

from .kind import InventoryKind, inventory_kind_name


class InventoryVector(Record):
    """
    Describes one piece of data that a peer has, wants, or does not have.

    The serialized form is always 36 bytes::

        [kind: uint32, little-endian][hash: 32 raw bytes]

    Instances are immutable and compare equal when both the kind and all 32
    hash bytes are equal.
    """

    kind: InventoryKind
    """What the hash refers to (transaction, block, or a kind unknown to us)."""

    hash: Bytes32
    """Content hash of the referenced data."""

    @classmethod
    def build(cls, kind: SupportsInt, hash: Any) -> Self:
        """
        Create a vector from a kind and any 32-byte bytes-like hash.

        The hash is copied, so mutating a `bytearray` passed here afterwards
        has no effect on the returned vector.

        Raises:
            OverflowError: If `kind` does not fit in 32 bits.
            ValueError: If `hash` is not exactly 32 bytes.
        """
        if not isinstance(kind, InventoryKind):
            kind = InventoryKind(int(kind))
        return cls(kind=kind, hash=Bytes32(hash))

    def __str__(self) -> str:
        return f"{inventory_kind_name(self.kind)} {self.hash.hex()}"


def new_inventory_vector(kind: SupportsInt, hash: Any) -> InventoryVector:
    """Create an inventory vector; see `InventoryVector.build`."""
    return InventoryVector.build(kind, hash)
