"""
Inventory-carrying peer messages.

Three messages carry a list of inventory vectors and share one layout and
one bound:

- `inv`: announce data the sender has.
- `getdata`: request the data named by each vector.
- `notfound`: answer a `getdata` for data the sender does not have.

Only the payload is modelled here. The envelope (command name, length,
checksum) is added by the transport.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar

from pydantic import field_validator
from typing_extensions import Self

from invwire.config import MAX_INV_PER_MSG, MAX_INV_VECT_PAYLOAD
from invwire.inventory import (
    InventoryVector,
    check_inventory_count,
    read_inventory_list,
    write_inventory_list,
)
from invwire.types import StrictBaseModel
from invwire.varint import compact_size_length


class InventoryMessage(StrictBaseModel):
    """
    Base payload for messages made of a single bounded list of inventory vectors.

    Construction rejects more than `MAX_INV_PER_MSG` vectors with
    `ExcessiveCountError`, so an oversized message can neither be built
    locally nor decoded from a peer.
    """

    COMMAND: ClassVar[str]
    """Protocol command name carried in the envelope."""

    inventory: tuple[InventoryVector, ...] = ()
    """The vectors, in wire order."""

    @field_validator("inventory", mode="before")
    @classmethod
    def _validate_inventory(cls, v: Any) -> tuple[Any, ...]:
        """Accept any sequence and enforce the per-message bound."""
        if not isinstance(v, tuple):
            v = tuple(v)
        check_inventory_count(len(v), cls.__name__)
        return v

    @classmethod
    def decode(cls, stream: IO[bytes], protocol_version: int) -> Self:
        """Read the payload from `stream`."""
        return cls(inventory=read_inventory_list(stream, protocol_version, type_name=cls.__name__))

    def encode(self, stream: IO[bytes], protocol_version: int) -> int:
        """Write the payload to `stream` and return the number of bytes written."""
        return write_inventory_list(
            stream, protocol_version, self.inventory, type_name=type(self).__name__
        )

    def add_inventory_vector(self, vector: InventoryVector) -> Self:
        """
        Return a copy of this message with `vector` appended.

        Raises:
            ExcessiveCountError: If the message already holds `MAX_INV_PER_MSG` vectors.
        """
        check_inventory_count(len(self.inventory) + 1, type(self).__name__)
        return type(self)(inventory=self.inventory + (vector,))

    @classmethod
    def max_payload_length(cls, protocol_version: int) -> int:
        """Upper bound on the encoded payload size: the prefix and records of a full list."""
        return compact_size_length(MAX_INV_PER_MSG) + MAX_INV_PER_MSG * MAX_INV_VECT_PAYLOAD

    def __len__(self) -> int:
        return len(self.inventory)


class InvMessage(InventoryMessage):
    """Announces transactions or blocks the sender has."""

    COMMAND = "inv"


class GetDataMessage(InventoryMessage):
    """Requests the data named by each vector, usually in reply to an `inv`."""

    COMMAND = "getdata"


class NotFoundMessage(InventoryMessage):
    """Tells the peer that requested data is not available."""

    COMMAND = "notfound"
