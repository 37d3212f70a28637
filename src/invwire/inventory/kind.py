"""
Inventory kinds: the tag saying what an inventory vector refers to.

The set of kinds is open. Peers running newer software may announce kinds
this module has never heard of; those values are carried, compared and
re-encoded like any other and only their display name degrades to a
generic label.
"""

from __future__ import annotations

from typing import Final, SupportsInt

from invwire.types import Uint32


class InventoryKind(Uint32):
    """A 32-bit unsigned tag identifying the kind of data an inventory vector names."""

    @property
    def name(self) -> str:
        """Human-readable name; see `inventory_kind_name`."""
        return inventory_kind_name(self)

    def __str__(self) -> str:
        """Return the display name rather than the bare number."""
        return self.name


INV_ERROR: Final = InventoryKind(0)
"""Sentinel for an unknown or invalid entry; also the zero value of the tag."""

INV_TX: Final = InventoryKind(1)
"""The vector names a transaction."""

INV_BLOCK: Final = InventoryKind(2)
"""The vector names a block."""

_KIND_NAMES: Final[dict[InventoryKind, str]] = {
    INV_ERROR: "ERROR",
    INV_TX: "MSG_TX",
    INV_BLOCK: "MSG_BLOCK",
}


def inventory_kind_name(kind: SupportsInt) -> str:
    """
    Return the display name of an inventory kind.

    Known kinds map to their protocol names; every other 32-bit value maps to
    `"Unknown InventoryKind (N)"`.

    Raises:
        OverflowError: If `kind` does not fit in 32 bits.
    """
    if not isinstance(kind, InventoryKind):
        kind = InventoryKind(int(kind))
    name = _KIND_NAMES.get(kind)
    if name is None:
        return f"Unknown InventoryKind ({int(kind)})"
    return name
