"""Inventory vectors: kinds, the 36-byte record, its codec and the per-message bound."""

from .batch import check_inventory_count, read_inventory_list, write_inventory_list
from .codec import read_inventory_vector, write_inventory_vector
from .kind import INV_BLOCK, INV_ERROR, INV_TX, InventoryKind, inventory_kind_name
from .vector import InventoryVector, new_inventory_vector

__all__ = [
    "INV_BLOCK",
    "INV_ERROR",
    "INV_TX",
    "InventoryKind",
    "InventoryVector",
    "check_inventory_count",
    "inventory_kind_name",
    "new_inventory_vector",
    "read_inventory_list",
    "read_inventory_vector",
    "write_inventory_list",
    "write_inventory_vector",
]
