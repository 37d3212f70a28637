"""Inventory Wire Configuration Constants."""

from typing_extensions import Final

PROTOCOL_VERSION: Final = 70001
"""
Protocol version to use when no version has been negotiated with a peer.

The inventory vector encoding is identical across every protocol version;
the value is threaded through the codecs so that callers keep the same
signature as version-dependent sibling codecs.
"""

HASH_SIZE: Final = 32
"""Size in bytes of the content hash carried by an inventory vector."""

MAX_INV_VECT_PAYLOAD: Final = 4 + HASH_SIZE
"""Serialized size of one inventory vector: a uint32 kind followed by the hash."""

MAX_INV_PER_MSG: Final = 50_000
"""
Maximum number of inventory vectors in a single `inv`, `getdata` or `notfound` message.

Exactly this many vectors is valid; one more is rejected when sending and
when receiving.
"""
