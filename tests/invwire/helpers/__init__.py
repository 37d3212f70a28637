"""Shared test helpers for invwire tests."""

from .builders import make_hash, make_vector
from .streams import (
    ChunkedReadStream,
    FailingReadStream,
    FailingWriteStream,
    ShortWriteStream,
    WouldBlockReadStream,
)

__all__ = [
    "ChunkedReadStream",
    "FailingReadStream",
    "FailingWriteStream",
    "ShortWriteStream",
    "WouldBlockReadStream",
    "make_hash",
    "make_vector",
]
