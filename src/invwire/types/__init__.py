"""Reusable wire type definitions."""

from .base import StrictBaseModel
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes32
from .exceptions import (
    ExcessiveCountError,
    TruncatedInputError,
    WireDecodeError,
    WireError,
    WireSerializationError,
    WireTypeDefinitionError,
    WireTypeError,
    WireValueError,
    WriteFailureError,
)
from .record import Record
from .uint import BaseUint, Uint8, Uint16, Uint32, Uint64
from .wire_base import WireModel, WireType, read_exact, write_all

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "BaseBytes",
    "Bytes32",
    "ZERO_HASH",
    "StrictBaseModel",
    "WireType",
    "WireModel",
    "Record",
    "read_exact",
    "write_all",
    # Exceptions
    "WireError",
    "WireTypeError",
    "WireTypeDefinitionError",
    "WireValueError",
    "ExcessiveCountError",
    "WireSerializationError",
    "WireDecodeError",
    "TruncatedInputError",
    "WriteFailureError",
]
