import io
from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from invwire.types import (
    ZERO_HASH,
    BaseBytes,
    Bytes32,
    TruncatedInputError,
    WireDecodeError,
    WriteFailureError,
)
from tests.invwire.helpers import ChunkedReadStream, FailingWriteStream, ShortWriteStream


def test_bytes_inheritance_ok() -> None:
    assert issubclass(Bytes32, BaseBytes)
    assert Bytes32.LENGTH == 32
    v = Bytes32(b"\x00" * 32)
    assert isinstance(v, Bytes32)
    assert isinstance(v, bytes)
    assert len(v) == 32


@pytest.mark.parametrize(
    "value",
    [
        b"\x11" * 32,
        bytearray(b"\x11" * 32),
        memoryview(b"\x11" * 32),
        [0x11] * 32,
        "11" * 32,
        "0x" + "11" * 32,
    ],
)
def test_coercion(value: Any) -> None:
    assert bytes(Bytes32(value)) == b"\x11" * 32


@pytest.mark.parametrize("length", [0, 31, 33])
def test_wrong_length_raises(length: int) -> None:
    with pytest.raises(ValueError):
        Bytes32(b"\x00" * length)


def test_construction_copies_mutable_buffer() -> None:
    # Later writes to the caller's buffer must not leak into the value.
    buffer = bytearray(range(32))
    value = Bytes32(buffer)
    buffer[0] = 0xFF
    assert value[0] == 0


def test_zero() -> None:
    assert Bytes32.zero() == b"\x00" * 32
    assert ZERO_HASH == Bytes32.zero()


def test_serialize_deserialize() -> None:
    value = Bytes32(bytes(range(32)))
    stream = io.BytesIO()
    assert value.serialize(stream) == 32
    assert stream.getvalue() == bytes(range(32))

    stream.seek(0)
    assert Bytes32.deserialize(stream, 32) == value


def test_deserialize_truncated() -> None:
    with pytest.raises(TruncatedInputError):
        Bytes32.deserialize(io.BytesIO(b"\x00" * 31), 32)


def test_deserialize_wrong_scope() -> None:
    with pytest.raises(WireDecodeError):
        Bytes32.deserialize(io.BytesIO(b"\x00" * 64), 64)


def test_decode_bytes_wrong_length() -> None:
    with pytest.raises(WireDecodeError):
        Bytes32.decode_bytes(b"\x00" * 33)


def test_pydantic_field_and_json() -> None:
    class Model(BaseModel):
        model_config = ConfigDict(strict=True)

        digest: Bytes32

    m = Model(digest=b"\x01" * 32)
    assert isinstance(m.digest, Bytes32)
    assert m.model_dump(mode="json") == {"digest": "01" * 32}

    with pytest.raises(ValidationError):
        Model(digest=b"\x01" * 31)


def test_repr_and_hash() -> None:
    value = Bytes32(b"\xab" * 32)
    assert repr(value) == f"Bytes32({'ab' * 32})"
    assert hash(value) == hash(Bytes32(b"\xab" * 32))


def test_deserialize_across_partial_reads() -> None:
    stream = ChunkedReadStream(bytes(range(32)), chunk=5)
    assert Bytes32.deserialize(stream, 32) == bytes(range(32))


def test_serialize_short_write() -> None:
    with pytest.raises(WriteFailureError, match="short write"):
        Bytes32.zero().serialize(ShortWriteStream(limit=31))


def test_serialize_write_error_is_wrapped() -> None:
    cause = ValueError("I/O operation on closed file.")
    with pytest.raises(WriteFailureError) as exc_info:
        Bytes32.zero().serialize(FailingWriteStream(cause))
    assert exc_info.value.__cause__ is cause
