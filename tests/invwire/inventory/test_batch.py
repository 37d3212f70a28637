"""Tests for count-prefixed inventory lists and the per-message bound."""

import io
import logging
import os
import threading

import pytest

from invwire.config import MAX_INV_PER_MSG, PROTOCOL_VERSION
from invwire.inventory import (
    check_inventory_count,
    read_inventory_list,
    write_inventory_list,
)
from invwire.types import ExcessiveCountError, TruncatedInputError
from invwire.varint import encode_compact_size
from tests.invwire.helpers import ChunkedReadStream, make_vector


def test_bound_value() -> None:
    assert MAX_INV_PER_MSG == 50_000


@pytest.mark.parametrize("count", [0, 1, MAX_INV_PER_MSG - 1, MAX_INV_PER_MSG])
def test_check_accepts_up_to_bound(count: int) -> None:
    check_inventory_count(count)


@pytest.mark.parametrize("count", [MAX_INV_PER_MSG + 1, 2**32])
def test_check_rejects_above_bound(count: int) -> None:
    with pytest.raises(ExcessiveCountError) as exc_info:
        check_inventory_count(count, "InvMessage")
    assert exc_info.value.limit == MAX_INV_PER_MSG
    assert exc_info.value.count == count
    assert exc_info.value.type_name == "InvMessage"


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="invwire.inventory.batch"):
        with pytest.raises(ExcessiveCountError):
            check_inventory_count(MAX_INV_PER_MSG + 1)
    assert "Rejecting InventoryList with 50001 inventory vectors" in caplog.text


def test_list_layout() -> None:
    vectors = [make_vector(1, 0), make_vector(2, 1)]
    stream = io.BytesIO()

    written = write_inventory_list(stream, PROTOCOL_VERSION, vectors)

    data = stream.getvalue()
    assert written == len(data) == 1 + 2 * 36
    assert data[0] == 2
    assert data[1:37] == vectors[0].encode_bytes()


def test_empty_list() -> None:
    stream = io.BytesIO()
    assert write_inventory_list(stream, PROTOCOL_VERSION, []) == 1
    stream.seek(0)
    assert read_inventory_list(stream, PROTOCOL_VERSION) == []


def test_round_trip_preserves_order() -> None:
    vectors = [make_vector(kind, seed) for seed, kind in enumerate([2, 1, 9999, 0, 1])]
    stream = io.BytesIO()
    write_inventory_list(stream, PROTOCOL_VERSION, vectors)
    stream.seek(0)
    assert read_inventory_list(stream, PROTOCOL_VERSION) == vectors


def test_send_exactly_bound_accepted() -> None:
    vectors = [make_vector()] * MAX_INV_PER_MSG
    stream = io.BytesIO()

    written = write_inventory_list(stream, PROTOCOL_VERSION, vectors)

    assert written == 3 + MAX_INV_PER_MSG * 36


def test_send_above_bound_rejected_before_writing() -> None:
    vectors = [make_vector()] * (MAX_INV_PER_MSG + 1)
    stream = io.BytesIO()

    with pytest.raises(ExcessiveCountError):
        write_inventory_list(stream, PROTOCOL_VERSION, vectors)

    assert stream.getvalue() == b""


def test_receive_exactly_bound_accepted() -> None:
    record = make_vector(2, 5).encode_bytes()
    stream = io.BytesIO(encode_compact_size(MAX_INV_PER_MSG) + record * MAX_INV_PER_MSG)

    vectors = read_inventory_list(stream, PROTOCOL_VERSION)

    assert len(vectors) == MAX_INV_PER_MSG
    assert vectors[-1] == make_vector(2, 5)


@pytest.mark.parametrize("claimed", [MAX_INV_PER_MSG + 1, 2**32 - 1, 2**64 - 1])
def test_receive_above_bound_rejected_from_prefix(claimed: int) -> None:
    """The count prefix alone is enough to reject; no element is read."""
    prefix = encode_compact_size(claimed)
    stream = io.BytesIO(prefix + make_vector().encode_bytes())

    with pytest.raises(ExcessiveCountError) as exc_info:
        read_inventory_list(stream, PROTOCOL_VERSION)

    assert exc_info.value.count == claimed
    assert stream.tell() == len(prefix)


def test_receive_truncated_element() -> None:
    stream = io.BytesIO(encode_compact_size(2) + make_vector().encode_bytes() + b"\x01\x00")
    with pytest.raises(TruncatedInputError):
        read_inventory_list(stream, PROTOCOL_VERSION)


def test_receive_from_chunked_stream() -> None:
    vectors = [make_vector(1, seed) for seed in range(3)]
    buffer = io.BytesIO()
    write_inventory_list(buffer, PROTOCOL_VERSION, vectors)

    stream = ChunkedReadStream(buffer.getvalue(), chunk=7)

    assert read_inventory_list(stream, PROTOCOL_VERSION) == vectors


def test_receive_from_unbuffered_pipe() -> None:
    """A record split across two pipe writes is reassembled."""
    vector = make_vector(2, 9)
    payload = encode_compact_size(1) + vector.encode_bytes()
    read_fd, write_fd = os.pipe()
    os.write(write_fd, payload[:21])

    def finish() -> None:
        os.write(write_fd, payload[21:])
        os.close(write_fd)

    writer = threading.Timer(0.05, finish)
    writer.start()
    try:
        with os.fdopen(read_fd, "rb", buffering=0) as stream:
            assert read_inventory_list(stream, PROTOCOL_VERSION) == [vector]
    finally:
        writer.join()
