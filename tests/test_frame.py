import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ferrofix.sofh.errors import IncompleteError, InvalidMessageLengthError
from ferrofix.sofh.frame import Frame


def test_information_retrieval_is_consistent_with_new():
    frame = Frame(0x0, b"")
    assert frame.encoding_type == 0x0
    assert frame.message == b""
    frame = Frame(0x1122, b"foobar")
    assert frame.encoding_type == 0x1122
    assert frame.message == b"foobar"
    frame = Frame(0xFFFF, bytes([0]))
    assert frame.encoding_type == 0xFFFF
    assert frame.message == bytes([0])


def test_new_example():
    assert len(Frame(0xF500, b"{}").message) == 2


@pytest.mark.parametrize(
    "data, needed",
    [(b"", 6), (bytes([0, 0, 0]), 3), (bytes([0, 0, 0, 0, 0]), 1)],
)
def test_decode_incomplete_header(data, needed):
    with pytest.raises(IncompleteError) as info:
        Frame.decode(data)
    assert info.value.needed == needed


def test_decode_empty_message():
    frame = Frame.decode(bytes([0, 0, 0, 6, 0, 0]))
    assert frame.encoding_type == 0
    assert frame.message == b""


def test_decode_example():
    frame = Frame.decode(bytes([0, 0, 0, 7, 0x0, 0x0, 42]))
    assert frame.message == bytes([42])


def test_decode_incomplete_body():
    with pytest.raises(IncompleteError) as info:
        Frame.decode(bytes([0, 0, 0, 9, 0, 0, 1]))
    assert info.value.needed == 2


@pytest.mark.parametrize("length", range(6))
def test_decode_invalid_message_length(length):
    with pytest.raises(InvalidMessageLengthError):
        Frame.decode(bytes([0, 0, 0, length, 0x43, 0x24]))


def test_encode_example():
    data = bytes([0, 0, 0, 7, 0x0, 0x0, 42])
    frame = Frame.decode(data)
    buffer = io.BytesIO()
    assert frame.encode(buffer) == 7
    assert buffer.getvalue() == data
    assert frame.to_bytes() == data


def test_encoding_type_out_of_range():
    with pytest.raises(ValueError):
        Frame(0x10000, b"")


@settings(max_examples=1000)
@given(st.integers(min_value=0, max_value=0xFFFF), st.binary())
def test_encode_then_decode_should_have_no_effect(encoding_type, data):
    buffer = io.BytesIO()
    Frame(encoding_type, data).encode(buffer)
    decoded = Frame.decode(buffer.getvalue())
    assert decoded.encoding_type == encoding_type
    assert decoded.message == data