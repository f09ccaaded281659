import pytest

from miraicore.dynamic_proto import (
    DynamicMessage,
    Float32,
    SInt,
    SInt32,
    SInt64,
    encode_svarint,
    encode_uvarint,
)

MAX_UINT64 = 2**64 - 1
MAX_INT64 = 2**63 - 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, b"\x01"),
        (114514, b"\xd2\xfe\x06"),
        (MAX_UINT64, b"\xff" * 9 + b"\x01"),
    ],
)
def test_uvarint(value, expected):
    assert encode_uvarint(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, b"\x02"),
        (-1, b"\x01"),
        (114514, b"\xa4\xfd\x0d"),
        (MAX_INT64, b"\xfe" + b"\xff" * 8 + b"\x01"),
    ],
)
def test_svarint(value, expected):
    assert encode_svarint(value) == expected


def test_uvarint_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode_uvarint(-1)
    with pytest.raises(ValueError):
        encode_uvarint(MAX_UINT64 + 1)


def test_svarint_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode_svarint(MAX_INT64 + 1)


def test_image_reserve_layout():
    message = DynamicMessage({1: 0, 2: 0, 6: "", 10: 0, 15: 8, 20: "abc"})
    assert message.encode() == (
        b"\x08\x00\x10\x00\x32\x00\x50\x00\x78\x08\xa2\x01\x03abc"
    )


def test_bool_and_negative_int():
    assert DynamicMessage({1: True, 2: False}).encode() == b"\x08\x01\x10\x00"
    assert DynamicMessage({1: -1}).encode() == b"\x08" + b"\xff" * 9 + b"\x01"


def test_zigzag_types():
    encoded = DynamicMessage({1: SInt(-1), 2: SInt32(1), 3: SInt64(-2)}).encode()
    assert encoded == b"\x08\x01\x10\x02\x18\x03"


def test_floats():
    assert DynamicMessage({1: Float32(1.0)}).encode() == b"\x0d\x00\x00\x80\x3f"
    assert DynamicMessage({1: 1.0}).encode() == b"\x09" + b"\x00" * 6 + b"\xf0\x3f"


def test_bytes_and_repeated():
    assert DynamicMessage({1: b"\x01\x02"}).encode() == b"\x0a\x02\x01\x02"
    assert DynamicMessage({2: [1, 2]}).encode() == b"\x10\x01\x10\x02"


def test_nested_message():
    inner = DynamicMessage({1: 1})
    assert DynamicMessage({3: inner}).encode() == b"\x1a\x02\x08\x01"


def test_unsupported_values_are_skipped():
    assert DynamicMessage({1: None, 2: 5}).encode() == b"\x10\x05"


def test_empty_message():
    assert DynamicMessage().encode() == b""