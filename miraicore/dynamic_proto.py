"""Encoding of ad hoc protobuf messages given as field-number mappings."""

import struct

_UINT64_MASK = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_VARINT = 0
_FIXED64 = 1
_BYTES = 2
_FIXED32 = 5


class SInt(int):
    """Integer encoded with zigzag (sint) varint."""


class SInt32(int):
    """32-bit integer encoded with zigzag (sint32) varint."""


class SInt64(int):
    """64-bit integer encoded with zigzag (sint64) varint."""


class Float32(float):
    """Float encoded as a 32-bit fixed field."""


def encode_uvarint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as a base-128 varint."""
    if value < 0 or value > _UINT64_MASK:
        raise ValueError(f"value out of uint64 range: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def encode_svarint(value: int) -> bytes:
    """Encode a signed 64-bit integer as a zigzag varint."""
    if value < _INT64_MIN or value > _INT64_MAX:
        raise ValueError(f"value out of int64 range: {value}")
    return encode_uvarint(((value << 1) ^ (value >> 63)) & _UINT64_MASK)


class DynamicMessage(dict):
    """Protobuf message built from {field number: value}.

    Field types follow the Python value: bool and int become varints,
    SInt/SInt32/SInt64 zigzag varints, Float32 and float fixed fields,
    str and bytes length-delimited fields, a list of ints repeated varints
    and a nested DynamicMessage an embedded message. Values of any other
    type are skipped.
    """

    def encode(self) -> bytes:
        out = bytearray()
        for field, value in self.items():
            key = field << 3

            def head(wire: int) -> None:
                out.extend(encode_uvarint(key | wire))

            if isinstance(value, bool):
                head(_VARINT)
                out.extend(encode_uvarint(int(value)))
            elif isinstance(value, (SInt, SInt32, SInt64)):
                head(_VARINT)
                out.extend(encode_svarint(int(value)))
            elif isinstance(value, int):
                head(_VARINT)
                out.extend(encode_uvarint(value & _UINT64_MASK))
            elif isinstance(value, Float32):
                head(_FIXED32)
                out.extend(struct.pack("<f", value))
            elif isinstance(value, float):
                head(_FIXED64)
                out.extend(struct.pack("<d", value))
            elif isinstance(value, str):
                data = value.encode("utf-8")
                head(_BYTES)
                out.extend(encode_uvarint(len(data)))
                out.extend(data)
            elif isinstance(value, (bytes, bytearray)):
                head(_BYTES)
                out.extend(encode_uvarint(len(value)))
                out.extend(value)
            elif isinstance(value, list):
                for item in value:
                    head(_VARINT)
                    out.extend(encode_uvarint(int(item) & _UINT64_MASK))
            elif isinstance(value, DynamicMessage):
                nested = value.encode()
                head(_BYTES)
                out.extend(encode_uvarint(len(nested)))
                out.extend(nested)
        return bytes(out)