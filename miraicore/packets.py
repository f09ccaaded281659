"""Packet structures and the QR-code login request frame."""

import struct
from dataclasses import dataclass, field

_HEADER_TAIL = 3
_VERSION = 50


@dataclass
class IncomingPacket:
    sequence_id: int
    flag2: int
    command_name: str
    session_id: bytes = field(default=b"")
    payload: bytes = field(default=b"")


def build_code2d_request_packet(seq: int, j: int, cmd: int, body: bytes) -> bytes:
    """Frame body as a QR-code login request.

    The frame starts with 0x02 and its total length, and ends with 0x03.
    """
    content = (
        struct.pack(">H", cmd & 0xFFFF)
        + bytes(21)
        + struct.pack(">BHH", _HEADER_TAIL, 0, _VERSION)
        + struct.pack(">IQ", seq & 0xFFFFFFFF, j & 0xFFFFFFFFFFFFFFFF)
        + bytes(body)
        + bytes([_HEADER_TAIL])
    )
    total = 1 + 2 + len(content)
    return b"\x02" + struct.pack(">H", total & 0xFFFF) + content