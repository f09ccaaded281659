import hashlib
import struct
import time

import pytest

from miraicore import tlv


def _split(record):
    tag, length = struct.unpack(">HH", record[:4])
    body = record[4:]
    assert length == len(body)
    return tag, body


def _read_short(data, offset):
    (length,) = struct.unpack(">H", data[offset:offset + 2])
    start = offset + 2
    return data[start:start + length], start + length


def test_generic_record_wire_bytes():
    assert tlv.t(0x104, b"ab") == b"\x01\x04\x00\x02ab"


@pytest.mark.parametrize(
    "builder, tag",
    [
        (tlv.t104, 0x104),
        (tlv.t108, 0x108),
        (tlv.t10a, 0x10A),
        (tlv.t143, 0x143),
        (tlv.t145, 0x145),
        (tlv.t16a, 0x16A),
        (tlv.t16e, 0x16E),
        (tlv.t174, 0x174),
        (tlv.t194, 0x194),
        (tlv.t33, 0x33),
        (tlv.t401, 0x401),
        (tlv.t52d, 0x52D),
        (tlv.t536, 0x536),
        (tlv.t545, 0x545),
    ],
)
def test_raw_body_records(builder, tag):
    data = b"\x01\x02\x03payload"
    got_tag, body = _split(builder(data))
    assert got_tag == tag
    assert body == data


@pytest.mark.parametrize("builder, tag", [(tlv.t109, 0x109), (tlv.t187, 0x187), (tlv.t188, 0x188)])
def test_md5_records(builder, tag):
    got_tag, body = _split(builder(b"device"))
    assert got_tag == tag
    assert body == hashlib.md5(b"device").digest()


def test_t1_layout():
    before = int(time.time())
    got_tag, body = _split(tlv.t1(123456, b"\x7f\x00\x00\x01"))
    after = int(time.time())
    assert got_tag == 0x01
    version, _rand, uin, stamp, ip, tail = struct.unpack(">HIII4sH", body)
    assert (version, uin, ip, tail) == (1, 123456, b"\x7f\x00\x00\x01", 0)
    assert before <= stamp <= after


def test_t1_rejects_bad_ip():
    with pytest.raises(ValueError):
        tlv.t1(1, b"\x00\x00\x00")


def test_t100_layout():
    got_tag, body = _split(tlv.t100(5, 16, 34869472))
    assert got_tag == 0x100
    assert struct.unpack(">HIIIII", body) == (1, 5, 16, 16, 0, 34869472)


def test_t107_layout():
    got_tag, body = _split(tlv.t107(7))
    assert got_tag == 0x107
    assert struct.unpack(">HBHB", body) == (7, 0, 0, 1)


def test_t112_is_decimal_uin():
    got_tag, body = _split(tlv.t112(987654))
    assert got_tag == 0x112
    assert body == b"987654"


def test_t116_layout():
    got_tag, body = _split(tlv.t116(11, 22))
    assert got_tag == 0x116
    assert struct.unpack(">BIIBI", body) == (0, 11, 22, 1, 1600000226)


def test_t141_layout():
    _tag, body = _split(tlv.t141(b"sim", b"wifi"))
    assert body[:2] == struct.pack(">H", 1)
    sim, offset = _read_short(body, 2)
    assert sim == b"sim"
    assert struct.unpack(">H", body[offset:offset + 2]) == (2,)
    apn, end = _read_short(body, offset + 2)
    assert apn == b"wifi"
    assert end == len(body)


def test_t16_layout():
    guid = bytes(range(16))
    _tag, body = _split(tlv.t16(1, 2, 3, guid, b"apk", b"8.0", b"sig"))
    assert struct.unpack(">III", body[:12]) == (1, 2, 3)
    assert body[12:28] == guid
    apk, offset = _read_short(body, 28)
    version, offset = _read_short(body, offset)
    sign, offset = _read_short(body, offset)
    assert (apk, version, sign) == (b"apk", b"8.0", b"sig")
    assert offset == len(body)


def test_t177_layout():
    _tag, body = _split(tlv.t177(1577331209, "6.0.0.2463"))
    assert body[0] == 1
    assert struct.unpack(">I", body[1:5]) == (1577331209,)
    sdk, end = _read_short(body, 5)
    assert sdk == b"6.0.0.2463"
    assert end == len(body)


def test_t17a_wraps_negative_value():
    _tag, body = _split(tlv.t17a(-1))
    assert struct.unpack(">i", body) == (-1,)


def test_t17c_and_t193():
    _tag, body = _split(tlv.t17c("code"))
    assert _read_short(body, 0) == (b"code", len(body))
    _tag, body = _split(tlv.t193("ticket"))
    assert body == b"ticket"


def test_t18_layout():
    _tag, body = _split(tlv.t18(16, 42))
    assert struct.unpack(">HIIIIHH", body) == (1, 1536, 16, 0, 42, 0, 0)


def test_t197_t198_single_zero_byte():
    assert _split(tlv.t197()) == (0x197, b"\x00")
    assert _split(tlv.t198()) == (0x198, b"\x00")


def test_t1b_t1d_layouts():
    _tag, body = _split(tlv.t1b(0, 0, 3, 4, 72, 2, 2))
    assert struct.unpack(">IIIIIIIH", body) == (0, 0, 3, 4, 72, 2, 2, 0)
    _tag, body = _split(tlv.t1d(184024956))
    assert struct.unpack(">BIIBI", body) == (1, 184024956, 0, 0, 0)


def test_t1f_layout():
    _tag, body = _split(tlv.t1f(True, b"android", b"7.1", b"op", b"wifi", 2))
    assert body[0] == 1
    name, offset = _read_short(body, 1)
    ver, offset = _read_short(body, offset)
    assert (name, ver) == (b"android", b"7.1")
    assert struct.unpack(">H", body[offset:offset + 2]) == (2,)
    op, offset = _read_short(body, offset + 2)
    empty, offset = _read_short(body, offset)
    apn, offset = _read_short(body, offset)
    assert (op, empty, apn) == (b"op", b"", b"wifi")
    assert offset == len(body)


def test_t2_layout():
    _tag, body = _split(tlv.t2("abcd", b"\x09\x08"))
    assert body[:2] == b"\x00\x00"
    result, offset = _read_short(body, 2)
    sign, end = _read_short(body, offset)
    assert (result, sign, end) == (b"abcd", b"\x09\x08", len(body))


def test_t511_domains():
    domains = ["tenpay.com", "qzone.qq.com"]
    _tag, body = _split(tlv.t511(domains))
    assert struct.unpack(">H", body[:2]) == (2,)
    offset = 2
    decoded = []
    for _ in domains:
        assert body[offset] == 1
        item, offset = _read_short(body, offset + 1)
        decoded.append(item.decode())
    assert decoded == domains
    assert offset == len(body)


def test_small_fixed_records():
    assert struct.unpack(">I", _split(tlv.t154(9))[1]) == (9,)
    assert _split(tlv.t166(1))[1] == b"\x01"
    assert _split(tlv.t191(0x82))[1] == b"\x82"
    assert struct.unpack(">I", _split(tlv.t35(8))[1]) == (8,)
    assert _split(tlv.t516())[1] == b"\x00\x00\x00\x00"
    assert struct.unpack(">IH", _split(tlv.t521(6))[1]) == (6, 0)
    assert struct.unpack(">HIH", _split(tlv.t8(2052))[1]) == (0, 2052, 0)


def test_t525_wraps_t536():
    inner = tlv.t536(b"\x01\x00")
    _tag, body = _split(tlv.t525(inner))
    assert body[:2] == b"\x00\x01"
    assert body[2:] == inner


def test_guid_flag():
    assert tlv.guid_flag() == 1 << 24