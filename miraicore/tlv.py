"""Builders for the tag-length-value records of the login protocol.

Every record is a big-endian uint16 tag, a uint16 length and the body.
"""

import hashlib
import random
import struct
import time
from collections.abc import Iterable


def _u8(value: int) -> bytes:
    return struct.pack(">B", value & 0xFF)


def _u16(value: int) -> bytes:
    return struct.pack(">H", value & 0xFFFF)


def _u32(value: int) -> bytes:
    return struct.pack(">I", value & 0xFFFFFFFF)


def _short(data: bytes) -> bytes:
    """Length-prefixed (uint16) bytes."""
    return _u16(len(data)) + bytes(data)


def _short_str(text: str) -> bytes:
    return _short(text.encode("utf-8"))


def t(tag: int, value: bytes) -> bytes:
    """Generic record: tag followed by the length-prefixed value."""
    return _u16(tag) + _short(value)


def t1(uin: int, ip: bytes) -> bytes:
    if len(ip) != 4:
        raise ValueError("invalid ip")
    body = (
        _u16(1)
        + _u32(random.getrandbits(32))
        + _u32(uin)
        + _u32(int(time.time()))
        + bytes(ip)
        + _u16(0)
    )
    return t(0x01, body)


def t100(sso_version: int, protocol: int, main_sig_map: int) -> bytes:
    body = (
        _u16(1)
        + _u32(sso_version)
        + _u32(16)
        + _u32(protocol)
        + _u32(0)  # app client version
        + _u32(main_sig_map)
    )
    return t(0x100, body)


def t104(data: bytes) -> bytes:
    return t(0x104, data)


def t107(pic_type: int) -> bytes:
    return t(0x107, _u16(pic_type) + _u8(0) + _u16(0) + _u8(1))


def t108(ksid: bytes) -> bytes:
    return t(0x108, ksid)


def t109(android_id: bytes) -> bytes:
    return t(0x109, hashlib.md5(android_id).digest())


def t10a(arr: bytes) -> bytes:
    return t(0x10A, arr)


def t112(uin: int) -> bytes:
    return t(0x112, str(uin).encode("ascii"))


def t116(misc_bitmap: int, sub_sig_map: int) -> bytes:
    body = (
        _u8(0)
        + _u32(misc_bitmap)
        + _u32(sub_sig_map)
        + _u8(1)
        + _u32(1600000226)  # app id list
    )
    return t(0x116, body)


def t141(sim_info: bytes, apn: bytes) -> bytes:
    body = _u16(1) + _short(sim_info) + _u16(2) + _short(apn)
    return t(0x141, body)


def t143(arr: bytes) -> bytes:
    return t(0x143, arr)


def t145(guid: bytes) -> bytes:
    return t(0x145, guid)


def t154(seq: int) -> bytes:
    return t(0x154, _u32(seq))


def t16(
    sso_version: int,
    app_id: int,
    sub_app_id: int,
    guid: bytes,
    apk_id: bytes,
    apk_version_name: bytes,
    apk_sign: bytes,
) -> bytes:
    body = (
        _u32(sso_version)
        + _u32(app_id)
        + _u32(sub_app_id)
        + bytes(guid)
        + _short(apk_id)
        + _short(apk_version_name)
        + _short(apk_sign)
    )
    return t(0x16, body)


def t166(image_type: int) -> bytes:
    return t(0x166, _u8(image_type))


def t16a(arr: bytes) -> bytes:
    return t(0x16A, arr)


def t16e(build_model: bytes) -> bytes:
    return t(0x16E, build_model)


def t174(data: bytes) -> bytes:
    return t(0x174, data)


def t177(build_time: int, sdk_version: str) -> bytes:
    return t(0x177, _u8(1) + _u32(build_time) + _short_str(sdk_version))


def t17a(value: int) -> bytes:
    return t(0x17A, _u32(value))


def t17c(code: str) -> bytes:
    return t(0x17C, _short_str(code))


def t18(app_id: int, uin: int) -> bytes:
    body = (
        _u16(1)
        + _u32(1536)
        + _u32(app_id)
        + _u32(0)
        + _u32(uin)
        + _u16(0)
        + _u16(0)
    )
    return t(0x18, body)


def t187(mac_address: bytes) -> bytes:
    return t(0x187, hashlib.md5(mac_address).digest())


def t188(android_id: bytes) -> bytes:
    return t(0x188, hashlib.md5(android_id).digest())


def t191(k: int) -> bytes:
    return t(0x191, _u8(k))


def t193(ticket: str) -> bytes:
    return t(0x193, ticket.encode("utf-8"))


def t194(imsi_md5: bytes) -> bytes:
    return t(0x194, imsi_md5)


def t197() -> bytes:
    return t(0x197, b"\x00")


def t198() -> bytes:
    return t(0x198, b"\x00")


def t1b(
    micro: int,
    version: int,
    size: int,
    margin: int,
    dpi: int,
    ec_level: int,
    hint: int,
) -> bytes:
    body = b"".join(_u32(v) for v in (micro, version, size, margin, dpi, ec_level, hint))
    return t(0x1B, body + _u16(0))


def t1d(misc_bitmap: int) -> bytes:
    body = _u8(1) + _u32(misc_bitmap) + _u32(0) + _u8(0) + _u32(0)
    return t(0x1D, body)


def t1f(
    is_root: bool,
    os_name: bytes,
    os_version: bytes,
    sim_operator_name: bytes,
    apn: bytes,
    network_type: int,
) -> bytes:
    body = (
        _u8(1 if is_root else 0)
        + _short(os_name)
        + _short(os_version)
        + _u16(network_type)
        + _short(sim_operator_name)
        + _u16(0)
        + _short(apn)
    )
    return t(0x1F, body)


def t2(result: str, sign: bytes) -> bytes:
    return t(0x02, _u16(0) + _short_str(result) + _short(sign))


def t33(guid: bytes) -> bytes:
    return t(0x33, guid)


def t35(product_type: int) -> bytes:
    return t(0x35, _u32(product_type))


def t401(d: bytes) -> bytes:
    return t(0x401, d)


def t511(domains: Iterable[str]) -> bytes:
    domains = list(domains)
    body = _u16(len(domains)) + b"".join(_u8(1) + _short_str(d) for d in domains)
    return t(0x511, body)


def t516() -> bytes:
    return t(0x516, _u32(0))


def t521(i: int) -> bytes:
    return t(0x521, _u32(i) + _u16(0))


def t525(t536_data: bytes) -> bytes:
    return t(0x525, _u16(1) + bytes(t536_data))


def t52d(dev_info: bytes) -> bytes:
    return t(0x52D, dev_info)


def t536(login_extra_data: bytes) -> bytes:
    return t(0x536, login_extra_data)


def t545(imei: bytes) -> bytes:
    return t(0x545, imei)


def t8(local_id: int) -> bytes:
    return t(0x8, _u16(0) + _u32(local_id) + _u16(0))


def guid_flag() -> int:
    """Flag describing where the device guid came from."""
    flag = 0
    flag |= (1 << 24) & 0xFF000000
    flag |= (0 << 8) & 0xFF00
    return flag