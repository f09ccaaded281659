"""Conversion between group codes and group uins."""

_MILLION = 1_000_000


def _split(value: int) -> tuple[int, int]:
    """Split into (value / 1e6, value % 1e6), both truncated toward zero."""
    quotient = abs(value) // _MILLION
    remainder = abs(value) % _MILLION
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


def to_group_uin(group_code: int) -> int:
    """Map a public group code to the internal group uin."""
    left, right = _split(group_code)
    if 0 <= left <= 10:
        left += 202
    elif 11 <= left <= 19:
        left += 480 - 11
    elif 20 <= left <= 66:
        left += 2100 - 20
    elif 67 <= left <= 156:
        left += 2010 - 67
    elif 157 <= left <= 209:
        left += 2147 - 157
    elif 210 <= left <= 309:
        left += 4100 - 210
    elif 310 <= left <= 335:
        left += 3800 - 310
    elif 336 <= left <= 386:
        left += 2265
    elif 387 <= left <= 499:
        left += 3490
    return left * _MILLION + right


def to_group_code(group_uin: int) -> int:
    """Map an internal group uin back to the public group code."""
    left, right = _split(group_uin)
    if 202 <= left <= 212:
        left -= 202
    elif 480 <= left <= 488:
        left -= 480 - 11
    elif 2100 <= left <= 2146:
        left -= 2100 - 20
    elif 2010 <= left <= 2099:
        left -= 2010 - 67
    elif 2147 <= left <= 2199:
        left -= 2147 - 157
    elif 2600 <= left <= 2651:
        left -= 2265
    elif 4100 <= left <= 4199:
        left -= 4100 - 210
    elif 3800 <= left <= 3989:
        left -= 3800 - 310
    return left * _MILLION + right