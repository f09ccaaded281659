"""String helpers: random strings, chunking, version parsing and XML escaping."""

import random
import re

_DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)

_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}
_REPLACEMENT = "\uFFFD"


def random_string(length: int) -> str:
    """Return a random alphanumeric string of the given length."""
    return random_string_range(length, _DEFAULT_ALPHABET)


def random_string_range(length: int, alphabet: str) -> str:
    """Return a random string of the given length drawn from alphabet."""
    return "".join(random.choice(alphabet) for _ in range(length))


def chunk_string(s: str, chunk_size: int) -> list[str]:
    """Split s into pieces of at most chunk_size characters."""
    if not s or len(s) <= chunk_size:
        return [s]
    return [s[start:start + chunk_size] for start in range(0, len(s), chunk_size)]


def _wrap_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def convert_sub_version_to_int(s: str) -> int:
    """Turn a dotted version such as "8.4.1" into its int32 code (8410)."""
    joined = "".join(s.split("."))
    if not _INTEGER.fullmatch(joined):
        value = 0
    else:
        value = min(max(int(joined), _INT64_MIN), _INT64_MAX)
    return _wrap_int32(_wrap_int32(value) * 10)


def _in_character_range(code: int) -> bool:
    return (
        code in (0x09, 0x0A, 0x0D)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def xml_escape(s: str) -> str:
    """Escape s for use in XML text or attributes."""
    parts = []
    for char in s:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif not _in_character_range(ord(char)):
            parts.append(_REPLACEMENT)
        else:
            parts.append(char)
    return "".join(parts)