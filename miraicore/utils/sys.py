"""Stream helpers: a rewindable concatenation of streams, md5 digests."""

import hashlib
import io
from typing import BinaryIO, Optional

_CHUNK = 64 * 1024


class MultiReadSeeker:
    """Reads several seekable streams one after another.

    Every stream is rewound to its start before the first read and after
    every seek back to the beginning.
    """

    def __init__(self, *streams: BinaryIO) -> None:
        self._streams = streams
        self._index: Optional[int] = None

    def _start(self) -> None:
        for stream in self._streams:
            stream.seek(0, io.SEEK_SET)
        self._index = 0

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes, or everything left when size is negative."""
        if self._index is None:
            self._start()
        parts = []
        remaining = size
        while self._index < len(self._streams):
            stream = self._streams[self._index]
            if remaining < 0:
                parts.append(stream.read())
                self._index += 1
                continue
            if remaining == 0:
                break
            chunk = stream.read(remaining)
            if not chunk:
                self._index += 1
                continue
            parts.append(chunk)
            remaining -= len(chunk)
        return b"".join(parts)

    def seek(self, offset: int = 0, whence: int = io.SEEK_SET) -> int:
        """Rewind to the beginning; no other position is supported."""
        if whence != io.SEEK_SET or offset != 0:
            raise io.UnsupportedOperation("unsupported offset")
        self._index = None
        return 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True


def compute_md5_and_length(stream: BinaryIO) -> tuple[bytes, int]:
    """Read stream to its end and return its md5 digest and length."""
    digest = hashlib.md5()
    length = 0
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        digest.update(chunk)
        length += len(chunk)
    return digest.digest(), length


def select(a: Optional[bytes], b: Optional[bytes]) -> Optional[bytes]:
    """Return a unless it is None, otherwise b."""
    return b if a is None else a