"""A thread-safe string-keyed cache whose entries expire."""

import threading
import time
import weakref
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_MIN_INTERVAL = 1.0


@dataclass
class _Entry(Generic[T]):
    value: T
    expiry: float


def _sweep(cache_ref: "weakref.ref[Cache[Any]]", interval: float) -> None:
    while True:
        time.sleep(interval)
        cache = cache_ref()
        if cache is None:
            return
        cache._purge()
        del cache


class Cache(Generic[T]):
    """Cache with per-entry time to live, in seconds.

    A background thread removes expired entries every interval seconds
    (at least one second); it stops once the cache is garbage collected.
    """

    def __init__(self, interval: float) -> None:
        interval = max(interval, _MIN_INTERVAL)
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry[T]] = {}
        threading.Thread(
            target=_sweep, args=(weakref.ref(self), interval), daemon=True
        ).start()

    def _purge(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.expiry < now]
            for key in expired:
                del self._entries[key]

    def count(self) -> int:
        """Number of entries held, expired ones not yet removed included."""
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[T]:
        """Return the live value for key, or None when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.expiry > time.monotonic():
                return entry.value
        return None

    def get_and_update(self, key: str, ttl: float) -> Optional[T]:
        """Return the value for key and extend its life to ttl seconds from now."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            entry.expiry = time.monotonic() + ttl
            return entry.value

    def add(self, key: str, value: T, ttl: float) -> None:
        """Store value under key for ttl seconds."""
        with self._lock:
            self._entries[key] = _Entry(value, time.monotonic() + ttl)

    def keys(self) -> list[str]:
        """All keys currently held."""
        with self._lock:
            return list(self._entries)