"""Serialises concurrent uploads of the same file."""

import threading


class UploadWaiter:
    """The first caller of wait() for a key proceeds; later callers block
    until the first one calls done() for that key."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: dict[str, threading.Event] = {}

    def wait(self, key: str) -> None:
        """Block while another upload of key is in progress."""
        with self._lock:
            event = self._pending.get(key)
            if event is None:
                self._pending[key] = threading.Event()
                return
        event.wait()

    def done(self, key: str) -> None:
        """Mark the upload of key as finished and release any waiters."""
        with self._lock:
            event = self._pending.pop(key, None)
        if event is not None:
            event.set()