"""
Atomic identifier generation for in-memory stores.
"""

import threading


class IdGenerator:
    """Thread-safe monotonically increasing integer id source.

    Callers should treat ids as opaque; only uniqueness and ordering within
    one generator are guaranteed.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next identifier."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the identifier the next call will produce."""
        with self._lock:
            return self._next
