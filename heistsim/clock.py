"""A thread-safe Lamport logical clock."""

from __future__ import annotations

import threading


class LamportClock:
    """Logical clock advanced on local events and on received timestamps."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Advance by one for a local event and return the new time."""
        with self._lock:
            self._value += 1
            return self._value

    def update(self, received: int) -> int:
        """Merge a received timestamp and return the new time."""
        with self._lock:
            self._value = max(received, self._value) + 1
            return self._value

    def reset(self, value: int) -> None:
        with self._lock:
            self._value = value