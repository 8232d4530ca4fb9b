"""A bounded, thread-safe priority queue holding one packet per source."""

from __future__ import annotations

import threading

from .packet import Packet


def _priority(packet: Packet) -> tuple[int, int]:
    return (packet.ts, packet.src)


class PacketQueue:
    """Packets ordered by (timestamp, source), at most one per source."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._packets: list[Packet] = []
        self._lock = threading.Lock()

    def enqueue(self, packet: Packet) -> bool:
        """Insert a packet; return False only when the queue is full.

        A packet from a source already queued replaces the old one only if
        its timestamp is earlier.
        """
        with self._lock:
            for index, existing in enumerate(self._packets):
                if existing.src == packet.src:
                    if packet.ts < existing.ts:
                        self._packets[index] = packet
                        self._packets.sort(key=_priority)
                    return True
            if len(self._packets) >= self.capacity:
                return False
            self._packets.append(packet)
            self._packets.sort(key=_priority)
            return True

    def remove_source(self, src: int) -> None:
        """Drop every packet that came from ``src``."""
        with self._lock:
            self._packets = [p for p in self._packets if p.src != src]

    def clear(self) -> None:
        with self._lock:
            self._packets.clear()

    def snapshot(self) -> list[Packet]:
        """Return the queued packets in priority order."""
        with self._lock:
            return list(self._packets)

    def heads(self, limit: int) -> list[Packet]:
        """Return at most ``limit`` packets from the front of the queue."""
        with self._lock:
            return self._packets[: max(limit, 0)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._packets)