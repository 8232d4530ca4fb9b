"""In-process message passing between a fixed number of ranks."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass

from .packet import Packet

_CLOSED = object()


@dataclass(frozen=True)
class Message:
    """A packet delivered to a rank, with its sender and tag."""

    source: int
    tag: int
    packet: Packet


class Network:
    """Point-to-point FIFO channels and a barrier for ``size`` ranks."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("network needs at least one rank")
        self.size = size
        self._inboxes: list[queue.Queue] = [queue.Queue() for _ in range(size)]
        self._barrier = threading.Barrier(size)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def _check_rank(self, rank: int) -> None:
        if not 0 <= rank < self.size:
            raise ValueError(f"rank {rank} outside 0..{self.size - 1}")

    def send(self, source: int, destination: int, tag: int, packet: Packet) -> None:
        """Deliver ``packet`` from ``source`` to the inbox of ``destination``."""
        self._check_rank(source)
        self._check_rank(destination)
        if self.closed:
            raise RuntimeError("network is closed")
        self._inboxes[destination].put(Message(source, tag, packet))

    def receive(self, rank: int, timeout: float | None = None) -> Message | None:
        """Take the next message for ``rank``.

        Returns None when the timeout passes or the network has been closed.
        """
        self._check_rank(rank)
        inbox = self._inboxes[rank]
        try:
            item = inbox.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            inbox.put(_CLOSED)
            return None
        return item

    def barrier(self) -> None:
        """Block until every rank has reached the barrier."""
        self._barrier.wait()

    def close(self) -> None:
        """Stop the network: wake receivers and break the barrier."""
        if self._closed.is_set():
            return
        self._closed.set()
        self._barrier.abort()
        for inbox in self._inboxes:
            inbox.put(_CLOSED)