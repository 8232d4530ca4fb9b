"""Per-rank state shared by a node's worker and receiver threads."""

from __future__ import annotations

import dataclasses
import sys
import threading
from typing import TextIO

from .clock import LamportClock
from .packet import Packet
from .packetqueue import PacketQueue
from .state import State, StateCell
from .transport import Network


class Node:
    """One participant: its clock, state, queues and counters."""

    def __init__(self, rank: int, network: Network, output: TextIO | None = None) -> None:
        if not 0 <= rank < network.size:
            raise ValueError(f"rank {rank} outside 0..{network.size - 1}")
        self.rank = rank
        self.network = network
        self.size = network.size
        self.output = output if output is not None else sys.stdout
        self.clock = LamportClock(0)
        self.state = StateCell(State.IDLE)
        self.house_queue = PacketQueue(self.size)
        self.fence_queue = PacketQueue(self.size)
        self.number_queue = PacketQueue(self.size)
        self._lock = threading.Lock()
        self._output_lock = threading.Lock()
        self._house_number = -1
        self._acks = 0

    @property
    def house_number(self) -> int:
        """Number of the house this node holds, or -1."""
        with self._lock:
            return self._house_number

    @house_number.setter
    def house_number(self, number: int) -> None:
        with self._lock:
            self._house_number = number

    @property
    def acks(self) -> int:
        """Acknowledgements received for the current request."""
        with self._lock:
            return self._acks

    @acks.setter
    def acks(self, count: int) -> None:
        with self._lock:
            self._acks = count

    def send(self, packet: Packet, destination: int, tag: int) -> None:
        """Send ``packet`` stamped with this node's rank."""
        self.network.send(self.rank, destination, tag, dataclasses.replace(packet, src=self.rank))

    def broadcast(self, packet: Packet, tag: int) -> None:
        """Send ``packet`` to every other rank."""
        for destination in range(self.size):
            if destination != self.rank:
                self.send(packet, destination, tag)

    def log(self, message: str) -> None:
        """Write a coloured line tagged with the rank and the clock."""
        bold = (1 + self.rank // 7) % 2
        colour = 31 + (6 + self.rank) % 7
        line = f"\x1b[{bold};{colour}m [{self.rank}][LC:{self.clock.value}]: {message}\x1b[0;37m\n"
        with self._output_lock:
            self.output.write(line)
            self.output.flush()