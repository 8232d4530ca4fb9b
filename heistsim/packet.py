"""Packets exchanged between nodes, their tags and resource kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Tag(IntEnum):
    """Kind of message a packet travels under."""

    ACK = 1
    REQ = 2
    RET = 3
    NUM = 4


class Resource(IntEnum):
    """What a packet is about."""

    ASK = 1
    ANSWER = 2
    HOUSE = 3
    FENCE = 4


@dataclass(frozen=True)
class Packet:
    """A timestamped packet sent by node ``src``.

    For house-number answers ``ts`` carries the house number (-1 for none).
    """

    ts: int
    src: int
    resource: int = 0


_TAG_NAMES = {
    Tag.NUM: "house number",
    Tag.ACK: "acknowledgement",
    Tag.REQ: "critical section request",
    Tag.RET: "critical section release",
}


def tag_name(tag: int) -> str:
    """Return a human-readable name for a message tag."""
    for known, name in _TAG_NAMES.items():
        if known == tag:
            return name
    return "<unknown>"