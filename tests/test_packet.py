import dataclasses

import pytest

from heistsim.packet import Packet, Resource, Tag, tag_name


def test_unknown_tag_name():
    assert tag_name(99) == "<unknown>"
    assert tag_name(0) == "<unknown>"


def test_known_tags_have_distinct_names():
    names = [tag_name(tag) for tag in Tag]
    assert "<unknown>" not in names
    assert len(set(names)) == len(names)


def test_tag_name_accepts_plain_int():
    assert tag_name(int(Tag.ACK)) == tag_name(Tag.ACK)
    assert tag_name(Tag.ACK) == "acknowledgement"


def test_packet_is_immutable():
    packet = Packet(ts=3, src=1, resource=Resource.HOUSE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        packet.ts = 5  # type: ignore[misc]
    assert packet.ts == 3
    assert packet == Packet(3, 1, Resource.HOUSE)


def test_packet_equality_and_replace():
    packet = Packet(4, 2, Resource.FENCE)
    moved = dataclasses.replace(packet, src=0)
    assert moved == Packet(4, 0, Resource.FENCE)
    assert packet.src == 2