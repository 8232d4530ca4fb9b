"""The receiving side of a node: reacts to every incoming message."""

from __future__ import annotations

from .node import Node
from .packet import Packet, Resource, Tag
from .state import State
from .transport import Message

_RECEIVE_TIMEOUT = 0.1

_ACK_RESOURCE = {
    State.HOUSE: Resource.HOUSE,
    State.FENCE: Resource.FENCE,
}


def handle_message(node: Node, message: Message) -> None:
    """Apply one received message to ``node``, replying where the protocol asks."""
    packet = message.packet
    tag = message.tag

    if tag == Tag.REQ:
        stamp = node.clock.update(packet.ts)
        resource = _ACK_RESOURCE.get(node.state.current, 0)
        node.send(Packet(stamp, node.rank, resource), message.source, Tag.ACK)
        if packet.resource == Resource.HOUSE:
            node.house_queue.enqueue(packet)
        elif packet.resource == Resource.FENCE:
            node.fence_queue.enqueue(packet)

    elif tag == Tag.ACK:
        node.acks = node.acks + 1
        node.clock.update(packet.ts)
        state = node.state.current
        if state is State.HOUSE:
            if packet.resource in (Resource.HOUSE, Resource.FENCE):
                node.house_queue.enqueue(packet)
        elif state is State.FENCE:
            if packet.resource == Resource.FENCE:
                node.fence_queue.enqueue(packet)

    elif tag == Tag.RET:
        node.clock.update(packet.ts)
        node.house_queue.remove_source(message.source)
        node.fence_queue.remove_source(message.source)

    elif tag == Tag.NUM:
        if packet.resource == Resource.ASK:
            answer = Packet(node.house_number, node.rank, Resource.ANSWER)
            node.send(answer, message.source, Tag.NUM)
        elif packet.resource == Resource.ANSWER:
            node.number_queue.enqueue(packet)


def run_receiver(node: Node) -> None:
    """Handle messages until the node finishes or the network is closed."""
    while not node.state.finished:
        message = node.network.receive(node.rank, timeout=_RECEIVE_TIMEOUT)
        if message is None:
            if node.network.closed:
                return
            continue
        try:
            handle_message(node, message)
        except RuntimeError:
            if node.network.closed:
                return
            raise