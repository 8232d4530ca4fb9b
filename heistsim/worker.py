"""The working side of a node: takes a house, then a fence, then lets go."""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

from .node import Node
from .packet import Packet, Resource, Tag
from .state import State

NUM_HOUSES = 3
NUM_FENCES = 2

_POLL = 0.01


def _wait_until(node: Node, condition: Callable[[], bool]) -> None:
    while not condition():
        if node.network.closed:
            raise RuntimeError("network closed while waiting")
        time.sleep(_POLL)


def _first_in(node: Node, queue, limit: int) -> bool:
    return any(p.src == node.rank for p in queue.heads(limit))


def choose_house_number(taken: Sequence[int], eligible: Sequence[int], rank: int) -> Optional[int]:
    """Pick the house for ``rank``.

    ``taken[i]`` is the rank holding house ``i`` or -1; ``eligible`` lists the
    ranks allowed in, in priority order. Ranks already holding a house are
    skipped; the n-th remaining rank gets the n-th free house. Returns None
    when ``rank`` gets nothing.
    """
    holders = set(taken) - {-1}
    waiting = [r for r in eligible if r not in holders]
    if rank not in waiting:
        return None
    position = waiting.index(rank)
    free = [number for number, holder in enumerate(taken) if holder == -1]
    if position >= len(free):
        return None
    return free[position]


def _request(node: Node, state: State, resource: Resource, queue) -> None:
    node.state.change(state)
    stamp = node.clock.increment()
    node.acks = 0
    packet = Packet(stamp, node.rank, resource)
    queue.enqueue(packet)
    node.broadcast(packet, Tag.REQ)
    _wait_until(node, lambda: node.acks >= node.size - 1)


def acquire_house(node: Node) -> Optional[int]:
    """Enter the house section and agree on a house number; return it."""
    node.log("Requesting the house critical section")
    _request(node, State.HOUSE, Resource.HOUSE, node.house_queue)
    _wait_until(node, lambda: _first_in(node, node.house_queue, NUM_HOUSES))
    node.log("May take a house, choosing a number")

    node.network.barrier()

    node.number_queue.clear()
    node.broadcast(Packet(node.clock.value, node.rank, Resource.ASK), Tag.NUM)
    _wait_until(node, lambda: len(node.number_queue) >= node.size - 1)

    taken = [-1] * NUM_HOUSES
    for answer in node.number_queue.snapshot():
        if 0 <= answer.ts < NUM_HOUSES:
            taken[answer.ts] = answer.src

    eligible = [p.src for p in node.house_queue.heads(NUM_HOUSES)]
    number = choose_house_number(taken, eligible, node.rank)
    if number is not None:
        node.house_number = number
        node.log(f"Received house number {number}")
        listing = "".join(f"({p.src}, {p.ts}) " for p in node.house_queue.snapshot())
        node.output.write(f"[{node.rank}] {listing}\n")
        node.output.flush()
    return number


def acquire_fence(node: Node) -> None:
    """Enter the fence section once fewer than NUM_FENCES nodes are ahead."""
    node.log("Requesting the fence critical section")
    _request(node, State.FENCE, Resource.FENCE, node.fence_queue)
    _wait_until(node, lambda: _first_in(node, node.fence_queue, NUM_FENCES))
    node.log("Entering the fence")


def release_all(node: Node) -> None:
    """Give up the house and the fence and tell everyone."""
    node.house_number = -1
    stamp = node.clock.increment()
    node.broadcast(Packet(stamp, node.rank, Resource.FENCE), Tag.RET)
    node.house_queue.remove_source(node.rank)
    node.fence_queue.remove_source(node.rank)
    node.log("Leaving everything")
    node.state.change(State.IDLE)


def main_loop(node: Node, cycles: Optional[int] = None) -> int:
    """Run house-fence-release cycles; return how many were completed.

    With ``cycles`` None the loop runs until the node finishes.
    """
    node.clock.reset(node.rank)
    node.acks = 0
    node.house_number = -1
    node.state.change(State.IDLE)
    completed = 0
    while not node.state.finished and (cycles is None or completed < cycles):
        state = node.state.current
        if state is State.IDLE:
            acquire_house(node)
        elif state is State.HOUSE:
            acquire_fence(node)
        elif state is State.FENCE:
            release_all(node)
            completed += 1
    return completed