import io

import pytest

from heistsim.node import Node
from heistsim.packet import Packet, Resource
from heistsim.state import State
from heistsim.transport import Network
from heistsim.worker import (
    NUM_HOUSES,
    acquire_fence,
    acquire_house,
    choose_house_number,
    main_loop,
    release_all,
)


@pytest.fixture
def lone():
    return Node(0, Network(1), io.StringIO())


def test_choose_all_free_follows_priority():
    taken = [-1] * NUM_HOUSES
    eligible = [2, 0, 1]
    picks = [choose_house_number(taken, eligible, rank) for rank in eligible]
    assert picks == list(range(NUM_HOUSES))


def test_choose_skips_holders_and_taken_houses():
    taken = [-1, 0, -1]
    assert choose_house_number(taken, [0, 1, 2], 1) == 0
    assert choose_house_number(taken, [0, 1, 2], 2) == 2
    assert choose_house_number(taken, [0, 1, 2], 0) is None


def test_choose_rank_not_eligible():
    assert choose_house_number([-1, -1, -1], [0, 1], 2) is None


def test_choose_runs_out_of_houses():
    assert choose_house_number([5, 6, -1], [0, 1], 1) is None
    assert choose_house_number([5, 6, -1], [0, 1], 0) == 2


def test_choices_are_distinct():
    taken = [-1, 4, -1]
    eligible = [3, 4, 1, 0]
    picks = [choose_house_number(taken, eligible, r) for r in eligible]
    chosen = [p for p in picks if p is not None]
    assert len(chosen) == len(set(chosen))
    assert all(taken[p] == -1 for p in chosen)


def test_acquire_house_alone(lone):
    number = acquire_house(lone)
    assert number == 0
    assert lone.house_number == number
    assert lone.state.current is State.HOUSE
    assert [p.src for p in lone.house_queue.snapshot()] == [0]
    assert "Received house number 0" in lone.output.getvalue()


def test_acquire_fence_alone(lone):
    acquire_fence(lone)
    assert lone.state.current is State.FENCE
    queued = lone.fence_queue.snapshot()
    assert len(queued) == 1
    assert queued[0].src == 0
    assert queued[0].resource == Resource.FENCE
    assert "Entering the fence" in lone.output.getvalue()


def test_release_all_clears_own_entries(lone):
    lone.house_queue.enqueue(Packet(1, 0, Resource.HOUSE))
    lone.fence_queue.enqueue(Packet(2, 0, Resource.FENCE))
    lone.house_number = 1
    lone.state.change(State.FENCE)
    before = lone.clock.value
    release_all(lone)
    assert lone.house_number == -1
    assert len(lone.house_queue) == 0
    assert len(lone.fence_queue) == 0
    assert lone.state.current is State.IDLE
    assert lone.clock.value == before + 1


def test_main_loop_completes_cycles(lone):
    assert main_loop(lone, 3) == 3
    assert lone.state.current is State.IDLE
    assert lone.house_number == -1
    text = lone.output.getvalue()
    assert text.count("Leaving everything") == 3
    assert text.count("Entering the fence") == 3


def test_main_loop_does_nothing_when_finished(lone):
    lone.state.finish()
    assert main_loop(lone, 5) == 0
    assert lone.output.getvalue() == ""


def test_waiting_fails_on_closed_network():
    network = Network(2)
    node = Node(0, network, io.StringIO())
    network.close()
    with pytest.raises(RuntimeError):
        acquire_house(node)