import threading

from heistsim.clock import LamportClock


def test_increment_returns_new_value():
    clock = LamportClock(0)
    assert clock.increment() == 1
    assert clock.value == 1


def test_update_with_larger_timestamp():
    clock = LamportClock(2)
    result = clock.update(5)
    assert result == 6
    assert clock.value == result


def test_update_with_smaller_timestamp_still_advances():
    clock = LamportClock(10)
    before = clock.value
    assert clock.update(3) == before + 1


def test_update_is_monotonic():
    clock = LamportClock(0)
    previous = clock.value
    for received in [4, 1, 9, 9, 0, 20]:
        now = clock.update(received)
        assert now > previous
        assert now > received
        previous = now


def test_reset():
    clock = LamportClock(7)
    clock.reset(3)
    assert clock.value == 3


def test_concurrent_increments():
    clock = LamportClock(5)

    def bump():
        for _ in range(200):
            clock.increment()

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert clock.value == 5 + 4 * 200