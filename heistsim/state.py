"""Node states and a thread-safe holder for the current one."""

from __future__ import annotations

import threading
from enum import Enum, auto


class State(Enum):
    FENCE = auto()
    HOUSE = auto()
    IDLE = auto()
    FINISHED = auto()


class StateCell:
    """Current state of a node; once finished it never changes again."""

    def __init__(self, initial: State = State.IDLE) -> None:
        self._state = initial
        self._lock = threading.Lock()

    @property
    def current(self) -> State:
        with self._lock:
            return self._state

    @property
    def finished(self) -> bool:
        return self.current is State.FINISHED

    def change(self, new_state: State) -> State:
        """Switch to ``new_state`` unless finished; return the resulting state."""
        with self._lock:
            if self._state is not State.FINISHED:
                self._state = new_state
            return self._state

    def finish(self) -> None:
        with self._lock:
            self._state = State.FINISHED