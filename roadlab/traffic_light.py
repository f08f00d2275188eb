"""Traffic lights that cycle between red and green and publish phase changes."""

from __future__ import annotations

import logging
import random
import threading
import time
from collections import deque
from enum import Enum
from typing import Generic, TypeVar

from roadlab.traffic_object import TrafficObject

_log = logging.getLogger(__name__)

T = TypeVar("T")


class TrafficLightPhase(Enum):
    RED = 0
    GREEN = 1


class MessageQueue(Generic[T]):
    """A thread-safe queue; receive hands out the most recently sent message."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()
        self._condition = threading.Condition()

    def __len__(self) -> int:
        with self._condition:
            return len(self._queue)

    def send(self, message: T) -> None:
        with self._condition:
            self._queue.append(message)
            self._condition.notify()

    def receive(self, timeout: float | None = None) -> T:
        """Wait for a message and take it; raise TimeoutError if none arrives in time."""
        with self._condition:
            if not self._condition.wait_for(lambda: self._queue, timeout):
                raise TimeoutError("no message received")
            return self._queue.pop()


class TrafficLight(TrafficObject):
    """A light toggling between red and green after random cycle durations in seconds."""

    def __init__(
        self,
        cycle_range: tuple[float, float] = (4, 6),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        low, high = cycle_range
        if low < 0 or high < low:
            raise ValueError(f"invalid cycle range {cycle_range!r}")
        self._cycle_range = (low, high)
        self._rng = rng if rng is not None else random.Random()
        self._phase_lock = threading.Lock()
        self._phase = TrafficLightPhase.RED
        self._messages: MessageQueue[TrafficLightPhase] = MessageQueue()

    @property
    def current_phase(self) -> TrafficLightPhase:
        with self._phase_lock:
            return self._phase

    @current_phase.setter
    def current_phase(self, phase: TrafficLightPhase) -> None:
        with self._phase_lock:
            self._phase = phase

    def toggle(self) -> TrafficLightPhase:
        """Switch the phase, publish it and return the new phase."""
        with self._phase_lock:
            if self._phase is TrafficLightPhase.RED:
                self._phase = TrafficLightPhase.GREEN
            else:
                self._phase = TrafficLightPhase.RED
            phase = self._phase
        self._messages.send(phase)
        return phase

    def wait_for_green(self, timeout: float | None = None) -> None:
        """Consume published phases until a green one arrives.

        Raises TimeoutError if no green phase is received within ``timeout`` seconds.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            if self._messages.receive(remaining) is TrafficLightPhase.GREEN:
                return

    def simulate(self) -> None:
        self._launch(self._cycle_through_phases)

    def _cycle_duration(self) -> float:
        low, high = self._cycle_range
        if isinstance(low, int) and isinstance(high, int):
            return self._rng.randint(low, high)
        return self._rng.uniform(low, high)

    def _cycle_through_phases(self) -> None:
        _log.info(
            "Traffic Light #%d::cycleThroughPhases: thread id = %d",
            self.id,
            threading.get_ident(),
        )
        duration = self._cycle_duration()
        while not self._wait(duration):
            self.toggle()
            duration = self._cycle_duration()