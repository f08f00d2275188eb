"""Base class shared by every object taking part in the traffic simulation."""

from __future__ import annotations

import itertools
import threading
from enum import Enum
from typing import Any, Callable


class ObjectType(Enum):
    """Kind of a traffic object."""

    NO_OBJECT = 0
    VEHICLE = 1
    INTERSECTION = 2
    STREET = 3


class TrafficObject:
    """An identified, positioned object that may run background threads."""

    object_type = ObjectType.NO_OBJECT

    _ids = itertools.count()
    _id_lock = threading.Lock()

    def __init__(self) -> None:
        with TrafficObject._id_lock:
            self.id = next(TrafficObject._ids)
        self._position = (0.0, 0.0)
        self._threads: list[threading.Thread] = []
        self._stop_event = threading.Event()

    @property
    def position(self) -> tuple[float, float]:
        """Position in pixel coordinates."""
        return self._position

    def set_position(self, x: float, y: float) -> None:
        self._position = (float(x), float(y))

    @property
    def threads(self) -> tuple[threading.Thread, ...]:
        """Threads launched by this object."""
        return tuple(self._threads)

    @property
    def stopped(self) -> bool:
        """True once a stop has been requested."""
        return self._stop_event.is_set()

    def simulate(self) -> None:
        """Start the object's background work; the base object has none."""

    def stop(self) -> None:
        """Ask every background loop of this object to finish."""
        self._stop_event.set()

    def join(self) -> None:
        """Wait for every thread launched by this object to finish."""
        current = threading.current_thread()
        for thread in list(self._threads):
            if thread is not current:
                thread.join()

    def _launch(self, target: Callable[..., Any], *args: Any) -> threading.Thread:
        thread = threading.Thread(
            target=target,
            args=args,
            name=f"{type(self).__name__}-{self.id}",
            daemon=True,
        )
        self._threads.append(thread)
        thread.start()
        return thread

    def _wait(self, seconds: float | None) -> bool:
        """Sleep up to ``seconds``; return True if a stop was requested."""
        return self._stop_event.wait(seconds)