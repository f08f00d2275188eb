"""Intersections that admit waiting vehicles one at a time."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING, Any

from roadlab.traffic_light import TrafficLight, TrafficLightPhase
from roadlab.traffic_object import ObjectType, TrafficObject

if TYPE_CHECKING:
    from roadlab.street import Street

_log = logging.getLogger(__name__)

_POLL_SECONDS = 0.05
_QUEUE_SECONDS = 0.001


class WaitingVehicles:
    """A thread-safe first-in, first-out line of vehicles awaiting entry."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: deque[tuple[Any, threading.Event]] = deque()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def push_back(self, vehicle: Any) -> threading.Event:
        """Queue ``vehicle``; the returned event is set once entry is permitted."""
        permitted = threading.Event()
        with self._lock:
            self._entries.append((vehicle, permitted))
        return permitted

    def permit_entry_to_first_in_queue(self) -> Any:
        """Let the longest-waiting vehicle enter and return it."""
        with self._lock:
            if not self._entries:
                raise IndexError("no vehicle is waiting")
            vehicle, permitted = self._entries.popleft()
        permitted.set()
        return vehicle


class Intersection(TrafficObject):
    """A junction of streets guarded by a traffic light."""

    object_type = ObjectType.INTERSECTION

    def __init__(self, traffic_light: TrafficLight | None = None) -> None:
        super().__init__()
        self.traffic_light = traffic_light if traffic_light is not None else TrafficLight()
        self.streets: list[Street] = []
        self.waiting_vehicles = WaitingVehicles()
        self.is_blocked = False

    def add_street(self, street: Street) -> None:
        self.streets.append(street)

    def query_streets(self, incoming: Street) -> list[Street]:
        """Return every connected street except ``incoming``."""
        return [street for street in self.streets if street.id != incoming.id]

    def add_vehicle_to_queue(self, vehicle: Any) -> bool:
        """Block until ``vehicle`` may enter and the light is green.

        Returns True on entry, False if the intersection was stopped meanwhile.
        """
        _log.info(
            "Intersection #%d::addVehicleToQueue: thread id = %d",
            self.id,
            threading.get_ident(),
        )
        permitted = self.waiting_vehicles.push_back(vehicle)
        while not permitted.wait(_POLL_SECONDS):
            if self.stopped:
                return False
        _log.info("Intersection #%d: Vehicle #%d is granted entry.", self.id, vehicle.id)

        if self.traffic_light.current_phase is TrafficLightPhase.RED:
            while True:
                try:
                    self.traffic_light.wait_for_green(timeout=_POLL_SECONDS)
                    break
                except TimeoutError:
                    if self.stopped:
                        return False
        return True

    def vehicle_has_left(self, vehicle: Any) -> None:
        self.is_blocked = False

    def process_waiting_vehicle(self) -> bool:
        """Admit the first waiting vehicle if free; return True if one was admitted."""
        if self.is_blocked or len(self.waiting_vehicles) == 0:
            return False
        self.is_blocked = True
        self.waiting_vehicles.permit_entry_to_first_in_queue()
        return True

    def simulate(self) -> None:
        self.traffic_light.simulate()
        self._launch(self._process_vehicle_queue)

    def _process_vehicle_queue(self) -> None:
        while not self._wait(_QUEUE_SECONDS):
            self.process_waiting_vehicle()

    def stop(self) -> None:
        super().stop()
        self.traffic_light.stop()

    def join(self) -> None:
        super().join()
        self.traffic_light.join()

    def traffic_light_is_green(self) -> bool:
        return self.traffic_light.current_phase is TrafficLightPhase.GREEN