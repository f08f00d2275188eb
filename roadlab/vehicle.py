"""Vehicles that drive along streets and queue at intersections."""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import TYPE_CHECKING

from roadlab.traffic_object import ObjectType, TrafficObject

if TYPE_CHECKING:
    from roadlab.intersection import Intersection
    from roadlab.street import Street

_log = logging.getLogger(__name__)

_SLEEP_SECONDS = 0.001
_CYCLE_MS = 1
_HALT_COMPLETION = 0.9
_SLOWDOWN = 10.0


class Vehicle(TrafficObject):
    """A vehicle moving at constant speed (m/s) towards its current destination."""

    object_type = ObjectType.VEHICLE

    def __init__(self, speed: float = 400.0, rng: random.Random | None = None) -> None:
        super().__init__()
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.speed = float(speed)
        self._rng = rng if rng is not None else random.Random()
        self.current_street: Street | None = None
        self.current_destination: Intersection | None = None
        self.pos_street = 0.0
        self.has_entered_intersection = False

    def set_current_street(self, street: Street) -> None:
        self.current_street = street

    def set_current_destination(self, destination: Intersection) -> None:
        """Head for ``destination`` from the start of the current street."""
        self.current_destination = destination
        self.pos_street = 0.0

    def _origin(self) -> Intersection:
        street = self.current_street
        destination = self.current_destination
        assert street is not None and destination is not None
        if street.in_intersection is None or street.out_intersection is None:
            raise RuntimeError(f"street #{street.id} is not connected at both ends")
        if destination.id == street.in_intersection.id:
            return street.out_intersection
        return street.in_intersection

    def step(self, elapsed_ms: float) -> float:
        """Advance the vehicle by ``elapsed_ms`` milliseconds and return its completion.

        On nearing the destination this blocks until the intersection admits the
        vehicle. If the intersection is stopped meanwhile, the vehicle stops too.
        """
        if self.current_street is None or self.current_destination is None:
            raise RuntimeError("vehicle has no street or destination")

        self.pos_street += self.speed * elapsed_ms / 1000.0
        completion = self.pos_street / self.current_street.length

        x1, y1 = self._origin().position
        x2, y2 = self.current_destination.position
        self.set_position(x1 + completion * (x2 - x1), y1 + completion * (y2 - y1))

        if completion >= _HALT_COMPLETION and not self.has_entered_intersection:
            if not self.current_destination.add_vehicle_to_queue(self):
                self.stop()
                return completion
            self.speed /= _SLOWDOWN
            self.has_entered_intersection = True

        if completion >= 1.0 and self.has_entered_intersection:
            self._cross_intersection()

        return completion

    def _cross_intersection(self) -> None:
        street = self.current_street
        destination = self.current_destination
        assert street is not None and destination is not None

        options = destination.query_streets(street)
        next_street = self._rng.choice(options) if options else street
        if next_street.in_intersection is None or next_street.out_intersection is None:
            raise RuntimeError(f"street #{next_street.id} is not connected at both ends")
        if next_street.in_intersection.id == destination.id:
            next_intersection = next_street.out_intersection
        else:
            next_intersection = next_street.in_intersection

        destination.vehicle_has_left(self)
        self.set_current_destination(next_intersection)
        self.set_current_street(next_street)
        self.speed *= _SLOWDOWN
        self.has_entered_intersection = False

    def simulate(self) -> None:
        self._launch(self._drive)

    def _drive(self) -> None:
        _log.info("Vehicle #%d::drive: thread id = %d", self.id, threading.get_ident())
        last_update = time.monotonic()
        while not self._wait(_SLEEP_SECONDS):
            elapsed_ms = int((time.monotonic() - last_update) * 1000)
            if elapsed_ms >= _CYCLE_MS:
                self.step(elapsed_ms)
                last_update = time.monotonic()