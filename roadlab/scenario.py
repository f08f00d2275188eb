"""City layouts for the traffic simulation and a console runner."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Sequence

from roadlab.intersection import Intersection
from roadlab.street import Street
from roadlab.traffic_object import TrafficObject
from roadlab.vehicle import Vehicle


@dataclass
class Scenario:
    """A set of connected intersections, streets and vehicles over a city map."""

    background: str
    intersections: list[Intersection] = field(default_factory=list)
    streets: list[Street] = field(default_factory=list)
    vehicles: list[Vehicle] = field(default_factory=list)

    def start(self) -> None:
        """Start the intersections, then the vehicles."""
        for intersection in self.intersections:
            intersection.simulate()
        for vehicle in self.vehicles:
            vehicle.simulate()

    def stop(self) -> None:
        """Stop every object and wait for all their threads to end."""
        objects = self.traffic_objects()
        for obj in objects:
            obj.stop()
        for obj in objects:
            obj.join()

    def traffic_objects(self) -> list[TrafficObject]:
        """Intersections followed by vehicles: everything that is drawn."""
        return [*self.intersections, *self.vehicles]

    def __enter__(self) -> Scenario:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def _check_count(n_vehicles: int, limit: int) -> None:
    if not 0 <= n_vehicles <= limit:
        raise ValueError(f"number of vehicles must be between 0 and {limit}")


def create_paris(n_vehicles: int = 5) -> Scenario:
    """Eight streets leading from the outskirts to a central plaza."""
    _check_count(n_vehicles, 8)
    scenario = Scenario(background="../data/paris.jpg")
    scenario.intersections = [Intersection() for _ in range(9)]
    positions = [
        (385, 270), (1240, 80), (1625, 75), (2110, 75), (2840, 175),
        (3070, 680), (2800, 1400), (400, 1100), (1700, 900),
    ]
    for intersection, (x, y) in zip(scenario.intersections, positions):
        intersection.set_position(x, y)

    plaza = scenario.intersections[8]
    for outer in scenario.intersections[:8]:
        street = Street()
        street.set_in_intersection(outer)
        street.set_out_intersection(plaza)
        scenario.streets.append(street)

    for street in scenario.streets[:n_vehicles]:
        vehicle = Vehicle()
        vehicle.set_current_street(street)
        vehicle.set_current_destination(plaza)
        scenario.vehicles.append(vehicle)
    return scenario


def create_nyc(n_vehicles: int = 5) -> Scenario:
    """A ring of six intersections with one cross street."""
    _check_count(n_vehicles, 6)
    scenario = Scenario(background="../data/nyc.jpg")
    scenario.intersections = [Intersection() for _ in range(6)]
    positions = [(1430, 625), (2575, 1260), (2200, 1950), (1000, 1350), (400, 1000), (750, 250)]
    for intersection, (x, y) in zip(scenario.intersections, positions):
        intersection.set_position(x, y)

    links = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (0, 3)]
    for start, end in links:
        street = Street()
        street.set_in_intersection(scenario.intersections[start])
        street.set_out_intersection(scenario.intersections[end])
        scenario.streets.append(street)

    for street, destination in zip(scenario.streets[:n_vehicles], scenario.intersections):
        vehicle = Vehicle()
        vehicle.set_current_street(street)
        vehicle.set_current_destination(destination)
        scenario.vehicles.append(vehicle)
    return scenario


_CITIES = {"paris": create_paris, "nyc": create_nyc}


def _describe(obj: TrafficObject) -> str:
    x, y = obj.position
    text = f"{obj.object_type.name.lower()} #{obj.id}: ({x:.1f}, {y:.1f})"
    if isinstance(obj, Intersection):
        text += " green" if obj.traffic_light_is_green() else " red"
    return text


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the concurrent traffic simulation.")
    parser.add_argument("--city", choices=sorted(_CITIES), default="paris")
    parser.add_argument("--vehicles", type=int, default=5)
    parser.add_argument("--duration", type=float, default=10.0, help="seconds to run")
    parser.add_argument("--verbose", action="store_true", help="log thread activity")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    try:
        scenario = _CITIES[args.city](args.vehicles)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    with scenario:
        try:
            time.sleep(max(0.0, args.duration))
        except KeyboardInterrupt:
            pass
        for obj in scenario.traffic_objects():
            print(_describe(obj))
    return 0


if __name__ == "__main__":
    sys.exit(main())