"""One-way streets connecting two intersections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roadlab.traffic_object import ObjectType, TrafficObject

if TYPE_CHECKING:
    from roadlab.intersection import Intersection


class Street(TrafficObject):
    """A street of ``length`` metres running from its in- to its out-intersection."""

    object_type = ObjectType.STREET

    def __init__(self, length: float = 1000.0) -> None:
        super().__init__()
        if length <= 0:
            raise ValueError("street length must be positive")
        self.length = float(length)
        self.in_intersection: Intersection | None = None
        self.out_intersection: Intersection | None = None

    def set_in_intersection(self, intersection: Intersection) -> None:
        self.in_intersection = intersection
        intersection.add_street(self)

    def set_out_intersection(self, intersection: Intersection) -> None:
        self.out_intersection = intersection
        intersection.add_street(self)