"""Cars, enumerations and a small fleet demonstration."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Sequence, TextIO

DEFAULT_COLORS = ("red", "blue", "green")


class Color(Enum):
    WHITE = "white"
    BLACK = "black"
    BLUE = "blue"
    RED = "red"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def direction_message(direction: Direction) -> str:
    """Return the announcement for moving in ``direction``."""
    return f"Going {direction.value}!"


class Car:
    """A numbered, coloured car that tracks how far it has travelled."""

    def __init__(self, color: str | None = None, number: int | None = None) -> None:
        self.color = color
        self.number = number
        self.distance = 0

    def increment_distance(self) -> None:
        self.distance += 1

    def describe(self) -> str:
        return (
            f"The distance that the {self.color} car {self.number} "
            f"has traveled is: {self.distance}"
        )

    def print_car_data(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write(self.describe() + "\n")


class Sedan(Car):
    def __init__(self, color: str, number: int, brand: str, model: str, trim: str) -> None:
        super().__init__(color, number)
        self.brand = brand
        self.model = model
        self.trim = trim


class Truck(Car):
    """A truck; it is given no colour or number."""

    def __init__(self, brand: str, model: str, trim: str) -> None:
        super().__init__()
        self.brand = brand
        self.model = model
        self.trim = trim


def make_fleet(count: int = 100, colors: Sequence[str] = DEFAULT_COLORS) -> list[Car]:
    """Create ``count`` cars numbered from 1, cycling through ``colors``."""
    if not colors:
        raise ValueError("at least one colour is required")
    if count < 0:
        raise ValueError("count must not be negative")
    return [Car(colors[i % len(colors)], i + 1) for i in range(count)]


def _enum_demo(out: TextIO) -> None:
    my_color = Color.BLUE
    if my_color is Color.RED:
        out.write("The color of my car is red!\n")
    else:
        out.write("The color of my car is not red.\n")
    out.write(direction_message(Direction.UP) + "\n")


def _inheritance_demo(out: TextIO) -> None:
    cars = [Car("green", 1), Car("red", 2), Car("blue", 3)]
    for _ in (Sedan("gray", 1, "BMW", "3-Series", "330i-xdrive"),
              Sedan("blue", 2, "Mercedes", "C-class", "C300")):
        out.write("Sedan Initialzied Successfully!\n")
    Truck("Ford", "F-150", "Rapters")
    out.write("Truck Initialized Successfully!\n")
    cars[0].increment_distance()
    for car in cars:
        car.print_car_data(out)


def _fleet_demo(out: TextIO) -> None:
    fleet = make_fleet()
    for car in fleet:
        car.increment_distance()
    for car in fleet:
        car.print_car_data(out)


_DEMOS = {"enum": _enum_demo, "inheritance": _inheritance_demo, "fleet": _fleet_demo}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Car demonstrations.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), default="inheritance")
    args = parser.parse_args(argv)
    _DEMOS[args.demo](sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())