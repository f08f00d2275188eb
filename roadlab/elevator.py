"""A single elevator serving up and down stop requests."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO

SEPARATOR = (
    "**********************************************************************************************\n"
)


class Status(Enum):
    """Direction the elevator is heading, or idle."""

    UP = 0
    DOWN = 1
    IDLE = 2


class Direction(Enum):
    """Direction asked for by an external call button."""

    UP = 0
    DOWN = 1


@dataclass(frozen=True)
class Request:
    """A request to stop at a floor, numbered from 1."""

    level: int = 0


@dataclass(frozen=True)
class ExternalRequest(Request):
    """A call from a floor's up or down button."""

    direction: Direction = Direction.UP


@dataclass(frozen=True)
class InternalRequest(Request):
    """A floor chosen from inside the car."""


@dataclass
class ElevatorButton:
    """A button inside the car that requests one floor."""

    level: int
    elevator: Elevator

    def press_button(self) -> None:
        self.elevator.handle_internal_request(InternalRequest(self.level))


def format_stops(stops: Sequence[bool]) -> str:
    """Render a stop list as ``[ 1, 0, ... ]``; an empty list renders as ``[ ``."""
    if not stops:
        return "[ "
    return "[ " + ", ".join("1" if stop else "0" for stop in stops) + " ]"


class Elevator:
    """An elevator over ``floors`` floors that reports its state to ``out``."""

    def __init__(self, floors: int, out: TextIO | None = None) -> None:
        if floors < 0:
            raise ValueError("the number of floors must not be negative")
        self.floors = floors
        self.buttons: list[ElevatorButton] = []
        self._out = out
        self._up_stops = [False] * floors
        self._down_stops = [False] * floors
        self._current_level = 0
        self._status = Status.IDLE
        self._write(
            f"An elevator system with {floors} floors has been initialized successfully!\n"
            + SEPARATOR
        )

    @property
    def status(self) -> Status:
        return self._status

    @property
    def current_level(self) -> int:
        """Zero-based index of the floor the elevator is at."""
        return self._current_level

    @property
    def up_stops(self) -> tuple[bool, ...]:
        return tuple(self._up_stops)

    @property
    def down_stops(self) -> tuple[bool, ...]:
        return tuple(self._down_stops)

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def _index(self, level: int) -> int:
        if not 1 <= level <= self.floors:
            raise ValueError(f"floor {level} is outside 1..{self.floors}")
        return level - 1

    def insert_button(self, button: ElevatorButton) -> None:
        self.buttons.append(button)

    def handle_external_request(self, request: ExternalRequest) -> None:
        index = self._index(request.level)
        if request.direction is Direction.UP:
            self._up_stops[index] = True
            if self.no_requests(self._down_stops):
                self._status = Status.UP
        else:
            self._down_stops[index] = True
            if self.no_requests(self._up_stops):
                self._status = Status.DOWN
        self._write(self.request_list_info())

    def handle_internal_request(self, request: InternalRequest) -> None:
        here = self._current_level + 1
        if self._status is Status.UP and request.level >= here:
            self._up_stops[self._index(request.level)] = True
        elif self._status is Status.DOWN and request.level <= here:
            self._down_stops[self._index(request.level)] = True
        self._write(self.request_list_info())

    def open_gate(self) -> None:
        """Move to the next requested stop in the current direction and clear it."""
        self._write("The elevator gate is open ! \n")
        count = self.floors
        current = self._current_level
        if self._status is Status.UP:
            stops = self._up_stops
            order = ((current + i) % count for i in range(count))
        elif self._status is Status.DOWN:
            stops = self._down_stops
            order = ((current + count - i) % count for i in range(count))
        else:
            stops, order = [], iter(())
        for level in order:
            if stops[level]:
                self._current_level = level
                stops[level] = False
                break
        self._write(self.status_info())

    def close_gate(self) -> None:
        """Choose the next heading from the outstanding requests."""
        self._write("The elevator gate is closed ! \n")
        no_up = self.no_requests(self._up_stops)
        no_down = self.no_requests(self._down_stops)
        if self._status is Status.IDLE:
            if no_down:
                self._status = Status.UP
                return
            if no_up:
                self._status = Status.DOWN
                return
        elif self._status is Status.UP:
            if no_up:
                self._status = Status.IDLE if no_down else Status.DOWN
        elif no_down:
            self._status = Status.IDLE if no_up else Status.UP
        self._write(self.status_info())

    def no_requests(self, stops: Sequence[bool]) -> bool:
        return not any(stops)

    def request_list_info(self) -> str:
        return (
            "- Up   stop request list: " + format_stops(self._up_stops) + ".\n"
            "- Down stop request list: " + format_stops(self._down_stops) + ".\n"
            + SEPARATOR
        )

    def status_info(self) -> str:
        return (
            f"- The elevator is current at floor # {self._current_level + 1}.\n"
            f"- The next elevator status will be : {self._status.name}.\n"
            + self.request_list_info()
        )