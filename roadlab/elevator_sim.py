"""Interactive console session driving an elevator."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from roadlab.elevator import Direction, Elevator, ExternalRequest, InternalRequest, Status

_UP_WORDS = frozenset({"u", "U", "up", "Up", "UP"})
_DOWN_WORDS = frozenset({"d", "D", "down", "Down", "DOWN"})


class _EndOfInput(Exception):
    """Raised when the input tokens run out."""


class _Reader:
    """Reads whitespace-separated tokens one at a time."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = iter(tokens)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def parse_direction(text: str) -> Direction | None:
    """Return the direction named by ``text``, or None if it names neither."""
    if text in _UP_WORDS:
        return Direction.UP
    if text in _DOWN_WORDS:
        return Direction.DOWN
    return None


def _run_round(reader: _Reader, elevator: Elevator, out: TextIO) -> None:
    floors = elevator.floors
    out.write("At this moment, the elevator system has a state information as: \n")
    out.write(elevator.status_info())
    out.write("Now let's start. Firstly let's shoot some external requests first!\n")
    out.write(
        "Please give an input: at how many floors the external elevator button is pushed "
        f"(from 1 to {floors}) \n"
    )
    for _ in range(reader.integer()):
        out.write(
            "Please give an input: at which floor the external elevator button is pushed "
            f"(from 1 to {floors}) \n"
        )
        floor = reader.integer()
        out.write("Which button you would press, Up or Down (u/d)? \n")
        direction = parse_direction(reader.word())
        out.write("Thanks for the input! The elevator's stop request list has been updated! \n")
        if direction is not None:
            elevator.handle_external_request(ExternalRequest(floor, direction))

    out.write("The elevator system starts to execute the requests ! \n")
    while elevator.status is not Status.IDLE:
        elevator.open_gate()
        here = elevator.current_level + 1
        if elevator.status is Status.UP:
            out.write(
                f"Please give an input: which floor do you plan to land (from {here} to {floors}); \n"
            )
        else:
            out.write(f"Please give an input: which floor do you plan to land (from 1 to {here}); \n")
        out.write('Or you can type in "-1" request to step out the elevator. \n')
        floor = reader.integer()
        if 1 <= floor <= floors:
            elevator.handle_internal_request(InternalRequest(floor))
        elevator.close_gate()
    out.write("All the external & internal requests have been process!\n\n")


def run(tokens: Iterable[str], out: TextIO | None = None, rounds: int | None = None) -> Elevator:
    """Drive an elevator from input tokens until they run out or ``rounds`` are done."""
    if out is None:
        out = sys.stdout
    reader = _Reader(tokens)
    out.write(
        "Please set elevator system with N floors/levels, where N should a positive integer: \n"
    )
    try:
        floors = reader.integer()
    except _EndOfInput:
        raise ValueError("the number of floors is missing") from None
    if floors < 1:
        raise ValueError("the number of floors must be a positive integer")
    elevator = Elevator(floors, out)
    completed = 0
    try:
        while rounds is None or completed < rounds:
            _run_round(reader, elevator, out)
            completed += 1
    except _EndOfInput:
        pass
    return elevator


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Simulate an elevator from console input.").parse_args(argv)
    try:
        run(_stdin_tokens())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())