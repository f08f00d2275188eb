"""Reading, parsing and printing of comma-separated occupancy boards."""

from __future__ import annotations

import argparse
import re
import sys
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence, TextIO

_INT = re.compile(r"\s*([+-]?\d+)")
_CHAR = re.compile(r"\s*(\S)")


class State(Enum):
    """Contents of a single board cell."""

    EMPTY = 0
    OBSTACLE = 1


class _ExtractionFailed(Exception):
    """Raised when the next token cannot be extracted."""


class _Extractor:
    """Whitespace-skipping token reader over a string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str]) -> str:
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise _ExtractionFailed
        self._pos = match.end()
        return match.group(1)

    def read_int(self) -> int:
        return int(self._take(_INT))

    def read_char(self) -> str:
        return self._take(_CHAR)


def stream_ints(text: str) -> Iterator[int]:
    """Yield integers from ``text`` until one can no longer be read."""
    reader = _Extractor(text)
    while True:
        try:
            value = reader.read_int()
        except _ExtractionFailed:
            return
        yield value


def stream_int_char_pairs(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(int, char)`` pairs until a complete pair can no longer be read."""
    reader = _Extractor(text)
    while True:
        try:
            number = reader.read_int()
            char = reader.read_char()
        except _ExtractionFailed:
            return
        yield number, char


def _comma_terminated(line: str) -> Iterator[int]:
    for number, char in stream_int_char_pairs(line):
        if char != ",":
            return
        yield number


def parse_int_line(line: str) -> list[int]:
    """Parse a line such as ``"0,1,0,"`` into its integers."""
    return list(_comma_terminated(line))


_STATE_OF = {0: State.EMPTY, 1: State.OBSTACLE}


def parse_line(line: str) -> list[State]:
    """Parse a line into cell states; values other than 0 and 1 are skipped."""
    return [_STATE_OF[n] for n in _comma_terminated(line) if n in _STATE_OF]


def _read_lines(path: str | Path) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError:
        return []


def read_int_board_file(path: str | Path) -> list[list[int]]:
    """Read a board file as rows of integers; an unreadable file gives no rows."""
    return [parse_int_line(line) for line in _read_lines(path)]


def read_board_file(path: str | Path) -> list[list[State]]:
    """Read a board file as rows of states; an unreadable file gives no rows."""
    return [parse_line(line) for line in _read_lines(path)]


def cell_string(cell: State) -> str:
    """Return the printed form of a cell."""
    if cell is State.OBSTACLE:
        return "⛰   "
    return "0   "


def _format_cell(cell: State | int) -> str:
    if isinstance(cell, State):
        return cell_string(cell)
    return str(cell)


def format_board(board: Sequence[Sequence[State | int]]) -> str:
    """Render a board of states or integers, one line per row."""
    return "".join("".join(_format_cell(cell) for cell in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[State | int]], out: TextIO | None = None) -> None:
    """Write a rendered board to ``out`` (standard output by default)."""
    (out or sys.stdout).write(format_board(board))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a board file.")
    parser.add_argument("path", nargs="?", default="1.board", help="board file to read")
    parser.add_argument("--ints", action="store_true", help="print raw integers")
    args = parser.parse_args(argv)
    board = read_int_board_file(args.path) if args.ints else read_board_file(args.path)
    print_board(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())