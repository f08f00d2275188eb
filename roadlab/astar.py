"""A* search over occupancy boards."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, MutableSequence, Sequence

from roadlab.board import State, read_board_file

# Neighbour offsets: up, left, down, right.
_DELTAS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


class _Cell(Enum):
    """Cell states used while searching."""

    EMPTY = 0
    OBSTACLE = 1
    CLOSED = 2
    PATH = 3
    START = 4
    FINISH = 5


_FROM_BOARD = {State.EMPTY: _Cell.EMPTY, State.OBSTACLE: _Cell.OBSTACLE}

_SYMBOLS = {
    _Cell.OBSTACLE: "⛰   ",
    _Cell.PATH: "🚗   ",
    _Cell.START: "🚦   ",
    _Cell.FINISH: "🏁   ",
}

Grid = MutableSequence[MutableSequence["_Cell | State"]]


class NoPathFound(Exception):
    """Raised when the open list runs out before the goal is reached."""

    def __init__(self, message: str = "No path found!") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Node:
    """An open-list entry: position, cost so far and heuristic estimate."""

    x: int
    y: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


def heuristic(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two cells."""
    return abs(x2 - x1) + abs(y2 - y1)


def compare(a: Node, b: Node) -> bool:
    """Return True when ``a`` has a larger f value than ``b``."""
    return a.f > b.f


def cell_sort(open_list: list[Node]) -> None:
    """Sort the open list in place by descending f value."""
    open_list.sort(key=lambda node: node.f, reverse=True)


def _is_empty(cell: _Cell | State) -> bool:
    return cell is _Cell.EMPTY or cell is State.EMPTY


def check_valid_cell(x: int, y: int, grid: Sequence[Sequence[_Cell | State]]) -> bool:
    """Return True if ``(x, y)`` is on the grid and still empty."""
    if not grid:
        return False
    if not (0 <= x < len(grid) and 0 <= y < len(grid[0])):
        return False
    row = grid[x]
    return y < len(row) and _is_empty(row[y])


def add_to_open(x: int, y: int, g: int, h: int, open_list: list[Node], grid: Grid) -> None:
    """Append a node to the open list and mark its cell closed."""
    open_list.append(Node(x, y, g, h))
    grid[x][y] = _Cell.CLOSED


def _neighbours(x: int, y: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _DELTAS:
        yield x + dx, y + dy


def expand_neighbors(current: Node, goal: Sequence[int], open_list: list[Node], grid: Grid) -> None:
    """Add every valid neighbour of ``current`` to the open list."""
    goal_x, goal_y = goal
    for x2, y2 in _neighbours(current.x, current.y):
        if check_valid_cell(x2, y2, grid):
            add_to_open(x2, y2, current.g + 1, heuristic(x2, y2, goal_x, goal_y), open_list, grid)


def _to_search_grid(grid: Sequence[Sequence[_Cell | State]]) -> list[list[_Cell]]:
    return [[_FROM_BOARD.get(cell, cell) for cell in row] for row in grid]  # type: ignore[arg-type]


def search(
    grid: Sequence[Sequence[_Cell | State]], init: Sequence[int], goal: Sequence[int]
) -> list[list[_Cell]]:
    """Run A* from ``init`` to ``goal`` and return the marked grid.

    The given grid is left untouched. Raises NoPathFound if the goal cannot be reached.
    """
    work = _to_search_grid(grid)
    init_x, init_y = init
    goal_x, goal_y = goal
    if not (0 <= init_x < len(work) and 0 <= init_y < len(work[init_x])):
        raise ValueError(f"start {tuple(init)} is not on the grid")

    open_list: list[Node] = []
    add_to_open(init_x, init_y, 0, heuristic(init_x, init_y, goal_x, goal_y), open_list, work)

    while open_list:
        cell_sort(open_list)
        current = open_list.pop()
        work[current.x][current.y] = _Cell.PATH
        if (current.x, current.y) == (goal_x, goal_y):
            work[init_x][init_y] = _Cell.START
            work[goal_x][goal_y] = _Cell.FINISH
            return work
        expand_neighbors(current, (goal_x, goal_y), open_list, work)

    raise NoPathFound()


def _cell_string(cell: _Cell) -> str:
    return _SYMBOLS.get(cell, "0   ")


def _format_solution(solution: Sequence[Sequence[_Cell]]) -> str:
    return "".join("".join(_cell_string(cell) for cell in row) + "\n" for row in solution)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a path across a board with A*.")
    parser.add_argument("path", nargs="?", default="1.board", help="board file to read")
    parser.add_argument("--init", nargs=2, type=int, default=[0, 0], metavar=("X", "Y"))
    parser.add_argument("--goal", nargs=2, type=int, default=[4, 5], metavar=("X", "Y"))
    args = parser.parse_args(argv)

    board = read_board_file(Path(args.path))
    try:
        solution = search(board, args.init, args.goal)
    except (NoPathFound, ValueError) as exc:
        print(exc if isinstance(exc, NoPathFound) else "No path found!")
        solution = []
    sys.stdout.write(_format_solution(solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())