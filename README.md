# roadlab

Small, self-contained building blocks for route planning and traffic
experiments:

- **Boards** (`roadlab.board`): read grid boards from text files and print
  them with one symbol per cell.
- **A\* search** (`roadlab.astar`): find a path across a board from a start
  cell to a goal cell, with a Manhattan-distance heuristic.
- **Elevator** (`roadlab.elevator`, `roadlab.elevator_sim`): an elevator
  controller that collects up and down stop requests and serves them floor
  by floor, plus a console session that drives it.
- **Traffic simulation** (`roadlab.traffic_object`, `roadlab.traffic_light`,
  `roadlab.intersection`, `roadlab.street`, `roadlab.vehicle`,
  `roadlab.scenario`): vehicles drive along streets between intersections.
  Each vehicle, intersection and traffic light runs in its own thread.
- **Cars** (`roadlab.cars`): a small car, sedan and truck model that
  tracks distance travelled, and a few console demonstrations.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Board files

A board is a text file with one row per line. Each cell is an integer
followed by a comma. `0` is an empty cell and `1` is an obstacle; other
numbers are left out of the row. Reading stops at the first value not
followed by a comma.

```
0,1,0,0,0,0,
0,1,0,0,0,0,
0,1,0,0,0,0,
0,1,0,0,0,0,
0,0,0,0,1,0,
```

```python
from roadlab.board import read_board_file, format_board

board = read_board_file("1.board")
print(format_board(board), end="")
```

`parse_line` turns one line into a list of `State` values (`State.EMPTY`,
`State.OBSTACLE`), and `parse_int_line` keeps the raw integers.
`read_int_board_file` reads a whole file as integers. A file that cannot be
opened reads as an empty board. `format_board` and `print_board` accept
boards of either kind; `cell_string` gives the symbol for one cell.

`stream_ints` and `stream_int_char_pairs` are the underlying tokenisers:
they yield integers, or `(int, char)` pairs, from a string until the next
one cannot be read.

## Path search

```python
from roadlab.board import read_board_file
from roadlab.astar import search, NoPathFound

board = read_board_file("1.board")
try:
    solution = search(board, (0, 0), (4, 5))
except NoPathFound:
    print("No path found!")
```

`search` works on a copy of the board and returns a new grid in which the
cells expanded on the way to the goal are marked as path, and the start and
goal cells are marked separately. It raises `NoPathFound` if the goal cannot
be reached and `ValueError` if the start is not on the board.

The steps are available on their own: `heuristic` (Manhattan distance),
`Node` (an open-list entry with `x`, `y`, `g`, `h` and `f`), `compare`,
`cell_sort`, `check_valid_cell`, `add_to_open` and `expand_neighbors`.

The `roadlab-astar` command reads a board file (default `1.board`),
searches from `--init X Y` (default `0 0`) to `--goal X Y` (default `4 5`)
and prints the marked grid, or `No path found!`.

## Elevator

```python
from roadlab.elevator import Elevator, ExternalRequest, InternalRequest, Direction

elevator = Elevator(5)
elevator.handle_external_request(ExternalRequest(3, Direction.UP))
elevator.open_gate()
elevator.handle_internal_request(InternalRequest(5))
elevator.close_gate()
print(elevator.status_info())
```

Floors are numbered from 1; `current_level` is the zero-based index of the
current floor. Every operation writes a report to the stream given as
`out` (standard output by default). `status_info()` and
`request_list_info()` return the controller's state as text, and
`status`, `up_stops` and `down_stops` expose it directly. An external
request for a floor outside the building raises `ValueError`.
`ElevatorButton(level, elevator).press_button()` sends an internal request.

`roadlab.elevator_sim.run(tokens, out=None, rounds=None)` drives an
elevator from a sequence of input words: first the number of floors, then
for each round the number of external calls, each call's floor and
direction (`u`/`up`/`d`/`down` and their capitalised forms), and a
destination floor each time the doors open (`-1` to step out). It stops
when the input runs out or after `rounds` rounds and returns the elevator.

## Traffic simulation

```python
import time
from roadlab.scenario import create_paris

with create_paris(n_vehicles=5) as scenario:
    time.sleep(2)
    for obj in scenario.traffic_objects():
        print(obj.object_type.name, obj.id, obj.position)
```

`create_paris` (up to 8 vehicles) and `create_nyc` (up to 6 vehicles) each
build a `Scenario` of intersections, streets and vehicles. `start()` starts
every object's thread, `stop()` shuts them down and waits for them, and
`traffic_objects()` lists the intersections followed by the vehicles.
Using a scenario as a context manager starts and stops it.

The parts can also be used on their own. A `TrafficLight` toggles between
`TrafficLightPhase.RED` and `GREEN` after random cycle durations (4 to 6
seconds by default) and publishes each change on a `MessageQueue`;
`wait_for_green(timeout)` blocks until a green phase arrives. An
`Intersection` admits queued vehicles one at a time and only on green.
`Vehicle.step(elapsed_ms)` advances a vehicle by hand without threads.

There is no graphical display: `Scenario.background` only names the city
map image, and the `roadlab-traffic` command reports positions as text.

## Commands

| Command            | What it does                                                          |
|--------------------|-----------------------------------------------------------------------|
| `roadlab-board`    | Read a board file (default `1.board`) and print it; `--ints` for raw integers |
| `roadlab-astar`    | Search a board file for a path and print the result                   |
| `roadlab-elevator` | Run an elevator session reading its input from standard input          |
| `roadlab-traffic`  | Run the simulation (`--city paris|nyc`, `--vehicles`, `--duration`, `--verbose`) and print every object's position and each light's colour |
| `roadlab-cars`     | Run a car demonstration: `inheritance` (default), `enum` or `fleet`    |

For example:

```
roadlab-astar 1.board
roadlab-elevator
roadlab-traffic --city nyc --duration 5
```