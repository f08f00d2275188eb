import io

import pytest

from roadlab.elevator import (
    SEPARATOR,
    Direction,
    Elevator,
    ElevatorButton,
    ExternalRequest,
    InternalRequest,
    Request,
    Status,
    format_stops,
)


@pytest.fixture
def out():
    return io.StringIO()


def make(floors, out):
    return Elevator(floors, out)


def test_init_reports_floor_count(out):
    elevator = make(5, out)
    text = out.getvalue()
    assert "An elevator system with 5 floors has been initialized successfully!" in text
    assert text.endswith(SEPARATOR)
    assert elevator.status is Status.IDLE
    assert elevator.current_level == 0
    assert elevator.up_stops == (False,) * 5
    assert elevator.down_stops == (False,) * 5


def test_negative_floors_rejected(out):
    with pytest.raises(ValueError):
        Elevator(-1, out)


def test_format_stops():
    assert format_stops([True, False, True]) == "[ 1, 0, 1 ]"
    assert format_stops([]) == "[ "


def test_request_defaults():
    assert Request().level == 0
    assert InternalRequest().level == 0
    assert ExternalRequest(3, Direction.DOWN).direction is Direction.DOWN


def test_external_up_sets_stop_and_status(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(3, Direction.UP))
    assert elevator.up_stops[3 - 1] is True
    assert elevator.status is Status.UP
    assert "- Up   stop request list: " in out.getvalue()


def test_external_down_with_no_up_requests(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(2, Direction.DOWN))
    assert elevator.down_stops[2 - 1] is True
    assert elevator.status is Status.DOWN


def test_external_up_keeps_down_heading(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(4, Direction.DOWN))
    elevator.handle_external_request(ExternalRequest(2, Direction.UP))
    assert elevator.status is Status.DOWN
    assert elevator.up_stops[2 - 1] is True


def test_external_out_of_range_rejected(out):
    elevator = make(3, out)
    with pytest.raises(ValueError):
        elevator.handle_external_request(ExternalRequest(4, Direction.UP))
    with pytest.raises(ValueError):
        elevator.handle_external_request(ExternalRequest(0, Direction.DOWN))


def test_internal_ignored_when_idle(out):
    elevator = make(4, out)
    elevator.handle_internal_request(InternalRequest(3))
    assert elevator.up_stops == (False, False, False, False)
    assert elevator.down_stops == (False, False, False, False)
    assert elevator.status is Status.IDLE
    assert out.getvalue().endswith(elevator.request_list_info())


def test_open_gate_moves_up_and_clears(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(3, Direction.UP))
    elevator.open_gate()
    assert elevator.current_level + 1 == 3
    assert not any(elevator.up_stops)
    assert "The elevator gate is open ! \n" in out.getvalue()


def test_internal_up_only_above_current(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(3, Direction.UP))
    elevator.open_gate()
    elevator.handle_internal_request(InternalRequest(2))
    assert not any(elevator.up_stops)
    elevator.handle_internal_request(InternalRequest(5))
    assert elevator.up_stops[5 - 1] is True


def test_open_gate_down_searches_downward_with_wrap(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(2, Direction.DOWN))
    elevator.handle_external_request(ExternalRequest(4, Direction.DOWN))
    elevator.open_gate()
    assert elevator.current_level + 1 == 4
    elevator.open_gate()
    assert elevator.current_level + 1 == 2
    assert not any(elevator.down_stops)


def test_internal_down_only_below_current(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(4, Direction.DOWN))
    elevator.open_gate()
    elevator.handle_internal_request(InternalRequest(5))
    assert not any(elevator.down_stops)
    elevator.handle_internal_request(InternalRequest(1))
    assert elevator.down_stops[1 - 1] is True


def test_close_gate_up_to_down_then_idle(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(3, Direction.UP))
    elevator.handle_external_request(ExternalRequest(2, Direction.DOWN))
    elevator.open_gate()
    elevator.close_gate()
    assert elevator.status is Status.DOWN
    elevator.open_gate()
    elevator.close_gate()
    assert elevator.status is Status.IDLE


def test_close_gate_idle_without_down_requests_goes_up_silently(out):
    elevator = make(3, out)
    before = out.getvalue()
    elevator.close_gate()
    added = out.getvalue()[len(before):]
    assert elevator.status is Status.UP
    assert added == "The elevator gate is closed ! \n"


def test_status_info_format(out):
    elevator = make(2, out)
    info = elevator.status_info()
    assert info.startswith("- The elevator is current at floor # 1.\n")
    assert "- The next elevator status will be : IDLE.\n" in info
    assert info.endswith(elevator.request_list_info())


def test_button_press_requests_floor(out):
    elevator = make(5, out)
    elevator.handle_external_request(ExternalRequest(1, Direction.UP))
    button = ElevatorButton(4, elevator)
    elevator.insert_button(button)
    button.press_button()
    assert elevator.buttons == [button]
    assert elevator.up_stops[4 - 1] is True


def test_no_requests(out):
    elevator = make(1, out)
    assert elevator.no_requests([False, False]) is True
    assert elevator.no_requests([False, True]) is False