import random

import pytest

from roadlab.intersection import Intersection
from roadlab.street import Street
from roadlab.traffic_light import TrafficLight
from roadlab.traffic_object import ObjectType
from roadlab.vehicle import Vehicle


def _fast_intersection():
    return Intersection(TrafficLight(cycle_range=(0.01, 0.02), rng=random.Random(1)))


def _connect(start, end, length=1000.0):
    street = Street(length)
    street.set_in_intersection(start)
    street.set_out_intersection(end)
    return street


@pytest.fixture
def running():
    started = []

    def start(*intersections):
        for intersection in intersections:
            intersection.simulate()
            started.append(intersection)

    yield start
    for intersection in started:
        intersection.stop()
    for intersection in started:
        intersection.join()


def test_vehicle_type_and_invalid_speed():
    assert Vehicle().object_type is ObjectType.VEHICLE
    with pytest.raises(ValueError):
        Vehicle(speed=0)


def test_step_without_route_raises():
    with pytest.raises(RuntimeError):
        Vehicle().step(10)


def test_step_advances_and_reports_completion():
    a, b = Intersection(), Intersection()
    a.set_position(0, 0)
    b.set_position(100, 0)
    street = _connect(a, b)
    vehicle = Vehicle(speed=100)
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    completion = vehicle.step(1000)
    assert vehicle.pos_street == pytest.approx(100.0)
    assert completion == pytest.approx(vehicle.pos_street / street.length)
    assert vehicle.has_entered_intersection is False


def test_direction_depends_on_destination():
    a, b = Intersection(), Intersection()
    a.set_position(0, 0)
    b.set_position(100, 0)
    street = _connect(a, b)
    towards_b = Vehicle(speed=100)
    towards_b.set_current_street(street)
    towards_b.set_current_destination(b)
    towards_a = Vehicle(speed=100)
    towards_a.set_current_street(street)
    towards_a.set_current_destination(a)
    towards_b.step(1000)
    towards_a.step(1000)
    xb, yb = towards_b.position
    xa, ya = towards_a.position
    assert yb == ya == 0.0
    assert 0 < xb < 50 < xa < 100
    assert xa + xb == pytest.approx(100.0)


def test_set_current_destination_resets_position_on_street():
    a, b = Intersection(), Intersection()
    street = _connect(a, b)
    vehicle = Vehicle()
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    vehicle.step(500)
    assert vehicle.pos_street > 0
    vehicle.set_current_destination(a)
    assert vehicle.pos_street == 0.0
    assert vehicle.current_destination is a


def test_dead_end_turns_back(running):
    a, b = Intersection(), _fast_intersection()
    street = _connect(a, b)
    running(b)
    vehicle = Vehicle(speed=400)
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    vehicle.step(2500)
    assert vehicle.current_street is street
    assert vehicle.current_destination is a
    assert vehicle.pos_street == 0.0
    assert vehicle.speed == pytest.approx(400)
    assert vehicle.has_entered_intersection is False
    assert b.is_blocked is False


def test_crossing_moves_to_next_street(running):
    a, b, c = Intersection(), _fast_intersection(), Intersection()
    first = _connect(a, b)
    second = _connect(b, c)
    running(b)
    vehicle = Vehicle(speed=400)
    vehicle.set_current_street(first)
    vehicle.set_current_destination(b)
    vehicle.step(2500)
    assert vehicle.current_street is second
    assert vehicle.current_destination is c
    assert vehicle.stopped is False


def test_entry_before_end_slows_down(running):
    a, b = Intersection(), _fast_intersection()
    street = _connect(a, b)
    running(b)
    vehicle = Vehicle(speed=400)
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    completion = vehicle.step(2300)
    assert 0.9 <= completion < 1.0
    assert vehicle.has_entered_intersection is True
    assert vehicle.speed == pytest.approx(400 / 10)
    assert b.is_blocked is True


def test_stopped_intersection_stops_vehicle():
    a, b = Intersection(), Intersection()
    street = _connect(a, b)
    b.stop()
    vehicle = Vehicle(speed=400)
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    vehicle.step(2500)
    assert vehicle.stopped is True
    assert vehicle.has_entered_intersection is False
    assert vehicle.current_street is street


def test_simulate_drives_until_stopped():
    a, b = Intersection(), Intersection()
    street = _connect(a, b, length=100000.0)
    vehicle = Vehicle(speed=400)
    vehicle.set_current_street(street)
    vehicle.set_current_destination(b)
    vehicle.simulate()
    try:
        import time

        time.sleep(0.1)
    finally:
        vehicle.stop()
        vehicle.join()
    assert vehicle.pos_street > 0
    assert len(vehicle.threads) == 1
    assert not any(thread.is_alive() for thread in vehicle.threads)