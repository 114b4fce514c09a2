from __future__ import annotations

import pytest
from pydantic import ValidationError

from advent_days.days.day15 import (
    BeaconScanOptions,
    Sensor,
    find_distress_beacon,
    merge_intervals,
    parse_sensors,
    task_1,
    task_2,
)
from advent_days.errors import NoSolutionError

SAMPLE = """\
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""
SAMPLE_OPTIONS = BeaconScanOptions(row=10, search_bound=20)


def test_default_options() -> None:
    options = BeaconScanOptions()

    assert options.row == 2_000_000
    assert options.search_bound == 4_000_000


def test_options_reject_negative_bound() -> None:
    with pytest.raises(ValidationError):
        BeaconScanOptions(search_bound=-5)


def test_sensor_coverage() -> None:
    sensor = Sensor(position=(8, 7), beacon=(2, 10))

    assert sensor.radius == 9
    assert sensor.coverage_at(10) == (2, 14)
    assert sensor.coverage_at(16) == (8, 8)
    assert sensor.coverage_at(17) is None
    assert sensor.covers((8, 16))


def test_merge_intervals() -> None:
    assert merge_intervals([(5, 8), (0, 3), (4, 4), (10, 12)]) == [(0, 8), (10, 12)]


def test_sample() -> None:
    assert task_1(SAMPLE, SAMPLE_OPTIONS).value == 26
    assert task_2(SAMPLE, SAMPLE_OPTIONS).value == 56000011


def test_distress_beacon_position() -> None:
    assert find_distress_beacon(parse_sensors(SAMPLE), 20) == (14, 11)


def test_fully_covered_area() -> None:
    sensors = [Sensor(position=(5, 5), beacon=(5, 15))]

    with pytest.raises(NoSolutionError):
        find_distress_beacon(sensors, 5)
