from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from advent_days.errors import NoSolutionError
from advent_days.lib.parsing import input_lines, match_line
from advent_days.models.answer import Answer

DAY = 15
TITLE = "Beacon Exclusion Zone"
DESCRIPTION = """\
Each sensor covers a diamond: every point within the Manhattan distance to its
closest beacon.

Task 1 only needs one row. A sensor at vertical distance d from the row covers
the interval [x - (r - d), x + (r - d)] of it, or nothing when d > r. The
intervals are sorted and merged, their lengths summed, and the beacons already
sitting on the row are subtracted.

Task 2 needs the single uncovered point inside the search square. Scanning four
million rows works but is slow, so instead: the point must sit just outside
several diamonds, so it lies on the lines one step beyond their edges. Those
edges lie on lines y = x + a and y = -x + b; intersecting every such pair (and
the square's own borders) gives a small set of candidates, and the first one no
sensor covers is the answer. The tuning frequency is x * 4000000 + y.

The row and the size of the search square come from the config (`days.15`) so
the puzzle's sample can be run with row 10 and bound 20."""

TUNING_MULTIPLIER = 4_000_000

_SENSOR_PATTERN = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)

Point = tuple[int, int]


class BeaconScanOptions(BaseModel):
    row: int = 2_000_000
    search_bound: int = Field(default=4_000_000, ge=0)

    model_config = ConfigDict(extra="forbid")


OPTIONS = BeaconScanOptions


@dataclass(frozen=True, slots=True)
class Sensor:
    position: Point
    beacon: Point

    @property
    def radius(self) -> int:
        return _distance(self.position, self.beacon)

    def covers(self, point: Point) -> bool:
        return _distance(self.position, point) <= self.radius

    def coverage_at(self, row: int) -> tuple[int, int] | None:
        margin = self.radius - abs(self.position[1] - row)
        if margin < 0:
            return None
        return self.position[0] - margin, self.position[0] + margin


def _distance(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def parse_sensors(puzzle_input: str) -> list[Sensor]:
    sensors: list[Sensor] = []
    for line in input_lines(puzzle_input):
        matched = match_line(_SENSOR_PATTERN, line, what="sensor")
        sx, sy, bx, by = (int(group) for group in matched.groups())
        sensors.append(Sensor(position=(sx, sy), beacon=(bx, by)))
    return sensors


def merge_intervals(intervals: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def excluded_positions(sensors: list[Sensor], row: int) -> int:
    coverage = merge_intervals(
        [interval for sensor in sensors if (interval := sensor.coverage_at(row)) is not None]
    )
    covered = sum(end - start + 1 for start, end in coverage)
    beacons_on_row = {
        sensor.beacon[0]
        for sensor in sensors
        if sensor.beacon[1] == row
        and any(start <= sensor.beacon[0] <= end for start, end in coverage)
    }
    return covered - len(beacons_on_row)


def _candidates(sensors: list[Sensor], bound: int) -> set[Point]:
    # Lines y = x + a and y = -x + b hugging each diamond one step outside it.
    rising: set[int] = set()
    falling: set[int] = set()
    for sensor in sensors:
        (x, y), reach = sensor.position, sensor.radius + 1
        rising.update((y - x + reach, y - x - reach))
        falling.update((y + x + reach, y + x - reach))

    candidates: set[Point] = {(0, 0), (0, bound), (bound, 0), (bound, bound)}
    for a in rising:
        for b in falling:
            if (b - a) % 2 == 0:
                candidates.add(((b - a) // 2, (a + b) // 2))
    for edge in (0, bound):
        for a in rising:
            candidates.update(((edge, edge + a), (edge - a, edge)))
        for b in falling:
            candidates.update(((edge, b - edge), (b - edge, edge)))
    return {(x, y) for x, y in candidates if 0 <= x <= bound and 0 <= y <= bound}


def find_distress_beacon(sensors: list[Sensor], bound: int) -> Point:
    for candidate in sorted(_candidates(sensors, bound)):
        if not any(sensor.covers(candidate) for sensor in sensors):
            return candidate
    raise NoSolutionError(f"every position within 0..{bound} is covered by a sensor")


def task_1(puzzle_input: str, options: BeaconScanOptions) -> Answer:
    count = excluded_positions(parse_sensors(puzzle_input), options.row)
    return Answer(
        value=count,
        summary=f"there are {count} positions where the distress beacon could not be found",
    )


def task_2(puzzle_input: str, options: BeaconScanOptions) -> Answer:
    x, y = find_distress_beacon(parse_sensors(puzzle_input), options.search_bound)
    frequency = x * TUNING_MULTIPLIER + y
    return Answer(
        value=frequency,
        summary=(
            f"the only position where the distress signal can come from is at {(x, y)}, "
            f"its tuning frequency is {frequency}"
        ),
    )
