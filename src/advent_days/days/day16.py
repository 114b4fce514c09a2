from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines, match_line
from advent_days.models.answer import Answer

logger = logging.getLogger(__name__)

DAY = 16
TITLE = "Proboscidea Volcanium"
DESCRIPTION = """\
Most valves have a flow rate of zero and only matter as corridors, so the graph
is reduced first: a BFS from the start valve and from every working valve gives
the travel time between every pair of valves worth opening.

On that reduced graph a depth-first search tries every order of opening valves
that fits in the time budget. The working valves are numbered so that a set of
opened valves is an integer bitmask, and for each bitmask the search remembers
the most pressure any order of opening exactly those valves releases.

Task 1 is the best value in that table for 30 minutes.

Task 2 runs the same search for 26 minutes. We and the elephant must open
disjoint sets of valves, and who does which part does not matter, so the answer
is the best sum over two non-overlapping bitmasks. Sorting the table by value
lets the pairing stop early once no remaining pair can beat the best sum."""

START_VALVE = "AA"
SOLO_MINUTES = 30
TEAM_MINUTES = 26
UNREACHABLE = 10**9

_VALVE_PATTERN = re.compile(
    r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? (.+)"
)


@dataclass(frozen=True, slots=True)
class Valve:
    name: str
    flow_rate: int
    tunnels: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ValveNetwork:
    """Working valves only, with travel times between them."""

    names: tuple[str, ...]
    flow_rates: tuple[int, ...]
    # distances[i][j]; index len(names) is the start valve.
    distances: tuple[tuple[int, ...], ...]

    @property
    def start(self) -> int:
        return len(self.names)


def parse_valves(puzzle_input: str) -> dict[str, Valve]:
    valves: dict[str, Valve] = {}
    for line in input_lines(puzzle_input):
        matched = match_line(_VALVE_PATTERN, line, what="valve")
        name = matched.group(1)
        tunnels = tuple(tunnel.strip() for tunnel in matched.group(3).split(","))
        valves[name] = Valve(name=name, flow_rate=int(matched.group(2)), tunnels=tunnels)

    if START_VALVE not in valves:
        raise PuzzleParseError(f"scan has no valve {START_VALVE}")
    for valve in valves.values():
        for tunnel in valve.tunnels:
            if tunnel not in valves:
                raise PuzzleParseError(f"valve {valve.name} leads to unknown valve {tunnel}")
    return valves


def _travel_times(valves: dict[str, Valve], origin: str) -> dict[str, int]:
    times = {origin: 0}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for tunnel in valves[current].tunnels:
            if tunnel not in times:
                times[tunnel] = times[current] + 1
                queue.append(tunnel)
    return times


def build_network(valves: dict[str, Valve]) -> ValveNetwork:
    working = sorted(name for name, valve in valves.items() if valve.flow_rate > 0)
    nodes = [*working, START_VALVE]

    distances: list[tuple[int, ...]] = []
    for origin in nodes:
        times = _travel_times(valves, origin)
        distances.append(tuple(times.get(target, UNREACHABLE) for target in nodes))

    return ValveNetwork(
        names=tuple(working),
        flow_rates=tuple(valves[name].flow_rate for name in working),
        distances=tuple(distances),
    )


def best_release_by_opened(network: ValveNetwork, minutes: int) -> dict[int, int]:
    """Map every reachable set of opened valves (as a bitmask) to its best release."""
    best: dict[int, int] = {}

    def visit(position: int, time_left: int, opened: int, released: int) -> None:
        if best.get(opened, -1) < released:
            best[opened] = released
        for index, flow_rate in enumerate(network.flow_rates):
            bit = 1 << index
            if opened & bit:
                continue
            remaining = time_left - network.distances[position][index] - 1
            if remaining <= 0:
                continue
            visit(index, remaining, opened | bit, released + remaining * flow_rate)

    visit(network.start, minutes, 0, 0)
    logger.debug("Explored %d valve combinations in %d minutes", len(best), minutes)
    return best


def best_disjoint_pair(best: dict[int, int]) -> int:
    ranked = sorted(best.items(), key=lambda item: item[1], reverse=True)
    result = 0
    for index, (mine, my_release) in enumerate(ranked):
        if my_release * 2 <= result:
            break
        for theirs, their_release in ranked[index:]:
            if my_release + their_release <= result:
                break
            if mine & theirs == 0:
                result = my_release + their_release
    return result


def task_1(puzzle_input: str) -> Answer:
    network = build_network(parse_valves(puzzle_input))
    released = max(best_release_by_opened(network, SOLO_MINUTES).values())
    return Answer(
        value=released,
        summary=f"the maximum amount of pressure we can release is {released}",
    )


def task_2(puzzle_input: str) -> Answer:
    network = build_network(parse_valves(puzzle_input))
    released = best_disjoint_pair(best_release_by_opened(network, TEAM_MINUTES))
    return Answer(
        value=released,
        summary=f"the maximum pressure we can release together with an elephant is {released}",
    )
