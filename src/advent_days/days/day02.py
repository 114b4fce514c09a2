from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines
from advent_days.models.answer import Answer

DAY = 2
TITLE = "Rock Paper Scissors"
DESCRIPTION = """\
Each hand is an IntEnum whose value doubles as the shape score (rock 1, paper 2,
scissors 3). A round is scored as the shape we played plus 0, 3 or 6 for a loss,
draw or win.

Task 1 reads the second column as the hand we play. Task 2 reads it as the
outcome we need and derives our hand from the opponent's: the hand that beats
theirs, the same hand, or the hand theirs beats."""


class Hand(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beats(self) -> Hand:
        return _BEATS[self]

    def beaten_by(self) -> Hand:
        return _BEATEN_BY[self]


_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK, Hand.SCISSORS: Hand.PAPER}
_BEATEN_BY = {beaten: winner for winner, beaten in _BEATS.items()}

_THEIR_HANDS = {"A": Hand.ROCK, "B": Hand.PAPER, "C": Hand.SCISSORS}
_OUR_HANDS = {"X": Hand.ROCK, "Y": Hand.PAPER, "Z": Hand.SCISSORS}

LOSS_SCORE = 0
DRAW_SCORE = 3
WIN_SCORE = 6


@dataclass(frozen=True, slots=True)
class Round:
    ours: Hand
    theirs: Hand

    def score(self) -> int:
        if self.ours == self.theirs:
            outcome = DRAW_SCORE
        elif self.ours.beats() == self.theirs:
            outcome = WIN_SCORE
        else:
            outcome = LOSS_SCORE
        return int(self.ours) + outcome


def _split_line(line: str) -> tuple[str, str]:
    parts = line.split()
    if len(parts) != 2 or parts[0] not in _THEIR_HANDS or parts[1] not in _OUR_HANDS:
        raise PuzzleParseError(f"invalid strategy line: {line!r}")
    return parts[0], parts[1]


def _round_from_hands(line: str) -> Round:
    theirs, ours = _split_line(line)
    return Round(ours=_OUR_HANDS[ours], theirs=_THEIR_HANDS[theirs])


def _round_from_outcome(line: str) -> Round:
    theirs_code, outcome = _split_line(line)
    theirs = _THEIR_HANDS[theirs_code]
    if outcome == "X":
        ours = theirs.beats()
    elif outcome == "Y":
        ours = theirs
    else:
        ours = theirs.beaten_by()
    return Round(ours=ours, theirs=theirs)


def task_1(puzzle_input: str) -> Answer:
    total = sum(_round_from_hands(line).score() for line in input_lines(puzzle_input))
    return Answer(value=total, summary=f"total score: {total}")


def task_2(puzzle_input: str) -> Answer:
    total = sum(_round_from_outcome(line).score() for line in input_lines(puzzle_input))
    return Answer(value=total, summary=f"total score: {total}")
