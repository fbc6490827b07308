"""Day 5: Binary Boarding.

A boarding pass like ``FBFBBFFRLR`` is binary space partitioning over
128 rows (F = lower half, B = upper half) followed by 8 columns (L/R).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..challenge import Example, challenge
from ..inputs import Lines

ROW_BITS = 7
COLUMN_BITS = 3

EXAMPLE = """
BFFFBBFRRR
FFFBBBFRRR
BBFFBBFRLL
"""

# Seats 4, 5, 7 and 8; the missing id 6 sits between 5 and 7.
EXAMPLE_GAP = """
FFFFFFFRLL
FFFFFFBLLL
FFFFFFFRRR
FFFFFFFRLR
"""


@dataclass(frozen=True)
class Seat:
    row: int
    column: int

    @property
    def id(self) -> int:
        return self.row * 8 + self.column


def partition(upper: Sequence[bool], start: int, end: int) -> int:
    """Narrow ``[start, end)`` by halves; ``True`` keeps the upper half."""
    for take_upper in upper:
        mid = (start + end) // 2
        if take_upper:
            start = mid
        else:
            end = mid
    return start


def _halves(text: str, lower: str, upper: str) -> Tuple[bool, ...]:
    out = []
    for ch in text:
        if ch == lower:
            out.append(False)
        elif ch == upper:
            out.append(True)
        else:
            raise ValueError(f'Expected "{lower}" or "{upper}", found "{ch}"')
    return tuple(out)


@dataclass(frozen=True)
class BoardingPass:
    rows: Tuple[bool, ...]
    columns: Tuple[bool, ...]

    @classmethod
    def parse(cls, text: str) -> "BoardingPass":
        text = text.strip()
        if len(text) != ROW_BITS + COLUMN_BITS:
            raise ValueError(
                f"A boarding pass has {ROW_BITS + COLUMN_BITS} characters, found {len(text)} in {text!r}"
            )
        return cls(
            rows=_halves(text[:ROW_BITS], "F", "B"),
            columns=_halves(text[ROW_BITS:], "L", "R"),
        )

    def location(self) -> Seat:
        return Seat(
            row=partition(self.rows, 0, 1 << ROW_BITS),
            column=partition(self.columns, 0, 1 << COLUMN_BITS),
        )


@challenge(parse=Lines.of(BoardingPass.parse), examples=[Example(EXAMPLE, "820")])
def part_1(passes: Lines[BoardingPass]) -> int:
    """Day 5a: Binary Boarding

    # Description

    Every seat has a unique seat ID: multiply the row by 8, then add the
    column.

    As a sanity check, look through your list of boarding passes. What is the
    highest seat ID on a boarding pass?
    """
    if not len(passes):
        raise ValueError("No boarding passes provided")
    return max(p.location().id for p in passes)


@challenge(parse=Lines.of(BoardingPass.parse), examples=[Example(EXAMPLE_GAP, "6")])
def part_2(passes: Lines[BoardingPass]) -> int:
    """Day 5b: Binary Boarding

    # Description

    It's a completely full flight, so your seat should be the only missing
    boarding pass in your list. Some of the seats at the very front and back
    of the plane don't exist on this aircraft, so they'll be missing from
    your list as well. Your seat wasn't at the very front or back, though;
    the seats with IDs +1 and -1 from yours will be in your list.

    What is the ID of your seat?
    """
    ids = sorted(p.location().id for p in passes)
    for first, second in zip(ids, ids[1:]):
        if second != first + 1:
            return first + 1
    raise ValueError("Unable to find the seat number")
