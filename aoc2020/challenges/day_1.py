"""Day 1: Report Repair."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..challenge import Example, challenge
from ..inputs import Lines

TARGET = 2020

EXAMPLE = """
1721
979
366
299
675
1456
"""


def _entry(line: str) -> int:
    try:
        return int(line)
    except ValueError as exc:
        raise ValueError(f"Expected an integer expense entry, found {line!r}") from exc


def find_pair(entries: Sequence[int], target: int = TARGET) -> Tuple[int, int]:
    """Two entries (at different positions) summing to ``target``."""
    seen = set()
    for value in entries:
        if target - value in seen:
            return target - value, value
        seen.add(value)
    raise ValueError(f"No two entries sum to {target}")


def find_triple(entries: Sequence[int], target: int = TARGET) -> Tuple[int, int, int]:
    values = sorted(entries)
    n = len(values)
    for i in range(n - 2):
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = values[i] + values[lo] + values[hi]
            if total == target:
                return values[i], values[lo], values[hi]
            if total < target:
                lo += 1
            else:
                hi -= 1
    raise ValueError(f"No three entries sum to {target}")


@challenge(parse=Lines.of(_entry), examples=[Example(EXAMPLE, "514579")])
def part_1(entries: Lines[int]) -> int:
    """Day 1a: Report Repair

    # Description

    Before you leave, the Elves in accounting just need you to fix your expense
    report (your puzzle input); apparently, something isn't quite adding up.

    Specifically, they need you to find the two entries that sum to 2020 and
    then multiply those two numbers together.

    Of course, your expense report is much larger. Find the two entries that
    sum to 2020; what do you get if you multiply them together?
    """
    a, b = find_pair(entries.items)
    return a * b


@challenge(parse=Lines.of(_entry), examples=[Example(EXAMPLE, "241861950")])
def part_2(entries: Lines[int]) -> int:
    """Day 1b: Report Repair

    # Description

    The Elves in accounting are thankful for your help; one of them even offers
    you a starfish coin they had left over from a past vacation. They offer you
    a second one if you can find three numbers in your expense report that meet
    the same criteria.

    In your expense report, what is the product of the three entries that sum
    to 2020?
    """
    a, b, c = find_triple(entries.items)
    return a * b * c
