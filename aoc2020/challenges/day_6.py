"""Day 6: Custom Customs.

Each person's answers become a 26-wide boolean row (one column per question
a-z). A group is then a (people, 26) array, which makes "anyone" and
"everyone" a single ``any``/``all`` reduction along the people axis.
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..challenge import Example, challenge
from ..inputs import GroupedLines

QUESTIONS = 26

EXAMPLE = """
abc

a
b
c

ab
ac

a
a
a
a

b
"""


def parse_response(line: str) -> np.ndarray:
    answers = np.zeros(QUESTIONS, dtype=bool)
    for letter in line.strip():
        if not "a" <= letter <= "z":
            raise ValueError(f"Questions are labelled a-z, found {letter!r}")
        answers[ord(letter) - ord("a")] = True
    return answers


def parse_groups(text: str) -> List[np.ndarray]:
    return [np.stack([parse_response(line) for line in group]) for group in GroupedLines.parse(text)]


def merge_any(group: np.ndarray) -> np.ndarray:
    return np.any(group, axis=0)


def merge_all(group: np.ndarray) -> np.ndarray:
    return np.all(group, axis=0)


@challenge(parse=parse_groups, examples=[Example(EXAMPLE, "11")])
def part_1(groups: List[np.ndarray]) -> int:
    """Day 6a: Custom Customs

    # Description

    The form asks a series of 26 yes-or-no questions marked a through z. Each
    group's answers are separated by a blank line, and within each group,
    each person's answers are on a single line.

    For each group, count the number of questions to which anyone answered
    "yes". What is the sum of those counts?
    """
    return int(sum(np.count_nonzero(merge_any(g)) for g in groups))


@challenge(parse=parse_groups, examples=[Example(EXAMPLE, "6")])
def part_2(groups: List[np.ndarray]) -> int:
    """Day 6b: Custom Customs

    # Description

    You don't need to identify the questions to which anyone answered "yes";
    you need to identify the questions to which everyone answered "yes"!

    For each group, count the number of questions to which everyone answered
    "yes". What is the sum of those counts?
    """
    return int(sum(np.count_nonzero(merge_all(g)) for g in groups))
