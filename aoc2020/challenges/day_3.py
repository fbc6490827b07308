"""Day 3: Toboggan Trajectory.

The map is stored as a boolean NumPy array (``True`` = tree). It repeats to
the right forever, so column indices wrap modulo the board width.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Iterator, Tuple

import numpy as np

from ..challenge import Example, challenge

EXAMPLE = """
..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""

SLOPES: Tuple[Tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))

_TILES = {"#": True, ".": False}


def _row(line: str) -> list:
    out = []
    for ch in line:
        if ch not in _TILES:
            raise ValueError(f'The board can only contain "#" or ".", found {ch!r}')
        out.append(_TILES[ch])
    return out


@dataclass(frozen=True, eq=False)
class Board:
    trees: np.ndarray  # (height, width) bool

    @property
    def height(self) -> int:
        return int(self.trees.shape[0])

    @property
    def width(self) -> int:
        return int(self.trees.shape[1])

    def is_tree(self, column: int, row: int) -> bool:
        return bool(self.trees[row, column % self.width])

    def rows(self) -> Iterator[np.ndarray]:
        return iter(self.trees)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.trees.shape == other.trees.shape and bool(np.all(self.trees == other.trees))

    def __str__(self) -> str:
        return "".join("".join("#" if t else "." for t in row) + "\n" for row in self.trees)

    @classmethod
    def parse(cls, text: str) -> "Board":
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if not lines:
            raise ValueError("The board can't be empty")

        width = len(lines[0])
        rows = []
        for number, line in enumerate(lines, start=1):
            try:
                row = _row(line)
            except ValueError as exc:
                raise ValueError(f"Unable to read line {number}: {exc}") from exc
            if len(row) != width:
                raise ValueError(
                    f"The board should be {width} items wide but line {number} had {len(row)} items"
                )
            rows.append(row)
        return cls(trees=np.asarray(rows, dtype=bool))


def trees_along_slope(board: Board, right: int, down: int) -> int:
    rows = np.arange(0, board.height, down)
    cols = (np.arange(rows.size) * right) % board.width
    return int(np.count_nonzero(board.trees[rows, cols]))


@challenge(parse=Board.parse, examples=[Example(EXAMPLE, "7")])
def part_1(board: Board) -> int:
    """Day 3a: Toboggan Trajectory

    # Description

    Due to the local geology, trees in this area only grow on exact integer
    coordinates in a grid. The same pattern repeats to the right many times.

    Starting at the top-left corner of your map and following a slope of
    right 3 and down 1, how many trees would you encounter?
    """
    return trees_along_slope(board, 3, 1)


@challenge(parse=Board.parse, examples=[Example(EXAMPLE, "336")])
def part_2(board: Board) -> int:
    """Day 3b: Toboggan Trajectory

    # Description

    Determine the number of trees you would encounter if, for each of the
    following slopes, you start at the top-left corner and traverse the map
    all the way to the bottom: right 1 down 1, right 3 down 1, right 5 down 1,
    right 7 down 1, right 1 down 2.

    What do you get if you multiply together the number of trees encountered
    on each of the listed slopes?
    """
    return prod(trees_along_slope(board, right, down) for right, down in SLOPES)
