from __future__ import annotations

import numpy as np
import pytest

from aoc2020.challenges.day_6 import EXAMPLE, merge_all, merge_any, parse_groups, parse_response


@pytest.mark.parametrize(
    "raw,indices",
    [("abcx", [0, 1, 2, 23]), ("abcy", [0, 1, 2, 24]), ("abcz", [0, 1, 2, 25])],
)
def test_parse_responses(raw: str, indices):
    got = parse_response(raw)
    assert got.shape == (26,)
    assert np.flatnonzero(got).tolist() == indices


def test_group_counts():
    groups = parse_groups(EXAMPLE)
    assert [len(g) for g in groups] == [1, 3, 2, 4, 1]
    assert [int(merge_any(g).sum()) for g in groups] == [3, 3, 3, 1, 1]
    assert [int(merge_all(g).sum()) for g in groups] == [3, 0, 1, 1, 1]


def test_rejects_non_letters():
    with pytest.raises(ValueError, match="a-z"):
        parse_response("abC")
