"""Lightweight diagnostic helpers.

Meant for eyeballing a puzzle input (did the paste pick up a stray blank line?
is the grid ragged?) and for a quick look at run timings. NumPy-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO, Tuple

import numpy as np


@dataclass(frozen=True)
class InputSummary:
    name: str
    n_chars: int
    n_lines: int
    n_blank: int
    n_groups: int
    min_width: int
    max_width: int


@dataclass(frozen=True)
class TimingSummary:
    name: str
    n: int
    total: float
    min: float
    max: float
    mean: float
    q: Tuple[float, float, float]


def summarize_input(name: str, text: str) -> InputSummary:
    """Line/group counts and line widths for a raw input."""
    lines = text.splitlines()
    widths = np.asarray([len(line.strip()) for line in lines], dtype=int)
    filled = widths[widths > 0]

    # A group starts on every non-blank line that follows a blank one (or the start).
    blank = widths == 0
    starts = ~blank & np.concatenate(([True], blank[:-1])) if widths.size else blank

    return InputSummary(
        name=name,
        n_chars=len(text),
        n_lines=len(lines),
        n_blank=int(np.count_nonzero(blank)),
        n_groups=int(np.count_nonzero(starts)),
        min_width=int(filled.min()) if filled.size else 0,
        max_width=int(filled.max()) if filled.size else 0,
    )


def summarize_timings(name: str, seconds: Iterable[float], *, q: Sequence[float] = (0.5, 0.9, 0.99)) -> TimingSummary:
    a = np.asarray(list(seconds), dtype=float)
    if a.size == 0:
        nan = float("nan")
        return TimingSummary(name=name, n=0, total=0.0, min=nan, max=nan, mean=nan, q=(nan, nan, nan))
    q50, q90, q99 = (float(np.quantile(a, qq)) for qq in q)
    return TimingSummary(
        name=name,
        n=int(a.size),
        total=float(a.sum()),
        min=float(a.min()),
        max=float(a.max()),
        mean=float(a.mean()),
        q=(q50, q90, q99),
    )


def print_summary(s: InputSummary, *, indent: str = "", file: Optional[TextIO] = None) -> None:
    """Pretty-print an InputSummary."""
    print(
        f"{indent}{s.name}: chars={s.n_chars} lines={s.n_lines} blank={s.n_blank} groups={s.n_groups}",
        file=file,
    )
    if s.min_width != s.max_width:
        print(f"{indent}  width: min={s.min_width} max={s.max_width} (ragged)", file=file)
    else:
        print(f"{indent}  width: {s.max_width}", file=file)


def print_timings(s: TimingSummary, *, indent: str = "", file: Optional[TextIO] = None) -> None:
    print(
        f"{indent}{s.name}: n={s.n} total={s.total:.6g}s min={s.min:.6g}s max={s.max:.6g}s mean={s.mean:.6g}s",
        file=file,
    )
    q50, q90, q99 = s.q
    print(f"{indent}  q[50%]={q50:.6g}s q[90%]={q90:.6g}s q[99%]={q99:.6g}s", file=file)
