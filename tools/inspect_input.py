#!/usr/bin/env python
"""Print a compact summary of one or more puzzle input files.

Handy for spotting stray blank lines or ragged grids before blaming a solver.

Usage
-----
    python tools/inspect_input.py inputs/day_3.txt inputs/day_6.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running without installing: add repo root to sys.path
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("paths", nargs="+", type=str, help="Puzzle input files")
    ap.add_argument("--head", type=int, default=0, help="Also show the first N lines of each file")
    args = ap.parse_args()

    from aoc2020.diagnostics import print_summary, summarize_input
    from aoc2020.driver import read_input

    for raw in args.paths:
        p = Path(raw)
        if not p.exists():
            raise SystemExit(f"error: input file not found: {p.resolve()}")
        text = read_input(p)
        print_summary(summarize_input(str(p), text))
        for line in text.splitlines()[: args.head]:
            print(f"  | {line}")
    print("done")


if __name__ == "__main__":
    main()
