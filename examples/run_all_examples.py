#!/usr/bin/env python
"""Solve every registered challenge's published examples and print a table.

This is the quickest end-to-end sanity check after touching a solver.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running from the examples/ directory without installing the package.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from aoc2020.challenge import all_challenges
from aoc2020.diagnostics import print_timings, summarize_timings
from aoc2020.driver import check_examples


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--day", type=int, default=0, help="Only this day (default: all)")
    args = ap.parse_args()

    print("==== aoc2020 published examples ====")
    timings = []
    bad = 0
    for ch in all_challenges():
        if args.day and ch.number.rstrip("ab") != str(args.day):
            continue
        for chk in check_examples(ch):
            timings.append(chk.elapsed)
            status = "ok" if chk.passed else "FAIL"
            bad += 0 if chk.passed else 1
            print(f"{ch.number:<4} {ch.name:<24} #{chk.index + 1}  expected={chk.expected:<12} got={chk.got}  {status}")
    print_timings(summarize_timings("examples", timings))
    if bad:
        raise SystemExit(f"{bad} example(s) failed")


if __name__ == "__main__":
    main()
