"""Command-line interface.

Usage
-----
    aoc2020 run 2a < inputs/day_2.txt
    aoc2020 run 2b --input inputs/day_2.txt
    aoc2020 run 3a --from-input-dir
    aoc2020 list
    aoc2020 check          # every challenge's published examples
    aoc2020 check 4a 4b
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .challenge import all_challenges, find_challenge
from .config import load_config
from .diagnostics import print_summary, print_timings, summarize_input, summarize_timings
from .driver import check_examples, input_path_for, read_input, run_challenge
from .logging_config import setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="aoc2020", description="Advent of Code 2020 solutions")
    ap.add_argument("--verbose", action="store_true", help="Log debug information to stderr")
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Solve a challenge")
    run.add_argument("challenge", help="The challenge to run, e.g. 2a")
    src = run.add_mutually_exclusive_group()
    src.add_argument("--input", default=None, help="Read the puzzle input from this file instead of stdin")
    src.add_argument(
        "--from-input-dir",
        action="store_true",
        help="Read day_<N>.txt from the configured input directory (AOC2020_INPUT_DIR)",
    )
    run.add_argument("--stats", action="store_true", help="Print an input summary and timing to stderr")

    sub.add_parser("list", help="List the registered challenges")

    check = sub.add_parser("check", help="Run the published examples")
    check.add_argument("challenges", nargs="*", help="Challenges to check (default: all)")
    return ap


def _cmd_run(args: argparse.Namespace) -> int:
    ch = find_challenge(args.challenge)
    if args.from_input_dir:
        path = input_path_for(ch.number, load_config())
    else:
        path = args.input
    text = read_input(path)
    if args.stats:
        print_summary(summarize_input(str(path or "<stdin>"), text), file=sys.stderr)

    result = run_challenge(ch.number, text)
    print(result.answer)
    if args.stats:
        print(f"{ch.number} ({ch.name}) solved in {result.elapsed:.6g}s", file=sys.stderr)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    for ch in all_challenges():
        print(f"{ch.number:<4} {ch.name}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    if args.challenges:
        selected = [find_challenge(n) for n in args.challenges]
    else:
        selected = list(all_challenges())

    failures = 0
    timings: List[float] = []
    for ch in selected:
        for chk in check_examples(ch):
            timings.append(chk.elapsed)
            if chk.passed:
                print(f"ok    {ch.number} example {chk.index + 1}: {chk.got}")
            elif chk.error is not None:
                failures += 1
                print(f"ERROR {ch.number} example {chk.index + 1}: {chk.error}")
            else:
                failures += 1
                print(f"FAIL  {ch.number} example {chk.index + 1}: expected {chk.expected}, got {chk.got}")

    if args.verbose:
        print_timings(summarize_timings("examples", timings), file=sys.stderr)
    print(f"{failures} failure(s)")
    return 1 if failures else 0


_COMMANDS = {"run": _cmd_run, "list": _cmd_list, "check": _cmd_check}


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        cfg = load_config()
        setup_logging(logging.DEBUG if args.verbose else cfg.log_level, log_file=args.log_file)
    except OSError as exc:
        raise SystemExit(f"error: Unable to open the log file {args.log_file}: {exc.strerror}") from exc
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc

    try:
        return _COMMANDS[args.command](args)
    except KeyError as exc:
        raise SystemExit(f"error: {exc.args[0]}") from exc
    except ValueError as exc:
        log.debug("challenge failed", exc_info=True)
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    sys.exit(main())
