"""High-level helpers for running challenges.

These wrap the registry with the bits every caller needs (reading input,
locating the per-day input file, timing) so the CLI and scripts stay short.
"""

from __future__ import annotations

import logging
import re
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .challenge import Challenge, find_challenge
from .config import AocConfig, load_config

log = logging.getLogger(__name__)

_DAY_RE = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class RunResult:
    challenge: Challenge
    answer: str
    elapsed: float


@dataclass(frozen=True)
class ExampleCheck:
    challenge: Challenge
    index: int
    expected: str
    got: Optional[str]
    elapsed: float
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.got == self.expected


def read_input(path: str | Path | None = None) -> str:
    """Read a puzzle input from ``path``, or from stdin when no path is given."""
    if path is None:
        raw = sys.stdin.buffer.read()
        source = "<stdin>"
    else:
        p = Path(path)
        try:
            raw = p.read_bytes()
        except OSError as exc:
            raise ValueError(f"Unable to read the input file {p}: {exc.strerror}") from exc
        source = str(p)

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("Unable to read the input as UTF-8 text") from exc
    log.debug("read %d bytes from %s", len(raw), source)
    return text


def input_path_for(number: str, config: AocConfig | None = None) -> Path:
    """``<input_dir>/day_<N>.txt``; both parts of a day share one file."""
    cfg = load_config() if config is None else config
    m = _DAY_RE.match(str(number).strip())
    if m is None:
        raise ValueError(f"Challenge numbers start with the day, found {number!r}")
    return cfg.input_dir / f"day_{int(m.group(1))}.txt"


def run_challenge(number: str, text: str) -> RunResult:
    ch = find_challenge(number)
    log.info("running challenge %s: %s", ch.number, ch.name)
    t0 = time.perf_counter()
    answer = ch.solve(text)
    elapsed = time.perf_counter() - t0
    log.info("challenge %s finished in %.3fs", ch.number, elapsed)
    return RunResult(challenge=ch, answer=answer, elapsed=elapsed)


def check_examples(ch: Challenge) -> List[ExampleCheck]:
    """Run every published example for ``ch``.

    A solver error is recorded on the check rather than raised, so one broken
    example doesn't hide the rest.
    """
    checks = []
    for i, ex in enumerate(ch.examples):
        t0 = time.perf_counter()
        try:
            got = ch.solve(ex.input)
        except ValueError as exc:
            log.warning("example %d of %s raised: %s", i, ch.number, exc)
            checks.append(
                ExampleCheck(
                    challenge=ch,
                    index=i,
                    expected=ex.expected,
                    got=None,
                    elapsed=time.perf_counter() - t0,
                    error=str(exc),
                )
            )
            continue
        check = ExampleCheck(challenge=ch, index=i, expected=ex.expected, got=got, elapsed=time.perf_counter() - t0)
        if not check.passed:
            log.warning("example %d of %s: expected %s, got %s", i, ch.number, ex.expected, got)
        checks.append(check)
    return checks
