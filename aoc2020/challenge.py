"""Challenge registry.

Solvers register themselves with the ``challenge`` decorator. The decorator
reads the solver's docstring to work out the challenge key and title, e.g.::

    @challenge(parse=Lines.of(int))
    def part_1(entries):
        \"\"\"Day 1a: Report Repair

        # Description

        ...
        \"\"\"

registers challenge ``"1a"`` named ``"Report Repair"``. Registration happens at
import time, so ``aoc2020.challenges`` must be imported before the registry is
queried (``all_challenges`` does this for you).
"""

from __future__ import annotations

import inspect
import logging
import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Tuple

log = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"(?i)day ([\d\w]+)\s*:\s*([\w \d]+)")
_HEADING_RE = re.compile(r"^#+\s+(?P<title>\S.*?)\s*$")


def docstrings_stripped() -> bool:
    """True under ``python -OO``, where every ``__doc__`` is None."""
    return sys.flags.optimize >= 2


@dataclass(frozen=True)
class Example:
    input: str
    expected: str


@dataclass(frozen=True)
class Challenge:
    number: str
    name: str
    description: str
    examples: Tuple[Example, ...]
    solve: Callable[[str], str]

    def __repr__(self) -> str:
        # ``solve`` is a closure; leave it out so reprs stay readable.
        return (
            f"Challenge(number={self.number!r}, name={self.name!r}, "
            f"description={self.description[:40]!r}, examples={self.examples!r})"
        )


_REGISTRY: Dict[str, Challenge] = {}


def parse_title(docs: str) -> Tuple[str, str]:
    """Return ``(number, name)`` from a docstring like ``"Day 2a: Password Philosophy"``."""
    if not docs or not docs.strip():
        raise ValueError("Challenges must use docstrings for their name and description")

    match = _TITLE_RE.search(docs)
    if match is None:
        raise ValueError(
            'Unable to determine the challenge name and day. Expected something like "Day 1: Report Repair"'
        )
    return match.group(1).lower(), match.group(2).strip()


def extract_description(docs: str) -> str:
    """Return the body of the ``# Description`` section, or ``""``."""
    lines = inspect.cleandoc(docs or "").splitlines()
    body = []
    inside = False
    fenced = False
    for line in lines:
        if line.lstrip().startswith("```"):
            fenced = not fenced
        heading = None if fenced else _HEADING_RE.match(line)
        if heading is not None:
            if inside:
                break
            inside = heading.group("title").lower() == "description"
            continue
        if inside:
            body.append(line)
    return "\n".join(body).strip()


def register(ch: Challenge) -> Challenge:
    if ch.number in _REGISTRY:
        raise ValueError(f"Challenge {ch.number!r} is already registered")
    _REGISTRY[ch.number] = ch
    log.debug("registered challenge %s (%s)", ch.number, ch.name)
    return ch


def challenge(parse: Callable[[str], Any], examples: Iterable[Example] = ()):
    """Decorator registering a solver as a ``Challenge``.

    ``parse`` turns the raw input text into the solver's argument. The solver's
    return value is converted with ``str`` to produce the answer.
    """

    examples = tuple(examples)

    def _decorate(func: Callable[[Any], Any]) -> Callable[[Any], Any]:
        if func.__doc__ is None and docstrings_stripped():
            raise RuntimeError(
                f"{func.__qualname__} has no docstring because Python is running with -OO; "
                "challenges are registered from their docstrings, so run without -OO"
            )
        docs = func.__doc__ or ""
        number, name = parse_title(docs)

        def _solve(text: str) -> str:
            return str(func(parse(text)))

        register(
            Challenge(
                number=number,
                name=name,
                description=extract_description(docs),
                examples=examples,
                solve=_solve,
            )
        )
        return func

    return _decorate


def _load_builtin() -> None:
    from . import challenges  # noqa: F401  (registers on import)


def all_challenges() -> Iterator[Challenge]:
    """Iterate over every registered challenge, in registration order."""
    _load_builtin()
    return iter(list(_REGISTRY.values()))


def find_challenge(number: str) -> Challenge:
    _load_builtin()
    ch = _REGISTRY.get(str(number).strip().lower())
    if ch is None:
        raise KeyError(f"Unknown challenge number {number!r}")
    return ch
