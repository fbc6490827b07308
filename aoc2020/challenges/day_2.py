"""Day 2: Password Philosophy.

Each line holds a policy and a password, e.g. ``1-3 a: abcde``. The two parts
read the policy numbers differently:
- part 1: ``a``/``b`` bound how often the letter may occur
- part 2: ``a``/``b`` are 1-based positions; exactly one must hold the letter
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..challenge import Example, challenge
from ..inputs import Lines

EXAMPLE = """
1-3 a: abcde
1-3 b: cdefg
2-9 c: ccccccccc
"""

_RULE_RE = re.compile(r"^(\d+)-(\d+)\s*(\w+)$")


@dataclass(frozen=True)
class Rule:
    a: int
    b: int
    letter: str

    @classmethod
    def parse(cls, text: str) -> "Rule":
        m = _RULE_RE.match(text.strip())
        if m is None:
            raise ValueError("Unable to parse the password rule")
        if len(m.group(3)) != 1:
            raise ValueError("The rule should only include one letter")
        return cls(a=int(m.group(1)), b=int(m.group(2)), letter=m.group(3))


@dataclass(frozen=True)
class Entry:
    rule: Rule
    password: str

    @classmethod
    def parse(cls, line: str) -> "Entry":
        rule, sep, password = line.partition(":")
        if not sep:
            raise ValueError("Expected the rule and password to be separated by a colon")
        try:
            parsed = Rule.parse(rule)
        except ValueError as exc:
            raise ValueError(f'Rules should look like "2-15 x", found {rule.strip()!r}') from exc
        return cls(rule=parsed, password=password.strip())


def occurrence_rule_is_valid(rule: Rule, password: str) -> bool:
    occurrences = password.count(rule.letter)
    return rule.a <= occurrences <= rule.b


def position_rule_is_valid(rule: Rule, password: str) -> bool:
    # Positions are 1-based; anything past the end simply doesn't match.
    def _has(pos: int) -> bool:
        return 1 <= pos <= len(password) and password[pos - 1] == rule.letter

    return _has(rule.a) != _has(rule.b)


@challenge(parse=Lines.of(Entry.parse), examples=[Example(EXAMPLE, "2")])
def part_1(entries: Lines[Entry]) -> int:
    """Day 2a: Password Philosophy

    # Description

    Each line gives the password policy and then the password. The password
    policy indicates the lowest and highest number of times a given letter
    must appear for the password to be valid. For example, ``1-3 a`` means
    that the password must contain ``a`` at least 1 time and at most 3 times.

    How many passwords are valid according to their policies?
    """
    return sum(1 for e in entries if occurrence_rule_is_valid(e.rule, e.password))


@challenge(parse=Lines.of(Entry.parse), examples=[Example(EXAMPLE, "1")])
def part_2(entries: Lines[Entry]) -> int:
    """Day 2b: Password Philosophy

    # Description

    Each policy actually describes two positions in the password, where 1
    means the first character, 2 means the second character, and so on.
    Exactly one of these positions must contain the given letter. Other
    occurrences of the letter are irrelevant for the purposes of policy
    enforcement.

    How many passwords are valid according to the new interpretation of the
    policies?
    """
    return sum(1 for e in entries if position_rule_is_valid(e.rule, e.password))
