"""Day 4: Passport Processing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..challenge import Example, challenge

EXAMPLE = """
ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in
"""

EXAMPLE_INVALID = """
eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946

hcl:dab227 iyr:2012
ecl:brn hgt:182cm pid:021572410 eyr:2020 byr:1992 cid:277

hgt:59cm ecl:zzz
eyr:2038 hcl:74454a iyr:2023
pid:3556412378 byr:2007
"""

EXAMPLE_VALID = """
pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980
hcl:#623a2f

eyr:2029 ecl:blu cid:129 byr:1989
iyr:2014 pid:896056539 hcl:#a97842 hgt:165cm

hcl:#888785
hgt:164cm byr:2001 iyr:2015 cid:88
pid:545766238 ecl:hzl
eyr:2022

iyr:2010 hgt:158cm hcl:#b6652c ecl:blu byr:1944 eyr:2021 pid:093154719
"""

REQUIRED_FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

_COLOUR_RE = re.compile(r"^#[0-9a-f]{6}$")
_HEIGHT_RE = re.compile(r"^([0-9]+)(cm|in)$")
_YEAR_RE = re.compile(r"^[0-9]{4}$")
_PID_RE = re.compile(r"^[0-9]{9}$")
_HEIGHT_LIMITS = {"cm": (150, 193), "in": (59, 76)}


@dataclass
class Passport:
    fields: Dict[str, str] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def get(self, key: str) -> Optional[str]:
        return self.fields.get(key)

    def has_required_fields(self) -> bool:
        return all(name in self.fields for name in REQUIRED_FIELDS)


def parse_passports(text: str) -> List[Passport]:
    passports: List[Passport] = []
    current = Passport()
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            if current.fields:
                passports.append(current)
                current = Passport()
            continue
        for pair in line.split():
            key, sep, value = pair.partition(":")
            if not sep:
                raise ValueError(f'Expected "{pair}" on line {number} to look like "key:value"')
            current.fields[key] = value
    if current.fields:
        passports.append(current)
    return passports


# Field validators -----------------------------------------------------------


def year_between(lo: int, hi: int) -> Callable[[str], bool]:
    def _check(value: str) -> bool:
        return _YEAR_RE.match(value) is not None and lo <= int(value) <= hi

    return _check


def valid_height(value: str) -> bool:
    m = _HEIGHT_RE.match(value)
    if m is None:
        return False
    lo, hi = _HEIGHT_LIMITS[m.group(2)]
    return lo <= int(m.group(1)) <= hi


def valid_hair_colour(value: str) -> bool:
    return _COLOUR_RE.match(value) is not None


def valid_eye_colour(value: str) -> bool:
    return value in EYE_COLOURS


def valid_passport_id(value: str) -> bool:
    return _PID_RE.match(value) is not None


VALIDATORS: Dict[str, Callable[[str], bool]] = {
    "byr": year_between(1920, 2002),
    "iyr": year_between(2010, 2020),
    "eyr": year_between(2020, 2030),
    "hgt": valid_height,
    "hcl": valid_hair_colour,
    "ecl": valid_eye_colour,
    "pid": valid_passport_id,
}


def is_valid(passport: Passport) -> bool:
    """All required fields present and well formed; ``cid`` is ignored."""
    for name, check in VALIDATORS.items():
        value = passport.get(name)
        if value is None or not check(value):
            return False
    return True


@challenge(parse=parse_passports, examples=[Example(EXAMPLE, "2")])
def part_1(passports: List[Passport]) -> int:
    """Day 4a: Passport Processing

    # Description

    Passport data is validated in batch files (your puzzle input). Each
    passport is represented as a sequence of ``key:value`` pairs separated by
    spaces or newlines. Passports are separated by blank lines.

    Count the number of valid passports - those that have all required
    fields. Treat ``cid`` as optional. In your batch file, how many passports
    are valid?
    """
    return sum(1 for p in passports if p.has_required_fields())


@challenge(
    parse=parse_passports,
    examples=[Example(EXAMPLE_INVALID, "0"), Example(EXAMPLE_VALID, "4")],
)
def part_2(passports: List[Passport]) -> int:
    """Day 4b: Passport Processing

    # Description

    Each field has strict rules about what values are valid for automatic
    validation:

    - byr (Birth Year) - four digits; at least 1920 and at most 2002.
    - iyr (Issue Year) - four digits; at least 2010 and at most 2020.
    - eyr (Expiration Year) - four digits; at least 2020 and at most 2030.
    - hgt (Height) - a number followed by either cm or in. If cm, the number
      must be at least 150 and at most 193. If in, the number must be at
      least 59 and at most 76.
    - hcl (Hair Color) - a # followed by exactly six characters 0-9 or a-f.
    - ecl (Eye Color) - exactly one of: amb blu brn gry grn hzl oth.
    - pid (Passport ID) - a nine-digit number, including leading zeroes.
    - cid (Country ID) - ignored, missing or not.

    Count the number of valid passports - those that have all required fields
    and valid values.
    """
    return sum(1 for p in passports if is_valid(p))
