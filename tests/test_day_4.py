from __future__ import annotations

import pytest

from aoc2020.challenge import find_challenge
from aoc2020.challenges.day_4 import (
    EXAMPLE,
    EXAMPLE_INVALID,
    EXAMPLE_VALID,
    Passport,
    is_valid,
    parse_passports,
    valid_hair_colour,
    valid_height,
    valid_eye_colour,
    valid_passport_id,
    year_between,
)


def test_parse_passports():
    passports = parse_passports(EXAMPLE)
    assert len(passports) == 4
    assert passports[0].get("ecl") == "gry"
    assert passports[0].get("cid") == "147"
    assert passports[2].get("hgt") == "179cm"
    assert [p.has_required_fields() for p in passports] == [True, False, True, False]


def test_parse_rejects_tokens_without_colon():
    with pytest.raises(ValueError, match="on line 2"):
        parse_passports("byr:1937\nbogus\n")


def test_trailing_passport_without_blank_line():
    assert len(parse_passports("byr:1937\n\niyr:2017")) == 2


@pytest.mark.parametrize(
    "value,ok",
    [("2002", True), ("2003", False), ("1920", True), ("02002", False), ("abcd", False)],
)
def test_birth_year(value: str, ok: bool):
    assert year_between(1920, 2002)(value) is ok


@pytest.mark.parametrize(
    "value,ok",
    [("60in", True), ("190cm", True), ("190in", False), ("190", False), ("cm", False)],
)
def test_height(value: str, ok: bool):
    assert valid_height(value) is ok


@pytest.mark.parametrize("value,ok", [("#123abc", True), ("#123abz", False), ("123abc", False)])
def test_hair_colour(value: str, ok: bool):
    assert valid_hair_colour(value) is ok


@pytest.mark.parametrize("value,ok", [("000000001", True), ("0123456789", False)])
def test_passport_id(value: str, ok: bool):
    assert valid_passport_id(value) is ok


def test_example_batches():
    assert not any(is_valid(p) for p in parse_passports(EXAMPLE_INVALID))
    assert all(is_valid(p) for p in parse_passports(EXAMPLE_VALID))


def test_missing_field_is_invalid():
    assert not is_valid(Passport())


@pytest.mark.parametrize(
    "lo,hi,value,ok",
    [
        (2010, 2020, "2010", True),
        (2010, 2020, "2020", True),
        (2010, 2020, "2009", False),
        (2010, 2020, "2021", False),
        (2020, 2030, "2020", True),
        (2020, 2030, "2030", True),
        (2020, 2030, "2019", False),
        (2020, 2030, "2031", False),
    ],
)
def test_issue_and_expiration_years(lo: int, hi: int, value: str, ok: bool):
    assert year_between(lo, hi)(value) is ok


@pytest.mark.parametrize(
    "value,ok",
    [
        ("150cm", True),
        ("193cm", True),
        ("149cm", False),
        ("194cm", False),
        ("59in", True),
        ("76in", True),
        ("58in", False),
        ("77in", False),
    ],
)
def test_height_edges(value: str, ok: bool):
    assert valid_height(value) is ok


@pytest.mark.parametrize("value", ["amb", "blu", "brn", "gry", "grn", "hzl", "oth"])
def test_eye_colour_accepted(value: str):
    assert valid_eye_colour(value)


@pytest.mark.parametrize("value", ["zzz", "", "AMB", "amber", "bl"])
def test_eye_colour_rejected(value: str):
    assert not valid_eye_colour(value)


def test_only_eye_colour_wrong_makes_passport_invalid():
    good = "pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980 hcl:#623a2f"
    assert is_valid(parse_passports(good)[0])
    assert not is_valid(parse_passports(good.replace("ecl:grn", "ecl:zzz"))[0])


@pytest.mark.parametrize(
    "check,value",
    [
        (valid_passport_id, "12345678²"),
        (valid_passport_id, "١٢٣٤٥٦٧٨٩"),
        (year_between(1920, 2002), "19²0"),
        (year_between(1920, 2002), "١٩٨٠"),
        (valid_height, "١٥٠cm"),
    ],
)
def test_non_ascii_digits_rejected(check, value: str):
    assert check(value) is False


def test_non_ascii_year_counts_as_invalid_passport():
    text = "byr:19²0 iyr:2012 eyr:2030 hgt:74in hcl:#623a2f ecl:grn pid:087499704\n"
    assert find_challenge("4b").solve(text) == "0"
