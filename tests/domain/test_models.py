from datetime import date

import pytest

from cwver.domain.errors import (
    InvalidWeekError,
    MalformedStringError,
    OutOfRangeError,
    YearOutOfCenturyError,
)
from cwver.domain.models import CwVersion, WorkdayPolicy
from cwver.domain.year_window import CenturyWindow


def test_parse():
    assert CwVersion.parse("21w01.2") == CwVersion(21, 1, 2)
    assert CwVersion.parse(" 21w45.7 ") == CwVersion(21, 45, 7)


@pytest.mark.parametrize(
    "text",
    ["21w1.0", "21W01.1", "2101.1", "21w01.12", "x21w01.1", "", "21w01", "\u0662\u0661w\u0660\u0661.\u0661", "\uff12\uff11w\uff10\uff11.\uff11"],
)
def test_parse_malformed(text):
    with pytest.raises(MalformedStringError) as excinfo:
        CwVersion.parse(text)
    assert excinfo.value.value == text


@pytest.mark.parametrize("text", ["21w01.8", "21w01.0", "21w00.1", "21w54.1", "99w99.9"])
def test_parse_out_of_range(text):
    with pytest.raises(OutOfRangeError) as excinfo:
        CwVersion.parse(text)
    assert text in str(excinfo.value)


@pytest.mark.parametrize("text", ["00w01.1", "09w09.7", "21w45.7", "20w53.5", "99w52.1"])
def test_format_inverts_parse(text):
    assert CwVersion.parse(text).format() == text
    assert str(CwVersion.parse(text)) == text


def test_format_inverts_parse_for_every_valid_string():
    for year in range(100):
        for week in range(1, 54):
            for weekday in range(1, 8):
                text = f"{year:02d}w{week:02d}.{weekday}"
                assert CwVersion.parse(text).format() == text


def test_to_date():
    assert CwVersion.parse("21w01.1").to_date() == date(2021, 1, 4)
    assert CwVersion.parse("21w10.7").to_date() == date(2021, 3, 14)
    assert CwVersion.parse("21w52.7").to_date() == date(2022, 1, 2)
    assert CwVersion.parse("20w53.5").to_date() == date(2021, 1, 1)


def test_week_53_of_52_week_year_fails_on_conversion():
    version = CwVersion.parse("21w53.1")
    with pytest.raises(InvalidWeekError):
        version.to_date()


def test_from_date():
    assert CwVersion.from_date(date(2021, 2, 6)) == CwVersion.parse("21w05.6")
    assert CwVersion.from_date(date(2021, 1, 1)).format() == "20w53.5"
    assert CwVersion.from_date(date(2100, 1, 1)).format() == "99w53.5"


@pytest.mark.parametrize("value", [date(1999, 12, 31), date(2000, 1, 1), date(2100, 1, 4)])
def test_from_date_outside_century(value):
    with pytest.raises(YearOutOfCenturyError):
        CwVersion.from_date(value)


def test_custom_century_window():
    window = CenturyWindow(1900)
    assert CwVersion.parse("99w01.1").to_date(window) == date(1999, 1, 4)
    assert CwVersion.from_date(date(1999, 1, 4), window).format() == "99w01.1"
    with pytest.raises(YearOutOfCenturyError):
        CwVersion.from_date(date(2021, 1, 4), window)


def test_versions_order_chronologically_within_window():
    assert CwVersion.parse("21w03.1") < CwVersion.parse("21w03.2") < CwVersion.parse("21w04.1")


def test_workday_policy():
    policy = WorkdayPolicy()
    assert policy.days == frozenset({1, 2, 3, 4, 5})
    assert policy.is_workday(date(2021, 1, 22))
    assert not policy.is_workday(date(2021, 1, 23))
    assert WorkdayPolicy.of([6, 7]).describe() == "Sat,Sun"


def test_workday_policy_rejects_unknown_weekday():
    with pytest.raises(OutOfRangeError):
        WorkdayPolicy.of([1, 8])
