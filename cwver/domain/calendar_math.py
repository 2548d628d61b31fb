"""ISO-8601 week date arithmetic.

Pure functions mapping a proleptic-Gregorian ``date`` to its ISO
(year, week, weekday) triple and back.

ISO 8601 week rules:
- Weeks run Monday (1) to Sunday (7)
- A date belongs to the week holding its Thursday; the ISO year is that
  Thursday's calendar year
- Week 1 is the week holding January 4th
- A year has 53 weeks when January 1st is a Thursday, or a Wednesday in a
  leap year; otherwise 52
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from .errors import InvalidWeekError, OutOfRangeError

THURSDAY = 4


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks (52 or 53) in ``year``."""
    jan_1 = date(year, 1, 1).isoweekday()
    if jan_1 == THURSDAY or (jan_1 == THURSDAY - 1 and is_leap_year(year)):
        return 53
    return 52


@dataclass(frozen=True, order=True)
class IsoWeekDate:
    """An ISO week date; only weeks that exist in ``iso_year`` can be built."""

    iso_year: int
    iso_week: int
    iso_weekday: int

    def __post_init__(self) -> None:
        if not 1 <= self.iso_weekday <= 7:
            raise OutOfRangeError(
                f"day of week {self.iso_weekday} out-of-range [1-7]", self.iso_weekday
            )
        if not 1 <= self.iso_year <= 9999:
            raise OutOfRangeError(f"year {self.iso_year} out-of-range [1-9999]", self.iso_year)
        max_weeks = weeks_in_year(self.iso_year)
        if not 1 <= self.iso_week <= max_weeks:
            raise InvalidWeekError(
                f"week {self.iso_week} does not exist in {self.iso_year} "
                f"(valid weeks: 1-{max_weeks})",
                self.iso_week,
            )


def iso_week_date_of(value: date) -> IsoWeekDate:
    weekday = value.isoweekday()
    thursday = value + timedelta(days=THURSDAY - weekday)
    iso_year = thursday.year
    week = (thursday - date(iso_year, 1, 1)).days // 7 + 1
    return IsoWeekDate(iso_year, week, weekday)


def week_one_monday(iso_year: int) -> date:
    """Monday on or before January 4th of ``iso_year``."""
    jan_4 = date(iso_year, 1, 4)
    return jan_4 - timedelta(days=jan_4.isoweekday() - 1)


def date_of(iso: IsoWeekDate) -> date:
    # IsoWeekDate already rejected weeks the year does not have.
    offset = (iso.iso_week - 1) * 7 + (iso.iso_weekday - 1)
    try:
        return add_days(week_one_monday(iso.iso_year), offset)
    except OverflowError as exc:
        raise OutOfRangeError(f"{iso} falls outside the supported date range", iso) from exc


def add_days(value: date, n: int) -> date:
    return value + timedelta(days=n)


def days_between(a: date, b: date) -> int:
    """Signed number of days from ``a`` to ``b``."""
    return (b - a).days


def iter_days(start: date, end: date):
    """Yield every date from ``start`` to ``end`` inclusive."""
    for offset in range(days_between(start, end) + 1):
        yield add_days(start, offset)
