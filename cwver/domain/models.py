"""Domain models for calendar-week versions.

``CwVersion`` is the ``<yy>w<ww>.<d>`` value type; ``WorkdayPolicy`` decides
which weekdays count when bisecting a range.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from loguru import logger

from .calendar_math import IsoWeekDate, date_of, iso_week_date_of
from .errors import MalformedStringError, OutOfRangeError
from .year_window import DEFAULT_WINDOW, YearWindow

CWVER_PATTERN = re.compile(r"(\d{2})w(\d{2})\.(\d)", re.ASCII)

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True, order=True)
class CwVersion:
    """Calendar week version, e.g. ``21w45.7`` for Sunday of week 45 in 2021.

    Only lexical bounds are checked here. Whether the week exists in the
    derived year is checked by ``to_date``.
    """

    year: int
    week: int
    weekday: int

    def __post_init__(self) -> None:
        if not 0 <= self.year <= 99:
            raise OutOfRangeError(f"year {self.year} out-of-range [0-99]", self.year)
        if not 1 <= self.week <= 53:
            raise OutOfRangeError(f"week {self.week} out-of-range [1-53]", self.week)
        if not 1 <= self.weekday <= 7:
            raise OutOfRangeError(f"day of week {self.weekday} out-of-range [1-7]", self.weekday)

    @classmethod
    def parse(cls, text: str) -> CwVersion:
        match = CWVER_PATTERN.fullmatch(text.strip())
        if match is None:
            raise MalformedStringError(
                f"failed to parse {text!r}: expected <yy>w<ww>.<d> (e.g. 21w45.7)", text
            )
        year, week, weekday = (int(group) for group in match.groups())
        try:
            return cls(year, week, weekday)
        except OutOfRangeError as exc:
            raise OutOfRangeError(f"{text}: {exc}", text) from exc

    def format(self) -> str:
        return f"{self.year:02d}w{self.week:02d}.{self.weekday}"

    def __str__(self) -> str:
        return self.format()

    def to_iso_week_date(self, window: YearWindow = DEFAULT_WINDOW) -> IsoWeekDate:
        return IsoWeekDate(window.to_full_year(self.year), self.week, self.weekday)

    def to_date(self, window: YearWindow = DEFAULT_WINDOW) -> date:
        result = date_of(self.to_iso_week_date(window))
        logger.debug("Converted {} to {}", self, result)
        return result

    @classmethod
    def from_date(cls, value: date, window: YearWindow = DEFAULT_WINDOW) -> CwVersion:
        iso = iso_week_date_of(value)
        version = cls(window.to_two_digit_year(iso.iso_year), iso.iso_week, iso.iso_weekday)
        logger.debug("Converted {} to {}", value, version)
        return version


@dataclass(frozen=True)
class WorkdayPolicy:
    """Set of ISO weekdays (1=Monday ... 7=Sunday) counted as workdays."""

    days: frozenset[int] = frozenset({1, 2, 3, 4, 5})

    def __post_init__(self) -> None:
        for day in self.days:
            if not 1 <= day <= 7:
                raise OutOfRangeError(f"given workday {day} not in range [1-7]", day)

    @classmethod
    def of(cls, days: Iterable[int]) -> WorkdayPolicy:
        return cls(frozenset(days))

    def is_workday(self, value: date) -> bool:
        return value.isoweekday() in self.days

    def describe(self) -> str:
        return ",".join(WEEKDAY_NAMES[day - 1] for day in sorted(self.days))


DEFAULT_POLICY = WorkdayPolicy()
