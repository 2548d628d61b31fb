"""Input token parsing.

Raw command-line or form input is resolved here, once, into either a
``CwVersionToken`` or an ``IsoDateToken``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Union

from cwver.domain.errors import MalformedStringError, OutOfRangeError
from cwver.domain.models import CwVersion, WorkdayPolicy
from cwver.domain.year_window import DEFAULT_WINDOW, YearWindow

ISO_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


@dataclass(frozen=True)
class CwVersionToken:
    version: CwVersion

    def to_date(self, window: YearWindow = DEFAULT_WINDOW) -> date:
        return self.version.to_date(window)

    def __str__(self) -> str:
        return self.version.format()


@dataclass(frozen=True)
class IsoDateToken:
    value: date

    def to_date(self, window: YearWindow = DEFAULT_WINDOW) -> date:
        return self.value

    def __str__(self) -> str:
        return self.value.isoformat()


Token = Union[CwVersionToken, IsoDateToken]


def parse_iso_date(text: str) -> date:
    match = ISO_DATE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise MalformedStringError(f"failed to parse {text!r}: expected YYYY-MM-DD", text)
    year, month, day = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise OutOfRangeError(f"{text} is not a calendar date: {exc}", text) from exc


def parse_token(text: str) -> Token:
    stripped = text.strip()
    if "w" in stripped:
        return CwVersionToken(CwVersion.parse(stripped))
    if "-" in stripped:
        return IsoDateToken(parse_iso_date(stripped))
    raise MalformedStringError(
        f"failed to parse {text!r}: expected <yy>w<ww>.<d> or YYYY-MM-DD", text
    )


def parse_workdays(text: str) -> WorkdayPolicy:
    """Parse a comma-separated weekday list such as ``1,2,3,4,5``."""
    days: list[int] = []
    for part in text.split(","):
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            raise MalformedStringError(f"failed to parse workday {part!r} in {text!r}", text)
        day = int(part)
        if not 1 <= day <= 7:
            raise OutOfRangeError(f"given workday {day} not in range [1-7]", day)
        days.append(day)
    return WorkdayPolicy.of(days)
