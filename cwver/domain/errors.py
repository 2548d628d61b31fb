"""Error taxonomy for calendar-week version handling.

Every error keeps the offending input on ``value`` so callers can echo it back.
"""
from __future__ import annotations


class CwVersionError(ValueError):
    """Base class for all cwver failures."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class MalformedStringError(CwVersionError):
    """Input matches none of the recognized grammars."""


class OutOfRangeError(CwVersionError):
    """A numeric field lies outside its lexical bound (e.g. weekday 8)."""


class InvalidWeekError(CwVersionError):
    """The week number does not exist in the given ISO year."""


class YearOutOfCenturyError(CwVersionError):
    """A full year cannot be represented with two digits."""


class NoWorkdaysInRangeError(CwVersionError):
    """A bisect range holds no day allowed by the workday policy."""
