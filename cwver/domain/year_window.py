"""Two-digit year policies.

The cwver format carries no century digit, so every conversion goes through
a single ``YearWindow`` that decides which hundred years ``00``-``99`` refer to.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .errors import OutOfRangeError, YearOutOfCenturyError


class YearWindow(Protocol):
    def to_full_year(self, two_digit_year: int) -> int:
        ...

    def to_two_digit_year(self, full_year: int) -> int:
        ...


@dataclass(frozen=True)
class CenturyWindow:
    """Maps ``00``-``99`` onto ``base``..``base + 99``."""

    base: int = 2000

    def to_full_year(self, two_digit_year: int) -> int:
        if not 0 <= two_digit_year <= 99:
            raise OutOfRangeError(f"year {two_digit_year} out-of-range [0-99]", two_digit_year)
        return self.base + two_digit_year

    def to_two_digit_year(self, full_year: int) -> int:
        if not self.base <= full_year <= self.base + 99:
            raise YearOutOfCenturyError(
                f"year {full_year} outside supported window [{self.base}-{self.base + 99}]",
                full_year,
            )
        return full_year - self.base


DEFAULT_WINDOW = CenturyWindow()
