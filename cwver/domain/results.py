"""Domain-level results for workday bisection."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from .models import WorkdayPolicy


@dataclass(frozen=True)
class BisectResult:
    start_date: date
    end_date: date
    policy: WorkdayPolicy
    workdays: Sequence[date] = field(default_factory=tuple)
    midpoints: Sequence[date] = field(default_factory=tuple)

    @property
    def workday_count(self) -> int:
        """Length of the regression range in workdays.

        The start day counts as one regardless of the policy, the end day is
        not counted, and a single-day range has length 0.
        """
        if self.start_date == self.end_date:
            return 0
        between = [day for day in self.workdays if self.start_date < day < self.end_date]
        return 1 + len(between)

    def has_single_midpoint(self) -> bool:
        return len(self.midpoints) == 1
