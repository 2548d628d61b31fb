"""Domain services implementing workday bisection."""
from __future__ import annotations

from datetime import date
from typing import Sequence

from loguru import logger

from .calendar_math import iter_days
from .errors import NoWorkdaysInRangeError
from .models import DEFAULT_POLICY, CwVersion, WorkdayPolicy
from .results import BisectResult
from .year_window import DEFAULT_WINDOW, YearWindow


class Bisector:
    """Finds the workday(s) in the middle of a regression range."""

    def __init__(self, policy: WorkdayPolicy | None = None, window: YearWindow = DEFAULT_WINDOW) -> None:
        self._policy = policy if policy is not None else DEFAULT_POLICY
        self._window = window

    def bisect(self, a: CwVersion, b: CwVersion) -> BisectResult:
        return self.bisect_dates(a.to_date(self._window), b.to_date(self._window))

    def bisect_dates(self, a: date, b: date) -> BisectResult:
        start, end = min(a, b), max(a, b)
        workdays = tuple(day for day in iter_days(start, end) if self._policy.is_workday(day))
        if not workdays:
            raise NoWorkdaysInRangeError(
                f"no workdays ({self._policy.describe() or 'none'}) between {start} and {end}",
                (start, end),
            )
        midpoints = self._midpoints(workdays)
        logger.debug(
            "Bisected {} -> {}: {} workday(s), midpoint(s) {}",
            start,
            end,
            len(workdays),
            ", ".join(str(day) for day in midpoints),
        )
        return BisectResult(
            start_date=start,
            end_date=end,
            policy=self._policy,
            workdays=workdays,
            midpoints=midpoints,
        )

    @staticmethod
    def _midpoints(workdays: Sequence[date]) -> tuple[date, ...]:
        count = len(workdays)
        if count % 2:
            return (workdays[(count - 1) // 2],)
        return (workdays[count // 2 - 1], workdays[count // 2])


def bisect(a: CwVersion, b: CwVersion, policy: WorkdayPolicy | None = None) -> BisectResult:
    return Bisector(policy).bisect(a, b)
