"""Calendar-week version strings (e.g. 21w45.7) and workday bisection."""
from loguru import logger

from cwver.application.use_cases import BisectUseCase, ConvertUseCase, CwVersionContext, today_version
from cwver.domain.calendar_math import IsoWeekDate, date_of, iso_week_date_of, weeks_in_year
from cwver.domain.errors import (
    CwVersionError,
    InvalidWeekError,
    MalformedStringError,
    NoWorkdaysInRangeError,
    OutOfRangeError,
    YearOutOfCenturyError,
)
from cwver.domain.models import CwVersion, WorkdayPolicy
from cwver.domain.results import BisectResult
from cwver.domain.services import Bisector, bisect
from cwver.domain.year_window import CenturyWindow

logger.disable("cwver")

__version__ = "0.1.0"

__all__ = [
    "BisectResult",
    "BisectUseCase",
    "Bisector",
    "CenturyWindow",
    "ConvertUseCase",
    "CwVersion",
    "CwVersionContext",
    "CwVersionError",
    "InvalidWeekError",
    "IsoWeekDate",
    "MalformedStringError",
    "NoWorkdaysInRangeError",
    "OutOfRangeError",
    "WorkdayPolicy",
    "YearOutOfCenturyError",
    "bisect",
    "date_of",
    "iso_week_date_of",
    "today_version",
    "weeks_in_year",
]
