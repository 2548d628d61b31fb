from datetime import date

import pytest

from cwver.application.use_cases import BisectUseCase, ConvertUseCase, CwVersionContext, today_version
from cwver.domain.errors import InvalidWeekError, YearOutOfCenturyError
from cwver.domain.models import CwVersion, WorkdayPolicy
from cwver.domain.services import Bisector
from cwver.domain.year_window import CenturyWindow


def test_today_version_uses_given_date():
    assert today_version(date(2021, 2, 6)).format() == "21w05.6"
    assert today_version(date(2026, 10, 19)).format() == "26w43.1"


def test_convert_cwver_to_date():
    result = ConvertUseCase().execute("21w01.1")
    assert result.counterpart == date(2021, 1, 4)
    assert result.render_counterpart() == "2021-01-04"


def test_convert_date_to_cwver():
    result = ConvertUseCase().execute("2021-02-06")
    assert result.counterpart == CwVersion(21, 5, 6)
    assert result.render_counterpart() == "21w05.6"


def test_convert_errors_propagate():
    with pytest.raises(InvalidWeekError):
        ConvertUseCase().execute("21w53.1")
    with pytest.raises(YearOutOfCenturyError):
        ConvertUseCase().execute("1999-06-01")


def test_convert_with_custom_window():
    context = CwVersionContext(window=CenturyWindow(1900))
    assert ConvertUseCase(context).execute("98w01.1").counterpart == date(1997, 12, 29)


def test_bisect_accepts_mixed_input_forms():
    result = BisectUseCase().execute("2021-01-27", "21w03.1")
    assert (result.start_date, result.end_date) == (date(2021, 1, 18), date(2021, 1, 27))
    assert result.midpoints == (date(2021, 1, 21), date(2021, 1, 22))


def test_bisect_uses_context_policy():
    context = CwVersionContext(bisector=Bisector(WorkdayPolicy.of(range(1, 8))))
    result = BisectUseCase(context).execute("21w03.1", "21w04.3")
    assert result.workday_count == 9
    assert result.midpoints == (date(2021, 1, 22), date(2021, 1, 23))
