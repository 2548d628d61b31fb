"""Application services orchestrating the today/convert/bisect workflows."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from loguru import logger

from cwver.application.dto import ConversionResult
from cwver.domain.models import CwVersion
from cwver.domain.results import BisectResult
from cwver.domain.services import Bisector
from cwver.domain.year_window import DEFAULT_WINDOW, YearWindow
from cwver.infrastructure.parsing.tokens import CwVersionToken, parse_token


def today_version(today: date, window: YearWindow = DEFAULT_WINDOW) -> CwVersion:
    return CwVersion.from_date(today, window)


@dataclass(slots=True)
class CwVersionContext:
    bisector: Bisector = field(default_factory=Bisector)
    window: YearWindow = DEFAULT_WINDOW


class ConvertUseCase:
    def __init__(self, context: CwVersionContext | None = None) -> None:
        self._context = context or CwVersionContext()

    def execute(self, raw: str) -> ConversionResult:
        token = parse_token(raw)
        if isinstance(token, CwVersionToken):
            counterpart: CwVersion | date = token.to_date(self._context.window)
        else:
            counterpart = CwVersion.from_date(token.value, self._context.window)
        logger.info("Converted {} to {}", token, counterpart)
        return ConversionResult(source=token, counterpart=counterpart)


class BisectUseCase:
    def __init__(self, context: CwVersionContext | None = None) -> None:
        self._context = context or CwVersionContext()

    def execute(self, raw_from: str, raw_till: str) -> BisectResult:
        window = self._context.window
        start = parse_token(raw_from).to_date(window)
        end = parse_token(raw_till).to_date(window)
        result = self._context.bisector.bisect_dates(start, end)
        logger.info(
            "Regression range {} -> {} spans {} workday(s)",
            result.start_date,
            result.end_date,
            result.workday_count,
        )
        return result
