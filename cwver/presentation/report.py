"""Text, CSV and tabular renderers for cwver results."""
from __future__ import annotations

import csv
import io
from datetime import date
from typing import Sequence

import pandas as pd

from cwver.application.dto import ConversionResult
from cwver.domain.errors import YearOutOfCenturyError
from cwver.domain.models import WEEKDAY_NAMES, CwVersion
from cwver.domain.results import BisectResult
from cwver.domain.year_window import DEFAULT_WINDOW, YearWindow

ROW_FIELDS = ["date", "cwver", "weekday", "midpoint"]


def encode_or_blank(day: date, window: YearWindow = DEFAULT_WINDOW) -> str:
    """cwver string for ``day``, or an empty string outside the year window."""
    try:
        return CwVersion.from_date(day, window).format()
    except YearOutOfCenturyError:
        return ""


def render_today(version: CwVersion) -> str:
    return f"Today = {version.format()}"


def render_conversion(result: ConversionResult) -> str:
    return f"{result.source} = {result.render_counterpart()}"


def render_bisect(result: BisectResult, window: YearWindow = DEFAULT_WINDOW) -> str:
    lines = [
        "Regression Range:",
        f" {result.start_date.isoformat():10}  ➔  {result.end_date.isoformat():10}"
        f" ({result.workday_count} workday(s))",
        "",
    ]
    bullets = []
    for day in result.midpoints:
        version = encode_or_blank(day, window)
        bullets.append(f" • {version} = {day.isoformat()}" if version else f" • {day.isoformat()}")
    if result.has_single_midpoint():
        lines.append("Bisect starting point:")
    else:
        lines.append("Two equivalent bisect starting points:")
        bullets[0] += ", or"
    lines.extend(bullets)
    return "\n".join(lines)


def bisect_to_rows(result: BisectResult, window: YearWindow = DEFAULT_WINDOW) -> list[dict[str, str]]:
    midpoints = set(result.midpoints)
    rows: list[dict[str, str]] = []
    for day in result.workdays:
        rows.append(
            {
                "date": day.isoformat(),
                "cwver": encode_or_blank(day, window),
                "weekday": WEEKDAY_NAMES[day.isoweekday() - 1],
                "midpoint": "yes" if day in midpoints else "",
            }
        )
    return rows


def render_csv(rows: Sequence[dict[str, str]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=ROW_FIELDS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def workdays_frame(result: BisectResult, window: YearWindow = DEFAULT_WINDOW) -> pd.DataFrame:
    frame = pd.DataFrame(bisect_to_rows(result, window), columns=ROW_FIELDS)
    frame["midpoint"] = frame["midpoint"] == "yes"
    return frame
