"""Streamlit front-end for calendar-week version conversion and bisection."""
from __future__ import annotations

from datetime import date

import pandas as pd
import streamlit as st

from cwver import BisectUseCase, Bisector, CenturyWindow, ConvertUseCase, CwVersionContext, CwVersionError, today_version
from cwver.config import SETTINGS
from cwver.domain.models import WEEKDAY_NAMES
from cwver.domain.results import BisectResult
from cwver.infrastructure.parsing.tokens import parse_workdays
from cwver.presentation.report import bisect_to_rows, render_csv, workdays_frame


st.set_page_config(page_title="cwver", layout="wide")
st.title("Calendar Week Versions")

WINDOW = CenturyWindow(SETTINGS.century_base)


def run_bisect(raw_from: str, raw_till: str, workdays: list[int]) -> BisectResult:
    policy = parse_workdays(",".join(str(day) for day in workdays))
    context = CwVersionContext(bisector=Bisector(policy, WINDOW), window=WINDOW)
    return BisectUseCase(context).execute(raw_from, raw_till)


def midpoints_dataframe(result: BisectResult) -> pd.DataFrame:
    frame = workdays_frame(result, WINDOW)
    return frame[frame["midpoint"]].drop(columns=["midpoint"])


st.caption(f"Today = {today_version(date.today(), WINDOW)}")

convert_tab, bisect_tab = st.tabs(["Convert", "Bisect"])

with convert_tab:
    raw = st.text_input("cw version or ISO date", placeholder="21w45.7 or 2021-11-14")
    if raw:
        try:
            conversion = ConvertUseCase(CwVersionContext(window=WINDOW)).execute(raw)
        except CwVersionError as exc:
            st.error(str(exc))
        else:
            st.metric(str(conversion.source), conversion.render_counterpart())

with bisect_tab:
    col1, col2 = st.columns(2)
    with col1:
        raw_from = st.text_input("From", key="bisect_from")
    with col2:
        raw_till = st.text_input("Till", key="bisect_till")
    default_days = [int(day) for day in SETTINGS.default_workdays.split(",")]
    workdays = st.multiselect(
        "Workdays",
        options=list(range(1, 8)),
        default=default_days,
        format_func=lambda day: WEEKDAY_NAMES[day - 1],
    )

    run_btn = st.button("Bisect", disabled=not (raw_from and raw_till and workdays))
    if run_btn:
        try:
            result = run_bisect(raw_from, raw_till, workdays)
        except CwVersionError as exc:
            st.error(str(exc))
        else:
            st.subheader("Regression Range")
            st.write(f"{result.start_date} ➔ {result.end_date}")
            st.metric("Workdays", result.workday_count)
            st.subheader("Bisect starting point" if result.has_single_midpoint() else "Two equivalent bisect starting points")
            st.dataframe(midpoints_dataframe(result), hide_index=True)
            with st.expander("All workdays in range"):
                st.dataframe(workdays_frame(result, WINDOW), hide_index=True)
            st.download_button(
                "Download range CSV",
                data=render_csv(bisect_to_rows(result, WINDOW)),
                file_name="cwver_bisect.csv",
                mime="text/csv",
            )
