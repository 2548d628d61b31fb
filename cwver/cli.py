"""Command-line entrypoint for calendar-week versions."""
from __future__ import annotations

import argparse
import sys
from datetime import date

from loguru import logger

from cwver import __version__
from cwver.application.use_cases import BisectUseCase, ConvertUseCase, CwVersionContext, today_version
from cwver.config import SETTINGS
from cwver.domain.errors import CwVersionError
from cwver.domain.services import Bisector
from cwver.domain.year_window import CenturyWindow
from cwver.infrastructure.parsing.tokens import parse_workdays
from cwver.log_config import setup_logger
from cwver.presentation.report import (
    bisect_to_rows,
    render_bisect,
    render_conversion,
    render_csv,
    render_today,
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cwver",
        description="Command line tool to work with calendar week version strings (e.g. 21w45.7).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion details to stderr")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("today", help="Display today's date as cw version string.")

    convert = subparsers.add_parser(
        "convert",
        help="Convert a cw version string (e.g. 21w45.7) into an ISO date, or an ISO date into a cw version.",
    )
    convert.add_argument("cw_ver_str", help="cw version string or YYYY-MM-DD date")

    bisect = subparsers.add_parser(
        "bisect",
        help=(
            "Calculate the workday(s) in the middle of two cw versions spanning a regression range. "
            "Saturdays and sundays are ignored. Use --workdays to override."
        ),
    )
    bisect.add_argument("from_", metavar="from", help="left side of the regression range")
    bisect.add_argument("till", help="right side of the regression range")
    bisect.add_argument(
        "-w",
        "--workdays",
        default=SETTINGS.default_workdays,
        help="comma separated ISO weekdays counted as workdays (1=Monday ... 7=Sunday)",
    )
    bisect.add_argument("--format", choices=("text", "csv"), default="text", help="Output format")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, today: date) -> str:
    window = CenturyWindow(SETTINGS.century_base)

    if args.command == "convert":
        context = CwVersionContext(window=window)
        return render_conversion(ConvertUseCase(context).execute(args.cw_ver_str))

    if args.command == "bisect":
        policy = parse_workdays(args.workdays)
        context = CwVersionContext(bisector=Bisector(policy, window), window=window)
        result = BisectUseCase(context).execute(args.from_, args.till)
        if args.format == "csv":
            return render_csv(bisect_to_rows(result, window)).decode("utf-8").rstrip("\n")
        return render_bisect(result, window)

    return render_today(today_version(today, window))


def main(argv: list[str] | None = None, today: date | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    setup_logger("DEBUG" if args.verbose else None)

    try:
        output = run(args, today or date.today())
    except CwVersionError as exc:
        logger.debug("{} failed for input {!r}", args.command or "today", exc.value)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
