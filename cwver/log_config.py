"""Loguru setup for the cwver command line and Streamlit front-ends.

The package disables its own loguru records on import, so library callers see
nothing unless they opt in through ``setup_logger``.
"""
from __future__ import annotations

import sys

from loguru import logger

from cwver.config import SETTINGS


def setup_logger(level: str | None = None, sink=None) -> int:
    """Replace loguru's default handler with a single sink and enable cwver logs.

    Returns the id of the added handler.
    """
    logger.remove()
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        format=SETTINGS.log_format,
        level=level or SETTINGS.log_level,
        colorize=False,
    )
    logger.enable("cwver")
    return handler_id
