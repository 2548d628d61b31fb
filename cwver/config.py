"""Central configuration for the cwver package."""
from __future__ import annotations

from dataclasses import dataclass

# 00-99 map onto 2000-2099; the format has no century digit.
CENTURY_BASE = 2000
DEFAULT_WORKDAYS = "1,2,3,4,5"

LOG_LEVEL = "WARNING"
LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"


@dataclass(slots=True, frozen=True)
class Settings:
    century_base: int
    default_workdays: str
    log_level: str
    log_format: str


SETTINGS = Settings(
    century_base=CENTURY_BASE,
    default_workdays=DEFAULT_WORKDAYS,
    log_level=LOG_LEVEL,
    log_format=LOG_FORMAT,
)
