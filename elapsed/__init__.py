from .checker import ElapsedChecker, TimeElapsed
from .exceptions import LogicError
from .interval import Interval
from .units import VALID_TIME_UNITS, TimeUnit
from .util import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    days_to_hours,
    days_to_weeks,
    hours_to_minutes,
    minutes_to_seconds,
    years_to_months,
)

__all__ = [
    "ElapsedChecker",
    "TimeElapsed",
    "Interval",
    "TimeUnit",
    "VALID_TIME_UNITS",
    "LogicError",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "years_to_months",
    "days_to_weeks",
    "days_to_hours",
    "hours_to_minutes",
    "minutes_to_seconds",
]
