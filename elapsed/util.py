"""Scale constants and conversions for elapsed.

The constants are fixed calendar-free factors between adjacent units.
Months and years are never converted to days here: that depends on the
calendar and is already folded into ``Interval.total_days``.
"""

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60


def years_to_months(years: int) -> int:
    return years * MONTHS_PER_YEAR


def days_to_weeks(days: int) -> int:
    """Whole weeks in ``days``, truncating any remainder."""
    return days // DAYS_PER_WEEK


def days_to_hours(days: int) -> int:
    return days * HOURS_PER_DAY


def hours_to_minutes(hours: int) -> int:
    return hours * MINUTES_PER_HOUR


def minutes_to_seconds(minutes: int) -> int:
    return minutes * SECONDS_PER_MINUTE
