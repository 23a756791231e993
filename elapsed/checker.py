"""Threshold checks against a calendar interval.

``ElapsedChecker`` holds at most one ``Interval`` and answers questions of
the form "have at least N units elapsed?". Larger components are folded
into smaller units before comparing, so two days and three hours count as
51 hours.
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from numbers import Rational, Real
from typing import Any

from typing_extensions import override

from elapsed.exceptions import LogicError
from elapsed.interval import Interval
from elapsed.units import TimeUnit
from elapsed.util import (
    days_to_hours,
    days_to_weeks,
    hours_to_minutes,
    minutes_to_seconds,
    years_to_months,
)

logger = logging.getLogger(__name__)

Amount = Real | Decimal | str
Unit = TimeUnit | str

# Plain ASCII decimal with optional exponent; no digit-group underscores
_NUMERIC_STRING = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


class TimeElapsed(ABC):
    """Capability of answering elapsed-time threshold questions."""

    @property
    @abstractmethod
    def interval(self) -> Interval | None:
        pass

    @interval.setter
    @abstractmethod
    def interval(self, value: Interval) -> None:
        pass

    @abstractmethod
    def has_elapsed(self, amount: Amount, unit: Unit = TimeUnit.DAY) -> bool:
        pass


class ElapsedChecker(TimeElapsed):
    """Compare a single calendar interval against thresholds.

    Example:
        >>> checker = ElapsedChecker.between(date(2016, 1, 1), date(2016, 12, 31))
        >>> checker.has_elapsed(11, "months")
        True
        >>> checker.has_years_elapsed(1)
        False
    """

    def __init__(self, interval: Interval | None = None) -> None:
        self._interval: Interval | None = None
        if interval is not None:
            self.interval = interval

    @classmethod
    def between(cls, start: date | datetime, end: date | datetime) -> "ElapsedChecker":
        """Build a checker for the span from ``start`` to ``end``.

        Raises:
            LogicError: If ``end`` precedes ``start``
        """
        return cls(Interval.between(start, end))

    @property
    @override
    def interval(self) -> Interval | None:
        return self._interval

    @interval.setter
    @override
    def interval(self, value: Interval) -> None:
        if not isinstance(value, Interval):
            raise TypeError(
                f"interval must be an Interval, got {type(value).__name__!r}\n"
                f"Hint: build one with Interval.between(start, end)"
            )
        if value.invert:
            logger.debug("Rejected inverted interval %s", value)
            raise LogicError(
                f"interval must not represent a backwards span, given: {value}"
            )
        logger.debug("Interval set to %s (was %s)", value, self._interval)
        self._interval = value

    @override
    def has_elapsed(self, amount: Amount, unit: Unit = TimeUnit.DAY) -> bool:
        """Return True if at least ``amount`` of ``unit`` has elapsed.

        Args:
            amount: Threshold, any real number or numeric string >= 1
            unit: A ``TimeUnit`` or one of ``VALID_TIME_UNITS``
                (case-insensitive, singular and plural are synonyms)

        Raises:
            LogicError: If no interval is set or ``amount`` is not numeric
            ValueError: If ``amount`` is below 1 or ``unit`` is unknown
        """
        interval = self._require_interval()
        threshold = _numeric(amount)
        if threshold < 1:
            raise ValueError(f"amount must be a positive value, given: {amount!r}")
        resolved = TimeUnit.parse(unit)

        actual = self._resolve(interval, resolved)
        logger.debug(
            "%s: actual %s %s, threshold %s",
            interval,
            actual,
            resolved.plural,
            threshold,
        )
        return actual >= threshold

    def actual(self, unit: Unit) -> int:
        """Cascaded amount of ``unit`` held by the interval."""
        return self._resolve(self._require_interval(), TimeUnit.parse(unit))

    def actual_months(self) -> int:
        interval = self._require_interval()
        return interval.months + years_to_months(interval.years)

    def actual_hours(self) -> int:
        # total_days rather than the month/day components: it already
        # accounts for leap years and month lengths
        interval = self._require_interval()
        return interval.hours + days_to_hours(interval.total_days)

    def actual_minutes(self) -> int:
        interval = self._require_interval()
        return interval.minutes + hours_to_minutes(self.actual_hours())

    def actual_seconds(self) -> int:
        interval = self._require_interval()
        return interval.seconds + minutes_to_seconds(self.actual_minutes())

    def has_years_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.YEAR)

    def has_months_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.MONTH)

    def has_weeks_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.WEEK)

    def has_days_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.DAY)

    def has_hours_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.HOUR)

    def has_minutes_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.MINUTE)

    def has_seconds_elapsed(self, amount: Amount) -> bool:
        return self.has_elapsed(amount, TimeUnit.SECOND)

    def _require_interval(self) -> Interval:
        if self._interval is None:
            raise LogicError("interval has not been set")
        return self._interval

    def _resolve(self, interval: Interval, unit: TimeUnit) -> int:
        if unit is TimeUnit.YEAR:
            return interval.years
        if unit is TimeUnit.MONTH:
            return self.actual_months()
        if unit is TimeUnit.WEEK:
            return days_to_weeks(interval.total_days)
        if unit is TimeUnit.HOUR:
            return self.actual_hours()
        if unit is TimeUnit.MINUTE:
            return self.actual_minutes()
        if unit is TimeUnit.SECOND:
            return self.actual_seconds()
        return interval.total_days


def _numeric(amount: Any) -> Real | Decimal:
    """Return ``amount`` as a finite number, parsing numeric strings."""
    value: Real | Decimal | None = None
    if isinstance(amount, str):
        if _NUMERIC_STRING.fullmatch(amount):
            value = Decimal(amount)
    elif isinstance(amount, (Real, Decimal)) and not isinstance(amount, bool):
        value = amount

    if value is None or not _is_finite(value):
        raise LogicError(f"amount must be numeric, given: {amount!r}")
    return value


def _is_finite(value: Real | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Rational):
        return True
    return math.isfinite(value)
