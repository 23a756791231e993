"""The closed set of units a threshold can be expressed in."""

from enum import Enum
from typing import Any


class TimeUnit(Enum):
    """Unit of a threshold passed to ``ElapsedChecker.has_elapsed``.

    Lookup is case-insensitive and accepts singular and plural tokens as
    synonyms, so ``TimeUnit("Hours") is TimeUnit.HOUR``.
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @classmethod
    def _missing_(cls, value: object) -> "TimeUnit | None":
        if not isinstance(value, str):
            return None
        token = value.lower()
        for unit in cls:
            if token in (unit.value, unit.plural):
                return unit
        return None

    @classmethod
    def parse(cls, unit: "TimeUnit | str | Any") -> "TimeUnit":
        """Resolve a unit token (or member) to its canonical member.

        Raises:
            ValueError: If ``unit`` is not one of ``VALID_TIME_UNITS``
        """
        if isinstance(unit, TimeUnit):
            return unit
        try:
            return cls(unit)
        except ValueError:
            valid = ", ".join(VALID_TIME_UNITS)
            raise ValueError(
                f"unit is not recognized, given: {unit!r}\n"
                f"Valid units: {valid}"
            ) from None


VALID_TIME_UNITS: tuple[str, ...] = tuple(
    token for unit in TimeUnit for token in (unit.value, unit.plural)
)
