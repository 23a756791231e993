from dataclasses import dataclass, fields
from datetime import date, datetime, time

from dateutil.relativedelta import relativedelta

_COMPONENTS = ("years", "months", "days", "hours", "minutes", "seconds")
_ABSOLUTE = ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Calendar difference between two points in time.

    ``years`` through ``seconds`` are the broken-down components, where
    ``days`` is only the part left over after whole months. ``total_days``
    is the full count of whole days spanned and already accounts for leap
    years and month lengths. Components are never negative; a backwards
    span is flagged with ``invert``.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    total_days: int = 0
    invert: bool = False

    def __post_init__(self) -> None:
        for field in fields(self):
            if field.name == "invert":
                if not isinstance(self.invert, bool):
                    raise TypeError(
                        f"Interval invert must be a bool, "
                        f"got {type(self.invert).__name__!r}: {self.invert!r}"
                    )
                continue
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Interval {field.name} must be an int, "
                    f"got {type(value).__name__!r}: {value!r}"
                )
            if value < 0:
                raise ValueError(
                    f"Interval {field.name} ({value}) must be >= 0\n"
                    f"Hint: express a backwards span with invert=True"
                )

    def __str__(self) -> str:
        """Human-friendly string showing components and total days."""
        sign = "-" if self.invert else ""
        return (
            f"Interval({sign}{self.years}y {self.months}m {self.days}d "
            f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}, "
            f"{self.total_days} days)"
        )

    @classmethod
    def between(cls, start: date | datetime, end: date | datetime) -> "Interval":
        """Compute the calendar difference from ``start`` to ``end``.

        Dates are treated as midnight. When ``end`` precedes ``start`` the
        components describe the span from ``end`` to ``start`` and
        ``invert`` is set. Sub-second precision is dropped.

        Raises:
            TypeError: If either bound is not a date/datetime, or a naive
                datetime is mixed with a timezone-aware one

        Example:
            >>> Interval.between(date(2016, 1, 1), date(2017, 1, 1))
            Interval(years=1, months=0, days=0, hours=0, minutes=0, seconds=0, total_days=366, invert=False)
        """
        start_dt = _as_datetime(start, "start")
        end_dt = _as_datetime(end, "end")

        if (start_dt.tzinfo is None) != (end_dt.tzinfo is None):
            raise TypeError(
                f"Cannot compare naive and timezone-aware datetimes.\n"
                f"Got start={start_dt!r}, end={end_dt!r}\n"
                f"Hint: give both bounds a tzinfo, e.g. tzinfo=timezone.utc"
            )
        if end_dt.tzinfo is not None:
            # Same tzinfo on both sides so day arithmetic follows the wall clock
            end_dt = end_dt.astimezone(start_dt.tzinfo)

        invert = end_dt < start_dt
        earlier, later = (end_dt, start_dt) if invert else (start_dt, end_dt)

        return cls.from_relativedelta(
            relativedelta(later, earlier),
            total_days=(later - earlier).days,
            invert=invert,
        )

    @classmethod
    def from_relativedelta(
        cls, delta: relativedelta, total_days: int, invert: bool = False
    ) -> "Interval":
        """Wrap a pre-computed relative delta.

        A negative delta is stored as its absolute value with ``invert``
        flipped. ``relativedelta`` cannot know how many days it spans, so
        ``total_days`` must be supplied by the caller.

        Raises:
            ValueError: If the delta carries absolute fields (``year=``,
                ``weekday=``, ...) or components of mixed sign
        """
        absolute = [name for name in _ABSOLUTE if getattr(delta, name) is not None]
        if absolute or delta.leapdays:
            raise ValueError(
                f"Cannot build an Interval from an absolute relativedelta.\n"
                f"Got {delta!r} (absolute fields: {', '.join(absolute) or 'leapdays'})"
            )

        values = [getattr(delta, name) for name in _COMPONENTS]
        if any(v > 0 for v in values) and any(v < 0 for v in values):
            raise ValueError(f"relativedelta components have mixed signs: {delta!r}")
        if any(v < 0 for v in values):
            values = [-v for v in values]
            invert = not invert

        return cls(**dict(zip(_COMPONENTS, values)), total_days=total_days, invert=invert)


def _as_datetime(value: date | datetime, edge: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(
        f"Interval {edge} must be a date or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )
