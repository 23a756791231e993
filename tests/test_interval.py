"""Tests for Interval construction and calendar differences."""

from datetime import date, datetime, timedelta, timezone

import pytest
from dateutil.relativedelta import relativedelta

from elapsed import Interval


def test_interval_defaults_to_zero():
    interval = Interval()
    assert interval.years == 0
    assert interval.seconds == 0
    assert interval.total_days == 0
    assert interval.invert is False


def test_interval_is_frozen():
    interval = Interval(days=1, total_days=1)
    with pytest.raises(AttributeError):
        interval.days = 2  # type: ignore[misc]


def test_interval_rejects_negative_components():
    """Test that direction is only expressed through invert."""
    with pytest.raises(ValueError, match="invert=True"):
        Interval(hours=-1)
    with pytest.raises(ValueError, match="total_days"):
        Interval(total_days=-5)


@pytest.mark.parametrize("value", [1.5, "2", True])
def test_interval_rejects_non_int_components(value):
    with pytest.raises(TypeError, match="must be an int"):
        Interval(days=value)


@pytest.mark.parametrize("value", ["no", 0, None])
def test_interval_rejects_non_bool_invert(value):
    """Test that invert only accepts real booleans."""
    with pytest.raises(TypeError, match="invert must be a bool"):
        Interval(days=1, total_days=1, invert=value)


def test_interval_str():
    assert str(Interval(years=1, total_days=366)) == "Interval(1y 0m 0d 00:00:00, 366 days)"
    assert (
        str(Interval(hours=2, minutes=5, seconds=9, invert=True))
        == "Interval(-0y 0m 0d 02:05:09, 0 days)"
    )


def test_between_almost_a_year():
    """Test 2016-01-01 to 2016-12-31 in a leap year."""
    interval = Interval.between(date(2016, 1, 1), date(2016, 12, 31))

    assert interval.years == 0
    assert interval.months == 11
    assert interval.days == 30
    assert interval.total_days == 365
    assert interval.invert is False


def test_between_counts_leap_days():
    """Test that total_days reflects the actual calendar."""
    leap = Interval.between(date(2016, 1, 1), date(2017, 1, 1))
    common = Interval.between(date(2017, 1, 1), date(2018, 1, 1))

    assert leap.years == 1 and leap.months == 0 and leap.days == 0
    assert leap.total_days == 366
    assert common.years == 1
    assert common.total_days == 365


def test_between_backwards_sets_invert():
    """Test that a reversed span keeps positive components."""
    forward = Interval.between(date(2016, 1, 1), date(2016, 12, 31))
    backward = Interval.between(date(2016, 12, 31), date(2016, 1, 1))

    assert backward.invert is True
    assert backward.months == forward.months
    assert backward.days == forward.days
    assert backward.total_days == forward.total_days


def test_between_datetimes_fills_time_components():
    interval = Interval.between(
        datetime(2017, 8, 22, 0, 0, 0), datetime(2017, 8, 23, 2, 30, 15)
    )

    assert interval.days == 1
    assert interval.hours == 2
    assert interval.minutes == 30
    assert interval.seconds == 15
    assert interval.total_days == 1


def test_between_drops_microseconds():
    """Test that 0.8s rounds down to zero whole seconds."""
    interval = Interval.between(
        datetime(2017, 1, 1, 0, 0, 0, 700000), datetime(2017, 1, 1, 0, 0, 1, 500000)
    )
    assert interval.seconds == 0
    assert interval.total_days == 0


def test_between_mixes_date_and_datetime():
    """Test that dates are treated as midnight."""
    interval = Interval.between(date(2017, 1, 1), datetime(2017, 1, 1, 6, 0))
    assert interval.hours == 6


def test_between_aware_datetimes_in_different_zones():
    """Test that the same instant in two zones is a zero span."""
    utc = datetime(2025, 1, 1, 0, 0, tzinfo=timezone.utc)
    plus_one = datetime(2025, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))

    assert Interval.between(utc, plus_one) == Interval()


def test_between_rejects_naive_and_aware_mix():
    with pytest.raises(TypeError, match="naive and timezone-aware"):
        Interval.between(
            datetime(2025, 1, 1), datetime(2025, 1, 2, tzinfo=timezone.utc)
        )


def test_between_rejects_non_dates():
    with pytest.raises(TypeError, match="must be a date or datetime"):
        Interval.between(0, date(2025, 1, 1))  # type: ignore[arg-type]


def test_from_relativedelta():
    interval = Interval.from_relativedelta(
        relativedelta(months=1, days=3, hours=5), total_days=34
    )
    assert interval == Interval(months=1, days=3, hours=5, total_days=34)


def test_from_negative_relativedelta_flips_invert():
    interval = Interval.from_relativedelta(relativedelta(months=-2, days=-3), total_days=64)

    assert interval.months == 2
    assert interval.days == 3
    assert interval.invert is True


def test_from_relativedelta_rejects_mixed_signs():
    with pytest.raises(ValueError, match="mixed signs"):
        Interval.from_relativedelta(relativedelta(months=1, days=-3), total_days=27)


def test_from_relativedelta_rejects_absolute_fields():
    with pytest.raises(ValueError, match="absolute"):
        Interval.from_relativedelta(relativedelta(year=2020, months=1), total_days=31)
