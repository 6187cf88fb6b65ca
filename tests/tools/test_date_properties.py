"""Property-based checks of parse_date against direct calendar arithmetic."""

from datetime import date, datetime, timedelta

import pytest
from dateutil.relativedelta import relativedelta
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from pastdate import DateParseError, parse_date
from tests.factories import FIXED_NOW

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_UNITS = ("day", "week", "month", "year")

# The autouse env-isolation fixture is function-scoped but irrelevant per example
_property = settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)

_moments = st.datetimes(
    min_value=datetime(1900, 1, 1),
    max_value=datetime(2100, 12, 31, 23, 59, 59),
)


@_property
@given(day=st.dates(min_value=date(1000, 1, 1), max_value=date(9999, 12, 31)))
def test_full_date_resolves_to_that_day(day):
    month = _MONTH_ABBREVIATIONS[day.month - 1]
    expected = datetime(day.year, day.month, day.day)
    assert parse_date(f"{month} {day.day}, {day.year}", now=FIXED_NOW) == expected
    assert parse_date(f"{month} {day.day} {day.year}", now=FIXED_NOW) == expected


@_property
@given(month=st.integers(min_value=1, max_value=12), day=st.integers(min_value=1, max_value=31))
def test_month_and_day_matches_calendar_validity(month, day):
    text = f"{_MONTH_ABBREVIATIONS[month - 1]} {day}"
    try:
        expected = datetime(FIXED_NOW.year, month, day)
    except ValueError:
        with pytest.raises(DateParseError):
            parse_date(text, now=FIXED_NOW)
    else:
        assert parse_date(text, now=FIXED_NOW) == expected


@_property
@given(
    count=st.integers(min_value=1, max_value=500),
    unit=st.sampled_from(_UNITS),
    plural=st.booleans(),
    now=_moments,
)
def test_n_units_ago(count, unit, plural, now):
    text = f"{count} {unit}{'s' if plural else ''} ago"
    midnight = datetime(now.year, now.month, now.day)
    expected = midnight - relativedelta(**{f"{unit}s": count})
    assert parse_date(text, now=now) == expected


@_property
@given(now=_moments)
def test_today_is_midnight_of_now(now):
    assert parse_date("today", now=now) == datetime(now.year, now.month, now.day)
    assert parse_date("yesterday", now=now) == (
        datetime(now.year, now.month, now.day) - timedelta(days=1)
    )
