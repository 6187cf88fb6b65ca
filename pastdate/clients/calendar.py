"""Calendar operations used by the date grammar.

Thin adapter over :mod:`datetime` and :class:`dateutil.relativedelta.relativedelta`.
The grammar only talks to the calendar through these functions, and only at
its leaves: building a concrete date, shifting it, or looking up a month name.
"""

from collections.abc import Iterable
from datetime import datetime

from dateutil.relativedelta import relativedelta

from pastdate.models.enums import IntervalUnit, Month, MonthFormat

# Month name/abbreviation → month int
_MONTH_NAMES: dict[str, int] = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10, "nov": 11, "november": 11, "dec": 12, "december": 12,
}

_ASCII_DIGITS = frozenset("0123456789")


def current_moment() -> datetime:
    """Return the current local time (naive)."""
    return datetime.now()


def start_of_day(moment: datetime) -> datetime:
    """Truncate *moment* to midnight of the same day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def make_date(year: int, month: int, day: int) -> datetime | None:
    """Build midnight of a Gregorian calendar day.

    Returns:
        The date at 00:00, or ``None`` if the triple is not a real day
        (e.g. April 31, or February 29 outside a leap year).
    """
    try:
        return datetime(year, month, day)
    except ValueError:
        return None


def subtract(moment: datetime, amount: int, unit: IntervalUnit) -> datetime | None:
    """Shift *moment* back by ``amount`` units, calendar-correctly.

    Month and year steps clamp to the last day of the target month, so
    March 31 minus one month is February 28 (or 29 in a leap year).

    Returns:
        Midnight of the shifted day, or ``None`` if it falls outside the
        years ``datetime`` can represent.
    """
    try:
        delta = relativedelta(**{f"{IntervalUnit(unit).value}s": amount})
        return start_of_day(moment - delta)
    except (ValueError, OverflowError):
        return None


def text_to_month(
    text: str,
    formats: Iterable[MonthFormat] = (MonthFormat.NAME,),
) -> Month | None:
    """Resolve a month token, trying each format in order.

    ``MonthFormat.NAME`` accepts full or abbreviated English names in any
    case; ``MonthFormat.NUMBER`` accepts ``1`` through ``12``.
    """
    for fmt in formats:
        if fmt is MonthFormat.NAME:
            number = _MONTH_NAMES.get(text.casefold())
        elif 1 <= len(text) <= 2 and set(text) <= _ASCII_DIGITS:
            number = int(text)
        else:
            number = None
        if number is not None and 1 <= number <= 12:
            return Month(number)
    return None


def format_date(moment: datetime) -> str:
    """Format as a medium date, e.g. ``Aug 27, 2013``."""
    return f"{moment:%b} {moment.day}, {moment.year}"
