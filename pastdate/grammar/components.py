"""Parsers for the building blocks of a date: month, day, year and intervals."""

from pastdate.clients.calendar import text_to_month
from pastdate.models.enums import IntervalUnit, MonthFormat
from pastdate.parsing.combinators import (
    Parser,
    alternation,
    fail,
    followed_by,
    integer,
    label,
    literal,
    mapped,
    optional,
    sequence,
    take_while,
    then,
    value,
)

_MONTH_FORMATS = (MonthFormat.NAME, MonthFormat.NUMBER)


def _token(name: str) -> Parser:
    """Everything up to the next whitespace (or end of input)."""
    return take_while(lambda ch: not ch.isspace(), name)


def month_name() -> Parser:
    """A month as a name ("Aug", "august") or a number ("8")."""

    @sequence
    def steps(ctx):
        text = yield _token("month")
        month = text_to_month(text, _MONTH_FORMATS)
        if month is None:
            yield fail(f"unknown month '{text}'")
        return month

    return label(steps, "month")


def day_of_month() -> Parser:
    """An integer from 1 to 31. Whether the month has that day is checked later."""

    @sequence
    def steps(ctx):
        day = yield integer()
        if not 1 <= day <= 31:
            yield fail(f"day {day} out of range")
        return day

    return label(steps, "day")


def year_4digit() -> Parser:
    @sequence
    def steps(ctx):
        text = yield _token("year")
        if len(text) != 4 or not text.isascii() or not text.isdigit():
            yield fail(f"'{text}' is not a four-digit year")
        return int(text)

    return label(steps, "year")


def interval_count() -> Parser:
    """A positive count, or "the" as an alias for 1 ("the day before ...")."""

    @sequence
    def counted(ctx):
        count = yield integer()
        if count < 1:
            yield fail("interval must be positive")
        return count

    return label(alternation(counted, then(literal("the"), value(1))), "interval")


def interval_unit() -> Parser:
    """day, week, month or year, singular or plural."""
    unit = alternation(
        literal("day"),
        literal("week"),
        literal("month"),
        literal("year"),
    )
    return label(mapped(followed_by(unit, optional(literal("s"))), IntervalUnit), "unit")
