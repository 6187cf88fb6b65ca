"""Phrase-level date grammar.

All dates resolve into the past relative to ``ctx.now`` and are truncated to
midnight. Alternatives are tried in the order listed; a phrase whose
components do not form a real calendar day fails like any other mismatch, so
the next alternative gets a chance at the same input.
"""

from pastdate.clients.calendar import make_date, start_of_day, subtract
from pastdate.grammar.components import (
    day_of_month,
    interval_count,
    interval_unit,
    month_name,
    year_4digit,
)
from pastdate.models.enums import IntervalUnit
from pastdate.parsing.combinators import (
    Parser,
    alternation,
    derive,
    end_of_input,
    fail,
    followed_by,
    label,
    lazy,
    literal,
    optional,
    sequence,
    spaces,
    then,
)


def _today() -> Parser:
    return derive(lambda ctx: start_of_day(ctx.now))


def now_or_today() -> Parser:
    return label(then(alternation(literal("today"), literal("now")), _today()), "today")


def yesterday() -> Parser:
    @sequence
    def steps(ctx):
        yield literal("yesterday")
        resolved = subtract(ctx.now, 1, IntervalUnit.DAY)
        if resolved is None:
            yield fail("date out of range")
        return resolved

    return label(steps, "yesterday")


def reference_date() -> Parser:
    """The date an interval is counted back from.

    "ago" means today. "from", "before" and "until" are interchangeable and
    introduce any full date expression, including another relative date.
    """
    ago = then(literal("ago"), _today())
    anchored = then(
        alternation(literal("from"), literal("before"), literal("until")),
        spaces(),
        lazy(english_date),
    )
    return label(alternation(ago, anchored), "reference date")


def relative_date() -> Parser:
    """``[count] unit reference``, e.g. "3 days ago" or "week before Aug 30"."""

    @sequence
    def steps(ctx):
        count = yield optional(interval_count(), default=1)
        yield optional(spaces())
        unit = yield interval_unit()
        yield spaces()
        reference = yield reference_date()
        resolved = subtract(reference, count, unit)
        if resolved is None:
            yield fail("date out of range")
        return resolved

    return label(steps, "relative date")


def month_and_year() -> Parser:
    """Month and year, e.g. "January 2010"; resolves to the first of the month."""

    @sequence
    def steps(ctx):
        month = yield month_name()
        yield spaces()
        year = yield year_4digit()
        resolved = make_date(year, month, 1)
        if resolved is None:
            yield fail("invalid date")
        return resolved

    return steps


def month_and_day() -> Parser:
    """Month and day, e.g. "Jan 1"; resolves within the current year."""

    @sequence
    def steps(ctx):
        month = yield month_name()
        yield spaces()
        day = yield day_of_month()
        resolved = make_date(ctx.now.year, month, day)
        if resolved is None:
            yield fail("invalid date")
        return resolved

    return steps


def full_date() -> Parser:
    """Month, day and year: "Aug 20, 2013" or "Aug 20 2013"."""

    @sequence
    def steps(ctx):
        month = yield month_name()
        yield spaces()
        day = yield day_of_month()
        yield optional(literal(","))
        yield optional(spaces())
        year = yield year_4digit()
        resolved = make_date(year, month, day)
        if resolved is None:
            yield fail("invalid date")
        return resolved

    return steps


def locale_date() -> Parser:
    # Most specific first, so a trailing year is never left unconsumed
    return label(alternation(full_date(), month_and_day(), month_and_year()), "date")


def english_date() -> Parser:
    """The whole input: one date expression, optionally padded with whitespace."""
    body = alternation(locale_date(), relative_date(), now_or_today(), yesterday())
    return followed_by(
        then(optional(spaces()), body),
        optional(spaces()),
        end_of_input(),
    )
