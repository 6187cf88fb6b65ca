"""Entry point for parsing English date expressions."""

import logging
from datetime import datetime

from pastdate.clients.calendar import current_moment
from pastdate.errors import DateParseError
from pastdate.grammar.phrases import english_date
from pastdate.models.options import ParseOptions
from pastdate.parsing.combinators import run
from pastdate.parsing.cursor import Failure, ParseContext

logger = logging.getLogger(__name__)

_GRAMMAR = english_date()


def parse_date(
    text: str,
    options: ParseOptions | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """Parse a natural-language date into midnight of that day.

    All dates are resolved into the past, relative to *now*.

    Supported formats:
    - "today", "now", "yesterday"
    - "3 days ago", "2 weeks ago", "the day before yesterday"
    - "1 month from 2 days before Aug 30" ("from", "before" and "until"
      all count backwards, just like "ago")
    - "Aug 20, 2013", "Aug 20 2013"
    - "Aug 19" (current year)
    - "August 2011" (first of the month)

    Args:
        text: The date string to parse.
        options: Engine options; defaults to ``ParseOptions()``.
        now: Override for the current moment (for testing).

    Returns:
        The resolved date at 00:00, or ``None`` if parsing failed and
        ``options.raise_on_error`` is false.

    Raises:
        DateParseError: If no date expression matches the whole string.
    """
    options = options or ParseOptions()
    ctx = ParseContext(now=now or current_moment(), options=options)

    try:
        result = run(_GRAMMAR, text, ctx)
    except RecursionError:
        # Nested reference clauses ran past the interpreter stack
        logger.warning("Date expression nested too deeply: %.60r", text)
        if not options.raise_on_error:
            return None
        raise DateParseError(text) from None

    if isinstance(result, Failure):
        logger.debug(
            "No date in %r: %s at offset %d", text, result.reason, result.cursor.pos
        )
        if not options.raise_on_error:
            return None
        raise DateParseError(text, result.cursor.pos, result.expected)

    logger.debug("Parsed %r as %s", text, result.value.date().isoformat())
    return result.value
