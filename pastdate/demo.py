"""Example conversions: ``python -m pastdate.demo``

Prints how a handful of representative phrases resolve today.
"""

from datetime import datetime

from pastdate.clients.calendar import format_date
from pastdate.config import get_settings
from pastdate.errors import DateParseError
from pastdate.server import setup_logging
from pastdate.tools.date_utils import parse_date

EXAMPLES = (
    "today",
    "1 day ago",
    "2 weeks ago",
    "1 month from 2 days from today",
    "Aug 27, 2013",
    "August 27",
    "Aug 2011",
    "1 month from 2 days before Aug 30",
)


def describe(text: str, now: datetime | None = None) -> str:
    """Return one line of demo output for *text*."""
    try:
        resolved = parse_date(text, now=now)
    except DateParseError as exc:
        return f"Error: {exc}"
    return f"{text}  =>  {format_date(resolved)}"


def main(now: datetime | None = None) -> None:
    setup_logging(get_settings().log_level)
    for text in EXAMPLES:
        print(describe(text, now=now))


if __name__ == "__main__":  # pragma: no cover
    main()
