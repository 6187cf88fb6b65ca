"""Parse English date expressions ("3 days ago", "Aug 20, 2013") into past dates."""

from pastdate.errors import DateParseError, GrammarError, PastDateError
from pastdate.models.options import ParseOptions
from pastdate.tools.date_utils import parse_date

__all__ = [
    "DateParseError",
    "GrammarError",
    "ParseOptions",
    "PastDateError",
    "parse_date",
]
