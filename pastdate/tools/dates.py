"""MCP tools for resolving natural-language dates."""

import logging

from fastmcp import FastMCP

from pastdate.clients.calendar import format_date
from pastdate.errors import DateParseError
from pastdate.models.conversion import DateConversion
from pastdate.models.options import ParseOptions
from pastdate.tools.date_utils import parse_date
from pastdate.tools.error_messages import safe_tool_wrapper

logger = logging.getLogger(__name__)


def convert(text: str, options: ParseOptions | None = None) -> DateConversion:
    """Parse *text* and pair it with the resolved date.

    Raises:
        DateParseError: If *text* is not a date expression.
    """
    resolved = parse_date(text, options=options)
    if resolved is None:
        raise DateParseError(text)
    return DateConversion(text=text, resolved=resolved)


def describe_conversion(conversion: DateConversion) -> str:
    return (
        f"{conversion.text} → {conversion.iso_date} "
        f"({format_date(conversion.resolved)})"
    )


def _resolve_text(text: str, options: ParseOptions) -> str:
    conversion = convert(text, options)
    logger.info("Resolved %r to %s", text, conversion.iso_date)
    return describe_conversion(conversion)


def register_date_tools(mcp: FastMCP) -> None:
    """Register date-resolution tools on the MCP server."""

    @mcp.tool
    def resolve_date(text: str) -> str:
        """Turn an English date expression into a calendar date in the past.

        Understands "today", "now", "yesterday", "3 days ago",
        "the day before yesterday", "1 month from 2 days before Aug 30",
        "Aug 20, 2013", "Aug 19" (this year) and "August 2011"
        (first of the month). Every result is midnight of a day at or
        before today.

        Args:
            text: The date expression, e.g. "2 weeks ago".

        Returns:
            The resolved date as "<text> → YYYY-MM-DD (Mon D, YYYY)", or an
            explanation of why the text could not be read.
        """
        from pastdate.config import get_settings

        settings = get_settings()
        options = ParseOptions(
            ignore_case=settings.ignore_case,
            trace=settings.trace_parser,
        )
        return safe_tool_wrapper(_resolve_text, text, options, context={"text": text})
