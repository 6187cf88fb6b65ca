"""User-friendly error messages and safe tool wrapper."""

import logging
from collections.abc import Callable

from pastdate.errors import DateParseError, GrammarError

logger = logging.getLogger(__name__)

EXAMPLE_PHRASES = ("Aug 20, 2013", "August 2011", "yesterday", "3 days ago")


def get_user_message(error: Exception, context: dict | None = None) -> str:
    """Map an exception to a user-friendly message.

    Args:
        error: The exception to translate.
        context: Optional dict with extra info (e.g. {"text": "next friday"}).

    Returns:
        A human-readable error message.
    """
    if isinstance(error, DateParseError):
        text = (context or {}).get("text", error.text)
        examples = ", ".join(f"'{phrase}'" for phrase in EXAMPLE_PHRASES)
        return (
            f"I couldn't read '{text}' as a date. "
            f"Try a past date such as {examples}."
        )
    if isinstance(error, GrammarError):
        return "The date parser hit an internal error. Please report this input."
    return "Something went wrong. Please try again or contact support."


def safe_tool_wrapper(
    func: Callable[..., str],
    *args: object,
    context: dict | None = None,
    **kwargs: object,
) -> str:
    """Call *func*, catching errors and returning friendly messages.

    Args:
        func: Callable to invoke.
        *args: Positional arguments for *func*.
        context: Optional context dict for error messages.
        **kwargs: Keyword arguments for *func*.

    Returns:
        The function's return value on success, or a user-friendly error string.
    """
    try:
        return func(*args, **kwargs)
    except DateParseError as exc:
        logger.info("Unparseable date in %s: %s", func.__name__, exc.describe())
        return get_user_message(exc, context)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tool error in %s", func.__name__)
        return get_user_message(exc, context)
