"""Backtracking parser combinators.

A parser is any callable ``(cursor, context) -> Success | Failure``. Parsers
never mutate their inputs, so ordered choice can retry each alternative from
the same cursor and a failure deep inside one alternative cannot leak into
its siblings.
"""

import logging
from collections.abc import Callable, Generator
from typing import Any, TypeVar

from pastdate.errors import GrammarError
from pastdate.parsing.cursor import Cursor, Failure, ParseContext, ParseResult, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[Cursor, ParseContext], ParseResult]
Steps = Callable[[ParseContext], Generator[Parser, Any, Any]]

_ASCII_DIGITS = frozenset("0123456789")


# ── Primitives ───────────────────────────────────────────────────────────────


def value(result: T) -> Parser:
    """Succeed with *result* without consuming input."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        return Success(result, cursor)

    return parse


def fail(reason: str = "no match", expected: tuple[str, ...] = ()) -> Parser:
    """Always fail at the current position."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        return Failure(cursor, reason, expected)

    return parse


def derive(compute: Callable[[ParseContext], T]) -> Parser:
    """Succeed with a value computed from the context, consuming nothing."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        return Success(compute(ctx), cursor)

    return parse


def literal(text: str) -> Parser:
    """Match *text* exactly (case-folded when ``ignore_case`` is set).

    The value is always *text* itself, not the matched slice of input.
    """
    if not text:
        raise GrammarError("literal() needs a non-empty string")
    size = len(text)
    folded = text.casefold()

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        candidate = cursor.text[cursor.pos : cursor.pos + size]
        if candidate == text or (
            ctx.options.ignore_case and candidate.casefold() == folded
        ):
            return Success(text, cursor.advance(size))
        return Failure(cursor, f"expected '{text}'", (repr(text),))

    return parse


def satisfy(predicate: Callable[[str], bool], name: str) -> Parser:
    """Match a single character accepted by *predicate*."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        if not cursor.is_eof and predicate(cursor.current):
            return Success(cursor.current, cursor.advance())
        return Failure(cursor, f"expected {name}", (name,))

    return parse


def take_while(
    predicate: Callable[[str], bool],
    name: str,
    min_count: int = 1,
) -> Parser:
    """Match the longest run of characters accepted by *predicate*.

    Fails without consuming anything if the run is shorter than *min_count*.
    """

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        text = cursor.text
        end = cursor.pos
        while end < len(text) and predicate(text[end]):
            end += 1
        if end - cursor.pos < min_count:
            return Failure(cursor, f"expected {name}", (name,))
        return Success(text[cursor.pos : end], Cursor(text, end))

    return parse


def end_of_input() -> Parser:
    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        if cursor.is_eof:
            return Success(None, cursor)
        return Failure(cursor, "expected end of input", ("end of input",))

    return parse


def spaces() -> Parser:
    """One or more whitespace characters."""
    return take_while(str.isspace, "whitespace")


def integer() -> Parser:
    """One or more ASCII digits, as an ``int``."""
    return mapped(take_while(_ASCII_DIGITS.__contains__, "integer"), int)


# ── Combinators ──────────────────────────────────────────────────────────────


def mapped(parser: Parser, transform: Callable[[Any], U]) -> Parser:
    """Apply *transform* to the value of a successful parse."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        result = parser(cursor, ctx)
        if isinstance(result, Failure):
            return result
        return Success(transform(result.value), result.cursor)

    return parse


def sequence(steps: Steps) -> Parser:
    """Run a generator of parsers against one evolving cursor.

    ``steps(ctx)`` yields parsers and is sent each parser's value; whatever
    it returns becomes the sequence's value. The first failing step fails the
    whole sequence, and the generator is closed without being resumed, so a
    semantic check can reject its input with ``yield fail(...)``::

        @sequence
        def pair(ctx):
            first = yield integer()
            yield literal(",")
            second = yield integer()
            if second < first:
                yield fail("descending pair")
            return first, second
    """

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        gen = steps(ctx)
        pending = cursor
        try:
            step = next(gen)
            while True:
                if not callable(step):
                    raise GrammarError(f"sequence step is not a parser: {step!r}")
                result = step(pending, ctx)
                if isinstance(result, Failure):
                    return result
                pending = result.cursor
                step = gen.send(result.value)
        except StopIteration as stop:
            return Success(stop.value, pending)
        finally:
            gen.close()

    return parse


def then(*parsers: Parser) -> Parser:
    """Run *parsers* in order, keeping the value of the last one."""
    if not parsers:
        raise GrammarError("then() needs at least one parser")

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        result: ParseResult = Success(None, cursor)
        for parser in parsers:
            result = parser(result.cursor, ctx)
            if isinstance(result, Failure):
                return result
        return result

    return parse


def followed_by(first: Parser, *rest: Parser) -> Parser:
    """Run *first* then *rest* in order, keeping the value of *first*."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        head = first(cursor, ctx)
        if isinstance(head, Failure):
            return head
        tail = then(*rest)(head.cursor, ctx) if rest else head
        if isinstance(tail, Failure):
            return tail
        return Success(head.value, tail.cursor)

    return parse


def alternation(*parsers: Parser) -> Parser:
    """Ordered choice: the first alternative to succeed wins.

    Every alternative starts from the same cursor. When all of them fail,
    the failure that got furthest into the input is reported, with the
    expected labels of equally-far failures merged.
    """
    if not parsers:
        raise GrammarError("alternation() needs at least one parser")

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        furthest: Failure | None = None
        for parser in parsers:
            result = parser(cursor, ctx)
            if isinstance(result, Success):
                return result
            furthest = _furthest(furthest, result)
        return furthest

    return parse


def optional(parser: Parser, default: Any = None) -> Parser:
    """Try *parser*; on failure succeed with *default* without consuming."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        result = parser(cursor, ctx)
        if isinstance(result, Failure):
            return Success(default, cursor)
        return result

    return parse


def label(parser: Parser, name: str) -> Parser:
    """Name *parser* for diagnostics. Never changes whether it matches."""

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        result = parser(cursor, ctx)
        if ctx.options.trace:
            outcome = "matched" if isinstance(result, Success) else "failed"
            logger.debug("%s %s at offset %d", name, outcome, cursor.pos)
        if isinstance(result, Failure) and result.cursor.pos == cursor.pos:
            return Failure(result.cursor, result.reason, (name,))
        return result

    return parse


def lazy(factory: Callable[[], Parser]) -> Parser:
    """Defer building a parser until it is first used.

    Lets a grammar refer to itself recursively without constructing an
    infinite tree up front.
    """
    built: list[Parser] = []

    def parse(cursor: Cursor, ctx: ParseContext) -> ParseResult:
        if not built:
            built.append(factory())
        return built[0](cursor, ctx)

    return parse


def run(parser: Parser, text: str, ctx: ParseContext) -> ParseResult:
    """Apply *parser* to the start of *text*."""
    return parser(Cursor(text), ctx)


def _furthest(current: Failure | None, candidate: Failure) -> Failure:
    if current is None or candidate.cursor.pos > current.cursor.pos:
        return candidate
    if candidate.cursor.pos < current.cursor.pos:
        return current
    merged = current.expected + tuple(
        name for name in candidate.expected if name not in current.expected
    )
    return Failure(current.cursor, current.reason, merged)
