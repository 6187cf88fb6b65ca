"""Immutable cursor, parse results and per-call parse context."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from pastdate.errors import GrammarError
from pastdate.models.options import ParseOptions

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """A position inside an input string.

    Cursors are never mutated: ``advance`` returns a new one, so a failed
    attempt is undone simply by reusing the cursor it started from.
    """

    text: str
    pos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pos <= len(self.text):
            raise GrammarError(
                f"Cursor position {self.pos} outside input of length {len(self.text)}"
            )

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def current(self) -> str:
        """Character at the cursor. Raises GrammarError at end of input."""
        if self.is_eof:
            raise GrammarError("No current character at end of input")
        return self.text[self.pos]

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def advance(self, count: int = 1) -> "Cursor":
        return Cursor(self.text, self.pos + count)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class Failure:
    """A parse attempt that did not match.

    ``cursor`` is where the mismatch was detected, which may be past the
    point the attempt started from. Callers never continue from it.
    """

    cursor: Cursor
    reason: str
    expected: tuple[str, ...] = ()


ParseResult = Success[Any] | Failure


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Everything a parser may read besides the input text.

    Built once per top-level call so every nested reference clause sees the
    same ``now``.
    """

    now: datetime
    options: ParseOptions = field(default_factory=ParseOptions)
