"""Exception hierarchy for date parsing.

Grammar mismatches are never exceptions: they travel as ``Failure`` values
through the combinators. Exceptions are only raised for malformed internal
state and for the public "could not parse" signal.
"""


class PastDateError(Exception):
    """Base class for all pastdate errors."""


class GrammarError(PastDateError):
    """The parser was built or driven incorrectly (a programming error)."""


class DateParseError(PastDateError, ValueError):
    """No grammar alternative matched the whole input.

    Args:
        text: The input that failed to parse.
        offset: Furthest position the parser reached before giving up.
        expected: Diagnostic labels of what could have matched at *offset*.
    """

    def __init__(
        self,
        text: str,
        offset: int = 0,
        expected: tuple[str, ...] = (),
    ) -> None:
        super().__init__(f"Cannot parse date: '{text}'")
        self.text = text
        self.offset = offset
        self.expected = expected

    def describe(self) -> str:
        """Return a debugging description including the failure position."""
        if not self.expected:
            return f"{self} at offset {self.offset}"
        wanted = ", ".join(self.expected)
        return f"{self} at offset {self.offset} (expected {wanted})"
