from datetime import datetime

from pastdate.models.options import ParseOptions
from pastdate.parsing.cursor import ParseContext

# Fixed reference moment: Wednesday, 2026-02-11, mid-afternoon
FIXED_NOW = datetime(2026, 2, 11, 15, 42, 7)


def make_options(**overrides: object) -> ParseOptions:
    defaults: dict = {
        "raise_on_error": True,
        "ignore_case": False,
        "trace": False,
    }
    defaults.update(overrides)
    return ParseOptions(**defaults)


def make_context(now: datetime = FIXED_NOW, **overrides: object) -> ParseContext:
    return ParseContext(now=now, options=make_options(**overrides))
