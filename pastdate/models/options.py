from pydantic import BaseModel, ConfigDict


class ParseOptions(BaseModel):
    """Options for a single parse call, forwarded untouched to the engine."""

    model_config = ConfigDict(frozen=True)

    # Raise DateParseError on failure; otherwise parse_date returns None
    raise_on_error: bool = True
    # Fold case when matching literals ("Today", "3 DAYS AGO")
    ignore_case: bool = False
    # Log every labelled parser's outcome at DEBUG level
    trace: bool = False
