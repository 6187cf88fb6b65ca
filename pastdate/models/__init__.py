from pastdate.models.conversion import DateConversion
from pastdate.models.enums import IntervalUnit, Month, MonthFormat
from pastdate.models.options import ParseOptions

__all__ = [
    "DateConversion",
    "IntervalUnit",
    "Month",
    "MonthFormat",
    "ParseOptions",
]
