"""Functional core - iCalendar text parsing with no I/O."""

from .errors import ICalError, ParseError, BogusDataError, TypeMismatchError
from .folding import ParseMode, fold, unfold, split_content_lines
from .property import Parameter, Property
from .date import Date, DateTimeRecord
from .result import Outcome, Result, parse_property, parse_date, compare_dates

__all__ = [
    # Errors
    "ICalError",
    "ParseError",
    "BogusDataError",
    "TypeMismatchError",
    # Folding
    "ParseMode",
    "fold",
    "unfold",
    "split_content_lines",
    # Properties
    "Parameter",
    "Property",
    # Dates
    "Date",
    "DateTimeRecord",
    # Results
    "Outcome",
    "Result",
    "parse_property",
    "parse_date",
    "compare_dates",
]
