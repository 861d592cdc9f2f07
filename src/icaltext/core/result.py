"""Tagged results for callers that prefer values over exceptions."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from .date import Date
from .errors import BogusDataError, ICalError, ParseError, TypeMismatchError
from .folding import ParseMode
from .property import Property

T = TypeVar("T")


class Outcome(Enum):
    """What happened to a parse or comparison."""

    OK = "ok"
    STRUCTURAL = "structural"  # Text does not match the grammar
    DATA_VALIDITY = "data_validity"  # Well-formed but out of range
    TYPE_MISMATCH = "type_mismatch"  # Compared against a non-date


_ERRORS: dict[Outcome, type[ICalError]] = {
    Outcome.STRUCTURAL: ParseError,
    Outcome.DATA_VALIDITY: BogusDataError,
    Outcome.TYPE_MISMATCH: TypeMismatchError,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success with a value, or a failure with its message and offending text."""

    outcome: Outcome
    value: T | None = None
    message: str = ""
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def unwrap(self) -> T:
        """Return the value, or raise the exception matching the outcome."""
        if self.outcome is Outcome.OK:
            return self.value
        raise _ERRORS[self.outcome](self.message, self.text)

    @classmethod
    def from_error(cls, error: ICalError) -> "Result[T]":
        if isinstance(error, TypeMismatchError):
            outcome = Outcome.TYPE_MISMATCH
        elif isinstance(error, BogusDataError):
            outcome = Outcome.DATA_VALIDITY
        else:
            outcome = Outcome.STRUCTURAL
        return cls(outcome=outcome, message=error.message, text=error.text)


def _capture(fn: Callable[..., T], *args) -> Result[T]:
    try:
        return Result(Outcome.OK, fn(*args))
    except ICalError as e:
        return Result.from_error(e)


def parse_property(text: str, mode: ParseMode = ParseMode.LOOSE) -> Result[Property]:
    """Parse a property line without raising."""
    return _capture(Property.parse, text, mode)


def parse_date(text: str, mode: ParseMode = ParseMode.LOOSE) -> Result[Date]:
    """Parse a date property line without raising."""
    return _capture(Date.parse, text, mode)


def compare_dates(a: Date, b: object) -> Result[int]:
    """Compare two dates, returning -1, 0 or 1 as the value."""
    return _capture(a.compare_to, b)
