"""Errors raised while parsing iCalendar text."""


class ICalError(Exception):
    """Base exception for icaltext errors.

    Carries a human-readable message and the input text that caused it.
    """

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.message = message
        self.text = text


class ParseError(ICalError):
    """Raised when text does not conform to the iCalendar grammar."""

    pass


class BogusDataError(ICalError):
    """Raised when well-formed text holds an out-of-range value."""

    pass


class TypeMismatchError(ICalError, TypeError):
    """Raised when a date is ordered against something that is not a date."""

    pass
