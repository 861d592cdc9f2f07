"""DATE and DATE-TIME values (DTSTART, DTEND, DTSTAMP, LAST-MODIFIED, ...).

Accepted value formats, based on ISO 8601:

    19991231            date only, no time
    19991231T115900     date with local time
    19991231T115900Z    date and time in UTC
"""

import datetime as dt
import re
from dataclasses import dataclass

from .errors import BogusDataError, ParseError, TypeMismatchError
from .folding import ParseMode
from .property import Parameter, Property

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_MONTH_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_DIGITS = re.compile(r"[0-9]+")


def is_leap_year(year: int) -> bool:
    """Every fourth year is a leap year; there is no century correction."""
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    table = LEAP_MONTH_DAYS if is_leap_year(year) else MONTH_DAYS
    return table[month - 1]


@dataclass(frozen=True)
class DateTimeRecord:
    """Plain date-time fields for calendar and scheduling consumers."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    is_utc: bool = False


class Date:
    """
    A date or date-time iCalendar property.

    Wraps a generic Property; the value string is rebuilt from the numeric
    fields every time the date is serialized. Dates come from parse() or
    from the year/month/day constructor.
    """

    def __init__(self, name: str, year: int, month: int, day: int):
        """
        Create a date-only property such as DTSTART;VALUE=DATE:20250115.

        The fields are stored as given, with no range checks.
        """
        self._reset(Property(name, ""))
        self._year, self._month, self._day = year, month, day
        self._date_only = True
        self._property.value = self.value
        self._property.add_parameter("VALUE", "DATE")

    def _reset(self, prop: Property) -> None:
        self._property = prop
        self._year = self._month = self._day = 0
        self._hour = self._minute = self._second = 0
        self._is_utc = False
        self._date_only = False

    @classmethod
    def from_fields(cls, name: str, year: int, month: int, day: int) -> "Date":
        """Same as Date(name, year, month, day)."""
        return cls(name, year, month, day)

    @classmethod
    def parse(cls, text: str, mode: ParseMode = ParseMode.LOOSE) -> "Date":
        """
        Parse a date property from one or more lines of iCalendar.

        Args:
            text: Content line, e.g. "DTSTART;VALUE=DATE:19991231"
            mode: STRICT rejects unknown VALUE parameters; LOOSE ignores them

        Raises:
            ParseError: If the text does not match the date grammar
            BogusDataError: If a field is out of range
        """
        date = cls.__new__(cls)
        date._reset(Property.parse(text, mode))
        date._check_value_parameters(mode, text)
        date._parse_value(date._property.value)
        return date

    def _check_value_parameters(self, mode: ParseMode, text: str) -> None:
        """Reject unknown VALUE parameters under STRICT.

        Whether the date carries a time is decided by the value string.
        """
        for param in self._property.parameters:
            if param.name.upper() != "VALUE":
                continue
            if param.value.upper() not in ("DATE", "DATE-TIME") and mode is ParseMode.STRICT:
                raise ParseError(f"Unknown date VALUE '{param.value}'", text)

    def _parse_value(self, value: str) -> None:
        if len(value) < 8 or not _DIGITS.fullmatch(value[:8]):
            raise ParseError(f"Invalid date format '{value}'", value)

        year, month, day = int(value[:4]), int(value[4:6]), int(value[6:8])
        if not 1 <= month <= 12 or not 1 <= day <= 31:
            raise BogusDataError(f"Invalid date '{value}'", value)
        if day > days_in_month(year, month):
            raise BogusDataError(f"Invalid day of month '{value}'", value)
        self._year, self._month, self._day = year, month, day

        if len(value) == 8:
            self._date_only = True
            return

        if value[8] != "T":
            raise ParseError(f"Invalid date format '{value}'", value)

        digits = value[9:15]
        if len(digits) != 6 or not _DIGITS.fullmatch(digits):
            raise BogusDataError(f"Invalid time in date string '{value}'", value)
        hour, minute, second = int(digits[:2]), int(digits[2:4]), int(digits[4:6])
        if hour > 23 or minute > 59 or second > 59:
            raise BogusDataError(f"Invalid time in date string '{value}'", value)

        self._hour, self._minute, self._second = hour, minute, second
        self._date_only = False
        self._is_utc = value[15:16] == "Z"

    @property
    def name(self) -> str:
        return self._property.name

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return self._property.parameters

    def add_parameter(self, param: Parameter | str, value: str | None = None) -> None:
        self._property.add_parameter(param, value)

    def get_parameter(self, name: str) -> Parameter | None:
        return self._property.get_parameter(name)

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, year: int) -> None:
        self._year = year

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, month: int) -> None:
        self._month = month

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, day: int) -> None:
        self._day = day

    @property
    def hour(self) -> int:
        return self._hour

    @hour.setter
    def hour(self, hour: int) -> None:
        self._hour = self._time_field(hour)

    @property
    def minute(self) -> int:
        return self._minute

    @minute.setter
    def minute(self, minute: int) -> None:
        self._minute = self._time_field(minute)

    @property
    def second(self) -> int:
        return self._second

    @second.setter
    def second(self, second: int) -> None:
        self._second = self._time_field(second)

    def _time_field(self, value: int) -> int:
        # Date-only values have no time of day
        if self._date_only and value != 0:
            raise BogusDataError("Cannot set a time on a date-only value", self.value)
        return value

    @property
    def is_utc(self) -> bool:
        return self._is_utc

    @is_utc.setter
    def is_utc(self, is_utc: bool) -> None:
        if self._date_only and is_utc:
            raise BogusDataError("Cannot mark a date-only value as UTC", self.value)
        self._is_utc = is_utc

    @property
    def date_only(self) -> bool:
        return self._date_only

    @date_only.setter
    def date_only(self, date_only: bool) -> None:
        self._date_only = date_only
        if date_only:
            self._hour = self._minute = self._second = 0
            self._is_utc = False
        # Keep an explicit VALUE parameter in step with the value string
        if self._property.get_parameter("VALUE") is not None:
            self._property.set_parameter("VALUE", "DATE" if date_only else "DATE-TIME")

    @property
    def value(self) -> str:
        """The iCalendar value string, regenerated from the current fields."""
        value = f"{self._year:04d}{self._month:02d}{self._day:02d}"
        if not self._date_only:
            value += f"T{self._hour:02d}{self._minute:02d}{self._second:02d}"
            if self._is_utc:
                value += "Z"
        return value

    def to_text(self) -> str:
        """Export to a folded iCalendar content line."""
        self._property.value = self.value
        return self._property.to_text()

    def to_record(self) -> DateTimeRecord:
        return DateTimeRecord(
            year=self._year,
            month=self._month,
            day=self._day,
            hour=self._hour,
            minute=self._minute,
            second=self._second,
            is_utc=self._is_utc,
        )

    def to_datetime(self) -> dt.date | dt.datetime:
        """
        Convert to a stdlib date, or a datetime (UTC-aware if is_utc).

        The stdlib applies the full Gregorian calendar, so a value such as
        19000229 that parses under the every-fourth-year rule, or a date built
        from unchecked fields, has no stdlib equivalent.

        Raises:
            BogusDataError: If the fields do not form a real calendar date
        """
        tz = dt.timezone.utc if self._is_utc else None
        try:
            if self._date_only:
                return dt.date(self._year, self._month, self._day)
            return dt.datetime(
                self._year, self._month, self._day,
                self._hour, self._minute, self._second,
                tzinfo=tz,
            )
        except ValueError as e:
            raise BogusDataError(f"No calendar date for '{self.value}': {e}", self.value) from e

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (self._year, self._month, self._day, self._hour, self._minute, self._second)

    def compare_to(self, other: object) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after other."""
        if not isinstance(other, Date):
            raise TypeMismatchError(
                f"Cannot compare Date with {type(other).__name__}", repr(other)
            )
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # mutable

    def __lt__(self, other: object) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        return f"Date(name={self.name!r}, value={self.value!r})"
