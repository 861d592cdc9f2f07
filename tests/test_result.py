"""Tests for tagged parse results."""

import pytest

from icaltext.core.date import Date
from icaltext.core.errors import BogusDataError, ParseError, TypeMismatchError
from icaltext.core.folding import ParseMode
from icaltext.core.property import Property
from icaltext.core.result import (
    Outcome,
    Result,
    compare_dates,
    parse_date,
    parse_property,
)


class TestParseProperty:
    def test_ok(self):
        result = parse_property("SUMMARY:Lunch")
        assert result.ok is True
        assert result.outcome is Outcome.OK
        assert isinstance(result.value, Property)
        assert result.unwrap().value == "Lunch"

    def test_structural(self):
        result = parse_property("SUMMARY Lunch")
        assert result.ok is False
        assert result.outcome is Outcome.STRUCTURAL
        assert result.value is None
        assert result.text == "SUMMARY Lunch"
        assert "':'" in result.message

    def test_strict_comma(self):
        result = parse_property("ATTENDEE;MEMBER=a,b:x", ParseMode.STRICT)
        assert result.outcome is Outcome.STRUCTURAL


class TestParseDate:
    def test_ok(self):
        result = parse_date("DTSTART:20000229")
        assert result.ok
        assert isinstance(result.value, Date)

    def test_data_validity(self):
        result = parse_date("DTSTART:20230230")
        assert result.outcome is Outcome.DATA_VALIDITY
        assert result.text == "20230230"

    def test_structural(self):
        result = parse_date("DTSTART:2023131")
        assert result.outcome is Outcome.STRUCTURAL

    @pytest.mark.parametrize(
        "line,error",
        [("DTSTART:2023131", ParseError), ("DTSTART:20230230", BogusDataError)],
    )
    def test_unwrap_raises(self, line, error):
        with pytest.raises(error):
            parse_date(line).unwrap()


class TestCompareDates:
    def test_ordering(self):
        a = Date.parse("DTSTART:20250115")
        b = Date.parse("DTSTART:20250116")
        assert compare_dates(a, b).value == -1
        assert compare_dates(b, a).value == 1
        assert compare_dates(a, a).value == 0

    def test_type_mismatch(self):
        result = compare_dates(Date.parse("DTSTART:20250115"), "20250115")
        assert result.outcome is Outcome.TYPE_MISMATCH
        with pytest.raises(TypeMismatchError):
            result.unwrap()


class TestResultFromError:
    def test_maps_error_kinds(self):
        assert Result.from_error(ParseError("x")).outcome is Outcome.STRUCTURAL
        assert Result.from_error(BogusDataError("x")).outcome is Outcome.DATA_VALIDITY
        assert Result.from_error(TypeMismatchError("x")).outcome is Outcome.TYPE_MISMATCH
