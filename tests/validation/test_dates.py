"""Tests for the date engine.

Covers format detection, calendar validity (including leap years), ISO
conversion and the strict dd-mm-yyyy helpers.
"""

from datetime import date, datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.validation.dates import (
    DateEngine,
    DateFormat,
    ParsedDate,
    is_valid_date,
    is_valid_dmy,
    parse_date,
    to_iso,
    to_iso_from_dmy,
)

from tests.conftest import rendered_dates


class TestParse:
    """Structural parsing of the four accepted formats."""

    @pytest.mark.parametrize(
        ("raw", "fmt"),
        [
            ("15-03-1990", DateFormat.DMY_DASH),
            ("15/03/1990", DateFormat.DMY_SLASH),
            ("1990-03-15", DateFormat.ISO),
            ("15.03.1990", DateFormat.DMY_DOT),
        ],
    )
    def test_formats(self, engine: DateEngine, raw: str, fmt: DateFormat) -> None:
        assert engine.parse(raw) == ParsedDate(day=15, month=3, year=1990, format=fmt)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "15-3-1990",
            "1990/03/15",
            " 15-03-1990",
            "15-03-1990 ",
            "15-03-90",
            "15 03 1990",
            "15-03/1990",
            "١٥-٠٣-١٩٩٠",
            "15-03-1990T00:00",
        ],
    )
    def test_rejected_shapes(self, engine: DateEngine, raw: str) -> None:
        assert engine.parse(raw) is None
        assert not engine.is_valid(raw)

    @pytest.mark.parametrize("raw", [None, 19900315, date(1990, 3, 15), ["15-03-1990"]])
    def test_non_string_input(self, engine: DateEngine, raw: object) -> None:
        assert engine.parse(raw) is None
        assert len(engine.cache) == 0

    def test_structural_parse_keeps_out_of_range_parts(self, engine: DateEngine) -> None:
        parsed = engine.parse("45-13-1990")
        assert parsed is not None
        assert (parsed.day, parsed.month) == (45, 13)
        assert not parsed.is_calendar_valid()


class TestCalendarValidity:
    """Year range, month/day ranges and real calendar dates."""

    @pytest.mark.parametrize("raw", ["29-02-2020", "29-02-2000", "29-02-2096", "31-12-2100", "01-01-1900"])
    def test_valid(self, raw: str) -> None:
        assert is_valid_date(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "29-02-2021",
            "29-02-1900",
            "29-02-2100",
            "31-04-2020",
            "31-06-2020",
            "00-01-2020",
            "01-00-2020",
            "32-01-2020",
            "01-13-2020",
            "31-12-1899",
            "01-01-2101",
        ],
    )
    def test_invalid(self, raw: str) -> None:
        assert not is_valid_date(raw)

    @given(st.integers(min_value=1900, max_value=2100))
    def test_leap_years_follow_gregorian_rules(self, year: int) -> None:
        leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        assert is_valid_date(f"29-02-{year}") is leap

    @given(rendered_dates())
    def test_all_formats_agree(self, pair: tuple[date, str]) -> None:
        """Every rendering of the same day converts to the same ISO string."""
        day, text = pair
        assert is_valid_date(text)
        assert to_iso(text) == f"{day.isoformat()}T00:00:00.000Z"


class TestConversion:
    """ISO and datetime conversion."""

    def test_to_iso(self) -> None:
        assert to_iso("15/03/1990") == "1990-03-15T00:00:00.000Z"

    def test_to_datetime_is_utc_midnight(self, engine: DateEngine) -> None:
        assert engine.to_datetime("15.03.1990") == datetime(1990, 3, 15, tzinfo=timezone.utc)

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            to_iso("31-04-2020")
        assert exc_info.value.code is ErrorCode.INVALID_DATE

    def test_field_named_in_error(self, engine: DateEngine) -> None:
        with pytest.raises(ValidationError) as exc_info:
            engine.to_iso("not a date", field="dob")
        error = exc_info.value
        assert error.field == "dob"
        assert "Date of Birth" in error.message

    def test_parse_date_uses_shared_engine(self) -> None:
        assert parse_date("1990-03-15") == ParsedDate(15, 3, 1990, DateFormat.ISO)


class TestStrictDmy:
    """The dd-mm-yyyy only helpers."""

    def test_is_valid_dmy(self) -> None:
        assert is_valid_dmy("15-03-1990")
        assert not is_valid_dmy("15/03/1990")
        assert not is_valid_dmy("1990-03-15")
        assert not is_valid_dmy("31-04-2020")

    def test_to_iso_from_dmy(self) -> None:
        assert to_iso_from_dmy("01-01-2030") == "2030-01-01T00:00:00.000Z"

    def test_to_iso_from_dmy_rejects_other_formats(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            to_iso_from_dmy("2030-01-01")
        assert exc_info.value.code is ErrorCode.INVALID_DATE
