"""Date engine: multi-format parsing, calendar checks and ISO conversion.

Accepted formats, tried in this order:
    - dd-mm-yyyy (15-03-1990)
    - dd/mm/yyyy (15/03/1990)
    - yyyy-mm-dd (1990-03-15)
    - dd.mm.yyyy (15.03.1990)

Parsing is purely structural: the first format whose pattern matches the
whole string wins and its day/month/year are extracted. Calendar validity is
a separate check (year 1900-2100, month 1-12, day 1-31, and the date must
exist in the proleptic Gregorian calendar, which rejects 31 April or
29 February in non-leap years).

Every parse, successful or not, is memoized in a DateParseCache owned by the
engine. The module-level functions share one process-wide engine.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum

from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.validation.cache import DEFAULT_CAPACITY, DateParseCache

MIN_YEAR = 1900
MAX_YEAR = 2100

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


class DateFormat(Enum):
    """Textual date formats, in matching priority order."""

    DMY_DASH = "dd-mm-yyyy"
    DMY_SLASH = "dd/mm/yyyy"
    ISO = "yyyy-mm-dd"
    DMY_DOT = "dd.mm.yyyy"


# Pattern per format; groups are always (day, month, year) by name
_PATTERNS: list[tuple[DateFormat, re.Pattern[str]]] = [
    (DateFormat.DMY_DASH, re.compile(r"(?P<day>[0-9]{2})-(?P<month>[0-9]{2})-(?P<year>[0-9]{4})")),
    (DateFormat.DMY_SLASH, re.compile(r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})")),
    (DateFormat.ISO, re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")),
    (DateFormat.DMY_DOT, re.compile(r"(?P<day>[0-9]{2})\.(?P<month>[0-9]{2})\.(?P<year>[0-9]{4})")),
]


@dataclass(frozen=True)
class ParsedDate:
    """Day, month and year extracted from a date string.

    Attributes:
        day: Day of month as written (not yet range checked)
        month: Month as written (not yet range checked)
        year: Four-digit year
        format: Format that matched
    """

    day: int
    month: int
    year: int
    format: DateFormat

    def is_calendar_valid(self) -> bool:
        """Check year/month/day ranges and that the date exists."""
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            return False
        if not 1 <= self.month <= 12 or not 1 <= self.day <= 31:
            return False
        try:
            date(self.year, self.month, self.day)
        except ValueError:
            return False
        return True

    def to_datetime(self) -> datetime:
        """Return the date as an aware datetime at UTC midnight.

        Returns:
            datetime with tzinfo=timezone.utc

        Raises:
            ValueError: If the date does not exist on the calendar
        """
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def to_iso(self) -> str:
        """Return the date as ``YYYY-MM-DDT00:00:00.000Z``."""
        return self.to_datetime().strftime(ISO_FORMAT)


def _parse_uncached(raw: str) -> ParsedDate | None:
    for fmt, pattern in _PATTERNS:
        match = pattern.fullmatch(raw)
        if match:
            return ParsedDate(
                day=int(match["day"]),
                month=int(match["month"]),
                year=int(match["year"]),
                format=fmt,
            )
    return None


class DateEngine:
    """Date parser with a bounded memoization cache.

    Example:
        >>> engine = DateEngine()
        >>> engine.parse("15/03/1990")
        ParsedDate(day=15, month=3, year=1990, format=<DateFormat.DMY_SLASH: 'dd/mm/yyyy'>)
        >>> engine.is_valid("29-02-2021")
        False
        >>> engine.to_iso("1990-03-15")
        '1990-03-15T00:00:00.000Z'
    """

    def __init__(self, cache: DateParseCache | None = None) -> None:
        self.cache = cache if cache is not None else DateParseCache(DEFAULT_CAPACITY)

    def parse(self, raw: object) -> ParsedDate | None:
        """Match ``raw`` against the supported formats.

        Returns None if no format matches or ``raw`` is not a string. Only
        strings are cached.
        """
        if not isinstance(raw, str):
            return None
        return self.cache.get_or_compute(raw, _parse_uncached)

    def is_valid(self, raw: object) -> bool:
        """Check that ``raw`` matches a supported format and is a real date.

        Args:
            raw: Candidate date string (non-strings are invalid)

        Returns:
            True if the date parses and passes the calendar check
        """
        parsed = self.parse(raw)
        return parsed is not None and parsed.is_calendar_valid()

    def to_datetime(self, raw: object, field: str | None = None) -> datetime:
        """Convert a valid date string to an aware datetime at UTC midnight.

        Raises:
            ValidationError: INVALID_DATE if the string does not parse or is
                            not a real calendar date
        """
        parsed = self.parse(raw)
        if parsed is None or not parsed.is_calendar_valid():
            reason = f"{field}_format" if field else None
            raise ValidationError.from_code(
                ErrorCode.INVALID_DATE, field=field, reason=reason, value=raw
            )
        return parsed.to_datetime()

    def to_iso(self, raw: object, field: str | None = None) -> str:
        """Convert a valid date string to ISO-8601 (``YYYY-MM-DDT00:00:00.000Z``)."""
        return self.to_datetime(raw, field).strftime(ISO_FORMAT)


default_engine = DateEngine()


def parse_date(raw: object) -> ParsedDate | None:
    """Parse a date string with the shared engine."""
    return default_engine.parse(raw)


def is_valid_date(raw: object) -> bool:
    """Return True if ``raw`` parses and is a real calendar date.

    Example:
        >>> is_valid_date("29-02-2020")
        True
        >>> is_valid_date("31-04-2020")
        False
    """
    return default_engine.is_valid(raw)


def to_iso(raw: object) -> str:
    """Convert a date string to ISO-8601 at UTC midnight.

    Raises:
        ValidationError: INVALID_DATE if the date is invalid
    """
    return default_engine.to_iso(raw)


def is_valid_dmy(raw: object) -> bool:
    """Strict check for the dd-mm-yyyy format only."""
    parsed = parse_date(raw)
    return (
        parsed is not None
        and parsed.format is DateFormat.DMY_DASH
        and parsed.is_calendar_valid()
    )


def to_iso_from_dmy(raw: object) -> str:
    """Convert a dd-mm-yyyy string to ISO-8601.

    Raises:
        ValidationError: INVALID_DATE if ``raw`` is not a valid dd-mm-yyyy date
    """
    if not is_valid_dmy(raw):
        raise ValidationError.from_code(ErrorCode.INVALID_DATE, value=raw)
    return to_iso(raw)
