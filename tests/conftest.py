"""Shared test fixtures and Hypothesis strategies for somalid tests."""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import strategies as st
from hypothesis.strategies import composite

# Fixed reference time for future-expiry checks
NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)

# strftime pattern per accepted input format
DATE_RENDERINGS = ["%d-%m-%Y", "%d/%m/%Y", "%Y-%m-%d", "%d.%m.%Y"]

VALID_RECORD = {
    "id_number": "934265782412",
    "name": "Ahmed Hassan Mohamed",
    "sex": "Male",
    "dob": "15-03-1990",
    "issue": "01-01-2020",
    "expiry": "01-01-2030",
}


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def valid_record() -> dict[str, str]:
    """A record that passes validation under the default rule at NOW."""
    return dict(VALID_RECORD)


@composite
def calendar_dates(draw: st.DrawFn, min_value: date = date(1900, 1, 1), max_value: date = date(2100, 12, 31)) -> date:
    """Generate dates inside the accepted year range."""
    return draw(st.dates(min_value=min_value, max_value=max_value))


@composite
def rendered_dates(draw: st.DrawFn) -> tuple[date, str]:
    """Generate a calendar date together with one accepted text rendering.

    Example:
        >>> @given(rendered_dates())
        ... def test_something(pair):
        ...     day, text = pair
    """
    day = draw(calendar_dates())
    fmt = draw(st.sampled_from(DATE_RENDERINGS))
    return day, day.strftime(fmt)


@composite
def id_numbers(draw: st.DrawFn, length: int = 12) -> str:
    """Generate ID digit strings of a fixed length."""
    return draw(st.text(alphabet="0123456789", min_size=length, max_size=length))


@composite
def names(draw: st.DrawFn) -> str:
    """Generate Latin names of one to four words."""
    word = st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12)
    return " ".join(draw(st.lists(word, min_size=1, max_size=4)))


@composite
def valid_records(draw: st.DrawFn) -> dict[str, str]:
    """Generate records that pass validation under the default rule at NOW.

    Dates are drawn in increasing order (dob < issue < expiry, expiry after
    NOW) and each is rendered in a randomly chosen accepted format.
    """
    dob = draw(calendar_dates(max_value=date(2020, 12, 31)))
    issue = dob + timedelta(days=draw(st.integers(min_value=1, max_value=20000)))
    expiry_floor = max(issue, NOW.date()) + timedelta(days=1)
    expiry = draw(calendar_dates(min_value=expiry_floor, max_value=date(2100, 12, 31)))

    def render(day: date) -> str:
        return day.strftime(draw(st.sampled_from(DATE_RENDERINGS)))

    return {
        "id_number": draw(id_numbers()),
        "name": draw(names()),
        "sex": draw(st.sampled_from(["Male", "Female", "m", "F", "MALE", "female"])),
        "dob": render(dob),
        "issue": render(issue),
        "expiry": render(expiry),
    }
