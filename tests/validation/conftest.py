"""Pytest configuration and fixtures for validation engine tests.

This module provides the Hypothesis profile and pytest fixtures shared by the
date, field, record and batch tests.
"""

import pytest
from hypothesis import settings

from somalid.core.rule import Rule
from somalid.validation.cache import DateParseCache
from somalid.validation.dates import DateEngine

# Configure Hypothesis for validation tests
settings.register_profile("validation", max_examples=100, deadline=None)
settings.load_profile("validation")


@pytest.fixture
def engine() -> DateEngine:
    """Date engine with its own small cache, isolated from the shared one."""
    return DateEngine(cache=DateParseCache(capacity=16))


@pytest.fixture
def strict_rule() -> Rule:
    """Rule with a prefix, no separators and Latin-only names."""
    return Rule(
        id_length=10,
        id_must_start="93",
        id_allow_separators=False,
        name_max_length=20,
        allow_non_latin_letters=False,
    )


@pytest.fixture
def lenient_rule() -> Rule:
    """Rule that accepts expired documents."""
    return Rule(require_future_expiry=False)
