"""Fixtures for CLI command tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Detach the handler configure_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == "somalid-cli":
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def record_args() -> dict[str, str]:
    """Keyword arguments of a record the validate command accepts."""
    return {
        "id_number": "9342 6578 2412",
        "name": "Ahmed Hassan Mohamed",
        "sex": "M",
        "dob": "15-03-1990",
        "issue": "01-01-2020",
        "expiry": "01-01-2099",
    }
