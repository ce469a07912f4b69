"""Pytest configuration and fixtures for unit tests."""

import re

import pytest


@pytest.fixture
def currency_pattern() -> re.Pattern[str]:
    """Three upper-case letters, e.g. an ISO currency code."""
    return re.compile("[A-Z]{3}")


@pytest.fixture
def sample_map() -> dict[str, float]:
    return {"USD": 1.0, "EUR": 0.92}
