"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from argcheck.config import settings as settings_module


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast unit tests")


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Drop the cached Settings so env patches take effect per test."""
    settings_module._settings = None
    settings_module._check_settings = None
    yield
    settings_module._settings = None
    settings_module._check_settings = None
