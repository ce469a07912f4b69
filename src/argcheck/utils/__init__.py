"""Shared utilities for the argcheck package."""

from argcheck.utils.logging import configure_logging

__all__ = ["configure_logging"]
