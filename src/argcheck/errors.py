"""
Argument-check failures and boundary reporting.

Every guard raises InvalidArgumentError. Callers let it propagate; a process
or request boundary may turn it into an ArgumentErrorReport for logging.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when an argument fails a precondition check."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        check: Optional[str] = None,
    ) -> None:
        self.message = message
        self.argument = argument
        self.check = check
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ArgumentErrorReport(BaseModel):
    """Structured report of an argument failure: check, argument, message."""

    error_type: str = Field(..., description="Exception class name")
    message: str = Field(..., description="Human-readable message")
    argument: Optional[str] = Field(default=None, description="Offending parameter name if known")
    check: Optional[str] = Field(default=None, description="Guard that rejected the argument")
    timestamp: str = Field(default="", description="ISO timestamp (UTC)")


def build_error_report(error: InvalidArgumentError) -> ArgumentErrorReport:
    """Build a report from a raised InvalidArgumentError."""
    return ArgumentErrorReport(
        error_type=type(error).__name__,
        message=error.message,
        argument=error.argument,
        check=error.check,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


def record_argument_error(error: InvalidArgumentError, log: Optional[Any] = None) -> ArgumentErrorReport:
    """Build a report for error and log it at warning level."""
    report = build_error_report(error)
    (log or logger).warning(
        "invalid_argument",
        error_type=report.error_type,
        message=report.message[:200] if len(report.message) > 200 else report.message,
        argument=report.argument,
        check=report.check,
    )
    return report
