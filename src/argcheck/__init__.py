"""
argcheck: guard clauses for validating function and constructor arguments.

This package provides null, emptiness, numeric, range and ordering checks that
return their input on success and raise InvalidArgumentError on failure.
"""

from argcheck.checker import (
    has_negative_element,
    has_null_element,
    in_order_not_equal,
    in_order_or_equal,
    in_range_excluding_high,
    is_false,
    is_in_range_exclusive,
    is_in_range_excluding_high,
    is_in_range_excluding_low,
    is_in_range_inclusive,
    is_true,
    matches,
    no_nulls,
    not_blank,
    not_empty,
    not_negative,
    not_negative_or_zero,
    not_null,
    not_null_item,
)
from argcheck.errors import (
    ArgumentErrorReport,
    InvalidArgumentError,
    build_error_report,
    record_argument_error,
)
from argcheck.messages import format_message

__all__ = [
    "ArgumentErrorReport",
    "InvalidArgumentError",
    "build_error_report",
    "format_message",
    "has_negative_element",
    "has_null_element",
    "in_order_not_equal",
    "in_order_or_equal",
    "in_range_excluding_high",
    "is_false",
    "is_in_range_exclusive",
    "is_in_range_excluding_high",
    "is_in_range_excluding_low",
    "is_in_range_inclusive",
    "is_true",
    "matches",
    "no_nulls",
    "not_blank",
    "not_empty",
    "not_negative",
    "not_negative_or_zero",
    "not_null",
    "not_null_item",
    "record_argument_error",
]
