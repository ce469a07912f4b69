"""
Argument checks for function and constructor inputs.

Most checks return their validated input, so they can be used inline:

    class Person:
        def __init__(self, name: str, age: int) -> None:
            self.name = not_blank(name, "name")
            self.age = not_negative(age, "age")

Every failed check raises InvalidArgumentError. Range predicates and the
has_*_element queries return booleans instead.
"""

from __future__ import annotations

import array
import re
from collections.abc import Collection, Iterable, Mapping, Sequence
from typing import Any, NoReturn, Optional, Pattern, TypeVar, Union

import structlog
from pydantic import ValidationError

from argcheck.config.settings import get_check_settings
from argcheck.errors import InvalidArgumentError
from argcheck.messages import format_message

logger = structlog.get_logger(__name__)

T = TypeVar("T")
N = TypeVar("N", int, float)

# Fixed-size sequences reported as "array" in messages
ARRAY_TYPES = (tuple, bytes, bytearray, array.array, memoryview)

_MISSING = object()


def _log_failures() -> bool:
    try:
        return get_check_settings().log_failures
    except ValidationError:
        return False


def _fail(check: str, message: str, argument: Optional[str] = None) -> NoReturn:
    if _log_failures():
        logger.debug("argument_check_failed", check=check, argument=argument, message=message)
    raise InvalidArgumentError(message, argument=argument, check=check)


def _unsupported(check: str, name: str) -> NoReturn:
    _fail(check, f"Argument '{name}' must be a string, sequence, collection, mapping or iterable", name)


# -----------------------------------------------------------------------------
# Boolean assertions
# -----------------------------------------------------------------------------


def is_true(valid_if_true: bool, message: str, *args: Any) -> None:
    """
    Check that the condition holds.

    The message may contain "{}" placeholders filled from args.
    Returns nothing; there is no value to pass through.
    """
    if not valid_if_true:
        _fail("is_true", format_message(message, *args))


def is_false(valid_if_false: bool, message: str, *args: Any) -> None:
    """Check that the condition does not hold. Message templating as in is_true."""
    if valid_if_false:
        _fail("is_false", format_message(message, *args))


# -----------------------------------------------------------------------------
# Null checks
# -----------------------------------------------------------------------------


def not_null(parameter: Optional[T], name: str) -> T:
    """Check that the argument is not None and return it."""
    if parameter is None:
        _fail("not_null", f"Argument '{name}' must not be null", name)
    return parameter


def not_null_item(parameter: Optional[T]) -> T:
    """Check that an element of an array, collection or map is not None."""
    if parameter is None:
        _fail("not_null_item", "Argument array/collection/map must not contain null")
    return parameter


# -----------------------------------------------------------------------------
# Strings
# -----------------------------------------------------------------------------


def matches(pattern: Union[Pattern[str], str], parameter: Optional[str], name: str) -> str:
    """
    Check that the argument fully matches the regular expression.

    pattern may be compiled or a pattern string.
    """
    not_null(pattern, "pattern")
    not_null(parameter, name)
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.fullmatch(parameter) is None:
        _fail("matches", f"Argument '{name}' must match pattern: {compiled.pattern}", name)
    return parameter


def not_blank(parameter: Optional[str], name: str) -> str:
    """Check that the string is not None and not whitespace-only. Returns it untrimmed."""
    not_null(parameter, name)
    if not parameter.strip():
        _fail("not_blank", f"Argument '{name}' must not be empty", name)
    return parameter


# -----------------------------------------------------------------------------
# Emptiness
# -----------------------------------------------------------------------------


def not_empty(parameter: Optional[T], name: str) -> T:
    """
    Check that a string, array, collection, mapping or iterable has content.

    Strings only need a length of at least one; whitespace passes.
    Elements are not checked. Plain iterables are probed by taking their
    first element, so a one-shot iterator loses it.
    """
    not_null(parameter, name)
    if isinstance(parameter, str):
        if len(parameter) == 0:
            _fail("not_empty", f"Argument '{name}' must not be empty", name)
    elif isinstance(parameter, ARRAY_TYPES):
        if len(parameter) == 0:
            _fail("not_empty", f"Argument array '{name}' must not be empty", name)
    elif isinstance(parameter, Mapping):
        if len(parameter) == 0:
            _fail("not_empty", f"Argument map '{name}' must not be empty", name)
    elif isinstance(parameter, Collection):
        if len(parameter) == 0:
            _fail("not_empty", f"Argument collection '{name}' must not be empty", name)
    elif isinstance(parameter, Iterable):
        if next(iter(parameter), _MISSING) is _MISSING:
            _fail("not_empty", f"Argument iterable '{name}' must not be empty", name)
    else:
        _unsupported("not_empty", name)
    return parameter


def no_nulls(parameter: Optional[T], name: str) -> T:
    """
    Check that a sequence, iterable or mapping contains no None.

    For a mapping both keys and values are checked. For a sequence the
    message names the index of the first None.
    """
    not_null(parameter, name)
    if isinstance(parameter, Mapping):
        for key, value in parameter.items():
            if key is None:
                _fail("no_nulls", f"Argument map '{name}' must not contain a null key", name)
            if value is None:
                _fail("no_nulls", f"Argument map '{name}' must not contain a null value", name)
    elif isinstance(parameter, Sequence) and not isinstance(parameter, str):
        for i, item in enumerate(parameter):
            if item is None:
                _fail("no_nulls", f"Argument array '{name}' must not contain null at index {i}", name)
    elif isinstance(parameter, Iterable):
        for item in parameter:
            if item is None:
                _fail("no_nulls", f"Argument iterable '{name}' must not contain null", name)
    else:
        _unsupported("no_nulls", name)
    return parameter


# -----------------------------------------------------------------------------
# Numbers
# -----------------------------------------------------------------------------


def not_negative(parameter: N, name: str) -> N:
    """Check that the number is zero or greater."""
    if parameter < 0:
        _fail("not_negative", f"Argument '{name}' must not be negative", name)
    return parameter


def not_negative_or_zero(parameter: N, name: str) -> N:
    """Check that the number is greater than zero."""
    if parameter <= 0:
        _fail("not_negative_or_zero", f"Argument '{name}' must not be negative or zero", name)
    return parameter


# -----------------------------------------------------------------------------
# Element queries
# -----------------------------------------------------------------------------


def has_null_element(iterable: Iterable[Any]) -> bool:
    """
    Return True if any element is None. Raises only if iterable itself is None.

    Iteration stops at the first None; a one-shot iterator is consumed up to it.
    """
    not_null(iterable, "iterable")
    for item in iterable:
        if item is None:
            return True
    return False


def has_negative_element(iterable: Iterable[Optional[float]]) -> bool:
    """
    Return True if any element is negative. None elements are rejected.

    Iteration stops at the first negative; a one-shot iterator is consumed up to it.
    """
    not_null(iterable, "collection")
    for value in iterable:
        not_null(value, "collection element")
        if value < 0:
            return True
    return False


# -----------------------------------------------------------------------------
# Ranges
# -----------------------------------------------------------------------------
# No check is made that low <= high; an inverted range matches nothing.


def is_in_range_exclusive(low: float, high: float, value: float) -> bool:
    return low < value < high


def is_in_range_inclusive(low: float, high: float, value: float) -> bool:
    return low <= value <= high


def is_in_range_excluding_low(low: float, high: float, value: float) -> bool:
    return low < value <= high


def is_in_range_excluding_high(low: float, high: float, value: float) -> bool:
    return low <= value < high


def in_range_excluding_high(low: float, high: float, value: float, name: str) -> float:
    """Check that low <= value < high and return value."""
    if value < low or value >= high:
        _fail(
            "in_range_excluding_high",
            f"Argument '{name}' must be greater than or equal to {low} and less than {high}",
            name,
        )
    return value


# -----------------------------------------------------------------------------
# Ordering
# -----------------------------------------------------------------------------


def in_order_not_equal(obj1: Any, obj2: Any, param1: str, param2: str) -> None:
    """Check that obj1 is strictly less than obj2. Neither may be None."""
    not_null(obj1, param1)
    not_null(obj2, param2)
    if obj1 >= obj2:
        _fail(
            "in_order_not_equal",
            f"Invalid order: Expected '{param1}' < '{param2}', but found: '{obj1}' >= '{obj2}'",
            param1,
        )


def in_order_or_equal(obj1: Any, obj2: Any, param1: str, param2: str) -> None:
    """Check that obj1 is less than or equal to obj2. Neither may be None."""
    not_null(obj1, param1)
    not_null(obj2, param2)
    if obj1 > obj2:
        _fail(
            "in_order_or_equal",
            f"Invalid order: Expected '{param1}' <= '{param2}', but found: '{obj1}' > '{obj2}'",
            param1,
        )
