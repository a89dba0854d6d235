"""Validation of action payloads."""

import math
from typing import TypeVar

from keycalc.exceptions import InvalidInputError

T = TypeVar("T", int, float)

DIGITS = frozenset("0123456789")


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_digit(value: str) -> str:
    """
    Validate that a value is a single decimal digit character.

    Args:
        value: The value to validate

    Returns:
        The validated digit

    Raises:
        InvalidInputError: If value is not exactly one of "0".."9"
    """
    if not isinstance(value, str):
        raise InvalidInputError(value, f"Expected digit character, got {type(value).__name__}")

    if len(value) != 1 or value not in DIGITS:
        raise InvalidInputError(value, "Expected a single digit 0-9")

    return value
