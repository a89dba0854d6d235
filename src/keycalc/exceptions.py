"""Custom exceptions for the keycalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(CalculatorError):
    """Raised when an action payload is malformed (bad digit, unknown symbol, ...)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class NonFiniteResultError(CalculatorError):
    """Raised when a value or result is infinite or NaN.

    The engine converts this into its error state; it never reaches the
    caller of an engine action.
    """

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Non-finite result in {operation}", operands)
        self.operation = operation
        self.operands = operands
