"""Binary operators and their evaluation rules."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from keycalc.exceptions import InvalidInputError, NonFiniteResultError

if TYPE_CHECKING:
    from collections.abc import Callable


class Operator(Enum):
    """The four operators a keypad can select, valued by their display symbol."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """
        Look up an operator by display symbol or ASCII alias.

        Raises:
            InvalidInputError: If the symbol names no operator
        """
        try:
            return _SYMBOLS[symbol]
        except (KeyError, TypeError):
            raise InvalidInputError(symbol, "Unknown operator symbol") from None

    def __str__(self) -> str:
        return self.value


_SYMBOLS: dict[str, Operator] = {
    "+": Operator.ADD,
    "−": Operator.SUBTRACT,
    "-": Operator.SUBTRACT,
    "×": Operator.MULTIPLY,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "/": Operator.DIVIDE,
}


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b with IEEE-754 semantics for a zero divisor.

    Python raises on float division by zero, so the zero case is mapped
    explicitly: a nonzero dividend gives +inf, 0 / 0 gives NaN.
    """
    if b == 0:
        return math.nan if a == 0 else math.inf
    return a / b


RULES: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply(operator: Operator, a: float, b: float) -> float:
    """
    Evaluate ``a <operator> b``.

    Args:
        operator: The pending operator
        a: Left-hand operand
        b: Right-hand operand

    Returns:
        The finite result

    Raises:
        NonFiniteResultError: If the result is infinite or NaN
    """
    result = RULES[operator](a, b)

    if not math.isfinite(result):
        raise NonFiniteResultError(operator.name.lower(), a, b)

    return result
