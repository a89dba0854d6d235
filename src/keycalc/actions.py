"""Closed set of abstract keypad actions and their dispatch onto an engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from keycalc.exceptions import InvalidInputError
from keycalc.operations import Operator
from keycalc.validators import validate_digit

if TYPE_CHECKING:
    from keycalc.core import CalculatorEngine, Snapshot


@dataclass(frozen=True)
class Digit:
    char: str

    def __post_init__(self) -> None:
        validate_digit(self.char)


@dataclass(frozen=True)
class Decimal:
    pass


@dataclass(frozen=True)
class ChooseOperator:
    operator: Operator

    def __post_init__(self) -> None:
        # Accept symbols as well as enum members
        if not isinstance(self.operator, Operator):
            object.__setattr__(self, "operator", Operator.from_symbol(self.operator))


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


Action = Digit | Decimal | ChooseOperator | Equals | Clear | Delete | Percent | ToggleSign


def dispatch(engine: CalculatorEngine, action: Action) -> Snapshot:
    """
    Apply one action to an engine.

    Args:
        engine: The engine that owns the state
        action: One of the action variants

    Returns:
        The snapshot after the action

    Raises:
        InvalidInputError: If action is not one of the variants
    """
    if isinstance(action, Digit):
        return engine.input_digit(action.char)
    if isinstance(action, Decimal):
        return engine.input_decimal()
    if isinstance(action, ChooseOperator):
        return engine.choose_operator(action.operator)
    if isinstance(action, Equals):
        return engine.evaluate()
    if isinstance(action, Clear):
        return engine.clear()
    if isinstance(action, Delete):
        return engine.delete_last()
    if isinstance(action, Percent):
        return engine.percent()
    if isinstance(action, ToggleSign):
        return engine.toggle_sign()
    raise InvalidInputError(action, "Unknown action")
