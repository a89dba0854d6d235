"""Keyboard key names mapped to keypad actions."""

from __future__ import annotations

from keycalc.actions import (
    Action,
    ChooseOperator,
    Clear,
    Decimal,
    Delete,
    Digit,
    Equals,
    Percent,
    ToggleSign,
)
from keycalc.operations import Operator

KEY_ACTIONS: dict[str, Action] = {
    **{d: Digit(d) for d in "0123456789"},
    ".": Decimal(),
    ",": Decimal(),
    "Enter": Equals(),
    "=": Equals(),
    "Backspace": Delete(),
    "%": Percent(),
    "Escape": Clear(),
    "c": Clear(),
    "C": Clear(),
    "n": ToggleSign(),
    "N": ToggleSign(),
    "+": ChooseOperator(Operator.ADD),
    "-": ChooseOperator(Operator.SUBTRACT),
    "*": ChooseOperator(Operator.MULTIPLY),
    "x": ChooseOperator(Operator.MULTIPLY),
    "X": ChooseOperator(Operator.MULTIPLY),
    "/": ChooseOperator(Operator.DIVIDE),
    # Numpad key names
    "Add": ChooseOperator(Operator.ADD),
    "Subtract": ChooseOperator(Operator.SUBTRACT),
    "Multiply": ChooseOperator(Operator.MULTIPLY),
    "Divide": ChooseOperator(Operator.DIVIDE),
}


def action_for_key(key: str) -> Action | None:
    """Return the action bound to a key name, or None for unbound keys."""
    return KEY_ACTIONS.get(key)
