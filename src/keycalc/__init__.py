"""
Keypad calculator engine.

Turns a sequence of keypad actions (digits, decimal point, operators,
equals, clear, delete, sign toggle, percent) into display text, holding
at most one pending binary operation and recovering from arithmetic
errors through clear.
"""

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
    dispatch,
)
from keycalc.config import DEFAULT_CONFIG, FormatConfig
from keycalc.core import CalculatorEngine, EngineState, Snapshot
from keycalc.exceptions import (
    CalculatorError,
    InvalidInputError,
    NonFiniteResultError,
)
from keycalc.formatting import format_number, parse_display, to_plain_text
from keycalc.keys import action_for_key
from keycalc.operations import Operator, apply
from keycalc.validators import validate_digit, validate_number

__all__ = [
    "DEFAULT_CONFIG",
    "Action",
    "CalculatorEngine",
    "CalculatorError",
    "ChooseOperator",
    "Clear",
    "Decimal",
    "Delete",
    "Digit",
    "EngineState",
    "Equals",
    "FormatConfig",
    "InvalidInputError",
    "NonFiniteResultError",
    "Operator",
    "Percent",
    "Snapshot",
    "ToggleSign",
    "action_for_key",
    "apply",
    "dispatch",
    "format_number",
    "parse_display",
    "to_plain_text",
    "validate_digit",
    "validate_number",
]

__version__ = "0.1.0"
