"""Input state machine turning keypad actions into display text."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from keycalc.config import DEFAULT_CONFIG, FormatConfig
from keycalc.exceptions import NonFiniteResultError
from keycalc.formatting import format_number, parse_display
from keycalc.operations import Operator, apply
from keycalc.validators import validate_digit

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"
ZERO_TEXT = "0"


@dataclass(frozen=True)
class Snapshot:
    """What a renderer needs after each action."""

    display_text: str
    expression_text: str


@dataclass
class EngineState:
    """Mutable state owned by one CalculatorEngine."""

    display_value: str = ZERO_TEXT
    first_operand: float | None = None
    operator: Operator | None = None
    awaiting_second_operand: bool = False
    expression_text: str = ""
    error: bool = False


class CalculatorEngine:
    """
    A keypad calculator holding at most one pending binary operation.

    Each public method handles one abstract action, mutates the engine
    state in place and returns the resulting snapshot. Operations chain
    left to right without precedence. A non-finite result puts the engine
    into an error state that only ``clear`` leaves; every other action is
    ignored meanwhile.

    Example:
        >>> engine = CalculatorEngine()
        >>> for d in "12":
        ...     _ = engine.input_digit(d)
        >>> engine.choose_operator("+")
        Snapshot(display_text='12', expression_text='12 +')
        >>> _ = engine.input_digit("3")
        >>> engine.evaluate()
        Snapshot(display_text='15', expression_text='')
    """

    def __init__(self, config: FormatConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._state = EngineState()

    @property
    def state(self) -> EngineState:
        """A copy of the current state."""
        return replace(self._state)

    @property
    def snapshot(self) -> Snapshot:
        return Snapshot(self._state.display_value, self._state.expression_text)

    @property
    def config(self) -> FormatConfig:
        return self._config

    def _format(self, value: float) -> str:
        return format_number(value, self._config)

    def _read_display(self) -> float:
        value = parse_display(self._state.display_value)
        if not math.isfinite(value):
            raise NonFiniteResultError("input", value)
        return value

    def _expression(self) -> str:
        state = self._state
        return f"{self._format(state.first_operand)} {state.operator.symbol}"

    def _enter_error(self, exc: NonFiniteResultError) -> Snapshot:
        logger.info("Entering error state: %s", exc)
        self._state = EngineState(
            display_value=ERROR_TEXT,
            error=True,
        )
        return self.snapshot

    def _changed(self, action: str) -> Snapshot:
        logger.debug("%s -> %r", action, self._state)
        return self.snapshot

    def clear(self) -> Snapshot:
        """Reset to the initial state, including out of the error state."""
        self._state = EngineState()
        return self._changed("clear")

    def input_digit(self, digit: str) -> Snapshot:
        """
        Type one digit.

        Raises:
            InvalidInputError: If digit is not a single character 0-9
        """
        validate_digit(digit)
        state = self._state
        if state.error:
            return self.snapshot

        if state.awaiting_second_operand:
            state.display_value = digit
            state.awaiting_second_operand = False
        elif state.display_value == ZERO_TEXT:
            state.display_value = digit
        else:
            state.display_value += digit
        return self._changed(f"digit {digit}")

    def input_decimal(self) -> Snapshot:
        state = self._state
        if state.error:
            return self.snapshot

        if state.awaiting_second_operand:
            state.display_value = "0."
            state.awaiting_second_operand = False
        elif "." not in state.display_value:
            state.display_value += "."
        return self._changed("decimal")

    def toggle_sign(self) -> Snapshot:
        state = self._state
        if state.error or state.display_value == ZERO_TEXT:
            return self.snapshot

        if state.display_value.startswith("-"):
            state.display_value = state.display_value[1:]
        else:
            state.display_value = "-" + state.display_value
        return self._changed("toggle sign")

    def percent(self) -> Snapshot:
        """Divide the value being typed by 100; the pending operation is untouched."""
        state = self._state
        if state.error:
            return self.snapshot

        try:
            value = self._read_display() / 100
        except NonFiniteResultError as exc:
            return self._enter_error(exc)
        state.display_value = self._format(value)
        return self._changed("percent")

    def choose_operator(self, operator: Operator | str) -> Snapshot:
        """
        Select the pending operator.

        Choosing an operator right after another one replaces it. Choosing
        one after the second operand has been started evaluates the pending
        operation first and carries its result forward.

        Raises:
            InvalidInputError: If a symbol names no operator
        """
        if not isinstance(operator, Operator):
            operator = Operator.from_symbol(operator)
        state = self._state
        if state.error:
            return self.snapshot

        if state.operator is not None and state.awaiting_second_operand:
            state.operator = operator
            state.expression_text = self._expression()
            return self._changed(f"replace operator {operator}")

        try:
            if state.first_operand is None:
                state.first_operand = self._read_display()
            elif state.operator is not None:
                result = apply(state.operator, state.first_operand, self._read_display())
                state.first_operand = result
                state.display_value = self._format(result)
        except NonFiniteResultError as exc:
            return self._enter_error(exc)

        state.operator = operator
        state.awaiting_second_operand = True
        state.expression_text = self._expression()
        return self._changed(f"operator {operator}")

    def evaluate(self) -> Snapshot:
        """Apply the pending operation to the value being typed."""
        state = self._state
        if state.error or state.operator is None or state.awaiting_second_operand:
            return self.snapshot

        try:
            result = apply(state.operator, state.first_operand, self._read_display())
        except NonFiniteResultError as exc:
            return self._enter_error(exc)

        self._state = EngineState(display_value=self._format(result))
        return self._changed("equals")

    def delete_last(self) -> Snapshot:
        """Remove the last typed character; nothing to remove while awaiting an operand."""
        state = self._state
        if state.error or state.awaiting_second_operand:
            return self.snapshot

        remaining = state.display_value[:-1]
        state.display_value = remaining if remaining not in ("", "-") else ZERO_TEXT
        return self._changed("delete")

    def __repr__(self) -> str:
        state = self._state
        return f"CalculatorEngine(display={state.display_value!r}, expression={state.expression_text!r})"
