"""
Property-based tests for the CalculatorEngine.

Tests the engine using Hypothesis stateful testing, which generates
sequences of keypad actions and verifies the state invariants after
each one.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from keycalc import (
    CalculatorEngine,
    NonFiniteResultError,
    Operator,
    Snapshot,
    apply,
    format_number,
    parse_display,
)

digits = st.sampled_from("0123456789")
operators = st.sampled_from(list(Operator))
digit_strings = st.text(alphabet="0123456789", min_size=1, max_size=12)


def type_number(engine: CalculatorEngine, text: str) -> None:
    for char in text:
        engine.input_digit(char)


@pytest.mark.property
class TestEngineProperties:
    """Property-based tests for CalculatorEngine."""

    @given(typed=digit_strings)
    def test_leading_zeros_collapse(self, typed: str):
        """Typed digits show up verbatim, minus leading zeros."""
        engine = CalculatorEngine()
        type_number(engine, typed)
        assert engine.snapshot.display_text == (typed.lstrip("0") or "0")

    @given(a=digit_strings, b=digit_strings, op=operators)
    def test_binary_operation_matches_format(self, a: str, b: str, op: Operator):
        """a op b = shows format(op(a, b)), or Error for a non-finite result."""
        engine = CalculatorEngine()
        type_number(engine, a)
        engine.choose_operator(op)
        type_number(engine, b)
        snapshot = engine.evaluate()

        try:
            expected = format_number(apply(op, float(a), float(b)))
        except NonFiniteResultError:
            expected = "Error"
        assert snapshot == Snapshot(expected, "")

    @given(typed=digit_strings, op=operators)
    def test_equals_after_operator_is_noop(self, typed: str, op: Operator):
        engine = CalculatorEngine()
        type_number(engine, typed)
        before = engine.choose_operator(op)
        assert engine.evaluate() == before

    @given(typed=digit_strings)
    def test_percent_divides_by_hundred(self, typed: str):
        engine = CalculatorEngine()
        type_number(engine, typed)
        assert engine.percent().display_text == format_number(float(typed) / 100)

    @given(typed=digit_strings, first=operators, second=operators)
    def test_operator_correction_keeps_only_last(
        self, typed: str, first: Operator, second: Operator
    ):
        corrected = CalculatorEngine()
        type_number(corrected, typed)
        corrected.choose_operator(first)
        corrected.choose_operator(second)

        direct = CalculatorEngine()
        type_number(direct, typed)
        direct.choose_operator(second)

        assert corrected.snapshot == direct.snapshot
        assert corrected.state == direct.state


@pytest.mark.property
@pytest.mark.slow
class EngineStateMachine(RuleBasedStateMachine):
    """
    Stateful testing for CalculatorEngine using Hypothesis state machines.

    This generates random sequences of keypad actions and verifies
    that the engine invariants hold after each action.
    """

    def __init__(self) -> None:
        super().__init__()
        self.engine = CalculatorEngine()

    def _act(self, action) -> None:
        """Run an action; in the error state nothing but clear may change anything."""
        before = self.engine.state
        snapshot = action(self.engine)
        assert snapshot == self.engine.snapshot
        if before.error:
            assert self.engine.state == before

    @invariant()
    def display_is_never_empty(self) -> None:
        assert self.engine.snapshot.display_text != ""

    @invariant()
    def error_flag_matches_display(self) -> None:
        state = self.engine.state
        assert state.error == (state.display_value == "Error")
        if state.error:
            assert state.expression_text == ""

    @invariant()
    def awaiting_implies_operator(self) -> None:
        state = self.engine.state
        if state.awaiting_second_operand:
            assert state.operator is not None

    @invariant()
    def at_most_one_decimal_point(self) -> None:
        assert self.engine.state.display_value.count(".") <= 1

    @invariant()
    def display_is_numeric_outside_error(self) -> None:
        state = self.engine.state
        if not state.error:
            parse_display(state.display_value)

    @invariant()
    def expression_tracks_pending_operator(self) -> None:
        state = self.engine.state
        if state.operator is None:
            assert state.expression_text == ""
        else:
            assert math.isfinite(state.first_operand)
            assert state.expression_text == (
                f"{format_number(state.first_operand)} {state.operator.symbol}"
            )

    @rule(digit=digits)
    def input_digit(self, digit: str) -> None:
        self._act(lambda e: e.input_digit(digit))

    @rule()
    def input_decimal(self) -> None:
        self._act(lambda e: e.input_decimal())

    @rule()
    def toggle_sign(self) -> None:
        self._act(lambda e: e.toggle_sign())

    @rule()
    def percent(self) -> None:
        self._act(lambda e: e.percent())

    @rule(op=operators)
    def choose_operator(self, op: Operator) -> None:
        self._act(lambda e: e.choose_operator(op))

    @rule()
    def evaluate(self) -> None:
        self._act(lambda e: e.evaluate())

    @rule()
    def delete_last(self) -> None:
        self._act(lambda e: e.delete_last())

    @precondition(lambda self: self.engine.state.error)
    @rule()
    def clear_from_error(self) -> None:
        assert self.engine.clear() == Snapshot("0", "")

    @rule()
    def clear(self) -> None:
        self.engine.clear()
        assert self.engine.snapshot == Snapshot("0", "")
        assert self.engine.clear() == Snapshot("0", "")


# Run the state machine as a pytest test
TestStateMachine = EngineStateMachine.TestCase
