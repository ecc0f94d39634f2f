"""Tests for the input buffer and its editing rules."""
import pytest

from deskcalc.errors import CalculatorError, InvalidNumberError
from deskcalc.model.state import CalculatorState


def typed(*tokens: str) -> CalculatorState:
    state = CalculatorState()
    for token in tokens:
        state.append_token(token)
    return state


class TestAppend:
    def test_tokens_are_appended_in_order(self):
        assert typed("1", "2", "+", "3").text == "12+3"

    def test_second_decimal_point_in_run_is_ignored(self):
        state = typed("1", ".", "5")
        state.append_token(".")
        assert state.text == "1.5"

    def test_decimal_point_allowed_in_new_run(self):
        state = typed("1", ".", "5", "+")
        state.append_token(".")
        assert state.text == "1.5+."

    def test_glyph_operators_start_a_new_run(self):
        assert typed("2", ".", "5", "×", "1", ".", "5").text == "2.5×1.5"

    def test_exponent_sign_is_part_of_the_number(self):
        state = CalculatorState("1.5e-7")
        assert state.current_run() == "1.5e-7"
        state.append_token(".")
        assert state.text == "1.5e-7"

    def test_no_decimal_point_after_exponent(self):
        state = CalculatorState("1e+21")
        state.append_token(".")
        assert state.text == "1e+21"

    def test_operator_after_exponent_starts_new_run(self):
        state = CalculatorState("1e+21")
        state.append_token("+")
        state.append_token(".")
        assert state.text == "1e+21+."

    def test_current_run(self):
        assert typed("1", "2", "÷", "3", ".").current_run() == "3."
        assert typed("4", "2").current_run() == "42"


class TestClearAndBackspace:
    def test_clear(self):
        state = typed("1", "+", "2")
        state.clear()
        assert state.text == ""

    def test_backspace_removes_last_character(self):
        state = typed("1", "+", "2")
        state.backspace()
        assert state.text == "1+"

    def test_backspace_on_empty_buffer(self):
        state = CalculatorState()
        state.backspace()
        state.backspace()
        assert state.text == ""


class TestToggleSign:
    def test_round_trip(self):
        state = CalculatorState("5")
        state.toggle_sign()
        assert state.text == "-5"
        state.toggle_sign()
        assert state.text == "5"

    def test_fraction(self):
        state = CalculatorState("2.5")
        state.toggle_sign()
        assert state.text == "-2.5"

    def test_zero_stays_zero(self):
        state = CalculatorState("0")
        state.toggle_sign()
        assert state.text == "0"

    def test_non_numeric_buffer(self):
        state = CalculatorState("2+")
        with pytest.raises(InvalidNumberError):
            state.toggle_sign()


class TestPercentage:
    def test_divides_by_hundred(self):
        state = CalculatorState("50")
        state.percentage()
        assert state.text == "0.5"

    def test_negative_value(self):
        state = CalculatorState("-250")
        state.percentage()
        assert state.text == "-2.5"

    def test_empty_buffer(self):
        with pytest.raises(CalculatorError):
            CalculatorState().percentage()
