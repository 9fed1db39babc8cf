"""Tests for the two-stack infix expression evaluator."""

import math

import pytest

from core.errors import ExpressionError, InvalidCharacterError, MalformedExpressionError
from core.expression_evaluator import ExpressionEvaluator, evaluate, results_match
from core.token_system import TOKEN_DEFINITIONS


class TestEvaluate:
    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("3 + 5", 8.0),
            ("10 + 2 * 6", 22.0),
            ("100 * 2 + 12", 212.0),
            ("100 * ( 2 + 12 )", 1400.0),
            ("100 * ( 2 + 12 ) / 14", 100.0),
        ],
    )
    def test_reference_cases(self, expression: str, expected: float) -> None:
        assert evaluate(expression) == expected

    def test_single_number(self) -> None:
        assert evaluate("42") == 42.0

    def test_decimal_literals(self) -> None:
        assert evaluate("1.5 + 2.25") == pytest.approx(3.75)
        assert evaluate(".5 * 4") == 2.0
        assert evaluate("2. + 1") == 3.0

    def test_no_spaces(self) -> None:
        assert evaluate("2+3*4") == 14.0
        assert evaluate("(2+3)*4") == 20.0

    def test_result_is_float(self) -> None:
        assert isinstance(evaluate("1 + 1"), float)

    def test_left_associative_subtraction(self) -> None:
        assert evaluate("10 - 4 - 3") == 3.0

    def test_left_associative_division(self) -> None:
        assert evaluate("100 / 10 / 5") == 2.0

    def test_mixed_same_precedence(self) -> None:
        assert evaluate("8 / 4 * 2") == 4.0
        assert evaluate("8 - 4 + 2") == 6.0

    def test_nested_parentheses(self) -> None:
        assert evaluate("((1 + 2) * (3 + 4)) / 7") == 3.0
        assert evaluate("2 * (3 + (4 - 1) * 2)") == 18.0

    def test_redundant_parentheses(self) -> None:
        assert evaluate("((5))") == 5.0

    def test_precedence_matters(self) -> None:
        assert evaluate("100 * ( 2 + 12 )") != evaluate("100 * 2 + 12")

    def test_addition_commutes(self) -> None:
        assert evaluate("3.5 + 7") == evaluate("7 + 3.5")

    def test_subtraction_and_division_do_not_commute(self) -> None:
        assert evaluate("9 - 2") != evaluate("2 - 9")
        assert evaluate("9 / 2") != evaluate("2 / 9")

    def test_floating_point_tolerance(self) -> None:
        assert evaluate("0.1 + 0.2") == pytest.approx(0.3, abs=1e-9)

    def test_idempotent(self) -> None:
        expression = "1.5 * (2 + 3) - 4 / 8"
        assert evaluate(expression) == evaluate(expression)

    def test_class_and_function_agree(self) -> None:
        assert ExpressionEvaluator.evaluate("6 / 4") == evaluate("6 / 4") == 1.5


class TestDivisionByZero:
    def test_positive_over_zero_is_inf(self) -> None:
        assert evaluate("1 / 0") == math.inf

    def test_negative_over_zero_is_negative_inf(self) -> None:
        assert evaluate("(0 - 1) / 0") == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(evaluate("0 / 0"))

    def test_inf_propagates(self) -> None:
        assert evaluate("1 / 0 + 5") == math.inf


class TestHasPrecedence:
    def _op(self, name: str):
        return TOKEN_DEFINITIONS[name]

    @pytest.mark.parametrize(
        "incoming, top, expected",
        [
            ("+", "+", True),
            ("-", "+", True),
            ("+", "*", True),
            ("-", "/", True),
            ("*", "*", True),
            ("/", "*", True),
            ("*", "+", False),
            ("/", "-", False),
            ("+", "(", False),
            ("*", "(", False),
            ("+", ")", False),
        ],
    )
    def test_rule(self, incoming: str, top: str, expected: bool) -> None:
        assert ExpressionEvaluator.has_precedence(self._op(incoming), self._op(top)) is expected


class TestMalformed:
    @pytest.mark.parametrize(
        "expression",
        [
            "",
            "   ",
            "3 +",
            "+ 3",
            "- 3",
            "3 + * 5",
            "(3 + 5",
            "3 + 5)",
            ")(",
            "()",
            "3 4",
            "2 (3)",
            "(1) (2)",
            "1.2.3",
            ".",
            "3 * (- 2)",
        ],
    )
    def test_raises_malformed(self, expression: str) -> None:
        with pytest.raises(MalformedExpressionError):
            evaluate(expression)

    def test_none_is_malformed(self) -> None:
        with pytest.raises(MalformedExpressionError):
            evaluate(None)

    def test_error_reports_position(self) -> None:
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate("3 + * 5")
        assert exc_info.value.position == 4
        assert "at position 4" in str(exc_info.value)
        assert "expected one of: number, (" in str(exc_info.value)

    def test_unmatched_close_paren_message(self) -> None:
        with pytest.raises(MalformedExpressionError, match="Unmatched"):
            evaluate("1 + 2)")

    def test_unclosed_paren_message(self) -> None:
        with pytest.raises(MalformedExpressionError, match="unclosed"):
            evaluate("((1 + 2)")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            evaluate("1 +")


class TestInvalidCharacter:
    @pytest.mark.parametrize("expression", ["2 ^ 3", "x + 1", "1e5", "2 % 3", "1\t+ 2"])
    def test_raises_invalid_character(self, expression: str) -> None:
        with pytest.raises(InvalidCharacterError):
            evaluate(expression)

    def test_carries_character_and_position(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            evaluate("12 + a")
        assert exc_info.value.character == "a"
        assert exc_info.value.position == 5
        assert exc_info.value.expression == "12 + a"

    def test_shares_base_class(self) -> None:
        with pytest.raises(ExpressionError):
            evaluate("1 & 2")


class TestMaxLength:
    def test_limit_enforced(self, monkeypatch) -> None:
        from config.config import EXPRESSION_CONFIG

        monkeypatch.setitem(EXPRESSION_CONFIG, "max_length", 5)
        assert evaluate("1 + 2") == 3.0
        with pytest.raises(MalformedExpressionError, match="longer than 5"):
            evaluate("1 + 2 + 3")


class TestResultsMatch:
    def test_close_values(self) -> None:
        assert results_match(0.1 + 0.2, 0.3)

    def test_distinct_values(self) -> None:
        assert not results_match(1.0, 1.1)

    def test_nan_equals_nan(self) -> None:
        assert results_match(math.nan, math.nan)
        assert not results_match(math.nan, 1.0)

    def test_infinities(self) -> None:
        assert results_match(math.inf, math.inf)
        assert not results_match(math.inf, -math.inf)

    def test_custom_tolerance(self) -> None:
        assert results_match(1.0, 1.05, tolerance=0.1)
