"""Tests for expression tokenizing and precedence evaluation"""
import pytest

from unitify.evaluation import (
    ExpressionEvaluator,
    ExpressionTokens,
    evaluate,
    evaluate_line,
    tokenize_line,
)
from unitify.measurement import Measurement
from unitify.units import (
    DimensionMismatchError,
    DivisionByZeroError,
    MalformedExpressionError,
    ParseError,
)


class TestTokenizer:
    """Test splitting lines into measurements and operators"""

    def test_tokenize_expression(self):
        tokens = tokenize_line("2 kg + 300 g * 4 s")
        assert [m.magnitude for m in tokens.measurements] == [2.0, 300.0, 4.0]
        assert [m.unit_name for m in tokens.measurements] == ["kg", "g", "s"]
        assert tokens.operators == ["+", "*"]
        assert tokens.is_balanced

    def test_tokenize_single_measurement(self):
        tokens = tokenize_line("  12.5 kilometers  ")
        assert len(tokens.measurements) == 1
        assert tokens.operators == []

    def test_tokenize_unspaced_compound_unit(self):
        tokens = tokenize_line("72 km/hr + 5 m/s")
        assert [m.unit_name for m in tokens.measurements] == ["km / hr", "m / s"]

    def test_trailing_operator_is_kept(self):
        tokens = tokenize_line("2 kg +")
        assert tokens.operators == ["+"]
        assert not tokens.is_balanced

    def test_unknown_operator_passed_through(self):
        tokens = tokenize_line("2 kg % 3 kg")
        assert tokens.operators == ["%"]

    def test_empty_line(self):
        tokens = tokenize_line("")
        assert tokens.measurements == []
        assert tokens.operators == []

    @pytest.mark.parametrize("line", [
        "kg 2",
        "2",
        "2 kg + 3",
        "2 kg 3 kg",
        "2 parsecs",
        "nan kg",
    ])
    def test_tokenize_errors(self, line):
        with pytest.raises(ParseError):
            tokenize_line(line)


class TestPrecedence:
    """Test operator precedence and associativity"""

    def test_multiplication_before_addition(self, evaluator):
        """2 g + 3 g * 4 g evaluates the product first"""
        result = evaluator.evaluate_line("2 g + 3 g * 4 g")
        assert result.magnitude == pytest.approx(14.0)
        assert result.unit_name == "g"

    def test_multiplication_first_on_left(self, evaluator):
        result = evaluator.evaluate_line("3 g * 4 g + 2 g")
        assert result.magnitude == pytest.approx(14.0)

    def test_left_associative_subtraction(self, evaluator):
        """10 - 4 - 3 is (10 - 4) - 3"""
        result = evaluator.evaluate_line("10 m - 4 m - 3 m")
        assert result.magnitude == pytest.approx(3.0)

    def test_left_associative_division(self, evaluator):
        """100 / 10 / 5 is (100 / 10) / 5"""
        result = evaluator.evaluate_line("100 s / 10 s / 5 s")
        assert result.magnitude == pytest.approx(2.0)

    def test_mixed_units_normalize(self, evaluator):
        result = evaluator.evaluate_line("1 kg + 500 g - 250 g")
        assert result.magnitude == pytest.approx(1250.0)
        assert result.unit_name == "g"

    def test_compound_result(self, evaluator):
        result = evaluator.evaluate_line("10 km / 1 hr")
        assert result.unit_name == "km / hr"
        assert result.to_base().magnitude == pytest.approx(10000.0 / 3600.0)

    def test_compound_then_addition(self, evaluator):
        """36 km / 1 hr + 5 m / 1 s adds two velocities"""
        result = evaluator.evaluate_line("36 km / 1 hr + 5 m / 1 s")
        assert result.magnitude == pytest.approx(15.0)
        assert result.unit_name == "m / s"

    def test_single_measurement(self, evaluator):
        result = evaluator.evaluate_line("42 ml")
        assert result.magnitude == 42.0
        assert result.unit_name == "ml"

    def test_get_precedence(self):
        assert ExpressionEvaluator.get_precedence("*") > ExpressionEvaluator.get_precedence("+")
        assert ExpressionEvaluator.get_precedence("/") == ExpressionEvaluator.get_precedence("*")
        assert ExpressionEvaluator.get_precedence("-") == ExpressionEvaluator.get_precedence("+")
        assert ExpressionEvaluator.get_precedence("^") == 0


class TestEvaluationErrors:
    """Test fail-fast error propagation"""

    def test_dimension_mismatch(self, evaluator):
        with pytest.raises(DimensionMismatchError):
            evaluator.evaluate_line("2 kg + 3 m")

    def test_mismatch_after_compound(self, evaluator):
        """(10 km / 1 hr) + 5 m can not be added"""
        with pytest.raises(DimensionMismatchError):
            evaluator.evaluate_line("10 km / 1 hr + 5 m")

    def test_division_by_zero(self, evaluator):
        with pytest.raises(DivisionByZeroError):
            evaluator.evaluate_line("5 g + 3 g / 0 g")

    def test_invalid_operator(self, evaluator):
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate_line("2 kg % 3 kg")

    def test_trailing_operator(self, evaluator):
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate_line("2 kg +")

    def test_empty_expression(self, evaluator):
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate([], [])

    def test_missing_operator(self, evaluator, m):
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate([m("1 g"), m("2 g")], [])

    def test_too_many_operators(self, evaluator, m):
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate([m("1 g")], ["+", "+"])

    @pytest.mark.parametrize("texts,operators", [
        (["5 g", "1 m", "2 kg"], ["+"]),
        (["5 g", "1 m", "0 s"], ["/"]),
        (["1 g", "2 g", "3 g", "4 g"], ["+", "*"]),
    ])
    def test_too_few_operators(self, evaluator, m, texts, operators):
        """Operators are never paired with operands they did not sit between"""
        with pytest.raises(MalformedExpressionError):
            evaluator.evaluate([m(t) for t in texts], operators)

    def test_parse_error_propagates(self, evaluator):
        with pytest.raises(ParseError):
            evaluator.evaluate_line("2 kg + three g")


class TestModuleFunctions:
    """Test default evaluator helpers"""

    def test_evaluate(self):
        result = evaluate(
            [Measurement.from_text("1 hr"), Measurement.from_text("30 min")],
            ["+"],
        )
        assert result.magnitude == pytest.approx(5400.0)
        assert result.unit_name == "s"

    def test_evaluate_line(self):
        assert evaluate_line("1 l - 250 ml").magnitude == pytest.approx(0.75)

    def test_evaluate_tokens(self, evaluator):
        tokens = ExpressionTokens(
            measurements=[Measurement.from_text("2 m"), Measurement.from_text("3 s")],
            operators=["*"],
        )
        result = evaluator.evaluate_tokens(tokens)
        assert result.unit_name == "m * s"
        assert result.magnitude == 6.0

    def test_apply_operation(self, evaluator, m):
        assert evaluator.apply_operation(m("2 kg"), m("1 kg"), "-").magnitude == pytest.approx(1000.0)
        with pytest.raises(MalformedExpressionError):
            evaluator.apply_operation(m("2 kg"), m("1 kg"), "^")
