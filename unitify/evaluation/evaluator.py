"""Operator-precedence evaluation of measurement expressions."""
from typing import Callable, Dict, List, Sequence

from unitify.evaluation.tokenizer import ExpressionTokens, tokenize_line
from unitify.measurement import Measurement
from unitify.units.exceptions import MalformedExpressionError

INVALID_PRECEDENCE = 0
ADD_SUB_PRECEDENCE = 1
MUL_DIV_PRECEDENCE = 2

PRECEDENCE: Dict[str, int] = {
    "+": ADD_SUB_PRECEDENCE,
    "-": ADD_SUB_PRECEDENCE,
    "*": MUL_DIV_PRECEDENCE,
    "/": MUL_DIV_PRECEDENCE,
}

OPERATIONS: Dict[str, Callable[[Measurement, Measurement], Measurement]] = {
    "+": Measurement.add,
    "-": Measurement.subtract,
    "*": Measurement.multiply,
    "/": Measurement.divide,
}


class ExpressionEvaluator:
    """Evaluates measurement expressions with standard precedence.

    Uses two stacks (shunting-yard): '*' and '/' bind tighter than '+' and
    '-', operators of equal precedence associate left to right. Parentheses
    are not supported. The first failing operation aborts the evaluation.
    """

    @staticmethod
    def get_precedence(op: str) -> int:
        return PRECEDENCE.get(op, INVALID_PRECEDENCE)

    def apply_operation(self, left: Measurement, right: Measurement, op: str) -> Measurement:
        """Apply a single binary operator.

        Raises:
            MalformedExpressionError: If the operator is not recognized
            DimensionMismatchError: If the operands are incompatible
            DivisionByZeroError: If dividing by zero
        """
        if self.get_precedence(op) == INVALID_PRECEDENCE:
            raise MalformedExpressionError(f"Invalid operator: '{op}'")
        return OPERATIONS[op](left, right)

    def _reduce(self, operand_stack: List[Measurement], operator_stack: List[str]) -> None:
        """Pop one operator and two operands, push the result."""
        op = operator_stack.pop()
        if len(operand_stack) < 2:
            raise MalformedExpressionError(f"Not enough operands for operator: '{op}'")
        right = operand_stack.pop()
        left = operand_stack.pop()
        operand_stack.append(self.apply_operation(left, right, op))

    def evaluate(self, measurements: Sequence[Measurement], operators: Sequence[str]) -> Measurement:
        """Evaluate measurements joined by operators.

        Args:
            measurements: Operands in expression order
            operators: Operators in expression order, one fewer than operands

        Returns:
            The single resulting Measurement

        Raises:
            MalformedExpressionError: If operators are invalid or the
                operand / operator counts do not reduce to one result
            DimensionMismatchError: If an operation combines incompatible units
            DivisionByZeroError: If an operation divides by zero
        """
        for op in operators:
            if self.get_precedence(op) == INVALID_PRECEDENCE:
                raise MalformedExpressionError(f"Invalid operator: '{op}'")
        if len(operators) > len(measurements):
            raise MalformedExpressionError(
                f"Too many operators: {len(operators)} for {len(measurements)} measurements"
            )
        if len(operators) < len(measurements) - 1:
            raise MalformedExpressionError(
                f"Missing operator: {len(operators)} operators for {len(measurements)} measurements"
            )

        operand_stack: List[Measurement] = []
        operator_stack: List[str] = []

        for index, measurement in enumerate(measurements):
            operand_stack.append(measurement)

            if index < len(operators):
                current = operators[index]
                while operator_stack and (
                    self.get_precedence(operator_stack[-1]) >= self.get_precedence(current)
                ):
                    self._reduce(operand_stack, operator_stack)
                operator_stack.append(current)

        while operator_stack:
            self._reduce(operand_stack, operator_stack)

        if not operand_stack:
            raise MalformedExpressionError("Empty expression: no result found")
        if len(operand_stack) > 1:
            raise MalformedExpressionError(
                f"Missing operator: {len(operand_stack)} measurements left without operators"
            )
        return operand_stack[0]

    def evaluate_tokens(self, tokens: ExpressionTokens) -> Measurement:
        return self.evaluate(tokens.measurements, tokens.operators)

    def evaluate_line(self, line: str) -> Measurement:
        """Tokenize and evaluate one line of text.

        Raises:
            ParseError: If the line can not be tokenized
            MalformedExpressionError, DimensionMismatchError,
            DivisionByZeroError: As for ``evaluate``
        """
        return self.evaluate_tokens(tokenize_line(line))


_default_evaluator = ExpressionEvaluator()


def evaluate(measurements: Sequence[Measurement], operators: Sequence[str]) -> Measurement:
    """Evaluate measurements joined by operators with the default evaluator."""
    return _default_evaluator.evaluate(measurements, operators)


def evaluate_line(line: str) -> Measurement:
    """Tokenize and evaluate one line with the default evaluator."""
    return _default_evaluator.evaluate_line(line)
