"""Tokenizer turning a line of text into measurements and operators"""
import math
from dataclasses import dataclass, field
from typing import List

from unitify.measurement import Measurement
from unitify.units.exceptions import ParseError, UnitError
from unitify.units.registry import resolve


@dataclass
class ExpressionTokens:
    """Measurements in line order with the operators between them"""
    measurements: List[Measurement] = field(default_factory=list)
    operators: List[str] = field(default_factory=list)

    @property
    def is_balanced(self) -> bool:
        return len(self.operators) == len(self.measurements) - 1


def _parse_magnitude(token: str, position: int) -> float:
    try:
        magnitude = float(token)
    except ValueError as e:
        raise ParseError(f"Expected magnitude at token {position}, got '{token}'") from e
    if not math.isfinite(magnitude):
        raise ParseError(f"Magnitude must be finite at token {position}, got '{token}'")
    return magnitude


def _is_number(token: str) -> bool:
    try:
        float(token)
        return True
    except ValueError:
        return False


def tokenize_line(line: str) -> ExpressionTokens:
    """Split a line such as "2 kg + 300 g * 4 s" into tokens.

    Tokens are whitespace separated and follow the pattern
    ``<magnitude> <unit> [<operator> <magnitude> <unit>]...``. A unit token
    written without blanks may itself be compound ("km/hr").

    A trailing operator is kept so the evaluator can reject the truncated
    expression. Operator tokens are not checked here beyond not being
    numbers; the evaluator rejects unknown operators.

    Raises:
        ParseError: If a magnitude or unit token is missing or invalid
    """
    tokens = line.split()
    result = ExpressionTokens()

    i = 0
    while i < len(tokens):
        magnitude = _parse_magnitude(tokens[i], i)
        if i + 1 >= len(tokens):
            raise ParseError(f"Missing unit after magnitude '{tokens[i]}'")

        unit_token = tokens[i + 1]
        try:
            unit = resolve(unit_token)
        except UnitError as e:
            raise ParseError(f"Invalid unit at token {i + 1}: {e}") from e
        result.measurements.append(Measurement(magnitude, unit))

        if i + 2 < len(tokens):
            operator = tokens[i + 2]
            if _is_number(operator):
                raise ParseError(f"Expected operator at token {i + 2}, got '{operator}'")
            result.operators.append(operator)

        i += 3

    return result
