"""Validation of unit names, measurements and token streams"""
from typing import List, Optional

from pydantic import BaseModel

from unitify.evaluation.evaluator import INVALID_PRECEDENCE, ExpressionEvaluator
from unitify.evaluation.tokenizer import ExpressionTokens
from unitify.measurement import Measurement
from unitify.units.registry import UnitRegistry, get_registry


class ValidationIssue(BaseModel):
    """Schema for a single validation problem"""
    check: str
    severity: str  # "error" | "warning"
    message: str
    position: Optional[int] = None


class MeasurementValidator:
    """Checks measurement data against the allowed unit list and value rules"""

    def __init__(self, registry: Optional[UnitRegistry] = None):
        self.registry = registry or get_registry()
        self.allowed_units = set(self.registry.aliases())

    def validate_unit(self, unit_name: str) -> bool:
        """
        Check a unit name against the allowed list

        Simple names must be listed in the unit table; compound names must
        be well formed and built only from listed names.
        """
        if unit_name in self.allowed_units:
            return True
        if "*" in unit_name or "/" in unit_name:
            return self.registry.is_known(unit_name)
        return False

    @staticmethod
    def validate_measurement(measurement: Measurement) -> bool:
        """Measured quantities must not be negative"""
        return measurement.magnitude >= 0

    def validate_tokens(self, tokens: ExpressionTokens) -> List[ValidationIssue]:
        """
        Collect problems in a token stream without evaluating it

        Args:
            tokens: Tokenized expression

        Returns:
            List of validation issues (empty when the stream is well formed)
        """
        issues: List[ValidationIssue] = []

        if not tokens.measurements:
            issues.append(ValidationIssue(
                check="empty_expression",
                severity="error",
                message="Expression contains no measurements",
            ))

        if tokens.measurements and not tokens.is_balanced:
            issues.append(ValidationIssue(
                check="operator_count",
                severity="error",
                message=(
                    f"Expected {len(tokens.measurements) - 1} operators, "
                    f"found {len(tokens.operators)}"
                ),
            ))

        for position, op in enumerate(tokens.operators):
            if ExpressionEvaluator.get_precedence(op) == INVALID_PRECEDENCE:
                issues.append(ValidationIssue(
                    check="operator",
                    severity="error",
                    message=f"Invalid operator: '{op}'",
                    position=position,
                ))

        for position, measurement in enumerate(tokens.measurements):
            if not self.validate_measurement(measurement):
                issues.append(ValidationIssue(
                    check="negative_magnitude",
                    severity="warning",
                    message=f"Negative magnitude: {measurement}",
                    position=position,
                ))

        return issues
