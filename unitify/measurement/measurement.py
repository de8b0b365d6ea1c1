"""Measurement values with dimensionally checked arithmetic."""
import math
from dataclasses import dataclass
from typing import Tuple

from unitify.common.config import settings
from unitify.measurement import converter
from unitify.units.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    ParseError,
    UnitError,
)
from unitify.units.registry import resolve
from unitify.units.unit import CompoundUnit, Unit, UnitKind, is_compatible


@dataclass(frozen=True, eq=False)
class Measurement:
    """A magnitude paired with a unit.

    Measurements are immutable; every arithmetic operation returns a new one.

    Same-kind operands are normalised to the base unit before they are
    combined, so ``0.5 kg + 200 g`` gives ``700 g``. Multiplying or dividing
    operands of different kinds builds a compound unit from the raw units,
    so ``10 km / 1 hr`` gives ``10 km / hr``.
    """
    magnitude: float
    unit: Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", float(self.magnitude))

    @property
    def unit_name(self) -> str:
        return self.unit.name

    @property
    def kind(self) -> UnitKind:
        return self.unit.kind

    def to_base(self) -> "Measurement":
        return converter.to_base_unit(self)

    def is_compatible(self, other: "Measurement") -> bool:
        return is_compatible(self.unit, other.unit)

    def _to_common_base(
        self, other: "Measurement", operation: str
    ) -> Tuple["Measurement", "Measurement"]:
        """Convert both operands to base units after checking compatibility.

        Raises:
            DimensionMismatchError: If the units are not compatible
        """
        if not self.is_compatible(other):
            raise DimensionMismatchError(self.unit_name, other.unit_name, operation)
        return converter.to_base_unit(self), converter.to_base_unit(other)

    def add(self, other: "Measurement") -> "Measurement":
        left, right = self._to_common_base(other, "add")
        return Measurement(left.magnitude + right.magnitude, left.unit)

    def subtract(self, other: "Measurement") -> "Measurement":
        left, right = self._to_common_base(other, "subtract")
        return Measurement(left.magnitude - right.magnitude, left.unit)

    def multiply(self, other: "Measurement") -> "Measurement":
        """Multiply by another measurement.

        Raises:
            DimensionMismatchError: If both operands are compound units that
                reduce to different base units
        """
        if self.kind == other.kind:
            left, right = self._to_common_base(other, "multiply")
            return Measurement(left.magnitude * right.magnitude, left.unit)

        unit = CompoundUnit((self.unit, other.unit), ("*",))
        return Measurement(self.magnitude * other.magnitude, unit)

    def divide(self, other: "Measurement") -> "Measurement":
        """Divide by another measurement.

        Raises:
            DivisionByZeroError: If ``other`` has zero magnitude
            DimensionMismatchError: If both operands are compound units that
                reduce to different base units
        """
        if other.magnitude == 0:
            raise DivisionByZeroError(
                f"Cannot divide {self} by zero-magnitude {other}"
            )

        if self.kind == other.kind:
            left, right = self._to_common_base(other, "divide")
            return Measurement(left.magnitude / right.magnitude, left.unit)

        unit = CompoundUnit((self.unit, other.unit), ("/",))
        return Measurement(self.magnitude / other.magnitude, unit)

    def __add__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.divide(other)

    # Comparisons use base-normalised magnitudes

    def _compare(self, other: "Measurement", operation: str) -> Tuple[float, float]:
        left, right = self._to_common_base(other, operation)
        return left.magnitude, right.magnitude

    def __eq__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self._compare(other, "compare")
        return math.isclose(
            left, right, rel_tol=settings.measurement.comparison_tolerance, abs_tol=0.0
        )

    def __ne__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self._compare(other, "compare")
        return left < right and not self == other

    def __gt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self._compare(other, "compare")
        return left > right and not self == other

    def __le__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return not self > other

    def __ge__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return not self < other

    __hash__ = None

    @classmethod
    def from_text(cls, text: str) -> "Measurement":
        """Parse a measurement such as "12.5 km" or "72 km / hr".

        Args:
            text: Magnitude followed by a unit name, separated by whitespace

        Returns:
            Parsed Measurement

        Raises:
            ParseError: If the magnitude is not a finite number or the unit
                is not recognized
        """
        parts = text.strip().split(None, 1)
        if len(parts) != 2:
            raise ParseError(f"Expected '<magnitude> <unit>', got '{text}'")

        magnitude_text, unit_text = parts
        try:
            magnitude = float(magnitude_text)
        except ValueError as e:
            raise ParseError(f"Invalid magnitude '{magnitude_text}' in '{text}'") from e
        if not math.isfinite(magnitude):
            raise ParseError(f"Magnitude must be finite in '{text}'")

        try:
            unit = resolve(unit_text)
        except UnitError as e:
            raise ParseError(f"Invalid unit in '{text}': {e}") from e

        return cls(magnitude, unit)

    def __str__(self) -> str:
        return f"{self.magnitude:g} {self.unit_name}"
