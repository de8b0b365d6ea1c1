"""Unit values: simple units of one kind and compound units built from them."""
import enum
from dataclasses import dataclass, field
from typing import Tuple, Union

from unitify.units.exceptions import MalformedCompoundError


class UnitKind(str, enum.Enum):
    """Dimensional category of a unit"""
    MASS = "mass"
    LENGTH = "length"
    TIME = "time"
    VOLUME = "volume"
    COMPOUND = "compound"


# Canonical base unit name for each simple kind
BASE_UNIT_NAMES = {
    UnitKind.MASS: "g",
    UnitKind.LENGTH: "m",
    UnitKind.TIME: "s",
    UnitKind.VOLUME: "l",
}

COMPOUND_OPERATORS = ("*", "/")


@dataclass(frozen=True, eq=False)
class SimpleUnit:
    """A unit of a single kind with a scalar factor to the kind's base unit.

    Args:
        kind: Dimensional kind (anything but COMPOUND)
        name: Canonical unit name, e.g. "km"
        factor_to_base: Size of one unit expressed in the base unit
    """
    kind: UnitKind
    name: str
    factor_to_base: float

    def __post_init__(self) -> None:
        if self.kind is UnitKind.COMPOUND:
            raise ValueError("A simple unit can not have the compound kind")
        if not self.factor_to_base > 0:
            raise ValueError(
                f"Factor to base must be positive for '{self.name}': {self.factor_to_base}"
            )

    def to_base(self, magnitude: float) -> float:
        return magnitude * self.factor_to_base

    def from_base(self, magnitude: float) -> float:
        return magnitude / self.factor_to_base

    def base_unit(self) -> "SimpleUnit":
        return SimpleUnit(self.kind, BASE_UNIT_NAMES[self.kind], 1.0)

    @property
    def is_compound(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (SimpleUnit, CompoundUnit)):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class CompoundUnit:
    """A chain of units joined left to right by '*' and '/' operators.

    The canonical name is built once at construction, e.g. ``km / hr``.

    Args:
        operands: Units in order, at least one
        operators: One operator between each pair of neighbouring operands

    Raises:
        MalformedCompoundError: If the operator count is not one less than
            the operand count, or an operator is not '*' or '/'
    """
    operands: Tuple["Unit", ...]
    operators: Tuple[str, ...]
    name: str = field(init=False)

    def __post_init__(self) -> None:
        operands = tuple(self.operands)
        operators = tuple(self.operators)
        if not operands:
            raise MalformedCompoundError("Compound unit needs at least one operand")
        if len(operators) != len(operands) - 1:
            raise MalformedCompoundError(
                f"Compound unit has {len(operands)} operands but {len(operators)} operators"
            )
        for op in operators:
            if op not in COMPOUND_OPERATORS:
                raise MalformedCompoundError(f"Invalid compound unit operator: '{op}'")

        name = operands[0].name
        for op, operand in zip(operators, operands[1:]):
            name += f" {op} {operand.name}"

        object.__setattr__(self, "operands", operands)
        object.__setattr__(self, "operators", operators)
        object.__setattr__(self, "name", name)

    @property
    def kind(self) -> UnitKind:
        return UnitKind.COMPOUND

    @property
    def is_compound(self) -> bool:
        return True

    @property
    def factor_to_base(self) -> float:
        """Product / quotient of the operands' own factors to base"""
        factor = self.operands[0].to_base(1.0)
        for op, operand in zip(self.operators, self.operands[1:]):
            if op == "*":
                factor *= operand.to_base(1.0)
            else:
                factor /= operand.to_base(1.0)
        return factor

    def to_base(self, magnitude: float) -> float:
        result = magnitude * self.operands[0].to_base(1.0)
        for op, operand in zip(self.operators, self.operands[1:]):
            if op == "*":
                result *= operand.to_base(1.0)
            else:
                result /= operand.to_base(1.0)
        return result

    def from_base(self, magnitude: float) -> float:
        result = magnitude / self.operands[0].to_base(1.0)
        for op, operand in zip(self.operators, self.operands[1:]):
            if op == "*":
                result /= operand.to_base(1.0)
            else:
                result *= operand.to_base(1.0)
        return result

    def base_unit(self) -> "CompoundUnit":
        return CompoundUnit(
            tuple(operand.base_unit() for operand in self.operands),
            self.operators,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (SimpleUnit, CompoundUnit)):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


Unit = Union[SimpleUnit, CompoundUnit]


def is_compatible(left: Unit, right: Unit) -> bool:
    """Check whether two units measure the same dimension.

    Simple units are compatible when their kinds match. Compound units must
    also reduce to the same base unit, so ``km / hr`` matches ``m / s`` but
    not ``g / l``.
    """
    if left.kind != right.kind:
        return False
    if left.kind is UnitKind.COMPOUND:
        return left.base_unit().name == right.base_unit().name
    return True
