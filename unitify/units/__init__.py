"""Unit kinds, unit values and the unit registry."""

from .exceptions import (
    UnitifyError,
    UnitError,
    UnknownUnitError,
    MalformedCompoundError,
    DimensionMismatchError,
    DivisionByZeroError,
    MalformedExpressionError,
    ParseError,
)
from .unit import (
    UnitKind,
    SimpleUnit,
    CompoundUnit,
    Unit,
    BASE_UNIT_NAMES,
    is_compatible,
)
from .registry import (
    UnitRegistry,
    UnitTableError,
    get_registry,
    resolve,
)

__all__ = [
    'UnitifyError',
    'UnitError',
    'UnknownUnitError',
    'MalformedCompoundError',
    'DimensionMismatchError',
    'DivisionByZeroError',
    'MalformedExpressionError',
    'ParseError',
    'UnitKind',
    'SimpleUnit',
    'CompoundUnit',
    'Unit',
    'BASE_UNIT_NAMES',
    'is_compatible',
    'UnitRegistry',
    'UnitTableError',
    'get_registry',
    'resolve',
]
