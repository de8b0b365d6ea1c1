"""Stateless conversions between a measurement's unit and its base unit."""
from __future__ import annotations

from typing import TYPE_CHECKING

from unitify.units.exceptions import DimensionMismatchError
from unitify.units.unit import Unit, is_compatible

if TYPE_CHECKING:
    from unitify.measurement.measurement import Measurement


def to_base_unit(measurement: Measurement) -> Measurement:
    """Express a measurement in the base unit of its unit.

    Simple units convert to g, m, s or l. Compound units convert operand by
    operand, so 72 km / hr becomes 20 m / s.
    """
    unit = measurement.unit
    return type(measurement)(unit.to_base(measurement.magnitude), unit.base_unit())


def from_base_unit(measurement: Measurement, unit: Unit) -> Measurement:
    """Express a base-unit measurement in ``unit``.

    Raises:
        DimensionMismatchError: If ``unit`` does not reduce to the
            measurement's unit
    """
    if unit.base_unit() != measurement.unit:
        raise DimensionMismatchError(measurement.unit_name, unit.name, "convert")
    return type(measurement)(unit.from_base(measurement.magnitude), unit)


def conversion_factor(from_unit: Unit, to_unit: Unit) -> float:
    """Get the factor that turns one ``from_unit`` into ``to_unit``.

    Raises:
        DimensionMismatchError: If the units are not compatible
    """
    if not is_compatible(from_unit, to_unit):
        raise DimensionMismatchError(from_unit.name, to_unit.name, "convert")
    return from_unit.to_base(1.0) / to_unit.to_base(1.0)


def convert(measurement: Measurement, to_unit: Unit) -> Measurement:
    """Convert a measurement to another compatible unit.

    Raises:
        DimensionMismatchError: If the units are not compatible
    """
    if not is_compatible(measurement.unit, to_unit):
        raise DimensionMismatchError(measurement.unit_name, to_unit.name, "convert")
    return from_base_unit(to_base_unit(measurement), to_unit)
