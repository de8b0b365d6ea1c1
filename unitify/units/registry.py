"""Unit registry mapping unit names to unit values."""

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from unitify.units.exceptions import MalformedCompoundError, UnitifyError, UnknownUnitError
from unitify.units.unit import (
    BASE_UNIT_NAMES,
    COMPOUND_OPERATORS,
    CompoundUnit,
    SimpleUnit,
    Unit,
    UnitKind,
)

DEFAULT_UNIT_TABLE = Path(__file__).parent / "data" / "units.json"

_OPERATOR_PATTERN = re.compile(r"([*/])")

# Greek small mu is often typed in place of the micro sign
_GREEK_MU = "μ"
_MICRO_SIGN = "µ"


class UnitTableError(UnitifyError):
    """Raised when the unit table is missing or inconsistent."""
    pass


class UnitRegistry:
    """Resolves unit names, aliases and compound unit strings to units."""

    def __init__(self, table_path: Optional[str] = None):
        """Initialize registry from a unit table.

        Args:
            table_path: Path to a units JSON table (defaults to the bundled one)
        """
        self.table_path = Path(table_path) if table_path else DEFAULT_UNIT_TABLE
        self._load_table()
        self._build_unit_lookup()

    def _load_table(self) -> None:
        """Load unit table from JSON file."""
        try:
            with open(self.table_path, 'r', encoding='utf-8') as f:
                self.table = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise UnitTableError(f"Failed to load unit table {self.table_path}: {e}") from e

    def _build_unit_lookup(self) -> None:
        """Build reverse lookup: alias -> unit."""
        self.unit_lookup: Dict[str, SimpleUnit] = {}
        self.canonical_units: Dict[UnitKind, List[str]] = {}

        for category, data in self.table.items():
            try:
                kind = UnitKind(category)
            except ValueError:
                raise UnitTableError(f"Unknown unit kind in table: '{category}'")
            if kind is UnitKind.COMPOUND:
                raise UnitTableError("Compound units can not be listed in the unit table")

            base_unit = data['base_unit']
            if base_unit != BASE_UNIT_NAMES[kind]:
                raise UnitTableError(
                    f"Base unit for {category} must be '{BASE_UNIT_NAMES[kind]}', got '{base_unit}'"
                )

            self.canonical_units[kind] = []
            for name, info in data['conversions'].items():
                unit = SimpleUnit(kind, name, float(info['factor']))
                self.canonical_units[kind].append(name)
                for alias in [name] + info.get('aliases', []):
                    if alias in self.unit_lookup:
                        raise UnitTableError(f"Duplicate unit alias: '{alias}'")
                    self.unit_lookup[alias] = unit

            if base_unit not in self.unit_lookup:
                raise UnitTableError(f"Base unit '{base_unit}' missing from {category} conversions")

    def resolve(self, name: str) -> Unit:
        """Resolve a unit name to a unit.

        Names containing '*' or '/' are read as compound units, e.g.
        "km / hr" or "g/ml". Each part is resolved through this registry.

        Args:
            name: Unit name, alias or compound unit string

        Returns:
            SimpleUnit or CompoundUnit

        Raises:
            UnknownUnitError: If a unit name is not recognized
            MalformedCompoundError: If a compound string does not alternate
                between unit names and operators
        """
        name = name.strip().replace(_GREEK_MU, _MICRO_SIGN)
        if any(op in name for op in COMPOUND_OPERATORS):
            return self._resolve_compound(name)

        if name not in self.unit_lookup:
            raise UnknownUnitError(name)
        return self.unit_lookup[name]

    def _resolve_compound(self, name: str) -> CompoundUnit:
        """Split a compound unit string and resolve each operand."""
        tokens = _OPERATOR_PATTERN.sub(r" \1 ", name).split()

        if len(tokens) % 2 == 0:
            raise MalformedCompoundError(f"Malformed compound unit: '{name}'")

        operands = []
        operators = []
        for i, token in enumerate(tokens):
            if i % 2 == 0:
                if token in COMPOUND_OPERATORS:
                    raise MalformedCompoundError(
                        f"Expected unit name at position {i} in '{name}', got '{token}'"
                    )
                operands.append(self.resolve(token))
            else:
                if token not in COMPOUND_OPERATORS:
                    raise MalformedCompoundError(
                        f"Expected operator at position {i} in '{name}', got '{token}'"
                    )
                operators.append(token)

        return CompoundUnit(tuple(operands), tuple(operators))

    def is_known(self, name: str) -> bool:
        """Check whether a name resolves to a unit."""
        try:
            self.resolve(name)
            return True
        except (UnknownUnitError, MalformedCompoundError):
            return False

    def base_unit(self, kind: UnitKind) -> SimpleUnit:
        """Get the base unit for a simple unit kind.

        Raises:
            UnknownUnitError: If the kind has no base unit (compound)
        """
        if kind not in BASE_UNIT_NAMES:
            raise UnknownUnitError(str(kind.value))
        return self.unit_lookup[BASE_UNIT_NAMES[kind]]

    def aliases(self) -> List[str]:
        """Get every accepted simple unit spelling."""
        return list(self.unit_lookup.keys())

    def get_supported_units(self, kind: Optional[UnitKind] = None) -> Dict[str, List[str]]:
        """Get canonical unit names, optionally filtered by kind.

        Args:
            kind: Optional kind to filter by

        Returns:
            Dictionary mapping kind names to lists of canonical unit names
        """
        if kind:
            if kind not in self.canonical_units:
                return {}
            return {kind.value: list(self.canonical_units[kind])}

        return {k.value: list(names) for k, names in self.canonical_units.items()}


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Get the process-wide default registry (loaded once)."""
    return UnitRegistry()


def resolve(name: str) -> Unit:
    """Resolve a unit name through the default registry."""
    return get_registry().resolve(name)
