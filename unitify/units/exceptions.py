"""Exceptions raised by unit, measurement and expression operations"""


class UnitifyError(Exception):
    """Base exception for all measurement errors"""
    pass


class UnitError(UnitifyError):
    """Base exception for unit resolution and construction errors"""
    pass


class UnknownUnitError(UnitError):
    """Raised when a unit name is not in the registry"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown unit: '{name}'")


class MalformedCompoundError(UnitError):
    """Raised when compound unit operands and operators do not line up"""
    pass


class DimensionMismatchError(UnitifyError):
    """Raised when combining or comparing measurements of incompatible kinds"""

    def __init__(self, left: str, right: str, operation: str = "combine"):
        self.left = left
        self.right = right
        super().__init__(f"Cannot {operation} incompatible units: '{left}' and '{right}'")


class DivisionByZeroError(UnitifyError):
    """Raised when dividing by a zero-magnitude measurement"""
    pass


class MalformedExpressionError(UnitifyError):
    """Raised when an expression can not be reduced to a single measurement"""
    pass


class ParseError(UnitifyError):
    """Raised when measurement text can not be parsed"""
    pass
