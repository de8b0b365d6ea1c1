"""Measurements and unit conversion."""

from . import converter
from .measurement import Measurement

__all__ = [
    'Measurement',
    'converter',
]
