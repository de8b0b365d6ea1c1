"""Unitify - physical measurements and dimensionally checked expressions"""

__version__ = "0.1.0"
