"""
Models Package

Value types for the measurement engine and the recipes built on it.
"""

from .unit import Kind, System, UnitDefinition
from .quantity import Quantity
from .recipe import Recipe, Section, Ingredient

__all__ = [
    'Kind',
    'System',
    'UnitDefinition',
    'Quantity',
    'Recipe',
    'Section',
    'Ingredient',
]
