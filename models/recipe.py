"""
Recipe Models

Contains the Recipe, Section and Ingredient values produced by the recipe
loader and consumed by the shopping list service.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """
    An ingredient line.

    measurements holds one Quantity per alternative measurement of the same
    amount, e.g. (weight, volume) for "bread flour, 5 oz, 1 cup".
    """
    item: str
    measurements: tuple = ()


@dataclass(frozen=True)
class Section:
    """Named part of a recipe with its own ingredients and steps."""
    name: str
    ingredients: tuple = ()
    steps: tuple = ()


@dataclass(frozen=True)
class Recipe:
    """Recipe with a title and ordered sections."""
    title: str = ''
    sections: tuple = ()

    @property
    def ingredients(self):
        """All ingredient lines across sections, in document order."""
        return [ingredient for section in self.sections for ingredient in section.ingredients]
