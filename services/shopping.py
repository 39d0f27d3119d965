"""
Shopping List Service

Functions for merging ingredients and generating shopping lists from
recipes.
"""

from models import Ingredient
from .arithmetic import add
from .errors import IngredientMergeError
from .recipes import scale_recipe
from .rendering import render


def merge_ingredients(first, second):
    """
    Combine two lines for the same ingredient.

    Measurements are summed pairwise, so both lines must list the same
    number of measurements in the same kinds (e.g. weight then volume).
    Neither input is modified.

    Raises:
        IngredientMergeError: If the names or measurement counts differ
        KindMismatchError: If paired measurements are of different kinds
    """
    if first.item != second.item:
        raise IngredientMergeError(f"Cannot add ingredient {second.item!r} to {first.item!r}")
    if len(first.measurements) != len(second.measurements):
        raise IngredientMergeError(
            f"Cannot merge ingredients. {first.item!r} has {len(first.measurements)} "
            f"measurements while {second.item!r} has {len(second.measurements)}"
        )
    # Sum everything before building the result so an error leaves nothing behind
    merged = tuple(add(a, b) for a, b in zip(first.measurements, second.measurements))
    return Ingredient(first.item, merged)


def _consolidate(ingredients):
    """Merge ingredient lines by name, keeping first-appearance order."""
    consolidated = {}
    for ingredient in ingredients:
        if ingredient.item in consolidated:
            consolidated[ingredient.item] = merge_ingredients(consolidated[ingredient.item], ingredient)
        else:
            consolidated[ingredient.item] = ingredient
    return list(consolidated.values())


def shopping_list(recipe):
    """Every ingredient of a recipe, with repeated ingredients merged."""
    return _consolidate(recipe.ingredients)


def generate_shopping_list(recipes, multipliers=None):
    """
    Generate one shopping list from several recipes.

    Args:
        recipes: Sequence of Recipe
        multipliers: Optional sequence of exact factors, one per recipe
            (defaults to 1 for each)

    Returns:
        List of merged Ingredient, in order of first appearance

    Raises:
        ValueError: If multipliers and recipes differ in length
    """
    recipes = list(recipes)
    if multipliers is None:
        multipliers = [1] * len(recipes)
    multipliers = list(multipliers)
    if len(multipliers) != len(recipes):
        raise ValueError(f"Got {len(multipliers)} multipliers for {len(recipes)} recipes")

    ingredients = []
    for recipe, multiplier in zip(recipes, multipliers):
        ingredients.extend(scale_recipe(recipe, multiplier).ingredients)
    return _consolidate(ingredients)


def format_shopping_qty(ingredient, system):
    """Format an ingredient's measurements for display, e.g. '5 oz or 1 c'."""
    return ' or '.join(render(m, system) for m in ingredient.measurements)
