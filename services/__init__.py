"""
Services Package

The measurement engine (parse, add, scale, render) and the recipe and
shopping list services built on it.
"""

from .errors import (
    MeasurementError,
    ParseError,
    MalformedInputError,
    UnrecognizedUnitError,
    NonNumericMagnitudeError,
    PrecisionLossError,
    KindMismatchError,
    UnrepresentableQuantityError,
    IngredientMergeError,
    RecipeFormatError,
    UnitTableError,
)

from .registry import UnitRegistry, default_registry

from .parsing import (
    parse_magnitude,
    parse_measurement,
)

from .arithmetic import (
    add,
    scale,
    total,
)

from .rendering import (
    render,
    render_tokens,
)

from .recipes import (
    load_recipe,
    load_recipe_text,
    parse_recipe,
    scale_recipe,
)

from .shopping import (
    format_shopping_qty,
    generate_shopping_list,
    merge_ingredients,
    shopping_list,
)

# Short name used by collaborators
parse = parse_measurement

__all__ = [
    # Errors
    'MeasurementError',
    'ParseError',
    'MalformedInputError',
    'UnrecognizedUnitError',
    'NonNumericMagnitudeError',
    'PrecisionLossError',
    'KindMismatchError',
    'UnrepresentableQuantityError',
    'IngredientMergeError',
    'RecipeFormatError',
    'UnitTableError',
    # Registry
    'UnitRegistry',
    'default_registry',
    # Parsing
    'parse',
    'parse_magnitude',
    'parse_measurement',
    # Arithmetic
    'add',
    'scale',
    'total',
    # Rendering
    'render',
    'render_tokens',
    # Recipes
    'load_recipe',
    'load_recipe_text',
    'parse_recipe',
    'scale_recipe',
    # Shopping
    'format_shopping_qty',
    'generate_shopping_list',
    'merge_ingredients',
    'shopping_list',
]
