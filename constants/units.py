"""
Unit Constants and Conversion Tables

Contains the base-unit multiples and the static volume and weight unit
tables the registry is built from.
"""

from models.unit import Kind, System, UnitDefinition

# Volume base unit is 1/24 ml so thirds and eighths of a teaspoon are whole
MILLILITER = 24
DECILITER = MILLILITER * 100
LITER = MILLILITER * 1000

TEASPOON = MILLILITER * 5
EIGHTH_TEASPOON = TEASPOON // 8
QUARTER_TEASPOON = TEASPOON // 4
THIRD_TEASPOON = TEASPOON // 3
HALF_TEASPOON = TEASPOON // 2
TWO_THIRDS_TEASPOON = TEASPOON * 2 // 3
THREE_QUARTER_TEASPOON = TEASPOON * 3 // 4
TABLESPOON = TEASPOON * 3
FLUID_OUNCE = TABLESPOON * 2
CUP = FLUID_OUNCE * 8
QUARTER_CUP = CUP // 4
THIRD_CUP = CUP // 3
HALF_CUP = CUP // 2
TWO_THIRDS_CUP = CUP * 2 // 3
THREE_QUARTER_CUP = CUP * 3 // 4
PINT = CUP * 2
QUART = CUP * 4
GALLON = QUART * 4

# Weight base unit is 1/8 mg
MILLIGRAM = 8
GRAM = MILLIGRAM * 1000
KILOGRAM = GRAM * 1000

# Cooking ounce of 28.35 g, divisible by 16
OUNCE = MILLIGRAM * 28350
POUND = OUNCE * 16


def _output_only(name, multiple, label):
    """Single-use imperial volume unit that is rendered but never parsed."""
    return UnitDefinition(name, Kind.VOLUME, System.IMPERIAL, multiple, label=label)


VOLUME_UNITS = (
    UnitDefinition(
        'milliliter', Kind.VOLUME, System.METRIC, MILLILITER,
        spellings=('ml', 'milliliter', 'milliliters', 'millilitre', 'millilitres', 'mL'),
        label='ml', decimal_places=1, multiples_allowed=True, fractions_allowed=True,
    ),
    UnitDefinition(
        'deciliter', Kind.VOLUME, System.METRIC, DECILITER,
        spellings=('dl', 'deciliter', 'deciliters', 'decilitre', 'decilitres', 'dL'),
        suppress_output=True,
    ),
    UnitDefinition(
        'liter', Kind.VOLUME, System.METRIC, LITER,
        spellings=('l', 'liter', 'liters', 'litre', 'litres', 'L'),
        label='l', decimal_places=3, multiples_allowed=True,
    ),
    _output_only('eighth teaspoon', EIGHTH_TEASPOON, '1/8 tsp'),
    _output_only('quarter teaspoon', QUARTER_TEASPOON, '1/4 tsp'),
    _output_only('third teaspoon', THIRD_TEASPOON, '1/3 tsp'),
    _output_only('half teaspoon', HALF_TEASPOON, '1/2 tsp'),
    _output_only('two-thirds teaspoon', TWO_THIRDS_TEASPOON, '2/3 tsp'),
    _output_only('three-quarter teaspoon', THREE_QUARTER_TEASPOON, '3/4 tsp'),
    UnitDefinition(
        'teaspoon', Kind.VOLUME, System.IMPERIAL, TEASPOON,
        spellings=('t', 'teaspoon', 'teaspoons', 'tsp', 'tsp.'),
        label='tsp', multiples_allowed=True,
    ),
    UnitDefinition(
        'tablespoon', Kind.VOLUME, System.IMPERIAL, TABLESPOON,
        spellings=('T', 'tablespoon', 'tablespoons', 'tbl', 'tbl.', 'tbs.', 'tbsp.'),
        label='T', multiples_allowed=True,
    ),
    UnitDefinition(
        'fluid ounce', Kind.VOLUME, System.IMPERIAL, FLUID_OUNCE,
        spellings=('fluid ounce', 'fluid ounces', 'fl oz'),
        suppress_output=True,
    ),
    _output_only('quarter cup', QUARTER_CUP, '1/4 c'),
    _output_only('third cup', THIRD_CUP, '1/3 c'),
    _output_only('half cup', HALF_CUP, '1/2 c'),
    _output_only('two-thirds cup', TWO_THIRDS_CUP, '2/3 c'),
    _output_only('three-quarter cup', THREE_QUARTER_CUP, '3/4 c'),
    UnitDefinition(
        'cup', Kind.VOLUME, System.IMPERIAL, CUP,
        spellings=('c', 'cup', 'cups'),
        label='c', multiples_allowed=True,
    ),
    UnitDefinition(
        'pint', Kind.VOLUME, System.IMPERIAL, PINT,
        spellings=('p', 'pt', 'pint', 'pints', 'fl pt'),
        suppress_output=True,
    ),
    UnitDefinition(
        'quart', Kind.VOLUME, System.IMPERIAL, QUART,
        spellings=('q', 'quart', 'quarts', 'qt', 'fl qt'),
        label='qt', multiples_allowed=True,
    ),
    # 'g' belongs to gram
    UnitDefinition(
        'gallon', Kind.VOLUME, System.IMPERIAL, GALLON,
        spellings=('gal', 'gallon', 'gallons'),
        label='gal', multiples_allowed=True,
    ),
)

WEIGHT_UNITS = (
    UnitDefinition(
        'milligram', Kind.WEIGHT, System.METRIC, MILLIGRAM,
        spellings=('mg', 'milligram', 'milligrams', 'milligramme', 'milligrammes'),
        label='mg', decimal_places=1, multiples_allowed=True, fractions_allowed=True,
    ),
    UnitDefinition(
        'gram', Kind.WEIGHT, System.METRIC, GRAM,
        spellings=('g', 'gram', 'grams', 'gramme', 'grammes'),
        label='g', multiples_allowed=True,
    ),
    UnitDefinition(
        'kilogram', Kind.WEIGHT, System.METRIC, KILOGRAM,
        spellings=('kg', 'kilogram', 'kilograms', 'kilogramme', 'kilogrammes'),
        label='kg', decimal_places=3, multiples_allowed=True,
    ),
    UnitDefinition(
        'ounce', Kind.WEIGHT, System.IMPERIAL, OUNCE,
        spellings=('oz', 'ounce', 'ounces'),
        label='oz', decimal_places=1, multiples_allowed=True, fractions_allowed=True,
    ),
    UnitDefinition(
        'pound', Kind.WEIGHT, System.IMPERIAL, POUND,
        spellings=('lb', '#', 'pound', 'pounds'),
        label='lb', multiples_allowed=True,
    ),
)

# Every table the default registry is built from
ALL_UNITS = VOLUME_UNITS + WEIGHT_UNITS
