"""
Recipe Loading Service

Functions for reading recipe documents from YAML into Recipe models.

A document is either a mapping with 'title' and 'sections', or a bare list
of sections. Each section has a 'name', a list of 'ingredients' and an
optional list of 'steps'; each ingredient is a list of the item name
followed by one or more measurements:

    title: Whole Wheat Rustic Italian Bread
    sections:
      - name: Biga
        ingredients:
          - [bread flour, 5 oz, 1 cup]
"""

import yaml

from constants.validation import MAX_LENGTHS
from models import Ingredient, Recipe, Section
from utils.logger import get_logger
from utils.sanitizer import sanitize_item_name
from .arithmetic import scale
from .errors import ParseError, PrecisionLossError, RecipeFormatError
from .parsing import parse_measurement

logger = get_logger(__name__)


def _parse_ingredient(fields, registry):
    """Build an Ingredient from ['item', 'measurement', ...]."""
    if not isinstance(fields, list) or len(fields) < 2:
        raise RecipeFormatError(
            f"Ingredient must list an item and at least one measurement, got {fields!r}"
        )
    item = sanitize_item_name(fields[0])
    if not item:
        raise RecipeFormatError(f"Ingredient has no item name: {fields!r}")
    measurements = tuple(parse_measurement(str(field), registry) for field in fields[1:])
    return Ingredient(item, measurements)


def _parse_section(data, strict, registry):
    """Build a Section from its mapping."""
    if not isinstance(data, dict):
        raise RecipeFormatError(f"Section must be a mapping, got {type(data).__name__}")

    raw_ingredients = data.get('ingredients') or []
    raw_steps = data.get('steps') or []
    if not isinstance(raw_ingredients, list) or not isinstance(raw_steps, list):
        raise RecipeFormatError(f"Section {data.get('name')!r}: ingredients and steps must be lists")

    ingredients = []
    for fields in raw_ingredients:
        try:
            ingredients.append(_parse_ingredient(fields, registry))
        except (ParseError, PrecisionLossError) as e:
            if strict:
                raise
            logger.warning(f"Skipping ingredient {fields!r}: {e}")

    return Section(
        name=sanitize_item_name(data.get('name')),
        ingredients=tuple(ingredients),
        steps=tuple(str(step) for step in raw_steps),
    )


def parse_recipe(document, strict=True, registry=None):
    """
    Build a Recipe from an already-decoded YAML/JSON document.

    Args:
        document: Mapping with 'title' and 'sections', or a list of sections
        strict: Raise on the first bad measurement; otherwise skip the
            ingredient and log a warning
        registry: UnitRegistry for measurement parsing (default if None)

    Raises:
        RecipeFormatError: If the document structure is wrong
        ParseError, PrecisionLossError: If strict and a measurement is bad
    """
    if isinstance(document, list):
        title, sections = '', document
    elif isinstance(document, dict):
        title = document.get('title', '')
        sections = document.get('sections') or []
    else:
        raise RecipeFormatError(f"Recipe must be a mapping or a list, got {type(document).__name__}")

    if not isinstance(sections, list):
        raise RecipeFormatError('Recipe sections must be a list')

    return Recipe(
        title=sanitize_item_name(title, MAX_LENGTHS['recipe_title']),
        sections=tuple(_parse_section(s, strict, registry) for s in sections),
    )


def load_recipe_text(text, strict=True, registry=None):
    """Parse YAML text into a Recipe."""
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RecipeFormatError(f"Invalid recipe YAML: {e}") from e
    return parse_recipe(document, strict, registry)


def load_recipe(path, strict=True, registry=None):
    """Read and parse a YAML recipe file."""
    with open(path, encoding='utf-8') as f:
        recipe = load_recipe_text(f.read(), strict, registry)
    logger.info(f"Read recipe {recipe.title or path!r}: {len(recipe.ingredients)} ingredients")
    return recipe


def scale_recipe(recipe, factor):
    """Return a copy of a recipe with every measurement scaled by factor."""
    return Recipe(
        title=recipe.title,
        sections=tuple(
            Section(
                name=section.name,
                ingredients=tuple(
                    Ingredient(i.item, tuple(scale(m, factor) for m in i.measurements))
                    for i in section.ingredients
                ),
                steps=section.steps,
            )
            for section in recipe.sections
        ),
    )
