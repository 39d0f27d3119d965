"""
Rendering Service

Turns a quantity back into text, greedily using the largest display unit
first: a cup and a teaspoon reads '1 c, 1 tsp' rather than '49 tsp'.
"""

from fractions import Fraction

from .errors import UnrepresentableQuantityError
from .registry import default_registry


def _format_decimal(remainder, unit):
    """Remainder expressed in unit, to the unit's decimal places."""
    value = float(Fraction(remainder, unit.base_multiple))
    return f"{value:.{unit.decimal_places}f}"


def render_tokens(quantity, system, registry=None):
    """
    Greedy decomposition of a quantity into display tokens.

    Walks the system's units largest first. Single-use units ('3/4 c') only
    match an exact remainder; units allowing multiples take as many whole
    units as fit; units with decimal places or fraction support absorb the
    whole remainder as a decimal.

    Raises:
        UnrepresentableQuantityError: If no unit matches, or an amount is left
            over after the smallest unit
    """
    if registry is None:
        registry = default_registry()

    tokens = []
    remainder = quantity.magnitude

    for unit in registry.ordered_units(quantity.kind, system):
        if remainder == 0:
            break
        size = unit.base_multiple

        if remainder == size and not unit.multiples_allowed:
            tokens.append(unit.label)
            remainder = 0
        elif size <= remainder and unit.multiples_allowed and (
                remainder % size == 0 or unit.decimal_places == 0):
            count = remainder // size
            tokens.append(f"{count} {unit.label}")
            remainder -= count * size
        elif (size < remainder and unit.decimal_places) or unit.fractions_allowed:
            value = _format_decimal(remainder, unit)
            if float(value) == 0:
                # Rounds to nothing in this unit; leave it to a smaller one
                continue
            tokens.append(f"{value} {unit.label}")
            remainder = 0

    if not tokens:
        raise UnrepresentableQuantityError(
            f"No {system.value} unit can display {quantity.magnitude} base units of {quantity.kind.value}"
        )
    if remainder:
        raise UnrepresentableQuantityError(
            f"{quantity.magnitude} base units of {quantity.kind.value} leave {remainder} "
            f"after {', '.join(tokens)} in {system.value} units"
        )
    return tokens


def render(quantity, system, registry=None):
    """Render a quantity as text in the given display system."""
    return ', '.join(render_tokens(quantity, system, registry))
