"""
Arithmetic Service

Exact addition and scaling of quantities. Magnitudes stay integral; any
operation that would need a fraction of a base unit fails.
"""

from decimal import Decimal
from fractions import Fraction
from numbers import Rational

from models import Quantity
from .errors import KindMismatchError
from .parsing import parse_magnitude, to_base_units


def add(a, b):
    """
    Sum two quantities of the same kind.

    Raises:
        KindMismatchError: If a and b are of different kinds
    """
    if a.kind != b.kind:
        raise KindMismatchError(f"{a.kind.value.capitalize()} incompatible with {b.kind.value}")
    return Quantity(a.kind, a.magnitude + b.magnitude)


def total(quantities):
    """Sum a non-empty iterable of same-kind quantities."""
    quantities = iter(quantities)
    try:
        result = next(quantities)
    except StopIteration:
        raise ValueError('total() of an empty sequence')
    for quantity in quantities:
        result = add(result, quantity)
    return result


def to_factor(factor):
    """
    Coerce a scaling factor to an exact Fraction.

    Accepts int, Fraction, Decimal, or magnitude text like '1 1/2'.
    Floats are refused since most decimal fractions have no exact float.
    """
    if isinstance(factor, str):
        return parse_magnitude(factor)
    if isinstance(factor, bool) or isinstance(factor, float):
        raise TypeError(f"Scale factor must be exact (int, Fraction, Decimal or str), got {factor!r}")
    if isinstance(factor, (Rational, Decimal)):
        return Fraction(factor)
    raise TypeError(f"Unsupported scale factor {factor!r}")


def scale(quantity, factor):
    """
    Multiply a quantity by an exact rational factor.

    Raises:
        PrecisionLossError: If the result is not a whole number of base units
    """
    return Quantity(quantity.kind, to_base_units(quantity.magnitude, to_factor(factor)))
