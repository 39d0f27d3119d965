"""
Parsing Service

Functions for parsing measurement text such as '1 1/2 cups' into exact
quantities.
"""

import re
from fractions import Fraction

from models import Quantity
from utils.logger import get_logger
from utils.sanitizer import normalize_whitespace
from .errors import MalformedInputError, NonNumericMagnitudeError, PrecisionLossError
from .registry import default_registry

logger = get_logger(__name__)

# <magnitude> <unit>, where magnitude is '2', '2.5', '1/2' or '2 1/2' and
# unit is the rest of the text ('cups', 'tsp.', 'fl oz', '#').
# The magnitude is captured loosely so 'abc tsp' reports a bad number
# rather than a bad shape.
MEASUREMENT_RE = re.compile(
    r'^\s*(?P<magnitude>\S+(?:\s+\S*/\S*)?)\s+(?P<unit>[^\s\d][^\d]*?)\s*$'
)

# One magnitude token: integer, decimal or simple fraction
MAGNITUDE_TOKEN_RE = re.compile(r'^(?:\d+|\d*\.\d+|\d+/\d+)$')


def parse_magnitude(text):
    """
    Parse magnitude text into an exact Fraction.

    Handles: '3', '2.5', '.5', '1/4', '2 1/2'. Tokens are summed, so
    '2 1/2' is 5/2.

    Raises:
        NonNumericMagnitudeError: If any token is not a number
    """
    tokens = text.split()
    if not tokens or len(tokens) > 2:
        raise NonNumericMagnitudeError(f"Expected one or two numbers in {text!r}")

    total = Fraction(0)
    for token in tokens:
        if not MAGNITUDE_TOKEN_RE.match(token):
            raise NonNumericMagnitudeError(f"Token {token!r} in {text!r} is not a number")
        try:
            total += Fraction(token)
        except ZeroDivisionError:
            raise NonNumericMagnitudeError(f"Token {token!r} in {text!r} divides by zero")
    return total


def to_base_units(multiple, magnitude):
    """
    Multiply a base multiple by an exact magnitude.

    Raises:
        PrecisionLossError: If the product is not a whole number of base units
    """
    product = Fraction(multiple) * magnitude
    if product.denominator != 1:
        raise PrecisionLossError(
            f"Multiplying {multiple} by {magnitude} gives non-integral value {product}"
        )
    return product.numerator


def parse_measurement(text, registry=None):
    """
    Parse text like '1 1/2 cups' into a Quantity.

    Args:
        text: Measurement text, '<magnitude> <unit>'
        registry: UnitRegistry to resolve units against (default registry if None)

    Returns:
        Quantity in the base units of the unit's kind

    Raises:
        MalformedInputError: Text does not match '<magnitude> <unit>'
        NonNumericMagnitudeError: Magnitude is not a number
        UnrecognizedUnitError: Unit is not a known spelling
        PrecisionLossError: Amount is not a whole number of base units
    """
    if registry is None:
        registry = default_registry()

    if not isinstance(text, str):
        raise MalformedInputError(f"Measurement must be text, got {type(text).__name__}")

    match = MEASUREMENT_RE.match(normalize_whitespace(text))
    if not match:
        raise MalformedInputError(f"Unable to parse {text!r} as a measurement")

    magnitude = parse_magnitude(match.group('magnitude'))
    unit = registry.lookup(match.group('unit'))
    quantity = Quantity(unit.kind, to_base_units(unit.base_multiple, magnitude))

    logger.debug(f"{text!r}: {magnitude} {unit.name} -> {quantity.magnitude}")
    return quantity
