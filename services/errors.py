"""
Measurement Errors

Exception hierarchy raised by the measurement engine and the recipe
services built on it. Every failure surfaces to the caller; nothing is
rounded or truncated to avoid one.
"""


class MeasurementError(Exception):
    """Base class for all measurement and recipe errors."""
    pass


class ParseError(MeasurementError):
    """Raised when measurement text cannot be turned into a quantity."""
    pass


class MalformedInputError(ParseError):
    """Text does not look like '<magnitude> <unit>'."""
    pass


class UnrecognizedUnitError(ParseError):
    """Unit text is not a known spelling."""
    pass


class NonNumericMagnitudeError(ParseError):
    """A magnitude token is not an integer, decimal or fraction."""
    pass


class PrecisionLossError(MeasurementError):
    """Result would need a fraction of a base unit."""
    pass


class KindMismatchError(MeasurementError):
    """Raised when combining a volume with a weight."""
    pass


class UnrepresentableQuantityError(MeasurementError):
    """No combination of display units renders the quantity exactly."""
    pass


class IngredientMergeError(MeasurementError):
    """Ingredients differ in name or in number of measurements."""
    pass


class RecipeFormatError(MeasurementError):
    """Recipe document has the wrong structure."""
    pass


class UnitTableError(Exception):
    """
    The static unit table is inconsistent.

    This is a defect in constants.units, raised while building the registry,
    and is deliberately not a MeasurementError.
    """
    pass
