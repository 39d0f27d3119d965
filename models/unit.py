"""
Unit Models

Contains the closed Kind and System enumerations and the UnitDefinition
value describing one row of the static unit tables.
"""

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Quantity kind. Quantities of different kinds never mix."""
    VOLUME = 'volume'
    WEIGHT = 'weight'


class System(Enum):
    """Display convention selecting which units the renderer may use."""
    METRIC = 'metric'
    IMPERIAL = 'imperial'


@dataclass(frozen=True)
class UnitDefinition:
    """
    One unit of measure.

    Attributes:
        name: Identifier used in logs and tests (e.g. 'teaspoon')
        kind: Kind of quantity this unit measures
        system: Display system the unit belongs to
        base_multiple: How many base units make one of this unit
        spellings: Accepted input spellings (case-sensitive, may be empty)
        label: Display label used by the renderer
        decimal_places: Precision used when rendering a fractional remainder
        suppress_output: Input-only unit, never chosen by the renderer
        multiples_allowed: May render as "N label"
        fractions_allowed: May render a non-integral remainder as a decimal
    """
    name: str
    kind: Kind
    system: System
    base_multiple: int
    spellings: tuple = ()
    label: str = ''
    decimal_places: int = 0
    suppress_output: bool = False
    multiples_allowed: bool = False
    fractions_allowed: bool = False
