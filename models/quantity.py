"""
Quantity Model

An exact amount of volume or weight, stored as an integer count of the
kind's indivisible base unit.
"""

from dataclasses import dataclass

from .unit import Kind


@dataclass(frozen=True)
class Quantity:
    """
    Immutable (kind, magnitude) pair.

    The magnitude is always an int; arithmetic lives in services.arithmetic
    and always returns new instances.
    """
    kind: Kind
    magnitude: int

    def __post_init__(self):
        if not isinstance(self.kind, Kind):
            raise TypeError(f"kind must be a Kind, got {self.kind!r}")
        # bool is an int subclass but never a meaningful magnitude
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise TypeError(f"magnitude must be an int, got {self.magnitude!r}")

    def to_dict(self):
        """Plain JSON-friendly representation."""
        return {'kind': self.kind.value, 'magnitude': self.magnitude}
