"""
Unit Registry Service

Builds the immutable spelling lookup and the per (kind, system) rendering
order from the static unit tables.
"""

from collections import defaultdict
from functools import lru_cache
from types import MappingProxyType

from constants import ALL_UNITS
from utils.logger import get_logger
from .errors import UnitTableError, UnrecognizedUnitError

logger = get_logger(__name__)


class UnitRegistry:
    """
    Read-only view over a set of UnitDefinitions.

    Build with UnitRegistry.build(); instances are never mutated and may be
    shared freely.
    """

    def __init__(self, lookup, ordered):
        self._lookup = MappingProxyType(dict(lookup))
        self._ordered = MappingProxyType(dict(ordered))

    @classmethod
    def build(cls, definitions):
        """
        Build a registry from unit definitions.

        Raises UnitTableError if two units share a spelling, or if two
        rendered units of the same kind and system share a base multiple.
        """
        lookup = {}
        groups = defaultdict(list)

        for unit in definitions:
            for spelling in unit.spellings:
                if spelling in lookup:
                    raise UnitTableError(
                        f"Spelling {spelling!r} registered by both "
                        f"{lookup[spelling].name!r} and {unit.name!r}"
                    )
                lookup[spelling] = unit
            if not unit.suppress_output:
                groups[(unit.kind, unit.system)].append(unit)

        ordered = {}
        for key, units in groups.items():
            units.sort(key=lambda u: u.base_multiple, reverse=True)
            for larger, smaller in zip(units, units[1:]):
                if larger.base_multiple == smaller.base_multiple:
                    raise UnitTableError(
                        f"{larger.name!r} and {smaller.name!r} both render "
                        f"{larger.base_multiple} base units"
                    )
            ordered[key] = tuple(units)

        logger.debug(f"Built unit registry: {len(lookup)} spellings, {len(ordered)} display groups")
        return cls(lookup, ordered)

    def find(self, spelling):
        """Return the unit for a spelling, or None."""
        return self._lookup.get(spelling)

    def lookup(self, spelling):
        """Return the unit for a spelling, raising UnrecognizedUnitError."""
        unit = self._lookup.get(spelling)
        if unit is None:
            raise UnrecognizedUnitError(f"Could not recognize {spelling!r} as a unit")
        return unit

    def ordered_units(self, kind, system):
        """Rendered units of kind/system, largest first."""
        return self._ordered.get((kind, system), ())

    @property
    def spellings(self):
        return tuple(self._lookup)

    def __contains__(self, spelling):
        return spelling in self._lookup


@lru_cache(maxsize=None)
def default_registry():
    """Registry over the shipped tables, built once on first use."""
    return UnitRegistry.build(ALL_UNITS)
