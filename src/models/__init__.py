"""Models package for unicon.

Exports the unit enumerations and the immutable unit descriptor.
"""

from .enums import Unit, UnitFamily
from .unit_descriptor import UnitDescriptor

__all__ = [
    "Unit",
    "UnitFamily",
    "UnitDescriptor",
]
