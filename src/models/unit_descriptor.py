"""
Unit descriptor model.

A descriptor carries the metadata the registry knows about one unit:
its family, its display/lookup name and, for ratio-based families, its
scale factor relative to the family base unit.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import Unit, UnitFamily


@dataclass(frozen=True)
class UnitDescriptor:
    """
    Immutable metadata for a single unit.

    Attributes:
        unit: Unit this descriptor describes
        family: Family the unit belongs to
        name: Lookup/display name (matched case-insensitively)
        scale_factor: How many of this unit equal one base unit of the family.
            None for temperature units, which convert by formula.
    """

    unit: Unit
    family: UnitFamily
    name: str
    scale_factor: Optional[float] = None

    def __post_init__(self):
        if self.family == UnitFamily.TEMPERATURE:
            if self.scale_factor is not None:
                raise ValueError(f"Temperature unit '{self.name}' cannot carry a scale factor")
        elif self.scale_factor is None or self.scale_factor <= 0:
            raise ValueError(f"Unit '{self.name}' requires a positive scale factor")

    @property
    def display_name(self) -> str:
        """Name as shown in the unit listing (e.g., "Kilometers")."""
        return self.name.capitalize()

    @property
    def is_temperature(self) -> bool:
        """True if this unit converts by formula rather than by ratio."""
        return self.family == UnitFamily.TEMPERATURE

    def __repr__(self) -> str:
        """Return string representation of UnitDescriptor."""
        return f"UnitDescriptor(name='{self.name}', family='{self.family.value}')"
