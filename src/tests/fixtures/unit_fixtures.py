"""Shared unit collections for parametrized tests."""

from src.models.enums import Unit, UnitFamily
from src.services import unit_registry


def units_in(family: UnitFamily):
    """All units of a family in registration order."""
    return [d.unit for d in unit_registry.list_by_family()[family]]


RATIO_FAMILIES = [UnitFamily.LENGTH, UnitFamily.TIME, UnitFamily.MASS, UnitFamily.DIGITAL]

TEMPERATURE_UNITS = units_in(UnitFamily.TEMPERATURE)

SAME_FAMILY_PAIRS = [
    (a, b)
    for family in UnitFamily
    for a in units_in(family)
    for b in units_in(family)
    if a != b
]

CROSS_FAMILY_PAIRS = [
    (a, b)
    for a in Unit
    for b in Unit
    if unit_registry.get_family(a) != unit_registry.get_family(b)
]
