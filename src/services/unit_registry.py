"""
Unit registry for unicon.

This module is the authoritative source of unit metadata. It provides:
- The static unit table (family and scale factor for every unit)
- Case-insensitive name lookup
- Descriptor lookup by Unit
- Grouping of descriptors by family for the unit listing

Scale Factor Convention:
- Each scale factor is "how many of this unit equal one base unit"
- Base units: meters (length), seconds (time), grams (mass), bytes (digital)
- Temperature units carry no scale factor; they convert by formula

The registry is built once at import time and is never mutated afterwards,
so it is safe to share between threads without locking.
"""

import logging
from typing import Dict, List, Optional, Tuple

from src.models.enums import Unit, UnitFamily
from src.models.unit_descriptor import UnitDescriptor

from .exceptions import UnitNotFound
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


# ============================================================================
# Standard Unit Table
# ============================================================================

_KIB = 1024.0

# (family, unit, scale factor) in registration order
_UNIT_TABLE: Tuple[Tuple[UnitFamily, Unit, Optional[float]], ...] = (
    # Temperature (formula-based)
    (UnitFamily.TEMPERATURE, Unit.CELSIUS, None),
    (UnitFamily.TEMPERATURE, Unit.FAHRENHEIT, None),
    (UnitFamily.TEMPERATURE, Unit.KELVIN, None),
    # Length (base: meters)
    (UnitFamily.LENGTH, Unit.METERS, 1.0),
    (UnitFamily.LENGTH, Unit.CENTIMETERS, 100.0),
    (UnitFamily.LENGTH, Unit.DECIMETERS, 10.0),
    (UnitFamily.LENGTH, Unit.DECAMETERS, 0.1),
    (UnitFamily.LENGTH, Unit.HECTOMETERS, 0.01),
    (UnitFamily.LENGTH, Unit.KILOMETERS, 0.001),
    (UnitFamily.LENGTH, Unit.MILLIMETERS, 1000.0),
    (UnitFamily.LENGTH, Unit.MILES, 0.000621371),
    (UnitFamily.LENGTH, Unit.INCHES, 39.3701),
    (UnitFamily.LENGTH, Unit.FEET, 3.28084),
    # Time (base: seconds)
    (UnitFamily.TIME, Unit.SECONDS, 1.0),
    (UnitFamily.TIME, Unit.MILLISECONDS, 1000.0),
    (UnitFamily.TIME, Unit.MINUTES, 1.0 / 60.0),
    (UnitFamily.TIME, Unit.HOURS, 1.0 / 3600.0),
    (UnitFamily.TIME, Unit.DAYS, 1.0 / 86400.0),
    (UnitFamily.TIME, Unit.MONTHS, 1.0 / 2592000.0),  # 30-day month
    (UnitFamily.TIME, Unit.YEARS, 1.0 / 31536000.0),  # 365-day year
    # Mass (base: grams)
    (UnitFamily.MASS, Unit.GRAMS, 1.0),
    (UnitFamily.MASS, Unit.CENTIGRAMS, 100.0),
    (UnitFamily.MASS, Unit.DECIGRAMS, 10.0),
    (UnitFamily.MASS, Unit.DECAGRAMS, 0.1),
    (UnitFamily.MASS, Unit.HECTOGRAMS, 0.01),
    (UnitFamily.MASS, Unit.MILLIGRAMS, 1000.0),
    (UnitFamily.MASS, Unit.KILOGRAMS, 0.001),
    (UnitFamily.MASS, Unit.POUNDS, 0.00220462),
    (UnitFamily.MASS, Unit.OUNCES, 0.03527396),
    # Digital storage (base: bytes, binary multiples)
    (UnitFamily.DIGITAL, Unit.BYTES, 1.0),
    (UnitFamily.DIGITAL, Unit.KILOBYTES, 1.0 / _KIB),
    (UnitFamily.DIGITAL, Unit.MEGABYTES, 1.0 / _KIB**2),
    (UnitFamily.DIGITAL, Unit.GIGABYTES, 1.0 / _KIB**3),
    (UnitFamily.DIGITAL, Unit.TERABYTES, 1.0 / _KIB**4),
    (UnitFamily.DIGITAL, Unit.PETABYTES, 1.0 / _KIB**5),
    (UnitFamily.DIGITAL, Unit.EXABYTES, 1.0 / _KIB**6),
)


def _build_registry() -> Tuple[Tuple[UnitDescriptor, ...], Dict[str, UnitDescriptor], Dict[Unit, UnitDescriptor]]:
    """
    Build the descriptor tuple and its lookup indexes.

    Returns:
        Tuple of (ordered descriptors, index by lower-case name, index by Unit)

    Raises:
        ValueError: If a name or unit is registered twice, or a Unit is missing
    """
    descriptors = []
    by_name: Dict[str, UnitDescriptor] = {}
    by_unit: Dict[Unit, UnitDescriptor] = {}

    for family, unit, scale_factor in _UNIT_TABLE:
        descriptor = UnitDescriptor(
            unit=unit, family=family, name=unit.value, scale_factor=scale_factor
        )
        key = descriptor.name.lower()
        if key in by_name:
            raise ValueError(f"Duplicate unit name: {descriptor.name}")
        if unit in by_unit:
            raise ValueError(f"Duplicate unit: {unit.name}")
        descriptors.append(descriptor)
        by_name[key] = descriptor
        by_unit[unit] = descriptor

    missing = [unit.name for unit in Unit if unit not in by_unit]
    if missing:
        raise ValueError(f"Units without a descriptor: {', '.join(missing)}")

    return tuple(descriptors), by_name, by_unit


_DESCRIPTORS, _BY_NAME, _BY_UNIT = _build_registry()


# ============================================================================
# Lookup
# ============================================================================


def lookup(name: str) -> Unit:
    """
    Resolve a unit name to its Unit.

    Matching is case-insensitive and exact: no abbreviations, no
    surrounding whitespace.

    Args:
        name: Unit name (e.g., "Kelvin", "KILOMETERS")

    Returns:
        The matching Unit

    Raises:
        UnitNotFound: If no registered unit has this name

    Example:
        >>> lookup("KELVIN")
        <Unit.KELVIN: 'kelvin'>
    """
    descriptor = _BY_NAME.get(name.lower())
    if descriptor is None:
        log_operation(logger, "lookup", "not_found", level=logging.DEBUG, unit_name=name)
        raise UnitNotFound(name)
    return descriptor.unit


def describe(unit: Unit) -> UnitDescriptor:
    """
    Get the descriptor for a unit.

    Args:
        unit: Any member of Unit

    Returns:
        The unit's descriptor
    """
    return _BY_UNIT[unit]


def get_family(unit: Unit) -> UnitFamily:
    """Get the family a unit belongs to."""
    return _BY_UNIT[unit].family


def get_scale_factor(unit: Unit) -> Optional[float]:
    """Get a unit's scale factor (None for temperature units)."""
    return _BY_UNIT[unit].scale_factor


def is_known_unit(name: str) -> bool:
    """Check whether a name resolves to a registered unit."""
    return name.lower() in _BY_NAME


def all_unit_names() -> List[str]:
    """Get every registered unit name in registration order."""
    return [descriptor.name for descriptor in _DESCRIPTORS]


def all_descriptors() -> Tuple[UnitDescriptor, ...]:
    """Get every descriptor in registration order."""
    return _DESCRIPTORS


# ============================================================================
# Listing
# ============================================================================


def list_by_family() -> Dict[UnitFamily, List[UnitDescriptor]]:
    """
    Group descriptors by family for display.

    Returns:
        Dict keyed by family in display order (temperature, length, time,
        mass, digital); each value lists descriptors in registration order.
    """
    grouped: Dict[UnitFamily, List[UnitDescriptor]] = {family: [] for family in UnitFamily}
    for descriptor in _DESCRIPTORS:
        grouped[descriptor.family].append(descriptor)
    return grouped
