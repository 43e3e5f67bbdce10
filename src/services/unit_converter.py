"""
Unit conversion engine for unicon.

This module provides:
- Temperature conversions by closed-form formula
- Ratio-based conversions for length, time, mass and digital storage
- Family compatibility checks
- Rounding and result display helpers

Conversion Strategy:
- Identical units short-circuit and return the value unchanged
- Temperature units convert only among themselves, through one of six
  formulas selected by the exact (from, to) pair
- Every other unit converts within its family through the scale factors
  stored in the registry: value -> base unit -> target unit

All functions are pure. Non-finite values are not rejected; they propagate
through the arithmetic.
"""

import logging
import math
import sys
from typing import Callable, Dict, Tuple

from src.models.enums import Unit, UnitFamily

from . import unit_registry
from .exceptions import IncompatibleFamilies
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


# ============================================================================
# Temperature Formulas
# ============================================================================

ABSOLUTE_ZERO_CELSIUS = 273.15

_TEMPERATURE_FORMULAS: Dict[Tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.CELSIUS, Unit.FAHRENHEIT): lambda v: v * 9 / 5 + 32,
    (Unit.CELSIUS, Unit.KELVIN): lambda v: v + ABSOLUTE_ZERO_CELSIUS,
    (Unit.FAHRENHEIT, Unit.CELSIUS): lambda v: (v - 32) * 5 / 9,
    (Unit.FAHRENHEIT, Unit.KELVIN): lambda v: (v - 32) * 5 / 9 + ABSOLUTE_ZERO_CELSIUS,
    (Unit.KELVIN, Unit.CELSIUS): lambda v: v - ABSOLUTE_ZERO_CELSIUS,
    (Unit.KELVIN, Unit.FAHRENHEIT): lambda v: (v - ABSOLUTE_ZERO_CELSIUS) * 9 / 5 + 32,
}


def convert_temperature(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert between two distinct temperature units.

    Args:
        value: Temperature to convert
        from_unit: Source unit (celsius, fahrenheit or kelvin)
        to_unit: Target unit (celsius, fahrenheit or kelvin)

    Returns:
        Converted temperature

    Raises:
        IncompatibleFamilies: If the pair has no formula (including any pair
            where one side is not a temperature unit)
    """
    formula = _TEMPERATURE_FORMULAS.get((from_unit, to_unit))
    if formula is None:
        raise _incompatible(from_unit, to_unit)
    return formula(value)


# ============================================================================
# Ratio Conversions
# ============================================================================


def convert_by_ratio(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert between two units of the same ratio-based family.

    Scale factors count units per base unit, so dividing by the source
    factor reaches the base unit and multiplying by the target factor
    reaches the target unit (1 kilometers -> 1000 meters).

    Args:
        value: Quantity to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted quantity

    Raises:
        IncompatibleFamilies: If the units belong to different families
            or either is a temperature unit
    """
    from_desc = unit_registry.describe(from_unit)
    to_desc = unit_registry.describe(to_unit)

    if from_desc.is_temperature or to_desc.is_temperature or from_desc.family != to_desc.family:
        raise _incompatible(from_unit, to_unit)

    return value * (to_desc.scale_factor / from_desc.scale_factor)


# ============================================================================
# Conversion Entry Point
# ============================================================================


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert a value from one unit to another.

    Args:
        value: Quantity to convert (any float; NaN and infinities propagate)
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value

    Raises:
        IncompatibleFamilies: If the units cannot be related

    Example:
        >>> convert(0, Unit.CELSIUS, Unit.FAHRENHEIT)
        32.0
        >>> convert(1024, Unit.BYTES, Unit.KILOBYTES)
        1.0
    """
    if from_unit == to_unit:
        return value

    try:
        if is_temperature(from_unit) or is_temperature(to_unit):
            result = convert_temperature(value, from_unit, to_unit)
        else:
            result = convert_by_ratio(value, from_unit, to_unit)
    except IncompatibleFamilies:
        log_operation(
            logger,
            operation="convert",
            outcome="incompatible_families",
            level=logging.DEBUG,
            from_unit=from_unit.value,
            to_unit=to_unit.value,
        )
        raise

    log_operation(
        logger,
        operation="convert",
        outcome="success",
        level=logging.DEBUG,
        from_unit=from_unit.value,
        to_unit=to_unit.value,
        value=value,
        result=result,
    )
    return result


def is_temperature(unit: Unit) -> bool:
    """Check whether a unit converts by formula."""
    return unit_registry.get_family(unit) == UnitFamily.TEMPERATURE


def units_compatible(from_unit: Unit, to_unit: Unit) -> bool:
    """
    Check if two units can be converted into each other.

    Args:
        from_unit: First unit
        to_unit: Second unit

    Returns:
        True if convert() would succeed for this pair
    """
    return unit_registry.get_family(from_unit) == unit_registry.get_family(to_unit)


# ============================================================================
# Rounding and Display
# ============================================================================


def round_value(value: float, places: int) -> float:
    """
    Round half away from zero to a number of decimal places.

    Python's round() rounds half to even; the command line rounds 2.5
    to 3 and -2.5 to -3.

    Args:
        value: Value to round
        places: Decimal places (must be >= 0)

    Returns:
        Rounded value. Non-finite values, and any value when places is too
        large for 10**places to be a finite float, are returned unchanged.

    Raises:
        ValueError: If places is negative
    """
    if places < 0:
        raise ValueError(f"Decimal places must be non-negative, got {places}")
    # 10.0**places overflows past max_10_exp
    if not math.isfinite(value) or places > sys.float_info.max_10_exp:
        return value

    factor = 10.0**places
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / factor


def format_conversion(value: float, from_unit: Unit, to_unit: Unit, places: int = 2) -> str:
    """
    Convert and format a conversion for display.

    Args:
        value: Source quantity
        from_unit: Source unit
        to_unit: Target unit
        places: Decimal places for both numbers

    Returns:
        Formatted string (e.g., "1.00 kilometers = 1000.00 meters")

    Raises:
        IncompatibleFamilies: If the units cannot be related
    """
    result = round_value(convert(value, from_unit, to_unit), places)
    from_name = unit_registry.describe(from_unit).name
    to_name = unit_registry.describe(to_unit).name
    return f"{value:.{places}f} {from_name} = {result:.{places}f} {to_name}"


def _incompatible(from_unit: Unit, to_unit: Unit) -> IncompatibleFamilies:
    return IncompatibleFamilies(
        from_unit,
        to_unit,
        unit_registry.get_family(from_unit),
        unit_registry.get_family(to_unit),
    )
