"""Services package - Unit registry and conversion engine for unicon.

Service Modules:
- unit_registry: Static unit table, name lookup, family grouping
- unit_converter: Temperature formulas, ratio conversions, rounding

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- logging_utils: Service logger naming and structured operation logging
"""

from . import unit_registry, unit_converter
from .exceptions import IncompatibleFamilies, ServiceError, UnitNotFound, ValidationError

__all__ = [
    "unit_registry",
    "unit_converter",
    "ServiceError",
    "UnitNotFound",
    "IncompatibleFamilies",
    "ValidationError",
]
