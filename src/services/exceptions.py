"""Service layer exception classes for unicon.

This module defines the custom exceptions raised by the unit registry, the
conversion engine and input validation. The core raises them; only the CLI
layer catches them and turns them into a message and exit status.

Exception Hierarchy:
    ServiceError (base)
    ├── UnitNotFound
    ├── IncompatibleFamilies
    └── ValidationError
"""


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class UnitNotFound(ServiceError):
    """Raised when a unit name does not match any registered unit.

    Args:
        name: The unit name that was not found

    Example:
        >>> raise UnitNotFound("parsecs")
        UnitNotFound: Unknown unit 'parsecs'
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown unit '{name}'")


class IncompatibleFamilies(ServiceError):
    """Raised when converting between units that cannot be related.

    Covers units of different families as well as any temperature pair
    without a defined formula.

    Args:
        from_unit: Source unit
        to_unit: Target unit

    Example:
        >>> raise IncompatibleFamilies(Unit.CELSIUS, Unit.METERS)
        IncompatibleFamilies: Cannot convert celsius (temperature) to meters (length)
    """

    def __init__(self, from_unit, to_unit, from_family=None, to_family=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.from_family = from_family
        self.to_family = to_family

        from_label = _label(from_unit, from_family)
        to_label = _label(to_unit, to_family)
        super().__init__(f"Cannot convert {from_label} to {to_label}")


class ValidationError(ServiceError):
    """Raised when command-line input validation fails."""

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")


def _label(unit, family) -> str:
    name = getattr(unit, "value", unit)
    if family is None:
        return f"{name}"
    return f"{name} ({getattr(family, 'value', family)})"
