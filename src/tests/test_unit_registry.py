"""
Unit tests for the unit registry.

Tests cover:
- Case-insensitive name lookup
- Unknown names
- Descriptor lookup and scale factors
- Family grouping order
"""

import pytest

from src.models.enums import Unit, UnitFamily
from src.models.unit_descriptor import UnitDescriptor
from src.services import unit_registry
from src.services.exceptions import ServiceError, UnitNotFound


EXPECTED_NAMES = [
    "celsius", "fahrenheit", "kelvin",
    "meters", "centimeters", "decimeters", "decameters", "hectometers",
    "kilometers", "millimeters", "miles", "inches", "feet",
    "seconds", "milliseconds", "minutes", "hours", "days", "months", "years",
    "grams", "centigrams", "decigrams", "decagrams", "hectograms",
    "milligrams", "kilograms", "pounds", "ounces",
    "bytes", "kilobytes", "megabytes", "gigabytes", "terabytes", "petabytes", "exabytes",
]


# ============================================================================
# Lookup Tests
# ============================================================================


class TestLookup:
    """Test resolving unit names."""

    def test_lookup_is_case_insensitive(self):
        """Test the same unit is found regardless of case."""
        assert unit_registry.lookup("KELVIN") == Unit.KELVIN
        assert unit_registry.lookup("kelvin") == Unit.KELVIN
        assert unit_registry.lookup("Kelvin") == Unit.KELVIN
        assert unit_registry.lookup("kElViN") == Unit.KELVIN

    @pytest.mark.parametrize("name", EXPECTED_NAMES)
    def test_every_name_resolves(self, name):
        """Test every vocabulary name resolves to the unit of that name."""
        assert unit_registry.lookup(name).value == name

    def test_lookup_unknown_unit(self):
        """Test an unknown name raises UnitNotFound."""
        with pytest.raises(UnitNotFound) as exc_info:
            unit_registry.lookup("parsecs")
        assert exc_info.value.name == "parsecs"
        assert "parsecs" in str(exc_info.value)

    def test_unit_not_found_is_service_error(self):
        """Test UnitNotFound belongs to the service error hierarchy."""
        with pytest.raises(ServiceError):
            unit_registry.lookup("furlongs")

    @pytest.mark.parametrize("name", ["km", "m", "kg", "meter", "", " meters", "meters "])
    def test_lookup_requires_exact_name(self, name):
        """Test abbreviations, singulars and padded names are rejected."""
        with pytest.raises(UnitNotFound):
            unit_registry.lookup(name)

    def test_is_known_unit(self):
        """Test membership check mirrors lookup."""
        assert unit_registry.is_known_unit("Bytes") is True
        assert unit_registry.is_known_unit("parsecs") is False


# ============================================================================
# Descriptor Tests
# ============================================================================


class TestDescribe:
    """Test descriptor lookup."""

    @pytest.mark.parametrize("unit", list(Unit))
    def test_describe_is_total(self, unit):
        """Test every unit has exactly one descriptor naming it."""
        descriptor = unit_registry.describe(unit)
        assert isinstance(descriptor, UnitDescriptor)
        assert descriptor.unit == unit
        assert descriptor.name == unit.value

    def test_names_are_unique(self):
        """Test names form a single flat namespace across families."""
        names = [name.lower() for name in unit_registry.all_unit_names()]
        assert len(names) == len(set(names))

    def test_registration_order(self):
        """Test names come back in registration order."""
        assert unit_registry.all_unit_names() == EXPECTED_NAMES
        assert len(unit_registry.all_descriptors()) == len(Unit)

    def test_temperature_units_have_no_scale_factor(self):
        """Test temperature descriptors carry no scale factor."""
        for unit in (Unit.CELSIUS, Unit.FAHRENHEIT, Unit.KELVIN):
            assert unit_registry.get_family(unit) == UnitFamily.TEMPERATURE
            assert unit_registry.get_scale_factor(unit) is None

    @pytest.mark.parametrize(
        "unit",
        [Unit.METERS, Unit.SECONDS, Unit.GRAMS, Unit.BYTES],
    )
    def test_base_units_have_unit_scale(self, unit):
        """Test base units have scale factor 1.0."""
        assert unit_registry.get_scale_factor(unit) == 1.0

    @pytest.mark.parametrize(
        "unit,expected",
        [
            (Unit.CENTIMETERS, 100.0),
            (Unit.KILOMETERS, 0.001),
            (Unit.MILES, 0.000621371),
            (Unit.INCHES, 39.3701),
            (Unit.FEET, 3.28084),
            (Unit.MINUTES, 1 / 60),
            (Unit.YEARS, 1 / 31536000),
            (Unit.POUNDS, 0.00220462),
            (Unit.OUNCES, 0.03527396),
            (Unit.KILOBYTES, 1 / 1024),
            (Unit.EXABYTES, 1 / 1024**6),
        ],
    )
    def test_scale_factors(self, unit, expected):
        """Test scale factors count units per base unit."""
        assert unit_registry.get_scale_factor(unit) == pytest.approx(expected, rel=1e-12)

    def test_all_ratio_scale_factors_positive(self):
        """Test every non-temperature unit has a positive scale factor."""
        for descriptor in unit_registry.all_descriptors():
            if not descriptor.is_temperature:
                assert descriptor.scale_factor > 0


# ============================================================================
# Listing Tests
# ============================================================================


class TestListByFamily:
    """Test grouping descriptors for display."""

    def test_family_display_order(self):
        """Test families come back temperature, length, time, mass, digital."""
        assert list(unit_registry.list_by_family()) == [
            UnitFamily.TEMPERATURE,
            UnitFamily.LENGTH,
            UnitFamily.TIME,
            UnitFamily.MASS,
            UnitFamily.DIGITAL,
        ]

    def test_every_unit_listed_once(self):
        """Test the grouping partitions the unit set."""
        grouped = unit_registry.list_by_family()
        listed = [d.unit for descriptors in grouped.values() for d in descriptors]
        assert sorted(listed, key=lambda u: u.value) == sorted(Unit, key=lambda u: u.value)

    def test_order_within_family(self):
        """Test registration order is kept inside a family."""
        grouped = unit_registry.list_by_family()
        assert [d.name for d in grouped[UnitFamily.TEMPERATURE]] == [
            "celsius",
            "fahrenheit",
            "kelvin",
        ]
        assert [d.name for d in grouped[UnitFamily.DIGITAL]][:3] == [
            "bytes",
            "kilobytes",
            "megabytes",
        ]

    def test_listing_does_not_expose_registry_state(self):
        """Test mutating a returned grouping leaves the registry intact."""
        grouped = unit_registry.list_by_family()
        grouped[UnitFamily.MASS].clear()
        assert len(unit_registry.list_by_family()[UnitFamily.MASS]) == 9
