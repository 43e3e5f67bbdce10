"""
Enumerations for the unit catalog.

This module contains the two enums the registry and the conversion engine
are built on:
- UnitFamily: Physical quantity a unit measures
- Unit: One member per supported unit, in registration order
"""

from enum import Enum


class UnitFamily(str, Enum):
    """
    Family (physical quantity) a unit belongs to.

    Units only convert within their own family. The declaration order is
    the display order used when listing units.

    Values:
        TEMPERATURE: Formula-based conversions (celsius, fahrenheit, kelvin)
        LENGTH: Ratio-based, base unit meters
        TIME: Ratio-based, base unit seconds
        MASS: Ratio-based, base unit grams
        DIGITAL: Ratio-based, base unit bytes
    """

    TEMPERATURE = "temperature"
    LENGTH = "length"
    TIME = "time"
    MASS = "mass"
    DIGITAL = "digital"


class Unit(str, Enum):
    """
    Supported units.

    Values are the canonical lower-case names accepted on the command line.
    """

    # Temperature
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"
    # Length
    METERS = "meters"
    CENTIMETERS = "centimeters"
    DECIMETERS = "decimeters"
    DECAMETERS = "decameters"
    HECTOMETERS = "hectometers"
    KILOMETERS = "kilometers"
    MILLIMETERS = "millimeters"
    MILES = "miles"
    INCHES = "inches"
    FEET = "feet"
    # Time
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"
    # Mass
    GRAMS = "grams"
    CENTIGRAMS = "centigrams"
    DECIGRAMS = "decigrams"
    DECAGRAMS = "decagrams"
    HECTOGRAMS = "hectograms"
    MILLIGRAMS = "milligrams"
    KILOGRAMS = "kilograms"
    POUNDS = "pounds"
    OUNCES = "ounces"
    # Digital storage
    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MEGABYTES = "megabytes"
    GIGABYTES = "gigabytes"
    TERABYTES = "terabytes"
    PETABYTES = "petabytes"
    EXABYTES = "exabytes"
