"""
Constants for the unicon application.

This module defines system-wide constants including:
- Application metadata
- Rounding defaults
- Family display labels for the unit listing
- Error messages
"""

from typing import Dict

from src.models.enums import UnitFamily

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "unicon"
APP_VERSION = "0.1"
APP_DESCRIPTION = "Convert between various units."

# ============================================================================
# Rounding
# ============================================================================

DEFAULT_ROUND_PLACES = 2

# ============================================================================
# Command Line Keywords
# ============================================================================

FROM_KEYWORD = "from"
TO_KEYWORD = "to"

# VALUE from <UNIT> to <UNIT>
POSITIONAL_ARGUMENT_COUNT = 5

# ============================================================================
# Unit Listing
# ============================================================================

FAMILY_LABELS: Dict[UnitFamily, str] = {
    UnitFamily.TEMPERATURE: "TEMPERATURE",
    UnitFamily.LENGTH: "LENGTH",
    UnitFamily.TIME: "TIME",
    UnitFamily.MASS: "MASS",
    UnitFamily.DIGITAL: "DIGITAL STORAGE",
}

# ============================================================================
# Environment Variables
# ============================================================================

ENV_ROUND_PLACES = "UNICON_ROUND_PLACES"
ENV_LOG_LEVEL = "UNICON_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# ============================================================================
# Error Messages
# ============================================================================

ERROR_INVALID_FORMAT = "Invalid command format. Please provide the correct number of arguments."
ERROR_MISSING_KEYWORDS = "Invalid command format. Please provide both 'from' and 'to' units."
ERROR_INVALID_VALUE = "Invalid value provided. Please provide a valid numeric value."
ERROR_INVALID_ROUND = "Rounding places must be a non-negative integer."
