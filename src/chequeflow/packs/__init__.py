"""
ChequeFlow Holiday Packs

YAML/JSON holiday data validated with pydantic and converted into an
immutable HolidayTable. The Sri Lankan bank holiday pack ships as package
data.
"""
from __future__ import annotations

from .loader import (
    DEFAULT_PACK_PATH,
    HolidayPack,
    HolidayPackLoader,
    load_default_pack,
    load_holiday_pack,
    load_holiday_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    HolidayEntrySchema,
    HolidayPackSchema,
    check_schema_version,
    validate_holiday_pack,
)

__all__ = [
    "DEFAULT_PACK_PATH",
    "HolidayPack",
    "HolidayPackLoader",
    "load_default_pack",
    "load_holiday_pack",
    "load_holiday_pack_from_string",
    "SCHEMA_VERSION",
    "HolidayEntrySchema",
    "HolidayPackSchema",
    "check_schema_version",
    "validate_holiday_pack",
]
