"""
ChequeFlow Holiday Pack Schemas

Pydantic models for validating holiday pack YAML/JSON files.

A holiday pack carries one jurisdiction's bank holidays:
- fixed: holidays on the same MM-DD every year
- variable: per-year holidays (lunar observances have no closed-form rule,
  so each year is listed explicitly)

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


WeekdayValue = Literal[
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]


# =============================================================================
# Entry Schema
# =============================================================================

class HolidayEntrySchema(BaseModel):
    """Schema for one holiday entry."""
    date: str = Field(..., pattern=r"^\d{2}-\d{2}$", description="Month and day, MM-DD")
    name: str = Field(..., min_length=1, description="Human-readable holiday name")

    @field_validator("date")
    @classmethod
    def validate_month_day(cls, v: str) -> str:
        month, day = (int(part) for part in v.split("-"))
        try:
            # 2000 is a leap year, so 02-29 is accepted here
            date(2000, month, day)
        except ValueError:
            raise ValueError(f"'{v}' is not a valid month/day")
        return v

    @property
    def month(self) -> int:
        return int(self.date[:2])

    @property
    def day(self) -> int:
        return int(self.date[3:])


# =============================================================================
# Pack Schema
# =============================================================================

class HolidayPackSchema(BaseModel):
    """Schema for a complete holiday pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Unique pack identifier")
    name: str = Field(..., description="Human-readable pack name")
    jurisdiction: str = Field(..., description="Jurisdiction code, e.g. LK")
    description: str = Field("", description="Free-text description")
    weekend_days: list[WeekdayValue] = Field(
        default_factory=lambda: ["Saturday", "Sunday"],
        description="Days banks are always closed",
    )
    fixed: list[HolidayEntrySchema] = Field(default_factory=list)
    variable: dict[int, list[HolidayEntrySchema]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_variable_dates(self) -> "HolidayPackSchema":
        """Variable entries must exist in their own year (no 02-29 off leap years)."""
        for year, entries in self.variable.items():
            for entry in entries:
                try:
                    date(year, entry.month, entry.day)
                except ValueError:
                    raise ValueError(
                        f"Variable holiday '{entry.name}' has date {entry.date} "
                        f"which does not exist in {year}"
                    )
        return self


def validate_holiday_pack(data: dict[str, Any]) -> HolidayPackSchema:
    """Validate raw pack data; raises pydantic.ValidationError."""
    return HolidayPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check the pack's major schema version matches this loader's."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
