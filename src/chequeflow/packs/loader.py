"""
ChequeFlow Holiday Pack Loader

Loads and validates holiday packs from YAML or JSON files.

Converts Pydantic schema models to an immutable HolidayTable wrapped in a
HolidayPack.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars.base import DEFAULT_MAX_ROLL_DAYS, HolidayTableCalendar
from ..calendars.holiday_table import HolidayTable
from ..exceptions import HolidayPackLoadError, HolidayPackValidationError, InvalidHolidayTableError
from ..models import Holiday, Weekday
from .schema import (
    SCHEMA_VERSION,
    HolidayPackSchema,
    check_schema_version,
    validate_holiday_pack,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_PACK_PATH = DATA_DIR / "sri_lanka_bank.yaml"


# =============================================================================
# Holiday Pack
# =============================================================================

@dataclass(frozen=True)
class HolidayPack:
    """
    A loaded holiday pack.

    Attributes:
        id: Unique pack identifier
        name: Human-readable name
        jurisdiction: Jurisdiction code
        table: Indexed holiday table
        weekend_days: Weekday indexes banks are closed (0=Monday)
        schema_version: Schema version the pack was written against
    """
    id: str
    name: str
    jurisdiction: str
    table: HolidayTable
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))
    schema_version: str = SCHEMA_VERSION
    description: str = ""

    def calendar(self, max_roll_days: int = DEFAULT_MAX_ROLL_DAYS) -> HolidayTableCalendar:
        """Build a working-day calendar over this pack's table."""
        return HolidayTableCalendar(
            weekend_days=self.weekend_days,
            max_roll_days=max_roll_days,
            table=self.table,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (used for content hashing)."""
        return {
            "id": self.id,
            "jurisdiction": self.jurisdiction,
            "weekend_days": sorted(self.weekend_days),
            "table": self.table.to_dict(),
        }


# =============================================================================
# Schema -> Domain Conversion
# =============================================================================

def _convert_holiday_pack(schema: HolidayPackSchema) -> HolidayPack:
    fixed = [Holiday(month=e.month, day=e.day, name=e.name) for e in schema.fixed]
    variable = [
        Holiday(month=e.month, day=e.day, name=e.name, year=year)
        for year, entries in schema.variable.items()
        for e in entries
    ]
    return HolidayPack(
        id=schema.id,
        name=schema.name,
        jurisdiction=schema.jurisdiction,
        table=HolidayTable(fixed=tuple(fixed), variable=tuple(variable)),
        weekend_days=frozenset(Weekday(d).index for d in schema.weekend_days),
        schema_version=schema.schema_version,
        description=schema.description,
    )


def _build_pack(data: Any, source: str) -> HolidayPack:
    if not isinstance(data, dict):
        raise HolidayPackLoadError(
            message="Holiday pack must be a mapping at the top level",
            details={"source": source},
        )
    try:
        schema = validate_holiday_pack(data)
    except ValidationError as e:
        raise HolidayPackValidationError(
            message=f"Holiday pack validation failed: {e.error_count()} errors",
            details={
                "errors": e.errors(include_url=False, include_context=False, include_input=False),
                "source": source,
            },
        )
    try:
        return _convert_holiday_pack(schema)
    except InvalidHolidayTableError as e:
        raise HolidayPackValidationError(
            message=f"Holiday pack table is invalid: {e.message}",
            details={"errors": e.details, "source": source},
        )


# =============================================================================
# Holiday Pack Loader
# =============================================================================

class HolidayPackLoader:
    """
    Loads holiday packs from files and caches them by ID.

    Usage:
        loader = HolidayPackLoader()
        pack = loader.load("packs/sri_lanka_bank.yaml")
        calendar = pack.calendar()
    """

    def __init__(self, strict_version: bool = True) -> None:
        self.strict_version = strict_version
        self._packs: dict[str, HolidayPack] = {}

    def load(self, path: Union[str, Path]) -> HolidayPack:
        """
        Load a holiday pack from a file.

        Raises:
            HolidayPackLoadError: If the file cannot be read or parsed, or
                its schema version is incompatible
            HolidayPackValidationError: If validation fails
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise HolidayPackLoadError(
                message=f"Failed to load holiday pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        if self.strict_version and isinstance(data, dict) and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise HolidayPackLoadError(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={"pack_version": pack_version, "expected_version": SCHEMA_VERSION},
            )

        pack = _build_pack(data, str(path))
        self._packs[pack.id] = pack
        logger.debug(
            "Loaded holiday pack %s (%d fixed, %d variable, years %s)",
            pack.id, len(pack.table.fixed), len(pack.table.variable),
            ", ".join(str(y) for y in pack.table.years) or "none",
        )
        return pack

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_pack(self, pack_id: str) -> Optional[HolidayPack]:
        """Get a cached pack by ID."""
        return self._packs.get(pack_id)

    def list_packs(self) -> list[str]:
        """List IDs of all loaded packs."""
        return list(self._packs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_holiday_pack(path: Union[str, Path]) -> HolidayPack:
    """Load a holiday pack from a file with a temporary loader."""
    return HolidayPackLoader().load(path)


def load_holiday_pack_from_string(content: str, format: str = "yaml") -> HolidayPack:
    """
    Load a holiday pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise HolidayPackLoadError(
            message=f"Failed to parse holiday pack: {e}",
            details={"format": format},
        )
    return _build_pack(data, f"<string:{format}>")


@lru_cache(maxsize=1)
def load_default_pack() -> HolidayPack:
    """Load the packaged Sri Lankan bank holiday pack (cached)."""
    return load_holiday_pack(DEFAULT_PACK_PATH)
