"""
ChequeFlow Exception Hierarchy

Domain-specific exceptions for the cheque reminder engine.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: CF_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ChequeFlowError(Exception):
    """
    Base exception for all ChequeFlow errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (CF_*)
        details: Additional context about the error
        cheque_id: Associated cheque ID if applicable
    """
    message: str
    code: str = "CF_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    cheque_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.cheque_id:
            parts.append(f"(cheque: {self.cheque_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cheque_id:
            result["cheque_id"] = self.cheque_id
        return result


# =============================================================================
# Holiday Pack Errors
# =============================================================================

@dataclass
class HolidayPackLoadError(ChequeFlowError):
    """Failed to read or parse a holiday pack file."""
    code: str = "CF_HOLIDAY_PACK_LOAD_ERROR"


@dataclass
class HolidayPackValidationError(ChequeFlowError):
    """Holiday pack schema validation failed."""
    code: str = "CF_HOLIDAY_PACK_VALIDATION_ERROR"


# =============================================================================
# Calendar Errors
# =============================================================================

@dataclass
class InvalidHolidayTableError(ChequeFlowError):
    """Holiday table entries are inconsistent."""
    code: str = "CF_INVALID_HOLIDAY_TABLE"


@dataclass
class WorkingDayNotFoundError(ChequeFlowError):
    """Roll-forward exceeded its iteration bound without reaching a working day."""
    code: str = "CF_WORKING_DAY_NOT_FOUND"


# =============================================================================
# Cheque Errors
# =============================================================================

@dataclass
class ChequeValidationError(ChequeFlowError):
    """Cheque record is missing required data or holds invalid values."""
    code: str = "CF_CHEQUE_VALIDATION_ERROR"
