"""
ChequeFlow Holiday Models

Value types produced and consumed by the holiday table, the working-day
calculator and the reminder resolver.

Key components:
- Holiday: a fixed (every year) or variable (single year) bank holiday
- HolidayCheck: result of looking a date up in the holiday table
- NextWorkingDay: result of rolling a date forward to a working day
- ReminderResult: reminder record derived from a cheque's due date
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


# =============================================================================
# Holiday
# =============================================================================

@dataclass(frozen=True)
class Holiday:
    """
    A named bank holiday rule.

    Attributes:
        month: Month number (1-12)
        day: Day of month
        name: Human-readable holiday name
        year: None for fixed holidays (recur every year); otherwise the only
            year a variable holiday (Poya day, Eid, Deepavali...) applies to
    """
    month: int
    day: int
    name: str
    year: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        """Check if this holiday recurs every year."""
        return self.year is None

    @property
    def month_day(self) -> str:
        """The holiday's date in MM-DD form."""
        return f"{self.month:02d}-{self.day:02d}"

    def on(self, year: int) -> Optional[date]:
        """
        Concrete date of this holiday in a given year.

        Returns None when the rule does not apply to that year (variable
        holiday for another year, or Feb 29 outside a leap year).
        """
        if self.year is not None and self.year != year:
            return None
        try:
            return date(year, self.month, self.day)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {"date": self.month_day, "name": self.name}
        if self.year is not None:
            result["year"] = self.year
        return result


# =============================================================================
# Lookup Results
# =============================================================================

@dataclass(frozen=True)
class HolidayCheck:
    """Result of a holiday lookup for one calendar date."""
    is_holiday: bool
    name: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_holiday


NOT_A_HOLIDAY = HolidayCheck(is_holiday=False)


@dataclass(frozen=True)
class NextWorkingDay:
    """
    The first bank working day on or after a date.

    Attributes:
        date: The working day landed on
        skipped_days: One label per non-working day passed over, in
            chronological order ("Saturday"/"Sunday" or the holiday name)
    """
    date: date
    skipped_days: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReminderResult:
    """
    Reminder record for a cheque due date.

    Attributes:
        reminder_date: First bank working day on or after the due date
        is_adjusted: True iff reminder_date differs from the due date
        original_date: The due date the reminder was computed from
        skipped_days: Labels of the days rolled over
    """
    reminder_date: date
    is_adjusted: bool
    original_date: date
    skipped_days: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "reminder_date": self.reminder_date.isoformat(),
            "is_adjusted": self.is_adjusted,
            "original_date": self.original_date.isoformat(),
            "skipped_days": list(self.skipped_days),
        }
