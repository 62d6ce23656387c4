"""
ChequeFlow Calendars

Bank working-day calendars for rolling cheque due dates forward.

Provides:
- HolidayTable: immutable, indexed fixed and per-year holidays
- WorkingDayCalendar protocol for custom implementations
- BaseCalendar with weekend classification and roll-forward logic
- HolidayTableCalendar backed by an injected HolidayTable
- Sri Lankan bank calendar (default) and quick-check helpers

Usage:
    from chequeflow.calendars import get_next_bank_working_day

    result = get_next_bank_working_day(date(2025, 2, 8))
    # NextWorkingDay(date=date(2025, 2, 10), skipped_days=('Saturday', 'Sunday'))
"""
from __future__ import annotations

from .base import (
    DEFAULT_MAX_ROLL_DAYS,
    BaseCalendar,
    HolidayTableCalendar,
    NoHolidayCalendar,
    WorkingDayCalendar,
)
from .holiday_table import HolidayTable
from .sri_lanka import (
    get_holiday_name,
    get_holidays_for_month,
    get_next_bank_working_day,
    get_sri_lanka_calendar,
    get_upcoming_holidays,
    is_bank_holiday,
    is_bank_working_day,
    is_holiday,
    is_weekend,
)

__all__ = [
    # Protocols and base classes
    "WorkingDayCalendar",
    "BaseCalendar",
    "HolidayTableCalendar",
    "NoHolidayCalendar",
    "DEFAULT_MAX_ROLL_DAYS",
    # Holiday table
    "HolidayTable",
    # Sri Lanka
    "get_sri_lanka_calendar",
    "is_weekend",
    "is_holiday",
    "is_bank_holiday",
    "get_holiday_name",
    "is_bank_working_day",
    "get_next_bank_working_day",
    "get_holidays_for_month",
    "get_upcoming_holidays",
]
