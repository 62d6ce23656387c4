"""
Sri Lanka Bank Holiday Calendar

The default working-day calendar, built once from the packaged LK-BANK
holiday pack. Module-level helpers mirror the calendar's methods for quick
checks.
"""
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from ..models import Holiday, HolidayCheck, NextWorkingDay
from .base import HolidayTableCalendar


@lru_cache(maxsize=1)
def get_sri_lanka_calendar() -> HolidayTableCalendar:
    """Get the Sri Lankan bank calendar (built on first use, then shared)."""
    from ..packs.loader import load_default_pack

    return load_default_pack().calendar()


def is_weekend(d: date) -> bool:
    """Check if a date is a Saturday or Sunday."""
    return get_sri_lanka_calendar().is_weekend(d)


def is_holiday(d: date) -> HolidayCheck:
    """Check if a date is a Sri Lankan bank holiday."""
    return get_sri_lanka_calendar().is_holiday(d)


def is_bank_holiday(d: date) -> bool:
    return is_holiday(d).is_holiday


def get_holiday_name(d: date) -> Optional[str]:
    return is_holiday(d).name


def is_bank_working_day(d: date) -> bool:
    """Check if a date is a Sri Lankan bank working day."""
    return get_sri_lanka_calendar().is_bank_working_day(d)


def get_next_bank_working_day(d: date) -> NextWorkingDay:
    """Roll a date forward to the next Sri Lankan bank working day."""
    return get_sri_lanka_calendar().get_next_bank_working_day(d)


def get_holidays_for_month(year: int, month: int) -> list[Holiday]:
    """Holidays in a month (1-12) of a year."""
    return get_sri_lanka_calendar().table.get_holidays_for_month(year, month)


def get_upcoming_holidays(
    count: int = 5,
    today: Optional[date] = None,
) -> list[tuple[date, str]]:
    """Next `count` holidays on or after today."""
    return get_sri_lanka_calendar().table.get_upcoming_holidays(count, today)
