"""
ChequeFlow Models

All domain models for the cheque reminder engine:

    from chequeflow.models import (
        # Enums
        ChequeStatus, Weekday,
        # Holidays
        Holiday, HolidayCheck, NextWorkingDay, ReminderResult,
        # Cheques
        Cheque,
    )
"""
from __future__ import annotations

from .cheque import Cheque
from .enums import ChequeStatus, Weekday
from .holiday import (
    NOT_A_HOLIDAY,
    Holiday,
    HolidayCheck,
    NextWorkingDay,
    ReminderResult,
)

__all__ = [
    # Enums
    "ChequeStatus",
    "Weekday",
    # Holidays
    "Holiday",
    "HolidayCheck",
    "NOT_A_HOLIDAY",
    "NextWorkingDay",
    "ReminderResult",
    # Cheques
    "Cheque",
]
