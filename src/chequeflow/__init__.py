"""
ChequeFlow - Post-Dated Cheque Reminders

ChequeFlow tracks post-dated cheques held by a retail chain and reminds staff
before each one is due. A due date that lands on a weekend or bank holiday is
rolled forward to the next bank working day, and the days skipped are
recorded so staff can see why.

Key Features:
- Sri Lankan bank holiday calendar (fixed and per-year lunar holidays)
- Pluggable holiday packs (YAML) for other jurisdictions
- Reminder resolution with ordered skipped-day labels
- iCalendar (.ics) export with a one-day-before alarm

Quick Start:
    from datetime import date
    from chequeflow import ReminderResolver, export_pending_cheques

    resolver = ReminderResolver()
    result = resolver.get_reminder_date(date(2025, 1, 13))
    # reminder 2025-01-14, skipped ('Duruthu Full Moon Poya Day',)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "ChequeFlow Team"

from .calendars import (
    HolidayTable,
    HolidayTableCalendar,
    get_next_bank_working_day,
    get_sri_lanka_calendar,
    is_bank_working_day,
    is_holiday,
    is_weekend,
)
from .engine import (
    ChequeSummary,
    ReminderResolver,
    get_reminder_date,
    summarize_cheques,
    upcoming_reminders,
)
from .exceptions import (
    ChequeFlowError,
    ChequeValidationError,
    HolidayPackLoadError,
    HolidayPackValidationError,
    InvalidHolidayTableError,
    WorkingDayNotFoundError,
)
from .export import (
    ExportArtifact,
    export_cheque,
    export_pending_cheques,
    generate_ics_calendar,
    generate_ics_event,
)
from .models import (
    Cheque,
    ChequeStatus,
    Holiday,
    HolidayCheck,
    NextWorkingDay,
    ReminderResult,
)
from .packs import HolidayPack, HolidayPackLoader, load_default_pack

__all__ = [
    "__version__",
    # Calendars
    "HolidayTable",
    "HolidayTableCalendar",
    "get_next_bank_working_day",
    "get_sri_lanka_calendar",
    "is_bank_working_day",
    "is_holiday",
    "is_weekend",
    # Engine
    "ChequeSummary",
    "ReminderResolver",
    "get_reminder_date",
    "summarize_cheques",
    "upcoming_reminders",
    # Exceptions
    "ChequeFlowError",
    "ChequeValidationError",
    "HolidayPackLoadError",
    "HolidayPackValidationError",
    "InvalidHolidayTableError",
    "WorkingDayNotFoundError",
    # Export
    "ExportArtifact",
    "export_cheque",
    "export_pending_cheques",
    "generate_ics_calendar",
    "generate_ics_event",
    # Models
    "Cheque",
    "ChequeStatus",
    "Holiday",
    "HolidayCheck",
    "NextWorkingDay",
    "ReminderResult",
    # Packs
    "HolidayPack",
    "HolidayPackLoader",
    "load_default_pack",
]
