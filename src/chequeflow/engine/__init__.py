"""
ChequeFlow Engine

Services built on the working-day calendars:
- ReminderResolver: due date -> reminder record, cheque creation
- summarize_cheques / upcoming_reminders: portfolio views

Usage:
    from chequeflow.engine import ReminderResolver, get_reminder_date
"""
from __future__ import annotations

from .reminder_resolver import (
    ReminderResolver,
    describe_adjustment,
    get_reminder_date,
)
from .summary import (
    ChequeSummary,
    summarize_cheques,
    upcoming_reminders,
)

__all__ = [
    "ReminderResolver",
    "describe_adjustment",
    "get_reminder_date",
    "ChequeSummary",
    "summarize_cheques",
    "upcoming_reminders",
]
