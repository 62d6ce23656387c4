"""
ChequeFlow Export

iCalendar encoding of cheque reminders and the downloadable artifacts built
from it.
"""
from __future__ import annotations

from .artifacts import (
    ICS_MEDIA_TYPE,
    ExportArtifact,
    export_cheque,
    export_pending_cheques,
)
from .ics import (
    build_event_description,
    escape_text,
    event_uid,
    fold_line,
    format_amount,
    generate_ics_calendar,
    generate_ics_event,
)

__all__ = [
    "ICS_MEDIA_TYPE",
    "ExportArtifact",
    "export_cheque",
    "export_pending_cheques",
    "build_event_description",
    "escape_text",
    "event_uid",
    "fold_line",
    "format_amount",
    "generate_ics_calendar",
    "generate_ics_event",
]
