"""
ChequeFlow Export Artifacts

Wraps encoded calendars as downloadable files: names them, and applies the
pending-only rule for batch exports.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..models import Cheque
from .ics import generate_ics_calendar, generate_ics_event

logger = logging.getLogger(__name__)

ICS_MEDIA_TYPE = "text/calendar;charset=utf-8"


@dataclass(frozen=True)
class ExportArtifact:
    """A named calendar file ready for download."""
    filename: str
    content: str
    event_count: int = 1
    media_type: str = ICS_MEDIA_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")


def export_cheque(cheque: Cheque, now: Optional[datetime] = None) -> ExportArtifact:
    """Export one cheque as `cheque-<number>.ics`."""
    now = now or datetime.now(timezone.utc)
    return ExportArtifact(
        filename=f"cheque-{cheque.cheque_number}.ics",
        content=generate_ics_event(cheque, now),
    )


def export_pending_cheques(
    cheques: Iterable[Cheque],
    now: Optional[datetime] = None,
) -> Optional[ExportArtifact]:
    """
    Export all pending cheques as one calendar.

    Cleared and bounced cheques are left out. Returns None when no pending
    cheques remain, so no empty file is offered for download.

    Args:
        cheques: Cheques to consider, in export order
        now: Generation time (defaults to the current UTC time)

    Returns:
        `chequeflow-reminders-<YYYY-MM-DD>.ics` artifact, or None
    """
    pending = [c for c in cheques if c.is_pending]
    if not pending:
        logger.debug("No pending cheques to export")
        return None

    now = now or datetime.now(timezone.utc)
    return ExportArtifact(
        filename=f"chequeflow-reminders-{now:%Y-%m-%d}.ics",
        content=generate_ics_calendar(pending, now),
        event_count=len(pending),
    )
