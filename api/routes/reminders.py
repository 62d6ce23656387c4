"""Reminder resolution endpoints."""

import logging

from fastapi import APIRouter

from api.schemas.requests import BatchResolveRequest, ResolveRequest
from api.schemas.responses import ReminderResponse
from chequeflow.engine import ReminderResolver, describe_adjustment
from chequeflow.models import ReminderResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reminders", tags=["Reminders"])

# Shared resolver instance (set by main.py)
resolver: ReminderResolver = None


def set_resolver(r: ReminderResolver):
    global resolver
    resolver = r


def _to_response(result: ReminderResult) -> ReminderResponse:
    return ReminderResponse(
        reminder_date=result.reminder_date.isoformat(),
        is_adjusted=result.is_adjusted,
        original_date=result.original_date.isoformat(),
        skipped_days=list(result.skipped_days),
        message=describe_adjustment(result),
    )


@router.post("/resolve", response_model=ReminderResponse)
async def resolve_reminder(request: ResolveRequest):
    """
    Resolve the reminder date for a cheque due date.

    The reminder falls on the due date when it is a bank working day,
    otherwise on the next one; every day rolled over is listed.
    """
    result = resolver.get_reminder_date(request.due_date)
    if result.is_adjusted:
        logger.info(
            "Reminder for %s moved to %s",
            result.original_date.isoformat(), result.reminder_date.isoformat(),
        )
    return _to_response(result)


@router.post("/resolve/batch", response_model=list[ReminderResponse])
async def resolve_reminders(request: BatchResolveRequest):
    """Resolve several due dates independently, in request order."""
    return [_to_response(r) for r in resolver.resolve_many(request.due_dates)]
