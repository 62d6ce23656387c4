"""
ChequeFlow Reminder Resolver

Turns a cheque due date into a reminder record: the first bank working day
on or after the due date, whether that moved the date, and which days were
rolled over.

The cheque-creation workflow calls this once per cheque and stores the
result. Nothing here reads or writes storage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from ..calendars import WorkingDayCalendar, get_sri_lanka_calendar
from ..calendars.base import HolidayTableCalendar
from ..exceptions import ChequeValidationError
from ..models import Cheque, ReminderResult

logger = logging.getLogger(__name__)


@dataclass
class ReminderResolver:
    """
    Resolves reminder dates against a working-day calendar.

    Usage:
        resolver = ReminderResolver()

        result = resolver.get_reminder_date(date(2025, 2, 8))
        print(result.reminder_date, result.skipped_days)
        # 2025-02-10 ('Saturday', 'Sunday')

        cheque = resolver.create_cheque(
            cheque_number="000123",
            bank_name="Commercial Bank",
            payee_name="Lanka Traders",
            amount=Decimal("150000"),
            due_date=date(2025, 1, 13),
            branch="Colombo 03",
        )
    """

    calendar: WorkingDayCalendar = field(default_factory=get_sri_lanka_calendar)

    def get_reminder_date(self, due_date: date) -> ReminderResult:
        """
        Compute the reminder record for a due date.

        Args:
            due_date: The cheque's due date

        Returns:
            ReminderResult; is_adjusted is True iff the reminder date differs
            from the due date
        """
        self._warn_if_uncovered(due_date)
        next_day = self.calendar.get_next_bank_working_day(due_date)
        return ReminderResult(
            reminder_date=next_day.date,
            is_adjusted=next_day.date != due_date,
            original_date=due_date,
            skipped_days=next_day.skipped_days,
        )

    def resolve_many(self, due_dates: Iterable[date]) -> list[ReminderResult]:
        """Resolve each due date independently, preserving input order."""
        return [self.get_reminder_date(d) for d in due_dates]

    def create_cheque(
        self,
        cheque_number: str,
        bank_name: str,
        payee_name: str,
        amount: Decimal,
        due_date: date,
        branch: str,
        **kwargs: Any,
    ) -> Cheque:
        """
        Create a cheque with its reminder fields filled in.

        Raises:
            ChequeValidationError: If the amount is not a positive number or a
                required text field is blank
        """
        _validate_cheque_fields(
            cheque_number=cheque_number,
            bank_name=bank_name,
            payee_name=payee_name,
            branch=branch,
            amount=amount,
        )
        cheque = Cheque.create(
            cheque_number=cheque_number,
            bank_name=bank_name,
            payee_name=payee_name,
            amount=amount,
            due_date=due_date,
            branch=branch,
            **kwargs,
        )
        return self.recalculate(cheque)

    def recalculate(self, cheque: Cheque) -> Cheque:
        """Return a copy of the cheque with reminder fields recomputed from its due date."""
        result = self.get_reminder_date(cheque.due_date)
        return replace(
            cheque,
            reminder_date=result.reminder_date,
            is_holiday_adjusted=result.is_adjusted,
            holiday_skipped=result.skipped_days,
        )

    def _warn_if_uncovered(self, due_date: date) -> None:
        if isinstance(self.calendar, HolidayTableCalendar):
            table = self.calendar.table
            if table.variable and not table.covers_year(due_date.year):
                logger.warning(
                    "No variable holidays loaded for %d; only fixed holidays and weekends apply",
                    due_date.year,
                )


def _validate_cheque_fields(amount: Decimal, **text_fields: str) -> None:
    blank = sorted(name for name, value in text_fields.items() if not (value or "").strip())
    if blank:
        raise ChequeValidationError(
            message=f"Missing required cheque fields: {', '.join(blank)}",
            details={"fields": blank},
        )
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise ChequeValidationError(
            message="Cheque amount must be a number",
            details={"amount": str(amount)},
        ) from e
    if not value.is_finite() or value <= 0:
        raise ChequeValidationError(
            message="Cheque amount must be a positive number",
            details={"amount": str(amount)},
        )


def describe_adjustment(result: ReminderResult) -> str:
    """Notification text shown when a cheque is saved."""
    if not result.is_adjusted:
        return "Cheque has been saved successfully."
    return (
        f"Due date falls on {', '.join(result.skipped_days)}. "
        "Reminder set for next working day."
    )


# =============================================================================
# Convenience Functions
# =============================================================================

def get_reminder_date(
    due_date: date,
    calendar: Optional[WorkingDayCalendar] = None,
) -> ReminderResult:
    """
    Compute a reminder record.

    Convenience function that creates a temporary resolver.
    """
    resolver = ReminderResolver(calendar=calendar or get_sri_lanka_calendar())
    return resolver.get_reminder_date(due_date)
