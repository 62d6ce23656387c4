"""
ChequeFlow Cheque Model

A post-dated cheque tracked for reminders. The reminder fields are derived
from the due date once, at creation time, and stored with the cheque; they
are not recomputed when the due date is edited.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4

from .enums import ChequeStatus


@dataclass
class Cheque:
    """
    A post-dated cheque.

    Attributes:
        id: Unique identifier (also seeds the calendar event UID)
        cheque_number: Number printed on the cheque
        bank_name: Drawee bank
        account_number: Drawer account number
        payee_name: Who the cheque is payable to
        amount: Face value in LKR
        issue_date: Date written on the cheque at issue
        due_date: Date the cheque may be presented
        status: pending | cleared | bounced
        branch: Retail branch that holds the cheque
        notes: Free-text notes
        created_at: When the record was created
        reminder_date: First bank working day on or after due_date
        is_holiday_adjusted: True when reminder_date != due_date
        holiday_skipped: Labels of the days rolled over
    """
    id: str
    cheque_number: str
    bank_name: str
    payee_name: str
    amount: Decimal
    due_date: date
    branch: str

    account_number: str = ""
    issue_date: Optional[date] = None
    status: ChequeStatus = ChequeStatus.PENDING
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Reminder fields (computed once by the ReminderResolver)
    reminder_date: Optional[date] = None
    is_holiday_adjusted: bool = False
    holiday_skipped: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))
        if isinstance(self.status, str) and not isinstance(self.status, ChequeStatus):
            self.status = ChequeStatus(self.status)
        self.holiday_skipped = tuple(self.holiday_skipped)

    @classmethod
    def create(
        cls,
        cheque_number: str,
        bank_name: str,
        payee_name: str,
        amount: Decimal,
        due_date: date,
        branch: str,
        **kwargs: Any,
    ) -> Cheque:
        """Factory method to create a new Cheque with auto-generated ID."""
        return cls(
            id=str(uuid4()),
            cheque_number=cheque_number,
            bank_name=bank_name,
            payee_name=payee_name,
            amount=amount,
            due_date=due_date,
            branch=branch,
            **kwargs,
        )

    @property
    def effective_date(self) -> date:
        """Date reminders fire on: the reminder date if set, else the due date."""
        return self.reminder_date or self.due_date

    @property
    def is_pending(self) -> bool:
        return self.status == ChequeStatus.PENDING

    def to_record(self) -> dict[str, Any]:
        """Row mapping handed to the persistence collaborator."""
        return {
            "id": self.id,
            "cheque_number": self.cheque_number,
            "bank_name": self.bank_name,
            "account_number": self.account_number,
            "payee_name": self.payee_name,
            "amount": str(self.amount),
            "issue_date": self.issue_date.isoformat() if self.issue_date else None,
            "due_date": self.due_date.isoformat(),
            "status": self.status.value,
            "branch": self.branch,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
            "reminder_date": self.reminder_date.isoformat() if self.reminder_date else None,
            "is_holiday_adjusted": self.is_holiday_adjusted,
            "holiday_skipped": list(self.holiday_skipped),
        }
