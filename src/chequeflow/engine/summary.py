"""
ChequeFlow Portfolio Summary

Aggregates a set of cheques into per-status counts and totals, and picks out
pending cheques whose reminders fall due soon.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..models import Cheque, ChequeStatus


@dataclass(frozen=True)
class ChequeSummary:
    """Counts and amounts per cheque status."""
    total: int = 0
    pending: int = 0
    cleared: int = 0
    bounced: int = 0
    total_amount: Decimal = Decimal("0")
    pending_amount: Decimal = Decimal("0")
    cleared_amount: Decimal = Decimal("0")
    bounced_amount: Decimal = Decimal("0")

    # Pending cheques whose reminder was moved off the due date
    holiday_adjusted_pending: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "pending": self.pending,
            "cleared": self.cleared,
            "bounced": self.bounced,
            "total_amount": str(self.total_amount),
            "pending_amount": str(self.pending_amount),
            "cleared_amount": str(self.cleared_amount),
            "bounced_amount": str(self.bounced_amount),
            "holiday_adjusted_pending": self.holiday_adjusted_pending,
        }


def summarize_cheques(cheques: Iterable[Cheque]) -> ChequeSummary:
    """Aggregate cheques into a ChequeSummary."""
    counts = {status: 0 for status in ChequeStatus}
    amounts = {status: Decimal("0") for status in ChequeStatus}
    adjusted_pending = 0

    for cheque in cheques:
        counts[cheque.status] += 1
        amounts[cheque.status] += cheque.amount
        if cheque.is_pending and cheque.is_holiday_adjusted:
            adjusted_pending += 1

    return ChequeSummary(
        total=sum(counts.values()),
        pending=counts[ChequeStatus.PENDING],
        cleared=counts[ChequeStatus.CLEARED],
        bounced=counts[ChequeStatus.BOUNCED],
        total_amount=sum(amounts.values(), Decimal("0")),
        pending_amount=amounts[ChequeStatus.PENDING],
        cleared_amount=amounts[ChequeStatus.CLEARED],
        bounced_amount=amounts[ChequeStatus.BOUNCED],
        holiday_adjusted_pending=adjusted_pending,
    )


def upcoming_reminders(
    cheques: Iterable[Cheque],
    today: Optional[date] = None,
    days: int = 7,
) -> list[Cheque]:
    """
    Pending cheques whose effective date lies within the next `days` days.

    Args:
        cheques: Cheques to scan
        today: Reference date (defaults to date.today())
        days: Window length; today and today + days are both included

    Returns:
        Matching cheques sorted by effective date, then cheque number
    """
    today = today or date.today()
    horizon = today + timedelta(days=days)
    due = [
        c for c in cheques
        if c.is_pending and today <= c.effective_date <= horizon
    ]
    return sorted(due, key=lambda c: (c.effective_date, c.cheque_number))
