"""Request schemas for the API."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

from chequeflow.models import Cheque, ChequeStatus


class ResolveRequest(BaseModel):
    """Request to resolve the reminder date for one due date."""
    due_date: date = Field(..., description="Cheque due date (ISO format: YYYY-MM-DD)")

    model_config = {
        "json_schema_extra": {
            "examples": [{"due_date": "2025-01-13"}]
        }
    }


class BatchResolveRequest(BaseModel):
    """Request to resolve several due dates independently."""
    due_dates: list[date] = Field(..., description="Due dates, resolved in order")


class ChequeInput(BaseModel):
    """A stored cheque, as handed over for calendar export."""
    id: str = Field(..., min_length=1, description="Cheque ID; seeds the event UID")
    cheque_number: str = Field(..., min_length=1, pattern=r"\S")
    bank_name: str = Field(..., min_length=1, pattern=r"\S")
    account_number: str = ""
    payee_name: str = Field(..., min_length=1, pattern=r"\S")
    amount: Decimal = Field(..., gt=0, description="Face value in LKR")
    issue_date: Optional[date] = None
    due_date: date
    status: Literal["pending", "cleared", "bounced"] = "pending"
    branch: str = Field(..., min_length=1, pattern=r"\S")
    notes: Optional[str] = None
    reminder_date: Optional[date] = None
    is_holiday_adjusted: bool = False
    holiday_skipped: list[str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "4f6c2a1e",
                    "cheque_number": "000123",
                    "bank_name": "Commercial Bank",
                    "payee_name": "Lanka Traders",
                    "amount": "150000",
                    "due_date": "2025-01-13",
                    "branch": "Colombo 03",
                    "reminder_date": "2025-01-14",
                    "is_holiday_adjusted": True,
                    "holiday_skipped": ["Duruthu Full Moon Poya Day"],
                }
            ]
        }
    }

    def to_cheque(self) -> Cheque:
        return Cheque(
            id=self.id,
            cheque_number=self.cheque_number,
            bank_name=self.bank_name,
            account_number=self.account_number,
            payee_name=self.payee_name,
            amount=self.amount,
            issue_date=self.issue_date,
            due_date=self.due_date,
            status=ChequeStatus(self.status),
            branch=self.branch,
            notes=self.notes,
            reminder_date=self.reminder_date,
            is_holiday_adjusted=self.is_holiday_adjusted,
            holiday_skipped=tuple(self.holiday_skipped),
        )


class BatchExportRequest(BaseModel):
    """Request to export cheques as one calendar; only pending ones are included."""
    cheques: list[ChequeInput] = Field(default_factory=list)
