"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class HolidayItem(BaseModel):
    """A holiday rule as listed for a month."""
    date: str  # MM-DD
    name: str
    year: Optional[int] = None


class MonthHolidaysResponse(BaseModel):
    """Holidays in one month."""
    year: int
    month: int
    holidays: list[HolidayItem]


class UpcomingHoliday(BaseModel):
    """A concrete upcoming holiday."""
    date: str  # ISO date
    name: str


class DateCheckResponse(BaseModel):
    """Classification of one calendar date."""
    date: str
    weekday: str
    is_weekend: bool
    is_holiday: bool
    holiday_name: Optional[str] = None
    is_bank_working_day: bool


class ReminderResponse(BaseModel):
    """Reminder record for one due date."""
    reminder_date: str
    is_adjusted: bool
    original_date: str
    skipped_days: list[str]
    message: str


class ServiceInfo(BaseModel):
    """Health and info payload."""
    service: str
    version: str
    status: str
    holiday_pack_id: str
    holiday_pack_hash: str
    holiday_years: list[int]
