"""Holiday calendar endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from api.schemas.responses import (
    DateCheckResponse,
    HolidayItem,
    MonthHolidaysResponse,
    UpcomingHoliday,
)
from chequeflow.calendars import HolidayTableCalendar
from chequeflow.models import Weekday

router = APIRouter(prefix="/holidays", tags=["Holidays"])

# Shared calendar instance (set by main.py)
calendar: HolidayTableCalendar = None


def set_calendar(c: HolidayTableCalendar):
    global calendar
    calendar = c


@router.get("", response_model=MonthHolidaysResponse)
async def list_month_holidays(
    year: int = Query(..., ge=1900, le=2999),
    month: int = Query(..., ge=1, le=12),
):
    """List fixed and that year's variable holidays falling in a month."""
    holidays = calendar.table.get_holidays_for_month(year, month)
    return MonthHolidaysResponse(
        year=year,
        month=month,
        holidays=[
            HolidayItem(date=h.month_day, name=h.name, year=h.year)
            for h in holidays
        ],
    )


@router.get("/upcoming", response_model=list[UpcomingHoliday])
async def list_upcoming_holidays(
    count: int = Query(5, ge=1, le=50),
    today: Optional[date] = None,
):
    """Next holidays on or after today (this year and next)."""
    return [
        UpcomingHoliday(date=d.isoformat(), name=name)
        for d, name in calendar.table.get_upcoming_holidays(count, today)
    ]


@router.get("/check/{day}", response_model=DateCheckResponse)
async def check_date(day: date):
    """Classify one date as weekend, holiday or bank working day."""
    check = calendar.is_holiday(day)
    return DateCheckResponse(
        date=day.isoformat(),
        weekday=Weekday.from_index(day.weekday()).value,
        is_weekend=calendar.is_weekend(day),
        is_holiday=check.is_holiday,
        holiday_name=check.name,
        is_bank_working_day=calendar.is_bank_working_day(day),
    )
