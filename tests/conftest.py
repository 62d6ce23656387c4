"""
Pytest configuration and fixtures for ChequeFlow tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from icalendar import Calendar

from chequeflow.calendars import HolidayTable, HolidayTableCalendar
from chequeflow.engine import ReminderResolver
from chequeflow.models import Cheque, ChequeStatus, Holiday
from chequeflow.packs import load_default_pack


# =============================================================================
# Factory Helpers
# =============================================================================

def make_cheque(
    cheque_number: str = "000123",
    due_date: date = date(2025, 1, 13),
    amount=Decimal("150000"),
    status: ChequeStatus = ChequeStatus.PENDING,
    payee_name: str = "Lanka Traders",
    bank_name: str = "Commercial Bank",
    branch: str = "Colombo 03",
    cheque_id: str = None,
    reminder_date: date = None,
    is_holiday_adjusted: bool = False,
    holiday_skipped: tuple = (),
    notes: str = None,
) -> Cheque:
    """Create a Cheque with required fields."""
    return Cheque(
        id=cheque_id or str(uuid4()),
        cheque_number=cheque_number,
        bank_name=bank_name,
        payee_name=payee_name,
        amount=amount,
        due_date=due_date,
        branch=branch,
        status=status,
        notes=notes,
        reminder_date=reminder_date,
        is_holiday_adjusted=is_holiday_adjusted,
        holiday_skipped=holiday_skipped,
    )


def make_table(
    fixed: list = None,
    variable: list = None,
) -> HolidayTable:
    """
    Create a HolidayTable from compact tuples.

    fixed: [(month, day, name), ...]
    variable: [(year, month, day, name), ...]
    """
    return HolidayTable(
        fixed=tuple(Holiday(month=m, day=d, name=n) for m, d, n in (fixed or [])),
        variable=tuple(
            Holiday(month=m, day=d, name=n, year=y) for y, m, d, n in (variable or [])
        ),
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fixed_now():
    """Deterministic generation time for calendar export."""
    return datetime(2025, 1, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def sri_lanka_pack():
    """The packaged LK-BANK holiday pack."""
    return load_default_pack()


@pytest.fixture
def sri_lanka_calendar(sri_lanka_pack):
    """Working-day calendar over the packaged Sri Lankan holidays."""
    return sri_lanka_pack.calendar()


@pytest.fixture
def resolver(sri_lanka_calendar):
    """Reminder resolver over the Sri Lankan calendar."""
    return ReminderResolver(calendar=sri_lanka_calendar)


@pytest.fixture
def small_calendar():
    """A calendar over a small synthetic table."""
    table = make_table(
        fixed=[(1, 1, "New Year's Day"), (12, 25, "Christmas Day")],
        variable=[
            (2025, 3, 3, "Spring Holiday"),
            (2025, 3, 4, "Spring Holiday Observed"),
        ],
    )
    return HolidayTableCalendar(table=table)


@pytest.fixture
def pending_cheque():
    """A pending cheque whose reminder was moved past a Poya day."""
    return make_cheque(
        cheque_id="4f6c2a1e",
        reminder_date=date(2025, 1, 14),
        is_holiday_adjusted=True,
        holiday_skipped=("Duruthu Full Moon Poya Day",),
    )


# =============================================================================
# Calendar Reading Helpers
# =============================================================================

def read_events(document: str) -> list:
    """Parse an exported document with icalendar and return its VEVENTs."""
    return Calendar.from_ical(document).walk("VEVENT")


def event_dates(document: str) -> list[date]:
    """DTSTART of every event in an exported document, in document order."""
    return [event.decoded("DTSTART") for event in read_events(document)]
