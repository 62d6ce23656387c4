"""
Bank Working-Day Calendar Base

Provides the protocol and base implementation for calendars used to roll
cheque due dates forward to the next bank working day.

The calendar system is pluggable: the holiday table is an injected value,
so alternate regional calendars need no code changes.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol, runtime_checkable

from ..exceptions import WorkingDayNotFoundError
from ..models import HolidayCheck, NextWorkingDay, Weekday
from .holiday_table import HolidayTable

logger = logging.getLogger(__name__)

# Every real calendar reaches a working day well within a year
DEFAULT_MAX_ROLL_DAYS = 366


@runtime_checkable
class WorkingDayCalendar(Protocol):
    """
    Protocol for bank working-day calendars.

    Implementations classify dates and roll them forward to a working day.
    """

    def is_weekend(self, d: date) -> bool:
        ...

    def is_holiday(self, d: date) -> HolidayCheck:
        ...

    def is_bank_working_day(self, d: date) -> bool:
        ...

    def get_next_bank_working_day(self, d: date) -> NextWorkingDay:
        ...


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for bank working-day calendars.

    Subclasses must implement `is_holiday()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))

    # Roll-forward bound; exceeding it means the holiday data is corrupt
    max_roll_days: int = DEFAULT_MAX_ROLL_DAYS

    @abstractmethod
    def is_holiday(self, d: date) -> HolidayCheck:
        """Look a date up in the holiday data."""
        ...

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_bank_working_day(self, d: date) -> bool:
        """A bank working day is a weekday that is not a holiday."""
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d).is_holiday

    def skip_label(self, d: date) -> str:
        """
        Label recorded for a non-working day.

        Weekend is checked first, so a holiday falling on a weekend is
        labelled with the weekday name and its holiday name is dropped.
        """
        if self.is_weekend(d):
            return Weekday.from_index(d.weekday()).value
        return self.is_holiday(d).name or "Holiday"

    def get_next_bank_working_day(self, d: date) -> NextWorkingDay:
        """
        Get the first bank working day on or after a date.

        Returns the date unchanged, with no labels, when it is already a
        working day. Otherwise records one label per skipped day, in the
        order skipped.

        Raises:
            WorkingDayNotFoundError: If no working day is found within
                `max_roll_days`
        """
        current = d
        skipped: list[str] = []

        while not self.is_bank_working_day(current):
            if len(skipped) >= self.max_roll_days:
                raise WorkingDayNotFoundError(
                    message=f"No bank working day within {self.max_roll_days} days of {d.isoformat()}",
                    details={"start": d.isoformat(), "max_roll_days": self.max_roll_days},
                )
            skipped.append(self.skip_label(current))
            current += timedelta(days=1)

        if skipped:
            logger.debug(
                "Rolled %s forward to %s, skipping %s",
                d.isoformat(), current.isoformat(), ", ".join(skipped),
            )
        return NextWorkingDay(date=current, skipped_days=tuple(skipped))


@dataclass
class HolidayTableCalendar(BaseCalendar):
    """A calendar backed by an injected, read-only HolidayTable."""

    table: HolidayTable = field(default_factory=HolidayTable)

    def is_holiday(self, d: date) -> HolidayCheck:
        return self.table.is_holiday(d)


@dataclass
class NoHolidayCalendar(BaseCalendar):
    """A calendar with no holidays. Only weekends are non-working days."""

    def is_holiday(self, d: date) -> HolidayCheck:
        return HolidayCheck(is_holiday=False)
