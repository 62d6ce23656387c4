"""
Holiday Table

Immutable reference data answering "is this date a named bank holiday, and
what is it called?".

Two kinds of entries:
- Fixed holidays recur on the same month/day every year
- Variable holidays (Poya days, Eid, Deepavali...) apply to one stated year

Lookups are indexed by (month, day) and (month, day, year). When a fixed and
a variable entry fall on the same day, lookups report the fixed entry;
listings show both.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..exceptions import InvalidHolidayTableError
from ..models import NOT_A_HOLIDAY, Holiday, HolidayCheck


@dataclass(frozen=True)
class HolidayTable:
    """
    Indexed, read-only holiday table.

    Usage:
        table = HolidayTable(
            fixed=[Holiday(1, 1, "New Year's Day")],
            variable=[Holiday(1, 13, "Duruthu Full Moon Poya Day", year=2025)],
        )
        table.is_holiday(date(2025, 1, 13))
        # HolidayCheck(is_holiday=True, name='Duruthu Full Moon Poya Day')
    """

    fixed: tuple[Holiday, ...] = ()
    variable: tuple[Holiday, ...] = ()

    _fixed_index: Mapping[tuple[int, int], str] = field(
        init=False, repr=False, compare=False
    )
    _variable_index: Mapping[tuple[int, int, int], str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        fixed = tuple(self.fixed)
        variable = tuple(self.variable)

        fixed_index: dict[tuple[int, int], str] = {}
        for holiday in fixed:
            if holiday.year is not None:
                raise InvalidHolidayTableError(
                    message=f"Fixed holiday '{holiday.name}' must not carry a year",
                    details={"holiday": holiday.to_dict()},
                )
            # First entry wins on duplicate keys
            fixed_index.setdefault((holiday.month, holiday.day), holiday.name)

        variable_index: dict[tuple[int, int, int], str] = {}
        for holiday in variable:
            if holiday.year is None:
                raise InvalidHolidayTableError(
                    message=f"Variable holiday '{holiday.name}' requires a year",
                    details={"holiday": holiday.to_dict()},
                )
            variable_index.setdefault(
                (holiday.month, holiday.day, holiday.year), holiday.name
            )

        object.__setattr__(self, "fixed", fixed)
        object.__setattr__(self, "variable", variable)
        object.__setattr__(self, "_fixed_index", MappingProxyType(fixed_index))
        object.__setattr__(self, "_variable_index", MappingProxyType(variable_index))

    @classmethod
    def from_holidays(cls, holidays: Iterable[Holiday]) -> HolidayTable:
        """Split a mixed list into fixed and variable entries, preserving order."""
        holidays = list(holidays)
        return cls(
            fixed=tuple(h for h in holidays if h.is_fixed),
            variable=tuple(h for h in holidays if not h.is_fixed),
        )

    @property
    def years(self) -> tuple[int, ...]:
        """Years covered by variable entries, ascending."""
        return tuple(sorted({h.year for h in self.variable if h.year is not None}))

    def covers_year(self, year: int) -> bool:
        """Check if variable holidays are populated for a year."""
        return year in self.years

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def is_holiday(self, d: date) -> HolidayCheck:
        """Look a date up; fixed entries are checked before variable ones."""
        name = self._fixed_index.get((d.month, d.day))
        if name is None:
            name = self._variable_index.get((d.month, d.day, d.year))
        if name is None:
            return NOT_A_HOLIDAY
        return HolidayCheck(is_holiday=True, name=name)

    def is_bank_holiday(self, d: date) -> bool:
        return self.is_holiday(d).is_holiday

    def get_holiday_name(self, d: date) -> Optional[str]:
        return self.is_holiday(d).name

    def get_holidays_for_month(self, year: int, month: int) -> list[Holiday]:
        """
        Holidays whose month matches, for display.

        Args:
            year: Year selecting which variable entries apply
            month: Month number (1-12)

        Returns:
            Fixed entries then that year's variable entries, in source order
        """
        fixed = [h for h in self.fixed if h.month == month]
        variable = [h for h in self.variable if h.month == month and h.year == year]
        return fixed + variable

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """
        Concrete (date, name) pairs for a year, sorted by date.

        Every entry is listed, so a variable holiday sharing a day with a
        fixed one appears after it rather than being shadowed.
        """
        holidays: list[tuple[date, str]] = []
        for holiday in self.fixed + self.variable:
            holiday_date = holiday.on(year)
            if holiday_date is not None:
                holidays.append((holiday_date, holiday.name))
        # Stable sort keeps fixed entries ahead of variable ones on the same day
        return sorted(holidays, key=lambda x: x[0])

    def get_upcoming_holidays(
        self,
        count: int = 5,
        today: Optional[date] = None,
    ) -> list[tuple[date, str]]:
        """
        Holidays on or after today, across the current and next year.

        Args:
            count: Maximum number of holidays returned
            today: Reference date (defaults to date.today())

        Returns:
            Up to `count` (date, name) pairs sorted by date
        """
        today = today or date.today()
        upcoming: list[tuple[date, str]] = []
        for year in (today.year, today.year + 1):
            upcoming.extend(
                (holiday_date, name)
                for holiday_date, name in self.get_holidays_for_year(year)
                if holiday_date >= today
            )
        return upcoming[:count]

    def to_dict(self) -> dict[str, list[dict]]:
        """Serialize to dictionary (used for content hashing)."""
        return {
            "fixed": [h.to_dict() for h in self.fixed],
            "variable": [h.to_dict() for h in self.variable],
        }
