"""
ChequeFlow Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


class ChequeStatus(str, Enum):
    """Lifecycle status of a post-dated cheque."""
    PENDING = "pending"    # Not yet presented
    CLEARED = "cleared"
    BOUNCED = "bounced"


class Weekday(str, Enum):
    """Weekday names, ordered to match ``date.weekday()``."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        """0=Monday ... 6=Sunday."""
        return list(Weekday).index(self)

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        return list(cls)[index]
