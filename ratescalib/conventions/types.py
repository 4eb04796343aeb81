"""
Basic types and enums used by the market conventions.
"""

from enum import Enum


class Frequency(Enum):
    """Payment frequencies, in months."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1
    TERM = 0

    def months(self) -> int:
        return self.value


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class CalendarType(Enum):
    """Predefined holiday calendars."""

    TARGET = "TARGET"
    USNY = "USNY"
    GBLO = "GBLO"
    WEEKEND = "WEEKEND"


class LegType(Enum):
    FIXED = "FIXED"
    FLOATING = "FLOATING"
