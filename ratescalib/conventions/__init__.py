"""
Market conventions: day counts, calendars, currencies and rate indices.
"""

from .calendars import Calendar, get_calendar
from .daycount import DayCountConvention, get_day_count_convention
from .indices import (
    Currency,
    IborIndex,
    OvernightIndex,
    RateIndex,
    get_ibor_index,
    get_rate_index,
)
from .types import BusinessDayAdjustment, CalendarType, Frequency, LegType

__all__ = [
    "BusinessDayAdjustment",
    "CalendarType",
    "Frequency",
    "LegType",
    "Calendar",
    "get_calendar",
    "DayCountConvention",
    "get_day_count_convention",
    "Currency",
    "IborIndex",
    "OvernightIndex",
    "RateIndex",
    "get_ibor_index",
    "get_rate_index",
]
