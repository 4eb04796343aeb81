"""
QuantLib-backed holiday calendars.

Conventions refer to calendars by ``CalendarType``; ``get_calendar`` returns
the shared wrapper for each.
"""

from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from ratescalib.conventions.types import CalendarType

def to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)

def to_py_date(ql_date: ql.Date) -> date:
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())

class Calendar:
    """Named holiday calendar answering business day questions through QuantLib."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: date) -> bool:
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def is_holiday(self, dt: date) -> bool:
        return self._ql_calendar.isHoliday(to_ql_date(dt))

    def add_business_days(self, start_date: date, days: int) -> date:
        """Move ``days`` business days from ``start_date``; zero rolls a holiday forward."""
        return to_py_date(self._ql_calendar.advance(to_ql_date(start_date), days, ql.Days))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


_CALENDARS: Dict[CalendarType, Calendar] = {
    CalendarType.TARGET: Calendar("TARGET", ql.TARGET()),
    CalendarType.USNY: Calendar("USNY", ql.UnitedStates(ql.UnitedStates.Settlement)),
    CalendarType.GBLO: Calendar("GBLO", ql.UnitedKingdom(ql.UnitedKingdom.Settlement)),
    CalendarType.WEEKEND: Calendar("WEEKEND", ql.WeekendsOnly()),
}

def get_calendar(calendar: Union[CalendarType, str]) -> Calendar:
    """Get a calendar by type or name."""
    if isinstance(calendar, str):
        try:
            calendar = CalendarType[calendar.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown calendar: {calendar}. "
                f"Available: {[c.value for c in CalendarType]}"
            ) from None
    return _CALENDARS[calendar]
