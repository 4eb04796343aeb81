"""
Business day adjustment of dates.
"""

from datetime import date, datetime, timedelta
from typing import Union

from ratescalib.conventions.calendars import Calendar
from ratescalib.conventions.types import BusinessDayAdjustment


def adjust_date(
    dt: Union[date, datetime], adjustment: BusinessDayAdjustment, calendar: Calendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()

    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt

    elif adjustment == BusinessDayAdjustment.FOLLOWING:
        return _roll(dt, calendar, 1)

    elif adjustment == BusinessDayAdjustment.MODIFIED_FOLLOWING:
        adjusted = _roll(dt, calendar, 1)
        # If month changed, use preceding instead
        if adjusted.month != dt.month:
            adjusted = _roll(dt, calendar, -1)
        return adjusted

    elif adjustment == BusinessDayAdjustment.PRECEDING:
        return _roll(dt, calendar, -1)

    elif adjustment == BusinessDayAdjustment.MODIFIED_PRECEDING:
        adjusted = _roll(dt, calendar, -1)
        if adjusted.month != dt.month:
            adjusted = _roll(dt, calendar, 1)
        return adjusted

    else:
        raise ValueError(f"Unknown business day adjustment: {adjustment}")


def _roll(dt: date, calendar: Calendar, step: int) -> date:
    while not calendar.is_business_day(dt):
        dt += timedelta(days=step)
    return dt
