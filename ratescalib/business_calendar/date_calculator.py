"""
Spot lag handling and period arithmetic with business day adjustment.
"""

from datetime import date, datetime
from typing import Union

from ratescalib.business_calendar.period import Period
from ratescalib.conventions.calendars import Calendar
from ratescalib.conventions.types import BusinessDayAdjustment
from ratescalib.schedule.adjustments import adjust_date


def get_spot_date(trade_date: Union[date, datetime], calendar: Calendar, spot_lag: int) -> date:
    """Advance the trade date by the spot lag in business days."""
    if isinstance(trade_date, datetime):
        trade_date = trade_date.date()
    return calendar.add_business_days(trade_date, spot_lag)


def add_period(
    start_date: Union[date, datetime],
    period: Period,
    calendar: Calendar,
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
) -> date:
    """Add a period to a date and apply the business day adjustment."""
    if isinstance(start_date, datetime):
        start_date = start_date.date()
    return adjust_date(period.add_to(start_date), business_day_adjustment, calendar)
