"""
Periods, tenors and business-day date arithmetic.
"""

from .period import ZERO_PERIOD, Period, Tenor
from .date_calculator import add_period, get_spot_date

__all__ = [
    "Period",
    "Tenor",
    "ZERO_PERIOD",
    "get_spot_date",
    "add_period",
]
