"""
QuantLib-backed day count conventions.

Curve settings name their day count with strings such as "Act/365F"; the
registry below resolves them case-insensitively.
"""

from datetime import date

import QuantLib as ql

from ratescalib.conventions.calendars import to_ql_date


class DayCountConvention:
    """Year fraction and day count between two dates, delegated to QuantLib."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: date, end: date) -> float:
        return self._ql_daycount.yearFraction(to_ql_date(start), to_ql_date(end))

    def day_count(self, start: date, end: date) -> int:
        return self._ql_daycount.dayCount(to_ql_date(start), to_ql_date(end))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"


# Pre-defined day count convention instances
ACT_360 = DayCountConvention("Act/360", ql.Actual360())
ACT_365F = DayCountConvention("Act/365F", ql.Actual365Fixed())
ACT_ACT_ISDA = DayCountConvention("Act/Act ISDA", ql.ActualActual(ql.ActualActual.ISDA))
THIRTY_360_ISDA = DayCountConvention("30/360 ISDA", ql.Thirty360(ql.Thirty360.ISDA))
THIRTY_E_360 = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
THIRTY_U_360 = DayCountConvention("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365 FIXED": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACT/ACT ISDA": ACT_ACT_ISDA,
    "ACT/ACT": ACT_ACT_ISDA,
    "ACTUAL/ACTUAL": ACT_ACT_ISDA,
    "30/360 ISDA": THIRTY_360_ISDA,
    "30E/360": THIRTY_E_360,
    "30/360 EUROPEAN": THIRTY_E_360,
    "30U/360": THIRTY_U_360,
    "30/360 US": THIRTY_U_360,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.strip().upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
