"""
Ibor fixing deposit and FRA conventions.

Both are defined by an Ibor index; the registries hold one convention per
index, named after the index (e.g. "USD-LIBOR-3M").
"""

from dataclasses import dataclass
from typing import Dict

from ratescalib.conventions.calendars import Calendar, get_calendar
from ratescalib.conventions.daycount import DayCountConvention
from ratescalib.conventions.indices import IBOR_INDICES, IborIndex
from ratescalib.conventions.types import BusinessDayAdjustment, CalendarType


@dataclass(frozen=True)
class IborFixingDepositConvention:
    """Specification for a deposit fixing against an Ibor index."""

    name: str
    index: IborIndex
    spot_lag_days: int
    business_day_adjustment: BusinessDayAdjustment

    @property
    def day_count(self) -> DayCountConvention:
        return self.index.day_count

    @property
    def calendar(self) -> CalendarType:
        return self.index.fixing_calendar

    @property
    def calendar_obj(self) -> Calendar:
        """Get the actual calendar object."""
        return get_calendar(self.calendar)


@dataclass(frozen=True)
class FraConvention:
    """Specification for a forward rate agreement on an Ibor index."""

    name: str
    index: IborIndex
    spot_lag_days: int
    business_day_adjustment: BusinessDayAdjustment

    @property
    def day_count(self) -> DayCountConvention:
        return self.index.day_count

    @property
    def calendar(self) -> CalendarType:
        return self.index.fixing_calendar

    @property
    def calendar_obj(self) -> Calendar:
        """Get the actual calendar object."""
        return get_calendar(self.calendar)


def _spot_lag(index: IborIndex) -> int:
    # GBP Ibor fixes same day, everything else spot T+2
    return 0 if index.currency.code == "GBP" else 2


IBOR_FIXING_DEPOSIT_CONVENTIONS: Dict[str, IborFixingDepositConvention] = {
    name: IborFixingDepositConvention(
        name=name,
        index=index,
        spot_lag_days=_spot_lag(index),
        business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    )
    for name, index in IBOR_INDICES.items()
}

FRA_CONVENTIONS: Dict[str, FraConvention] = {
    name: FraConvention(
        name=name,
        index=index,
        spot_lag_days=_spot_lag(index),
        business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    )
    for name, index in IBOR_INDICES.items()
}


def get_ibor_fixing_deposit_convention(name: str) -> IborFixingDepositConvention:
    """Get an Ibor fixing deposit convention by name."""
    key = name.strip().upper()
    if key not in IBOR_FIXING_DEPOSIT_CONVENTIONS:
        raise ValueError(
            f"Unknown IborFixingDeposit convention: {name}. "
            f"Available: {list(IBOR_FIXING_DEPOSIT_CONVENTIONS.keys())}"
        )
    return IBOR_FIXING_DEPOSIT_CONVENTIONS[key]


def get_fra_convention(name: str) -> FraConvention:
    """Get a FRA convention by name."""
    key = name.strip().upper()
    if key not in FRA_CONVENTIONS:
        raise ValueError(
            f"Unknown FRA convention: {name}. Available: {list(FRA_CONVENTIONS.keys())}"
        )
    return FRA_CONVENTIONS[key]
