"""
Swap leg and swap conventions used by curve nodes.

Three swap kinds are supported: fixed vs overnight (OIS), fixed vs Ibor (IRS)
and Ibor vs Ibor basis swaps.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ratescalib.conventions.calendars import Calendar, get_calendar
from ratescalib.conventions.daycount import (
    ACT_360,
    ACT_365F,
    THIRTY_E_360,
    THIRTY_U_360,
    DayCountConvention,
)
from ratescalib.conventions.indices import (
    EUR_EONIA,
    EUR_ESTR,
    EUR_EURIBOR_3M,
    EUR_EURIBOR_6M,
    GBP_LIBOR_6M,
    GBP_SONIA,
    USD_FED_FUND,
    USD_LIBOR_1M,
    USD_LIBOR_3M,
    USD_LIBOR_6M,
    USD_SOFR,
    IborIndex,
    OvernightIndex,
    RateIndex,
)
from ratescalib.conventions.types import (
    BusinessDayAdjustment,
    CalendarType,
    Frequency,
    LegType,
)


@dataclass(frozen=True)
class SwapLegConvention:
    """Specification for a swap leg convention."""

    leg_type: LegType
    day_count: DayCountConvention
    pay_frequency: Frequency
    business_day_adjustment: BusinessDayAdjustment
    calendar: CalendarType
    index: Optional[RateIndex] = None
    reset_frequency: Optional[Frequency] = None
    fixing_lag_days: Optional[int] = None
    pay_delay_days: int = 0

    @property
    def calendar_obj(self) -> Calendar:
        """Get the actual calendar object."""
        return get_calendar(self.calendar)


@dataclass(frozen=True)
class FixedOvernightSwapConvention:
    """Fixed leg against a compounded overnight leg."""

    name: str
    fixed_leg: SwapLegConvention
    floating_leg: SwapLegConvention
    spot_lag_days: int = 2

    @property
    def index(self) -> OvernightIndex:
        return self.floating_leg.index

    @property
    def business_day_adjustment(self) -> BusinessDayAdjustment:
        return self.floating_leg.business_day_adjustment

    @property
    def calendar_obj(self) -> Calendar:
        return self.floating_leg.calendar_obj


@dataclass(frozen=True)
class FixedIborSwapConvention:
    """Fixed leg against an Ibor leg."""

    name: str
    fixed_leg: SwapLegConvention
    floating_leg: SwapLegConvention
    spot_lag_days: int = 2

    @property
    def index(self) -> IborIndex:
        return self.floating_leg.index

    @property
    def business_day_adjustment(self) -> BusinessDayAdjustment:
        return self.floating_leg.business_day_adjustment

    @property
    def calendar_obj(self) -> Calendar:
        return self.floating_leg.calendar_obj


@dataclass(frozen=True)
class IborIborSwapConvention:
    """Ibor leg plus spread against a flat Ibor leg of another tenor."""

    name: str
    spread_leg: SwapLegConvention
    flat_leg: SwapLegConvention
    spot_lag_days: int = 2

    @property
    def business_day_adjustment(self) -> BusinessDayAdjustment:
        return self.flat_leg.business_day_adjustment

    @property
    def calendar_obj(self) -> Calendar:
        return self.flat_leg.calendar_obj


def _fixed_leg(
    pay_frequency: Frequency, day_count: DayCountConvention, calendar: CalendarType
) -> SwapLegConvention:
    return SwapLegConvention(
        leg_type=LegType.FIXED,
        day_count=day_count,
        pay_frequency=pay_frequency,
        business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
        calendar=calendar,
    )


def _ibor_leg(index: IborIndex) -> SwapLegConvention:
    frequency = Frequency(index.tenor.period.total_months())
    return SwapLegConvention(
        leg_type=LegType.FLOATING,
        day_count=index.day_count,
        pay_frequency=frequency,
        business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
        calendar=index.fixing_calendar,
        index=index,
        reset_frequency=frequency,
        fixing_lag_days=2,
    )


def _overnight_leg(index: OvernightIndex) -> SwapLegConvention:
    return SwapLegConvention(
        leg_type=LegType.FLOATING,
        day_count=index.day_count,
        pay_frequency=Frequency.ANNUAL,
        business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
        calendar=index.fixing_calendar,
        index=index,
        fixing_lag_days=0,
        pay_delay_days=2,
    )


def _ois(name: str, index: OvernightIndex, spot_lag_days: int = 2) -> FixedOvernightSwapConvention:
    return FixedOvernightSwapConvention(
        name=name,
        fixed_leg=_fixed_leg(Frequency.ANNUAL, index.day_count, index.fixing_calendar),
        floating_leg=_overnight_leg(index),
        spot_lag_days=spot_lag_days,
    )


def _irs(
    name: str,
    fixed_frequency: Frequency,
    fixed_day_count: DayCountConvention,
    index: IborIndex,
    spot_lag_days: int = 2,
) -> FixedIborSwapConvention:
    return FixedIborSwapConvention(
        name=name,
        fixed_leg=_fixed_leg(fixed_frequency, fixed_day_count, index.fixing_calendar),
        floating_leg=_ibor_leg(index),
        spot_lag_days=spot_lag_days,
    )


def _basis(name: str, spread_index: IborIndex, flat_index: IborIndex) -> IborIborSwapConvention:
    return IborIborSwapConvention(
        name=name,
        spread_leg=_ibor_leg(spread_index),
        flat_leg=_ibor_leg(flat_index),
    )


# Registries
FIXED_OVERNIGHT_SWAP_CONVENTIONS: Dict[str, FixedOvernightSwapConvention] = {
    c.name: c
    for c in (
        _ois("USD-FIXED-1Y-FED-FUND-OIS", USD_FED_FUND),
        _ois("USD-FIXED-1Y-SOFR-OIS", USD_SOFR),
        _ois("EUR-FIXED-1Y-EONIA-OIS", EUR_EONIA),
        _ois("EUR-FIXED-1Y-ESTR-OIS", EUR_ESTR),
        _ois("GBP-FIXED-1Y-SONIA-OIS", GBP_SONIA, spot_lag_days=0),
    )
}

FIXED_IBOR_SWAP_CONVENTIONS: Dict[str, FixedIborSwapConvention] = {
    c.name: c
    for c in (
        _irs("USD-FIXED-6M-LIBOR-3M", Frequency.SEMIANNUAL, THIRTY_U_360, USD_LIBOR_3M),
        _irs("USD-FIXED-1Y-LIBOR-3M", Frequency.ANNUAL, ACT_360, USD_LIBOR_3M),
        _irs("EUR-FIXED-1Y-EURIBOR-3M", Frequency.ANNUAL, THIRTY_E_360, EUR_EURIBOR_3M),
        _irs("EUR-FIXED-1Y-EURIBOR-6M", Frequency.ANNUAL, THIRTY_E_360, EUR_EURIBOR_6M),
        _irs("GBP-FIXED-6M-LIBOR-6M", Frequency.SEMIANNUAL, ACT_365F, GBP_LIBOR_6M, spot_lag_days=0),
    )
}

IBOR_IBOR_SWAP_CONVENTIONS: Dict[str, IborIborSwapConvention] = {
    c.name: c
    for c in (
        _basis("USD-LIBOR-3M-LIBOR-6M", USD_LIBOR_3M, USD_LIBOR_6M),
        _basis("USD-LIBOR-1M-LIBOR-3M", USD_LIBOR_1M, USD_LIBOR_3M),
        _basis("EUR-EURIBOR-3M-EURIBOR-6M", EUR_EURIBOR_3M, EUR_EURIBOR_6M),
    )
}


def get_fixed_overnight_swap_convention(name: str) -> FixedOvernightSwapConvention:
    """Get a fixed-overnight swap convention by name."""
    key = name.strip().upper()
    if key not in FIXED_OVERNIGHT_SWAP_CONVENTIONS:
        raise ValueError(
            f"Unknown FixedOvernightSwap convention: {name}. "
            f"Available: {list(FIXED_OVERNIGHT_SWAP_CONVENTIONS.keys())}"
        )
    return FIXED_OVERNIGHT_SWAP_CONVENTIONS[key]


def get_fixed_ibor_swap_convention(name: str) -> FixedIborSwapConvention:
    """Get a fixed-Ibor swap convention by name."""
    key = name.strip().upper()
    if key not in FIXED_IBOR_SWAP_CONVENTIONS:
        raise ValueError(
            f"Unknown FixedIborSwap convention: {name}. "
            f"Available: {list(FIXED_IBOR_SWAP_CONVENTIONS.keys())}"
        )
    return FIXED_IBOR_SWAP_CONVENTIONS[key]


def get_ibor_ibor_swap_convention(name: str) -> IborIborSwapConvention:
    """Get an Ibor-Ibor basis swap convention by name."""
    key = name.strip().upper()
    if key not in IBOR_IBOR_SWAP_CONVENTIONS:
        raise ValueError(
            f"Unknown IborIborSwap convention: {name}. "
            f"Available: {list(IBOR_IBOR_SWAP_CONVENTIONS.keys())}"
        )
    return IBOR_IBOR_SWAP_CONVENTIONS[key]
