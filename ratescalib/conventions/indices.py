"""
Currencies and the rate indices curves are used to forecast.

Forward roles in the curve groups file reference an index by name, e.g.
"USD-LIBOR-3M" or "EUR-ESTR".
"""

import re
from dataclasses import dataclass
from typing import Dict, Union

from ratescalib.business_calendar.period import Tenor
from ratescalib.conventions.daycount import ACT_360, ACT_365F, DayCountConvention
from ratescalib.conventions.types import CalendarType

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True)
class Currency:
    """ISO-4217 three letter currency code."""

    code: str

    def __post_init__(self):
        if not _CURRENCY_CODE.fullmatch(self.code or ""):
            raise ValueError(f"Invalid currency code: {self.code!r}")

    @classmethod
    def of(cls, code: str) -> "Currency":
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.code


USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")


@dataclass(frozen=True)
class IborIndex:
    """Term rate index with a fixed tenor, such as EURIBOR 3M."""

    name: str
    currency: Currency
    tenor: Tenor
    day_count: DayCountConvention
    fixing_calendar: CalendarType

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class OvernightIndex:
    """Overnight rate index, such as ESTR or SOFR."""

    name: str
    currency: Currency
    day_count: DayCountConvention
    fixing_calendar: CalendarType

    def __str__(self) -> str:
        return self.name


RateIndex = Union[IborIndex, OvernightIndex]


USD_LIBOR_1M = IborIndex("USD-LIBOR-1M", USD, Tenor.of_months(1), ACT_360, CalendarType.GBLO)
USD_LIBOR_3M = IborIndex("USD-LIBOR-3M", USD, Tenor.of_months(3), ACT_360, CalendarType.GBLO)
USD_LIBOR_6M = IborIndex("USD-LIBOR-6M", USD, Tenor.of_months(6), ACT_360, CalendarType.GBLO)
EUR_EURIBOR_1M = IborIndex("EUR-EURIBOR-1M", EUR, Tenor.of_months(1), ACT_360, CalendarType.TARGET)
EUR_EURIBOR_3M = IborIndex("EUR-EURIBOR-3M", EUR, Tenor.of_months(3), ACT_360, CalendarType.TARGET)
EUR_EURIBOR_6M = IborIndex("EUR-EURIBOR-6M", EUR, Tenor.of_months(6), ACT_360, CalendarType.TARGET)
GBP_LIBOR_3M = IborIndex("GBP-LIBOR-3M", GBP, Tenor.of_months(3), ACT_365F, CalendarType.GBLO)
GBP_LIBOR_6M = IborIndex("GBP-LIBOR-6M", GBP, Tenor.of_months(6), ACT_365F, CalendarType.GBLO)

USD_FED_FUND = OvernightIndex("USD-FED-FUND", USD, ACT_360, CalendarType.USNY)
USD_SOFR = OvernightIndex("USD-SOFR", USD, ACT_360, CalendarType.USNY)
EUR_EONIA = OvernightIndex("EUR-EONIA", EUR, ACT_360, CalendarType.TARGET)
EUR_ESTR = OvernightIndex("EUR-ESTR", EUR, ACT_360, CalendarType.TARGET)
GBP_SONIA = OvernightIndex("GBP-SONIA", GBP, ACT_365F, CalendarType.GBLO)

# Registry
IBOR_INDICES: Dict[str, IborIndex] = {
    index.name: index
    for index in (
        USD_LIBOR_1M,
        USD_LIBOR_3M,
        USD_LIBOR_6M,
        EUR_EURIBOR_1M,
        EUR_EURIBOR_3M,
        EUR_EURIBOR_6M,
        GBP_LIBOR_3M,
        GBP_LIBOR_6M,
    )
}

OVERNIGHT_INDICES: Dict[str, OvernightIndex] = {
    index.name: index
    for index in (USD_FED_FUND, USD_SOFR, EUR_EONIA, EUR_ESTR, GBP_SONIA)
}


def get_ibor_index(name: str) -> IborIndex:
    """Get an Ibor index by name."""
    key = name.strip().upper()
    if key not in IBOR_INDICES:
        raise ValueError(
            f"Unknown Ibor index: {name}. Available: {list(IBOR_INDICES.keys())}"
        )
    return IBOR_INDICES[key]


def get_rate_index(name: str) -> RateIndex:
    """Get an Ibor or overnight index by name."""
    key = name.strip().upper()
    if key in IBOR_INDICES:
        return IBOR_INDICES[key]
    if key in OVERNIGHT_INDICES:
        return OVERNIGHT_INDICES[key]
    raise ValueError(
        f"Unknown rate index: {name}. "
        f"Available: {list(IBOR_INDICES.keys()) + list(OVERNIGHT_INDICES.keys())}"
    )
