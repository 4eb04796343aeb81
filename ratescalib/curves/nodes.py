"""
Curve nodes: the calibration instruments that each contribute one point to a curve.

A node couples a template (convention plus the node's period or tenor) with
the key of the market quote it is calibrated to, an additive spread and a
label. The five node kinds form a closed set, see ``CurveNode``.
"""

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Union

from ratescalib.business_calendar.date_calculator import add_period, get_spot_date
from ratescalib.business_calendar.period import Period, Tenor
from ratescalib.instruments.deposit import FraConvention, IborFixingDepositConvention
from ratescalib.instruments.swap import (
    FixedIborSwapConvention,
    FixedOvernightSwapConvention,
    IborIborSwapConvention,
)
from ratescalib.schema.ids import QuoteKey


def _spot_date(convention, valuation_date: date) -> date:
    return get_spot_date(valuation_date, convention.calendar_obj, convention.spot_lag_days)


def _end_date(convention, valuation_date: date, period: Period) -> date:
    return add_period(
        _spot_date(convention, valuation_date),
        period,
        convention.calendar_obj,
        convention.business_day_adjustment,
    )


# Templates

@dataclass(frozen=True)
class IborFixingDepositTemplate:
    """Deposit fixing against an Ibor index over the index tenor."""

    deposit_period: Period
    convention: IborFixingDepositConvention

    @property
    def label(self) -> str:
        return Tenor.of(self.deposit_period).name

    def end_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.deposit_period)


@dataclass(frozen=True)
class FraTemplate:
    """FRA starting ``period_to_start`` after spot and ending ``period_to_end`` after spot."""

    period_to_start: Period
    period_to_end: Period
    convention: FraConvention

    @property
    def label(self) -> str:
        return f"{self.period_to_start.total_months()}Mx{self.period_to_end.total_months()}M"

    def start_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.period_to_start)

    def end_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.period_to_end)


@dataclass(frozen=True)
class FixedOvernightSwapTemplate:
    tenor: Tenor
    convention: FixedOvernightSwapConvention

    @property
    def label(self) -> str:
        return self.tenor.name

    def end_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.tenor.period)


@dataclass(frozen=True)
class FixedIborSwapTemplate:
    tenor: Tenor
    convention: FixedIborSwapConvention

    @property
    def label(self) -> str:
        return self.tenor.name

    def end_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.tenor.period)


@dataclass(frozen=True)
class IborIborSwapTemplate:
    tenor: Tenor
    convention: IborIborSwapConvention

    @property
    def label(self) -> str:
        return self.tenor.name

    def end_date(self, valuation_date: date) -> date:
        return _end_date(self.convention, valuation_date, self.tenor.period)


# Nodes

class _NodeMixin:
    """Behaviour shared by every node kind."""

    def __post_init__(self):
        if not self.label:
            object.__setattr__(self, "label", self.template.label)

    @property
    def convention(self):
        return self.template.convention

    def date(self, valuation_date: date) -> date:
        """Pillar date of the node: the end date of the underlying instrument."""
        return self.template.end_date(valuation_date)

    def requirements(self) -> FrozenSet[QuoteKey]:
        """Market quotes needed to calibrate this node."""
        return frozenset([self.quote_key])


@dataclass(frozen=True)
class IborFixingDepositCurveNode(_NodeMixin):
    template: IborFixingDepositTemplate
    quote_key: QuoteKey
    spread: float = 0.0
    label: str = ""


@dataclass(frozen=True)
class FraCurveNode(_NodeMixin):
    template: FraTemplate
    quote_key: QuoteKey
    spread: float = 0.0
    label: str = ""


@dataclass(frozen=True)
class FixedOvernightSwapCurveNode(_NodeMixin):
    template: FixedOvernightSwapTemplate
    quote_key: QuoteKey
    spread: float = 0.0
    label: str = ""


@dataclass(frozen=True)
class FixedIborSwapCurveNode(_NodeMixin):
    template: FixedIborSwapTemplate
    quote_key: QuoteKey
    spread: float = 0.0
    label: str = ""


@dataclass(frozen=True)
class IborIborSwapCurveNode(_NodeMixin):
    template: IborIborSwapTemplate
    quote_key: QuoteKey
    spread: float = 0.0
    label: str = ""


CurveNode = Union[
    IborFixingDepositCurveNode,
    FraCurveNode,
    FixedOvernightSwapCurveNode,
    FixedIborSwapCurveNode,
    IborIborSwapCurveNode,
]
