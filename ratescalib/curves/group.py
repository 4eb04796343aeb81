"""
Curve roles and curve group definitions.

A curve role says what a curve is used for within a group: discounting cash
flows in a currency, or forecasting a rate index. The two role kinds form a
closed set, see ``CurveRole``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Union

from ratescalib.conventions.indices import Currency, RateIndex, get_rate_index
from ratescalib.curves.definition import NodalCurveDefinition
from ratescalib.schema.ids import CurveGroupName, QuoteKey


@dataclass(frozen=True)
class DiscountRole:
    """Curve used to discount cash flows in ``currency`` within ``group_name``."""

    currency: Currency
    group_name: CurveGroupName


@dataclass(frozen=True)
class ForwardRole:
    """Curve used to forecast ``index`` within ``group_name``."""

    index: RateIndex
    group_name: CurveGroupName


CurveRole = Union[DiscountRole, ForwardRole]


@dataclass(frozen=True)
class CurveGroupDefinition:
    """Curves calibrated together, keyed by what they are used for."""

    name: CurveGroupName
    discount_curves: Mapping[Currency, NodalCurveDefinition]
    forward_curves: Mapping[RateIndex, NodalCurveDefinition]

    def discount_curve(self, currency: Union[Currency, str]) -> Optional[NodalCurveDefinition]:
        if isinstance(currency, str):
            currency = Currency.of(currency)
        return self.discount_curves.get(currency)

    def forward_curve(self, index: Union[RateIndex, str]) -> Optional[NodalCurveDefinition]:
        if isinstance(index, str):
            index = get_rate_index(index)
        return self.forward_curves.get(index)

    def curve_definitions(self) -> List[NodalCurveDefinition]:
        """Distinct curve definitions in the group, discount curves first."""
        seen: Dict[object, NodalCurveDefinition] = {}
        for curve in list(self.discount_curves.values()) + list(self.forward_curves.values()):
            seen.setdefault(curve.name, curve)
        return list(seen.values())

    def quote_keys(self) -> FrozenSet[QuoteKey]:
        keys = set()
        for curve in self.curve_definitions():
            keys |= curve.quote_keys()
        return frozenset(keys)


class CurveGroupDefinitionBuilder:
    """
    Accumulates the curves of one group.

    Slots are overwritten: adding a second discount curve for a currency, or a
    second forward curve for an index, replaces the first.
    """

    def __init__(self, name: CurveGroupName):
        self.name = name
        self._discount_curves: Dict[Currency, NodalCurveDefinition] = {}
        self._forward_curves: Dict[RateIndex, NodalCurveDefinition] = {}

    def add_discount_curve(
        self, curve: NodalCurveDefinition, currency: Currency
    ) -> "CurveGroupDefinitionBuilder":
        self._discount_curves[currency] = curve
        return self

    def add_forward_curve(
        self, curve: NodalCurveDefinition, index: RateIndex
    ) -> "CurveGroupDefinitionBuilder":
        self._forward_curves[index] = curve
        return self

    def build(self) -> CurveGroupDefinition:
        return CurveGroupDefinition(
            name=self.name,
            discount_curves=MappingProxyType(dict(self._discount_curves)),
            forward_curves=MappingProxyType(dict(self._forward_curves)),
        )
