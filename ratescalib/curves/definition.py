"""
Curve settings and nodal curve definitions.
"""

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, List, Sequence, Tuple

from ratescalib.conventions.daycount import DayCountConvention
from ratescalib.curves.nodal import InterpolatedNodalCurve
from ratescalib.curves.nodes import CurveNode
from ratescalib.interpolation.factory import CurveExtrapolator, CurveInterpolator
from ratescalib.schema.enums import ValueType
from ratescalib.schema.ids import CurveName, QuoteKey


@dataclass(frozen=True)
class CurveSettings:
    """Per-curve metadata from the curve settings file."""

    value_type: ValueType
    day_count: DayCountConvention
    interpolator: CurveInterpolator
    left_extrapolator: CurveExtrapolator
    right_extrapolator: CurveExtrapolator

    def create_curve_definition(
        self, name: CurveName, nodes: Sequence[CurveNode]
    ) -> "NodalCurveDefinition":
        """Bind these settings and the given nodes to a curve name."""
        return NodalCurveDefinition(name=name, settings=self, nodes=tuple(nodes))


@dataclass(frozen=True)
class NodalCurveDefinition:
    """
    Definition of a curve calibrated at its nodes.

    The order of ``nodes`` is the order in which they were read and has no
    meaning for calibration.
    """

    name: CurveName
    settings: CurveSettings
    nodes: Tuple[CurveNode, ...]

    @property
    def value_type(self) -> ValueType:
        return self.settings.value_type

    @property
    def day_count(self) -> DayCountConvention:
        return self.settings.day_count

    @property
    def parameter_count(self) -> int:
        return len(self.nodes)

    def quote_keys(self) -> FrozenSet[QuoteKey]:
        """Market quotes required to calibrate the curve."""
        keys = set()
        for node in self.nodes:
            keys |= node.requirements()
        return frozenset(keys)

    def node_dates(self, valuation_date: date) -> List[date]:
        return [node.date(valuation_date) for node in self.nodes]

    def curve(self, valuation_date: date, parameters: Sequence[float]) -> InterpolatedNodalCurve:
        """
        Build the interpolated curve for a set of calibrated parameters.

        Args:
            valuation_date: Date the curve is valued at
            parameters: One y-value per node, in node order

        Returns:
            Curve whose x-values are the node year fractions under the curve day count

        Raises:
            ValueError: If the number of parameters differs from the number of nodes
        """
        if len(parameters) != len(self.nodes):
            raise ValueError(
                f"Curve {self.name} expects {len(self.nodes)} parameters, got {len(parameters)}"
            )
        x_values = [
            self.day_count.year_fraction(valuation_date, node_date)
            for node_date in self.node_dates(valuation_date)
        ]
        return InterpolatedNodalCurve(
            name=self.name,
            value_type=self.value_type,
            x_values=x_values,
            y_values=list(parameters),
            interpolator=self.settings.interpolator,
            left_extrapolator=self.settings.left_extrapolator,
            right_extrapolator=self.settings.right_extrapolator,
        )
