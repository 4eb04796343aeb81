"""
Interpolated nodal curve built from a curve definition and calibrated parameters.
"""

import math
from typing import List

import numpy as np

from ratescalib.interpolation.factory import (
    BoundCurveInterpolator,
    CurveExtrapolator,
    CurveInterpolator,
)
from ratescalib.schema.enums import ValueType
from ratescalib.schema.ids import CurveName


class InterpolatedNodalCurve:
    """Curve defined by nodal points with x as year fraction and y as ``value_type``."""

    def __init__(
        self,
        name: CurveName,
        value_type: ValueType,
        x_values: List[float],
        y_values: List[float],
        interpolator: CurveInterpolator,
        left_extrapolator: CurveExtrapolator,
        right_extrapolator: CurveExtrapolator,
    ):
        self.name = name
        self.value_type = value_type
        self.interpolator = interpolator
        self.left_extrapolator = left_extrapolator
        self.right_extrapolator = right_extrapolator
        self._bound = BoundCurveInterpolator.of(
            interpolator, left_extrapolator, right_extrapolator, x_values, y_values
        )

    @property
    def x_values(self) -> np.ndarray:
        return self._bound.interpolator.pillars

    @property
    def y_values(self) -> np.ndarray:
        return self._bound.interpolator.values

    @property
    def parameter_count(self) -> int:
        return len(self.x_values)

    def y_value(self, x: float) -> float:
        """Curve value at year fraction ``x``."""
        return self._bound.value(x)

    def discount_factor(self, x: float) -> float:
        """Discount factor at year fraction ``x``."""
        if self.value_type == ValueType.DISCOUNT_FACTOR:
            return self.y_value(x)
        return math.exp(-self.y_value(x) * x)

    def zero_rate(self, x: float) -> float:
        """Continuously compounded zero rate at year fraction ``x``."""
        if self.value_type == ValueType.ZERO_RATE:
            return self.y_value(x)
        if x <= 0:
            raise ValueError("Zero rate from discount factors requires a positive time")
        return -math.log(self.y_value(x)) / x

    def __repr__(self) -> str:
        return f"InterpolatedNodalCurve({self.name}, {self.value_type.value}, {self.parameter_count} nodes)"
