"""
Linear, log-linear and step interpolation methods for nodal curves.
"""
import math
from typing import List

import numpy as np

from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Linear interpolation on the curve values."""

    def interpolate(self, t: float) -> float:
        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        v1, v2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(v1 + weight * (v2 - v1))


class LogLinearInterpolator(Interpolator):
    """Linear interpolation on the log of the curve values.

    Usual choice for discount factor curves, giving piecewise constant
    continuously compounded forward rates.
    """

    def __init__(self, pillars: List[float], values: List[float]):
        super().__init__(pillars, values)
        if np.any(self.values <= 0):
            raise ValueError("Log-linear interpolation requires positive values")
        self.log_values = np.log(self.values)

    def interpolate(self, t: float) -> float:
        return math.exp(self._log_value(t))

    def extrapolate(self, t: float) -> float:
        return math.exp(self._log_value(t))

    def _log_value(self, t: float) -> float:
        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        log_v1, log_v2 = self.log_values[i], self.log_values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(log_v1 + weight * (log_v2 - log_v1))


class StepUpperInterpolator(Interpolator):
    """Step function taking the value of the upper pillar of each interval."""

    def interpolate(self, t: float) -> float:
        i = np.searchsorted(self.pillars, t, side="left")
        return float(self.values[min(i, len(self.pillars) - 1)])

    def extrapolate(self, t: float) -> float:
        return self._extrapolate_flat(t)
