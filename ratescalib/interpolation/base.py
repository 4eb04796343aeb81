"""
Base class for interpolators over the nodes of a curve.

x-values are year fractions from the valuation date; y-values are whatever the
curve holds (zero rates or discount factors).
"""
from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Interpolator(ABC):
    """Interpolates within, and optionally beyond, a set of (pillar, value) points."""

    def __init__(self, pillars: List[float], values: List[float]):
        """
        Args:
            pillars: Year fractions of the nodes, in any order
            values: Curve value at each pillar
        """
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        x = np.asarray(pillars, dtype=float)
        order = np.argsort(x, kind="stable")
        self.pillars = x[order]
        self.values = np.asarray(values, dtype=float)[order]

        if np.any(np.diff(self.pillars) == 0):
            raise ValueError("Duplicate pillar dates not allowed")

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """Value at t, with t inside the pillar range."""

    def extrapolate(self, t: float) -> float:
        """Value outside the pillar range following the interpolator's own shape."""
        return self._extrapolate_linear(t)

    def _segment(self, t: float) -> int:
        """Index of the left pillar of the segment used for t; end segments extend outwards."""
        i = int(np.searchsorted(self.pillars, t)) - 1
        return min(max(i, 0), len(self.pillars) - 2)

    def _extrapolate_flat(self, t: float) -> float:
        if self.pillars[0] < t < self.pillars[-1]:
            raise ValueError("Time is within pillar range, use interpolation")
        return float(self.values[0] if t <= self.pillars[0] else self.values[-1])

    def _extrapolate_linear(self, t: float) -> float:
        """Extend the first or last segment as a straight line."""
        if self.pillars[0] < t < self.pillars[-1]:
            raise ValueError("Time is within pillar range, use interpolation")
        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        v1, v2 = self.values[i], self.values[i + 1]
        return float(v1 + (v2 - v1) / (t2 - t1) * (t - t1))
