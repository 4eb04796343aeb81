"""
Named interpolators and extrapolators, as referenced by the curve settings file.
"""
from enum import Enum
from typing import List

from .base import Interpolator
from .linear import LinearInterpolator, LogLinearInterpolator, StepUpperInterpolator


class CurveInterpolator(Enum):
    """Interpolators available to nodal curves."""

    LINEAR = "Linear"
    LOG_LINEAR = "LogLinear"
    STEP_UPPER = "StepUpper"

    @classmethod
    def of(cls, name: str) -> "CurveInterpolator":
        key = name.strip().upper()
        for member in cls:
            if member.value.upper() == key:
                return member
        raise ValueError(
            f"Unknown curve interpolator: {name}. "
            f"Available: {[m.value for m in cls]}"
        )

    def create(self, pillars: List[float], values: List[float]) -> Interpolator:
        """Create an interpolator over the given points."""
        return _INTERPOLATORS[self](pillars, values)

    def __str__(self) -> str:
        return self.value


_INTERPOLATORS = {
    CurveInterpolator.LINEAR: LinearInterpolator,
    CurveInterpolator.LOG_LINEAR: LogLinearInterpolator,
    CurveInterpolator.STEP_UPPER: StepUpperInterpolator,
}


class CurveExtrapolator(Enum):
    """Extrapolators applied left of the first and right of the last node."""

    FLAT = "Flat"
    LINEAR = "Linear"
    INTERPOLATOR = "Interpolator"
    EXCEPTION = "Exception"

    @classmethod
    def of(cls, name: str) -> "CurveExtrapolator":
        key = name.strip().upper()
        for member in cls:
            if member.value.upper() == key:
                return member
        raise ValueError(
            f"Unknown curve extrapolator: {name}. "
            f"Available: {[m.value for m in cls]}"
        )

    def __str__(self) -> str:
        return self.value


class BoundCurveInterpolator:
    """An interpolator bound to its points together with both extrapolators."""

    def __init__(
        self,
        interpolator: Interpolator,
        left: CurveExtrapolator,
        right: CurveExtrapolator,
    ):
        self.interpolator = interpolator
        self.left = left
        self.right = right

    @classmethod
    def of(
        cls,
        interpolator: CurveInterpolator,
        left: CurveExtrapolator,
        right: CurveExtrapolator,
        pillars: List[float],
        values: List[float],
    ) -> "BoundCurveInterpolator":
        return cls(interpolator.create(pillars, values), left, right)

    def value(self, t: float) -> float:
        pillars = self.interpolator.pillars
        if t < pillars[0]:
            return self._extrapolate(self.left, t)
        if t > pillars[-1]:
            return self._extrapolate(self.right, t)
        return self.interpolator.interpolate(t)

    def _extrapolate(self, extrapolator: CurveExtrapolator, t: float) -> float:
        if extrapolator == CurveExtrapolator.FLAT:
            return self.interpolator._extrapolate_flat(t)
        elif extrapolator == CurveExtrapolator.LINEAR:
            return self.interpolator._extrapolate_linear(t)
        elif extrapolator == CurveExtrapolator.INTERPOLATOR:
            return self.interpolator.extrapolate(t)
        elif extrapolator == CurveExtrapolator.EXCEPTION:
            raise ValueError(
                f"Extrapolation not allowed: {t} is outside "
                f"[{self.interpolator.pillars[0]}, {self.interpolator.pillars[-1]}]"
            )
        else:
            raise ValueError(f"Unknown curve extrapolator: {extrapolator}")
