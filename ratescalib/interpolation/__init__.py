"""
Interpolation methods for nodal curves.

The curve settings file names an interpolator and a left and right
extrapolator for each curve; this package resolves those names.
"""

# Base classes
from .base import Interpolator

# Factory
from .factory import BoundCurveInterpolator, CurveExtrapolator, CurveInterpolator

# Interpolation methods
from .linear import LinearInterpolator, LogLinearInterpolator, StepUpperInterpolator

__all__ = [
    'Interpolator',
    'LinearInterpolator',
    'LogLinearInterpolator',
    'StepUpperInterpolator',
    'CurveInterpolator',
    'CurveExtrapolator',
    'BoundCurveInterpolator',
]
