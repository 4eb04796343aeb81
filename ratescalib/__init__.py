"""
ratescalib - curve calibration definitions loaded from CSV.

Reads three kinds of CSV file (curve groups, curve settings and curve nodes)
and produces one curve group definition per group, ready for calibration.

Example:
    >>> from ratescalib import CurveGroupName, load
    >>> groups = load("groups.csv", "settings.csv", ["nodes-usd.csv", "nodes-eur.csv"])
    >>> group = groups[CurveGroupName.of("Default")]
    >>> group.discount_curve("USD").nodes
"""

from ratescalib.curves import (
    CurveGroupDefinition,
    CurveSettings,
    DiscountRole,
    ForwardRole,
    InterpolatedNodalCurve,
    NodalCurveDefinition,
)
from ratescalib.data import LoaderConfig, load
from ratescalib.errors import (
    CurveLoadError,
    DuplicateCurveError,
    MissingCurveSettingsError,
    TenorFormatError,
    UnknownNodeTypeError,
    UnsupportedCurveRoleError,
)
from ratescalib.schema import CurveGroupName, CurveName, FieldName, QuoteKey, StandardId

__version__ = "1.0.0"

__all__ = [
    "load",
    "LoaderConfig",
    # Model
    "CurveName",
    "CurveGroupName",
    "StandardId",
    "FieldName",
    "QuoteKey",
    "CurveSettings",
    "NodalCurveDefinition",
    "InterpolatedNodalCurve",
    "DiscountRole",
    "ForwardRole",
    "CurveGroupDefinition",
    # Errors
    "CurveLoadError",
    "TenorFormatError",
    "UnknownNodeTypeError",
    "MissingCurveSettingsError",
    "DuplicateCurveError",
    "UnsupportedCurveRoleError",
]
