"""
Identifiers and enumerations used by the curve calibration files.
"""

from .enums import CurveType, NodeType, ValueType
from .ids import CurveGroupName, CurveName, FieldName, QuoteKey, StandardId

__all__ = [
    # Enums
    "ValueType",
    "CurveType",
    "NodeType",
    # Identifiers
    "CurveName",
    "CurveGroupName",
    "StandardId",
    "FieldName",
    "QuoteKey",
]
