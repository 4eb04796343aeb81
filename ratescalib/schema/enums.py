"""
Core enumeration types for the curve calibration CSV files.
"""

from enum import Enum

from ratescalib.errors import CurveLoadError, UnknownNodeTypeError


class ValueType(Enum):
    """Type of the y-values held by a curve."""

    ZERO_RATE = "zero"
    DISCOUNT_FACTOR = "df"

    @classmethod
    def of(cls, text: str) -> "ValueType":
        key = text.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise CurveLoadError(f"Unsupported Value Type in curve settings: {text}")


class CurveType(Enum):
    """How a curve is used within a curve group."""

    DISCOUNT = "discount"
    FORWARD = "forward"

    @classmethod
    def of(cls, text: str) -> "CurveType":
        key = text.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise CurveLoadError(f"Unsupported curve type: {text}")


class NodeType(Enum):
    """Instrument kinds that can be used as curve nodes."""

    IBOR_FIXING_DEPOSIT = "IborFixingDeposit"
    FRA = "Fra"
    FIXED_OVERNIGHT_SWAP = "FixedOvernightSwap"
    FIXED_IBOR_SWAP = "FixedIborSwap"
    IBOR_IBOR_SWAP = "IborIborSwap"

    @property
    def code(self) -> str:
        """Short code used in the nodes file, e.g. 'FRA' or 'OIS'."""
        return _SHORT_CODES[self]

    @classmethod
    def of(cls, text: str) -> "NodeType":
        """Resolve either spelling of a node type; matching is exact."""
        key = text.strip()
        node_type = _NODE_TYPE_CODES.get(key)
        if node_type is None:
            raise UnknownNodeTypeError(key)
        return node_type


_SHORT_CODES = {
    NodeType.IBOR_FIXING_DEPOSIT: "FIX",
    NodeType.FRA: "FRA",
    NodeType.FIXED_OVERNIGHT_SWAP: "OIS",
    NodeType.FIXED_IBOR_SWAP: "IRS",
    NodeType.IBOR_IBOR_SWAP: "BAS",
}

_NODE_TYPE_CODES = {}
for _node_type, _code in _SHORT_CODES.items():
    _NODE_TYPE_CODES[_code] = _node_type
    _NODE_TYPE_CODES[_node_type.value] = _node_type
