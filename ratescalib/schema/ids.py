"""
Identifiers shared by the curve loaders: curve and group names, quote keys.
"""

from dataclasses import dataclass


def _require_text(value: str, what: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{what} must not be empty")
    return str(value).strip()


@dataclass(frozen=True)
class CurveName:
    """Unique name of a curve, the join key across the three CSV files."""

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", _require_text(self.name, "Curve name"))

    @classmethod
    def of(cls, name: str) -> "CurveName":
        return cls(name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CurveGroupName:
    """Unique name of a group of curves."""

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", _require_text(self.name, "Curve group name"))

    @classmethod
    def of(cls, name: str) -> "CurveGroupName":
        return cls(name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StandardId:
    """Identifier of a market instrument within a symbology scheme."""

    scheme: str
    value: str

    def __post_init__(self):
        object.__setattr__(self, "scheme", _require_text(self.scheme, "Symbology"))
        object.__setattr__(self, "value", _require_text(self.value, "Ticker"))

    @classmethod
    def of(cls, scheme: str, value: str) -> "StandardId":
        return cls(scheme, value)

    def __str__(self) -> str:
        return f"{self.scheme}~{self.value}"


@dataclass(frozen=True)
class FieldName:
    """Name of the market data field to read, such as 'Bid' or 'Ask'."""

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", _require_text(self.name, "Field name"))

    @classmethod
    def of(cls, name: str) -> "FieldName":
        return cls(name)

    def __str__(self) -> str:
        return self.name


FieldName.MARKET_VALUE = FieldName("MarketValue")


@dataclass(frozen=True)
class QuoteKey:
    """Key of the market quote a curve node is calibrated to."""

    standard_id: StandardId
    field_name: FieldName = FieldName.MARKET_VALUE

    @classmethod
    def of(cls, standard_id: StandardId, field_name: FieldName = FieldName.MARKET_VALUE) -> "QuoteKey":
        return cls(standard_id, field_name)

    def __str__(self) -> str:
        return f"{self.standard_id}/{self.field_name}"
