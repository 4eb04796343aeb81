"""
Exceptions raised while loading curve calibration definitions.
"""


class CurveLoadError(ValueError):
    """Base error for an invalid curve calibration input set."""


class TenorFormatError(CurveLoadError):
    """Time text that does not match the grammar of its instrument kind."""

    def __init__(self, instrument: str, text: str):
        self.instrument = instrument
        self.text = text
        super().__init__(f"Invalid time format for {instrument}: {text}")


class UnknownNodeTypeError(CurveLoadError):
    """Node type code outside the supported vocabulary."""

    def __init__(self, type_code: str):
        self.type_code = type_code
        super().__init__(f"Invalid curve node type: {type_code}")


class MissingCurveSettingsError(CurveLoadError):
    """A curve has nodes but no settings record."""

    def __init__(self, curve_name):
        self.curve_name = curve_name
        super().__init__(f"Missing settings for curve: {curve_name}")


class DuplicateCurveError(CurveLoadError):
    """A curve name was inserted twice into a map that requires unique keys."""

    def __init__(self, curve_name, what: str = "curve"):
        self.curve_name = curve_name
        super().__init__(f"Duplicate {what} for curve: {curve_name}")


class UnsupportedCurveRoleError(CurveLoadError, TypeError):
    """A curve role variant the group mapper does not know how to apply."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unknown curve role type: {type(role).__name__}")
