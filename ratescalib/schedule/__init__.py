# Re-export schedule components
from ratescalib.conventions.types import BusinessDayAdjustment

from .adjustments import adjust_date

__all__ = ["BusinessDayAdjustment", "adjust_date"]
