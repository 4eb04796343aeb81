"""
Named market conventions for the instruments used as curve nodes.
"""

from .deposit import (
    FraConvention,
    IborFixingDepositConvention,
    get_fra_convention,
    get_ibor_fixing_deposit_convention,
)
from .swap import (
    FixedIborSwapConvention,
    FixedOvernightSwapConvention,
    IborIborSwapConvention,
    SwapLegConvention,
    get_fixed_ibor_swap_convention,
    get_fixed_overnight_swap_convention,
    get_ibor_ibor_swap_convention,
)

__all__ = [
    "IborFixingDepositConvention",
    "FraConvention",
    "SwapLegConvention",
    "FixedOvernightSwapConvention",
    "FixedIborSwapConvention",
    "IborIborSwapConvention",
    "get_ibor_fixing_deposit_convention",
    "get_fra_convention",
    "get_fixed_overnight_swap_convention",
    "get_fixed_ibor_swap_convention",
    "get_ibor_ibor_swap_convention",
]
