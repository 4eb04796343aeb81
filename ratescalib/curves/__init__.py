"""
Curves package - the configuration model handed to curve calibration.

Main APIs:
---------
    - CurveNode variants: IborFixingDepositCurveNode, FraCurveNode,
      FixedOvernightSwapCurveNode, FixedIborSwapCurveNode, IborIborSwapCurveNode
    - CurveSettings / NodalCurveDefinition: one definition per curve
    - CurveRole variants: DiscountRole, ForwardRole
    - CurveGroupDefinition: curves of a group keyed by currency or index
    - InterpolatedNodalCurve: curve built from a definition and parameters
"""

from .definition import CurveSettings, NodalCurveDefinition
from .group import (
    CurveGroupDefinition,
    CurveGroupDefinitionBuilder,
    CurveRole,
    DiscountRole,
    ForwardRole,
)
from .nodal import InterpolatedNodalCurve
from .nodes import (
    CurveNode,
    FixedIborSwapCurveNode,
    FixedIborSwapTemplate,
    FixedOvernightSwapCurveNode,
    FixedOvernightSwapTemplate,
    FraCurveNode,
    FraTemplate,
    IborFixingDepositCurveNode,
    IborFixingDepositTemplate,
    IborIborSwapCurveNode,
    IborIborSwapTemplate,
)

__all__ = [
    # Nodes
    "CurveNode",
    "IborFixingDepositCurveNode",
    "FraCurveNode",
    "FixedOvernightSwapCurveNode",
    "FixedIborSwapCurveNode",
    "IborIborSwapCurveNode",
    # Templates
    "IborFixingDepositTemplate",
    "FraTemplate",
    "FixedOvernightSwapTemplate",
    "FixedIborSwapTemplate",
    "IborIborSwapTemplate",
    # Definitions
    "CurveSettings",
    "NodalCurveDefinition",
    "InterpolatedNodalCurve",
    # Groups
    "CurveRole",
    "DiscountRole",
    "ForwardRole",
    "CurveGroupDefinition",
    "CurveGroupDefinitionBuilder",
]
