"""
Factory for curve nodes read from the curve nodes file.

Dispatches on the 'Type' column to one of the five node constructors.
"""

import logging

from ratescalib.business_calendar.period import Tenor
from ratescalib.curves.nodes import (
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
from ratescalib.instruments.deposit import (
    get_fra_convention,
    get_ibor_fixing_deposit_convention,
)
from ratescalib.instruments.swap import (
    get_fixed_ibor_swap_convention,
    get_fixed_overnight_swap_convention,
    get_ibor_ibor_swap_convention,
)
from ratescalib.schema.enums import NodeType
from ratescalib.schema.ids import QuoteKey

from .tenors import parse_fra_time, parse_simple_time

logger = logging.getLogger(__name__)


def create_curve_node(
    type_str: str,
    convention_str: str,
    time_str: str,
    label: str,
    quote_key: QuoteKey,
    spread: float,
) -> CurveNode:
    """
    Create a curve node from the fields of one nodes file row.

    Args:
        type_str: Node type code, e.g. "FRA" or "FixedIborSwap"
        convention_str: Name of the convention for the node type
        time_str: Time description, e.g. "1Y" or "3Mx6M"; ignored for deposits
        label: Node label; blank uses the node's tenor text
        quote_key: Key of the market quote for the node
        spread: Spread added to the instrument

    Returns:
        The curve node

    Raises:
        UnknownNodeTypeError: If the type code is not recognised
        TenorFormatError: If the time does not parse for the node type
        ValueError: If the convention is unknown
    """
    node_type = NodeType.of(type_str)
    logger.debug("Creating %s node: convention=%s, time=%s", node_type.value, convention_str, time_str)
    return _NODE_BUILDERS[node_type](convention_str, time_str, label, quote_key, spread)


def _ibor_fixing_deposit_node(convention_str, time_str, label, quote_key, spread):
    convention = get_ibor_fixing_deposit_convention(convention_str)
    template = IborFixingDepositTemplate(convention.index.tenor.period, convention)
    return IborFixingDepositCurveNode(template, quote_key, spread, label)


def _fra_node(convention_str, time_str, label, quote_key, spread):
    period_to_start, period_to_end = parse_fra_time(time_str, NodeType.FRA.code)
    convention = get_fra_convention(convention_str)
    template = FraTemplate(period_to_start, period_to_end, convention)
    return FraCurveNode(template, quote_key, spread, label)


def _fixed_overnight_swap_node(convention_str, time_str, label, quote_key, spread):
    period_to_end = parse_simple_time(time_str, NodeType.FIXED_OVERNIGHT_SWAP.code)
    convention = get_fixed_overnight_swap_convention(convention_str)
    template = FixedOvernightSwapTemplate(Tenor.of(period_to_end), convention)
    return FixedOvernightSwapCurveNode(template, quote_key, spread, label)


def _fixed_ibor_swap_node(convention_str, time_str, label, quote_key, spread):
    period_to_end = parse_simple_time(time_str, NodeType.FIXED_IBOR_SWAP.code)
    convention = get_fixed_ibor_swap_convention(convention_str)
    template = FixedIborSwapTemplate(Tenor.of(period_to_end), convention)
    return FixedIborSwapCurveNode(template, quote_key, spread, label)


def _ibor_ibor_swap_node(convention_str, time_str, label, quote_key, spread):
    period_to_end = parse_simple_time(time_str, NodeType.IBOR_IBOR_SWAP.code)
    convention = get_ibor_ibor_swap_convention(convention_str)
    template = IborIborSwapTemplate(Tenor.of(period_to_end), convention)
    return IborIborSwapCurveNode(template, quote_key, spread, label)


_NODE_BUILDERS = {
    NodeType.IBOR_FIXING_DEPOSIT: _ibor_fixing_deposit_node,
    NodeType.FRA: _fra_node,
    NodeType.FIXED_OVERNIGHT_SWAP: _fixed_overnight_swap_node,
    NodeType.FIXED_IBOR_SWAP: _fixed_ibor_swap_node,
    NodeType.IBOR_IBOR_SWAP: _ibor_ibor_swap_node,
}
