"""
Loads the definitions used to calibrate rates curves from CSV resources.

There are three types of CSV file.

The curve groups file has the header
``Group Name, Curve Type, Reference, Curve Name``:

- 'Group Name' is the name of the group of curves.
- 'Curve Type' is "discount" or "forward".
- 'Reference' is what the curve is used for: a currency such as "USD" for
  discount curves, an index such as "USD-LIBOR-3M" for forward curves.
- 'Curve Name' is the name of the curve.

The curve settings file has the header
``Curve Name, Value Type, Day Count, Interpolator, Left Extrapolator, Right Extrapolator``:

- 'Value Type' is "zero" for zero rates or "df" for discount factors.
- 'Day Count' is the name of the day count, such as "Act/365F".
- 'Interpolator' and the extrapolator columns name the interpolation to use.

The curve nodes file(s) have the header
``Curve Name, Label, Symbology, Ticker, Field Name, Type, Convention, Time, Spread``:

- 'Label' is the label used to refer to the node.
- 'Symbology' and 'Ticker' identify the market quote.
- 'Field Name' defaults to "MarketValue", allowing fields such as 'Bid' or 'Ask'.
- 'Type' is the instrument type, such as "FRA" or "OIS".
- 'Convention' is the name of the convention to use.
- 'Time' describes the instrument length, such as "1Y" or "3Mx6M".
- 'Spread' is the spread to add to the instrument, default 0.

A curve's nodes may be split over several nodes files and need not be ordered.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, MutableMapping, Sequence, Tuple, Union

from ratescalib.conventions.daycount import get_day_count_convention
from ratescalib.conventions.indices import Currency, get_rate_index
from ratescalib.curves.definition import CurveSettings, NodalCurveDefinition
from ratescalib.curves.group import (
    CurveGroupDefinition,
    CurveGroupDefinitionBuilder,
    CurveRole,
    DiscountRole,
    ForwardRole,
)
from ratescalib.curves.nodes import CurveNode
from ratescalib.errors import (
    CurveLoadError,
    DuplicateCurveError,
    MissingCurveSettingsError,
    UnsupportedCurveRoleError,
)
from ratescalib.interpolation.factory import CurveExtrapolator, CurveInterpolator
from ratescalib.schema.enums import CurveType, ValueType
from ratescalib.schema.ids import (
    CurveGroupName,
    CurveName,
    FieldName,
    QuoteKey,
    StandardId,
)

from .base import CsvFile, LoaderConfig, Resource, TabularSource
from .factory import create_curve_node

logger = logging.getLogger(__name__)

# CSV column headers
GROUPS_NAME = "Group Name"
GROUPS_CURVE_TYPE = "Curve Type"
GROUPS_REFERENCE = "Reference"
GROUPS_CURVE_NAME = "Curve Name"

SETTINGS_CURVE_NAME = "Curve Name"
SETTINGS_VALUE_TYPE = "Value Type"
SETTINGS_DAY_COUNT = "Day Count"
SETTINGS_INTERPOLATOR = "Interpolator"
SETTINGS_LEFT_EXTRAPOLATOR = "Left Extrapolator"
SETTINGS_RIGHT_EXTRAPOLATOR = "Right Extrapolator"

CURVE_NAME = "Curve Name"
CURVE_LABEL = "Label"
CURVE_SYMBOLOGY = "Symbology"
CURVE_TICKER = "Ticker"
CURVE_FIELD_NAME = "Field Name"
CURVE_TYPE = "Type"
CURVE_CONVENTION = "Convention"
CURVE_TIME = "Time"
CURVE_SPREAD = "Spread"


def load(
    groups_resource: Resource,
    settings_resource: Resource,
    curve_resources: Union[Resource, Sequence[Resource]],
    config: LoaderConfig = None,
) -> Mapping[CurveGroupName, CurveGroupDefinition]:
    """
    Load one or more CSV format curve calibration files.

    Args:
        groups_resource: The curve groups CSV resource
        settings_resource: The curve settings CSV resource
        curve_resources: One curve nodes CSV resource or a sequence of them
        config: Reader configuration (optional)

    Returns:
        Read-only mapping of group name to curve group definition

    Raises:
        CurveLoadError: If the resources are inconsistent; see ``ratescalib.errors``
        ValueError: If a convention, index or day count name is unknown
    """
    config = config or LoaderConfig()
    curve_groups = load_curve_groups(groups_resource, config)
    settings_map = load_curve_settings(settings_resource, config)

    all_nodes = load_curve_nodes(curve_resources, config)
    curves = build_curve_definitions(settings_map, all_nodes, config)
    groups = map_groups(curve_groups, curves)
    logger.info("Loaded %d curve groups from %d curves", len(groups), len(curves))
    return groups


#-------------------------------------------------------------------------
def load_curve_groups(
    resource: Resource, config: LoaderConfig = None
) -> Dict[CurveName, Tuple[CurveRole, ...]]:
    """
    Load the curve groups file into the roles played by each curve.

    Rows are not checked against each other; a repeated row adds the same role
    twice, which is harmless when groups are mapped.
    """
    csv = CsvFile.of(resource, config)
    logger.info("Loading curve groups from %s (%d rows)", csv.source, csv.row_count())

    roles: Dict[CurveName, List[CurveRole]] = {}
    for i in range(csv.row_count()):
        group_name = CurveGroupName.of(csv.field(i, GROUPS_NAME))
        curve_type = CurveType.of(csv.field(i, GROUPS_CURVE_TYPE))
        reference = csv.field(i, GROUPS_REFERENCE)
        curve_name = CurveName.of(csv.field(i, GROUPS_CURVE_NAME))

        if curve_type == CurveType.DISCOUNT:
            role = DiscountRole(Currency.of(reference), group_name)
        else:
            role = ForwardRole(get_rate_index(reference), group_name)
        roles.setdefault(curve_name, []).append(role)
        logger.debug("Curve %s is %s curve for %s in group %s", curve_name, curve_type.value, reference, group_name)

    return {name: tuple(curve_roles) for name, curve_roles in roles.items()}


def load_curve_settings(
    resource: Resource, config: LoaderConfig = None
) -> Dict[CurveName, CurveSettings]:
    """
    Load the curve settings file.

    Raises:
        DuplicateCurveError: If a curve has more than one settings row
    """
    csv = CsvFile.of(resource, config)
    logger.info("Loading curve settings from %s (%d rows)", csv.source, csv.row_count())

    settings_map: Dict[CurveName, CurveSettings] = {}
    for i in range(csv.row_count()):
        curve_name = CurveName.of(csv.field(i, SETTINGS_CURVE_NAME))
        settings = CurveSettings(
            value_type=ValueType.of(csv.field(i, SETTINGS_VALUE_TYPE)),
            day_count=get_day_count_convention(csv.field(i, SETTINGS_DAY_COUNT)),
            interpolator=CurveInterpolator.of(csv.field(i, SETTINGS_INTERPOLATOR)),
            left_extrapolator=CurveExtrapolator.of(csv.field(i, SETTINGS_LEFT_EXTRAPOLATOR)),
            right_extrapolator=CurveExtrapolator.of(csv.field(i, SETTINGS_RIGHT_EXTRAPOLATOR)),
        )
        # settings must be unique per curve
        _put_unique(settings_map, curve_name, settings, "settings")
    return settings_map


def load_curve_nodes(
    resources: Union[Resource, Sequence[Resource]], config: LoaderConfig = None
) -> Dict[CurveName, List[CurveNode]]:
    """
    Load the nodes of every curve from one or more curve nodes files.

    Nodes of the same curve accumulate across files in file-then-row order.

    Raises:
        CurveLoadError: If no resource is given
    """
    resources = _to_sequence(resources)
    if not resources:
        raise CurveLoadError("At least one curve nodes resource is required")

    all_nodes: Dict[CurveName, List[CurveNode]] = {}
    for resource in resources:
        csv = CsvFile.of(resource, config)
        logger.info("Loading curve nodes from %s (%d rows)", csv.source, csv.row_count())
        for i in range(csv.row_count()):
            curve_name, node = _load_node_row(csv, i)
            all_nodes.setdefault(curve_name, []).append(node)
    return all_nodes


def build_curve_definitions(
    settings_map: Mapping[CurveName, CurveSettings],
    all_nodes: Mapping[CurveName, Sequence[CurveNode]],
    config: LoaderConfig = None,
) -> Dict[CurveName, NodalCurveDefinition]:
    """
    Join the nodes of each curve with its settings.

    Raises:
        MissingCurveSettingsError: If a curve has nodes but no settings
    """
    config = config or LoaderConfig()
    results: Dict[CurveName, NodalCurveDefinition] = {}
    for name, nodes in all_nodes.items():
        settings = settings_map.get(name)
        if settings is None:
            logger.error("Missing settings for curve: %s", name)
            raise MissingCurveSettingsError(name)
        definition = settings.create_curve_definition(name, nodes)
        # each curve is defined exactly once
        _put_unique(results, name, definition, "curve definition")
        if config.verbose:
            logger.info(
                "   Curve %s: %d nodes, %s, %s, %s",
                name,
                definition.parameter_count,
                settings.value_type.value,
                settings.day_count,
                settings.interpolator,
            )
    return results


def map_groups(
    curve_groups: Mapping[CurveName, Iterable[CurveRole]],
    curves: Mapping[CurveName, NodalCurveDefinition],
) -> Mapping[CurveGroupName, CurveGroupDefinition]:
    """
    Use the curve roles to place each curve in its groups.

    Curves without a role are dropped. Groups are created on first use. Within
    a group the last curve applied to a currency or index wins.

    Raises:
        UnsupportedCurveRoleError: If a role is neither a discount nor a forward role
    """
    builders: Dict[CurveGroupName, CurveGroupDefinitionBuilder] = {}
    for curve_name, curve in curves.items():
        # ignore if curve not mapped in any group
        curve_roles = curve_groups.get(curve_name)
        if not curve_roles:
            logger.debug("Curve %s is not used by any group", curve_name)
            continue
        for role in curve_roles:
            if isinstance(role, DiscountRole):
                builder = builders.setdefault(role.group_name, CurveGroupDefinitionBuilder(role.group_name))
                # overwrites any earlier discount curve for the currency
                builder.add_discount_curve(curve, role.currency)
            elif isinstance(role, ForwardRole):
                builder = builders.setdefault(role.group_name, CurveGroupDefinitionBuilder(role.group_name))
                # overwrites any earlier forward curve for the index
                builder.add_forward_curve(curve, role.index)
            else:
                logger.error("Unknown curve role type: %s", type(role).__name__)
                raise UnsupportedCurveRoleError(role)

    unused = set(curve_groups) - set(curves)
    if unused:
        logger.debug("Curves in groups file without nodes: %s", sorted(str(n) for n in unused))
    return MappingProxyType({name: builder.build() for name, builder in builders.items()})


#-------------------------------------------------------------------------
def _load_node_row(csv: TabularSource, i: int) -> Tuple[CurveName, CurveNode]:
    curve_name = CurveName.of(csv.field(i, CURVE_NAME))
    label = csv.field(i, CURVE_LABEL)
    symbology_str = csv.field(i, CURVE_SYMBOLOGY)
    ticker_str = csv.field(i, CURVE_TICKER)
    field_name_str = csv.field(i, CURVE_FIELD_NAME)
    type_str = csv.field(i, CURVE_TYPE)
    convention_str = csv.field(i, CURVE_CONVENTION)
    time_str = csv.field(i, CURVE_TIME)
    spread_str = csv.field(i, CURVE_SPREAD)

    standard_id = StandardId.of(symbology_str, ticker_str)
    field_name = FieldName.MARKET_VALUE if not field_name_str else FieldName.of(field_name_str)
    quote_key = QuoteKey.of(standard_id, field_name)
    spread = 0.0 if not spread_str else float(spread_str)

    node = create_curve_node(type_str, convention_str, time_str, label, quote_key, spread)
    return curve_name, node


def _put_unique(mapping: MutableMapping, key: CurveName, value, what: str) -> None:
    """Insert-if-absent; a second insertion for the same curve is an error."""
    if key in mapping:
        logger.error("Duplicate %s for curve: %s", what, key)
        raise DuplicateCurveError(key, what)
    mapping[key] = value


def _to_sequence(resources) -> List[Resource]:
    """Wrap a single resource in a list; pass sequences through."""
    if isinstance(resources, (str, Path)) or hasattr(resources, "read"):
        return [resources]
    return list(resources)
