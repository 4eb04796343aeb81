"""Tests for loading curve group definitions from CSV files."""

import io
import logging
from collections import Counter

import pytest

from ratescalib.conventions.indices import (
    EUR,
    EUR_ESTR,
    EUR_EURIBOR_3M,
    USD,
    USD_FED_FUND,
    USD_LIBOR_3M,
    USD_LIBOR_6M,
)
from ratescalib.curves.definition import CurveSettings
from ratescalib.curves.group import DiscountRole, ForwardRole
from ratescalib.curves.nodes import FraCurveNode
from ratescalib.data import (
    LoaderConfig,
    build_curve_definitions,
    load,
    load_curve_groups,
    load_curve_nodes,
    load_curve_settings,
    map_groups,
)
from ratescalib.errors import (
    CurveLoadError,
    DuplicateCurveError,
    MissingCurveSettingsError,
    UnsupportedCurveRoleError,
)
from ratescalib.interpolation.factory import CurveExtrapolator, CurveInterpolator
from ratescalib.schema.enums import ValueType
from ratescalib.schema.ids import CurveGroupName, CurveName, FieldName, QuoteKey, StandardId

NODES_HEADER = "Curve Name,Label,Symbology,Ticker,Field Name,Type,Convention,Time,Spread\n"


def _load_sample(data_dir, node_files=("nodes-usd.csv", "nodes-eur.csv")):
    return load(
        data_dir / "groups.csv",
        data_dir / "settings.csv",
        [data_dir / name for name in node_files],
    )


# Curve groups

def test_load_curve_groups(data_dir):
    groups = load_curve_groups(data_dir / "groups.csv")
    default = CurveGroupName.of("Default")

    assert groups[CurveName.of("USD-Disc")] == (
        DiscountRole(USD, default),
        ForwardRole(USD_FED_FUND, default),
    )
    assert groups[CurveName.of("USD-3ML")] == (ForwardRole(USD_LIBOR_3M, default),)
    assert groups[CurveName.of("EUR-Disc")] == (DiscountRole(EUR, default), ForwardRole(EUR_ESTR, default))


def test_load_curve_groups_unsupported_curve_type(write_csv):
    path = write_csv(
        "groups.csv",
        """
Group Name,Curve Type,Reference,Curve Name
G1,inflation,USD-CPI,CurveA
""",
    )
    with pytest.raises(CurveLoadError, match="Unsupported curve type: inflation"):
        load_curve_groups(path)


def test_load_curve_groups_unknown_index(write_csv):
    path = write_csv(
        "groups.csv",
        """
Group Name,Curve Type,Reference,Curve Name
G1,forward,USD-NOT-AN-INDEX,CurveA
""",
    )
    with pytest.raises(ValueError, match="Unknown rate index: USD-NOT-AN-INDEX"):
        load_curve_groups(path)


# Curve settings

def test_load_curve_settings(data_dir):
    settings = load_curve_settings(data_dir / "settings.csv")

    eur_disc = settings[CurveName.of("EUR-Disc")]
    assert isinstance(eur_disc, CurveSettings)
    assert eur_disc.value_type == ValueType.DISCOUNT_FACTOR
    assert eur_disc.day_count.name == "Act/360"
    assert eur_disc.interpolator == CurveInterpolator.LOG_LINEAR
    assert eur_disc.left_extrapolator == CurveExtrapolator.FLAT
    assert eur_disc.right_extrapolator == CurveExtrapolator.INTERPOLATOR
    assert settings[CurveName.of("USD-Disc")].value_type == ValueType.ZERO_RATE


def test_load_curve_settings_duplicate_curve(write_csv):
    path = write_csv(
        "settings.csv",
        """
Curve Name,Value Type,Day Count,Interpolator,Left Extrapolator,Right Extrapolator
CurveA,zero,Act/365F,Linear,Flat,Flat
CurveA,df,Act/360,LogLinear,Flat,Flat
""",
    )
    with pytest.raises(DuplicateCurveError) as excinfo:
        load_curve_settings(path)

    assert excinfo.value.curve_name == CurveName.of("CurveA")


def test_load_curve_settings_bad_value_type(write_csv):
    path = write_csv(
        "settings.csv",
        """
Curve Name,Value Type,Day Count,Interpolator,Left Extrapolator,Right Extrapolator
CurveA,forward,Act/365F,Linear,Flat,Flat
""",
    )
    with pytest.raises(CurveLoadError, match="Unsupported Value Type in curve settings: forward"):
        load_curve_settings(path)


def test_load_curve_settings_unknown_day_count(write_csv):
    path = write_csv(
        "settings.csv",
        """
Curve Name,Value Type,Day Count,Interpolator,Left Extrapolator,Right Extrapolator
CurveA,zero,Bus/252,Linear,Flat,Flat
""",
    )
    with pytest.raises(ValueError, match="Unknown day count convention: Bus/252"):
        load_curve_settings(path)


# Curve nodes

def test_load_curve_nodes_defaults(write_csv):
    path = write_csv(
        "nodes.csv",
        NODES_HEADER
        + "CurveA,,OG,T1,,IRS,USD-FIXED-6M-LIBOR-3M,2Y,\n"
        + "CurveA,,OG,T2,Ask,IRS,USD-FIXED-6M-LIBOR-3M,5Y,0.0025\n",
    )
    nodes = load_curve_nodes(path)[CurveName.of("CurveA")]

    assert nodes[0].quote_key == QuoteKey(StandardId("OG", "T1"), FieldName.MARKET_VALUE)
    assert nodes[0].spread == 0.0
    assert nodes[1].quote_key == QuoteKey(StandardId("OG", "T2"), FieldName.of("Ask"))
    assert nodes[1].spread == 0.0025


def test_load_curve_nodes_accumulates_across_files(data_dir, write_csv):
    extra = write_csv(
        "more-usd.csv",
        NODES_HEADER + "USD-Disc,OIS5Y,OG-Ticker,USD-OIS-5Y,,OIS,USD-FIXED-1Y-FED-FUND-OIS,5Y,\n",
    )
    nodes = load_curve_nodes([data_dir / "nodes-usd.csv", extra])

    labels = [node.label for node in nodes[CurveName.of("USD-Disc")]]
    assert labels == ["OIS1M", "OIS6M", "OIS1Y", "OIS2Y", "OIS5Y"]


def test_load_curve_nodes_accepts_streams(data_dir):
    text = (data_dir / "nodes-eur.csv").read_text()
    nodes = load_curve_nodes(io.StringIO(text))
    assert len(nodes[CurveName.of("EUR-3ME")]) == 3


def test_load_curve_nodes_requires_a_resource():
    with pytest.raises(CurveLoadError):
        load_curve_nodes([])


def test_load_curve_nodes_malformed_spread(write_csv):
    path = write_csv("nodes.csv", NODES_HEADER + "CurveA,,OG,T1,,IRS,USD-FIXED-6M-LIBOR-3M,2Y,ten\n")
    with pytest.raises(ValueError):
        load_curve_nodes(path)


def test_missing_header(write_csv):
    path = write_csv(
        "nodes.csv",
        """
Curve Name,Label,Symbology,Ticker,Field Name,Type,Convention,Time
CurveA,,OG,T1,,FRA,USD-LIBOR-3M,3Mx6M
""",
    )
    with pytest.raises(CurveLoadError) as excinfo:
        load_curve_nodes(path)

    assert "Header not found: 'Spread'" in str(excinfo.value)


def test_semicolon_delimiter(write_csv):
    path = write_csv(
        "nodes.csv",
        """
Curve Name;Label;Symbology;Ticker;Field Name;Type;Convention;Time;Spread
CurveA;;OG;T1;;FRA;USD-LIBOR-3M;3Mx6M;
""",
    )
    nodes = load_curve_nodes(path, LoaderConfig(delimiter=";"))
    assert isinstance(nodes[CurveName.of("CurveA")][0], FraCurveNode)


# Assembly

def test_build_curve_definitions_missing_settings():
    with pytest.raises(MissingCurveSettingsError) as excinfo:
        build_curve_definitions({}, {CurveName.of("CurveB"): []})

    assert excinfo.value.curve_name == CurveName.of("CurveB")
    assert "Missing settings for curve: CurveB" in str(excinfo.value)


def test_map_groups_unsupported_role(data_dir):
    settings = load_curve_settings(data_dir / "settings.csv")
    nodes = load_curve_nodes(data_dir / "nodes-usd.csv")
    curves = build_curve_definitions(settings, nodes)

    class InflationRole:
        pass

    with pytest.raises(UnsupportedCurveRoleError) as excinfo:
        map_groups({CurveName.of("USD-Disc"): (InflationRole(),)}, curves)

    assert "InflationRole" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)


def test_map_groups_last_role_wins(data_dir):
    settings = load_curve_settings(data_dir / "settings.csv")
    curves = build_curve_definitions(settings, load_curve_nodes(data_dir / "nodes-usd.csv"))
    group = CurveGroupName.of("G")

    result = map_groups(
        {
            CurveName.of("USD-Disc"): (DiscountRole(USD, group),),
            CurveName.of("USD-3ML"): (DiscountRole(USD, group),),
        },
        curves,
    )

    assert result[group].discount_curve(USD).name == CurveName.of("USD-3ML")


# End to end

def test_single_fra_curve(single_fra_files):
    groups = load(*single_fra_files)

    assert list(groups) == [CurveGroupName.of("G1")]
    group = groups[CurveGroupName.of("G1")]
    assert list(group.forward_curves) == []

    curve = group.discount_curve(USD)
    assert curve.name == CurveName.of("CurveA")
    assert len(curve.nodes) == 1
    node = curve.nodes[0]
    assert isinstance(node, FraCurveNode)
    assert node.label == "3Mx6M"
    assert node.quote_key == QuoteKey(StandardId("OG", "T1"))


def test_nodes_without_settings(single_fra_files, write_csv):
    groups, settings, _ = single_fra_files
    nodes = write_csv("nodes-b.csv", NODES_HEADER + "CurveB,,OG,T2,,OIS,USD-FIXED-1Y-SOFR-OIS,1Y,\n")

    with pytest.raises(MissingCurveSettingsError, match="CurveB"):
        load(groups, settings, nodes)


def test_curve_with_nodes_but_no_role_is_dropped(single_fra_files, write_csv):
    groups, _, nodes = single_fra_files
    settings = write_csv(
        "settings-ab.csv",
        """
Curve Name,Value Type,Day Count,Interpolator,Left Extrapolator,Right Extrapolator
CurveA,zero,Act/365F,Linear,Flat,Flat
CurveB,zero,Act/365F,Linear,Flat,Flat
""",
    )
    extra = write_csv("nodes-b.csv", NODES_HEADER + "CurveB,,OG,T2,,OIS,USD-FIXED-1Y-SOFR-OIS,1Y,\n")

    result = load(groups, settings, [nodes, extra])
    curve_names = {c.name for c in result[CurveGroupName.of("G1")].curve_definitions()}
    assert curve_names == {CurveName.of("CurveA")}


def test_load_sample(data_dir):
    groups = _load_sample(data_dir)
    default = groups[CurveGroupName.of("Default")]

    assert set(default.discount_curves) == {USD, EUR}
    assert set(default.forward_curves) == {USD_FED_FUND, USD_LIBOR_3M, EUR_ESTR, EUR_EURIBOR_3M}
    assert default.discount_curve("USD") is default.forward_curve("USD-FED-FUND")
    assert default.forward_curve(EUR_EURIBOR_3M).parameter_count == 3
    assert len(default.curve_definitions()) == 4


def test_registry_curve_without_nodes_is_absent(data_dir):
    default = _load_sample(data_dir)[CurveGroupName.of("Default")]

    assert default.forward_curve(USD_LIBOR_6M) is None
    assert CurveName.of("USD-6ML") not in {c.name for c in default.curve_definitions()}


def test_split_files_give_same_nodes_in_any_order(data_dir, write_csv):
    lines = (data_dir / "nodes-usd.csv").read_text().splitlines()[1:]
    first = write_csv("part1.csv", NODES_HEADER + "\n".join(lines[::2]) + "\n")
    second = write_csv("part2.csv", NODES_HEADER + "\n".join(lines[1::2]) + "\n")
    eur = data_dir / "nodes-eur.csv"

    whole = _load_sample(data_dir)[CurveGroupName.of("Default")]
    settings = data_dir / "settings.csv"
    groups = data_dir / "groups.csv"
    for files in ([first, second, eur], [eur, second, first]):
        split = load(groups, settings, files)[CurveGroupName.of("Default")]
        for index in (USD_FED_FUND, USD_LIBOR_3M, EUR_ESTR, EUR_EURIBOR_3M):
            assert Counter(split.forward_curve(index).nodes) == Counter(whole.forward_curve(index).nodes)


def test_loading_twice_gives_equal_results(data_dir):
    assert _load_sample(data_dir) == _load_sample(data_dir)


def test_quote_keys(data_dir):
    default = _load_sample(data_dir)[CurveGroupName.of("Default")]
    keys = default.quote_keys()

    assert len(keys) == 14
    assert QuoteKey(StandardId("OG-Ticker", "USD-IRS3M-5Y"), FieldName.of("Bid")) in keys


def test_verbose_logs_curve_summaries(data_dir, caplog):
    with caplog.at_level(logging.INFO, logger="ratescalib"):
        load(
            data_dir / "groups.csv",
            data_dir / "settings.csv",
            [data_dir / "nodes-usd.csv", data_dir / "nodes-eur.csv"],
            LoaderConfig(verbose=True),
        )

    assert "Curve USD-3ML: 5 nodes" in caplog.text
    assert "Loaded 1 curve groups" in caplog.text
