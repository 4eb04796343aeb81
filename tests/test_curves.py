"""Tests for curve nodes, definitions and groups."""

import math
from datetime import date

import pytest

from ratescalib.conventions.daycount import ACT_365F
from ratescalib.conventions.indices import EUR, USD, USD_LIBOR_3M
from ratescalib.curves.definition import CurveSettings
from ratescalib.curves.group import CurveGroupDefinitionBuilder
from ratescalib.data.factory import create_curve_node
from ratescalib.interpolation.factory import CurveExtrapolator, CurveInterpolator
from ratescalib.schema.enums import ValueType
from ratescalib.schema.ids import CurveGroupName, CurveName, QuoteKey, StandardId

ZERO_LINEAR = CurveSettings(
    value_type=ValueType.ZERO_RATE,
    day_count=ACT_365F,
    interpolator=CurveInterpolator.LINEAR,
    left_extrapolator=CurveExtrapolator.FLAT,
    right_extrapolator=CurveExtrapolator.FLAT,
)


def _node(type_code, convention, time, ticker="T"):
    return create_curve_node(type_code, convention, time, "", QuoteKey(StandardId("OG", ticker)), 0.0)


def _definition(name, nodes, settings=ZERO_LINEAR):
    return settings.create_curve_definition(CurveName.of(name), nodes)


# Node dates

def test_fixing_deposit_date(valuation_date):
    # spot 2024-01-04 on TARGET, plus 3M
    node = _node("FIX", "EUR-EURIBOR-3M", "")
    assert node.date(valuation_date) == date(2024, 4, 4)


def test_fra_date_uses_period_to_end(valuation_date):
    node = _node("FRA", "EUR-EURIBOR-3M", "3Mx6M")
    assert node.template.start_date(valuation_date) == date(2024, 4, 4)
    assert node.date(valuation_date) == date(2024, 7, 4)


def test_swap_date_rolls_forward_off_weekend(valuation_date):
    # 2025-01-04 is a Saturday
    node = _node("OIS", "EUR-FIXED-1Y-ESTR-OIS", "1Y")
    assert node.date(valuation_date) == date(2025, 1, 6)


def test_modified_following_stays_in_month():
    # spot 2024-05-31, plus 1M is Sunday 2024-06-30; following would cross into July
    node = _node("FIX", "EUR-EURIBOR-1M", "")
    assert node.date(date(2024, 5, 29)) == date(2024, 6, 28)


def test_same_day_spot_for_gbp(valuation_date):
    node = _node("FIX", "GBP-LIBOR-3M", "")
    assert node.date(valuation_date) == date(2024, 4, 2)


# Definitions

def test_definition_quote_keys_and_parameter_count():
    definition = _definition(
        "CurveA",
        [_node("FIX", "USD-LIBOR-3M", "", "A"), _node("IRS", "USD-FIXED-6M-LIBOR-3M", "2Y", "B")],
    )
    assert definition.parameter_count == 2
    assert definition.quote_keys() == frozenset(
        [QuoteKey(StandardId("OG", "A")), QuoteKey(StandardId("OG", "B"))]
    )


def test_curve_reproduces_parameters_at_node_dates(valuation_date):
    definition = _definition(
        "EUR-3ME",
        [
            _node("FIX", "EUR-EURIBOR-3M", "", "A"),
            _node("IRS", "EUR-FIXED-1Y-EURIBOR-3M", "2Y", "B"),
            _node("IRS", "EUR-FIXED-1Y-EURIBOR-3M", "5Y", "C"),
        ],
    )
    parameters = [0.031, 0.027, 0.025]

    curve = definition.curve(valuation_date, parameters)

    for node_date, value in zip(definition.node_dates(valuation_date), parameters):
        x = ACT_365F.year_fraction(valuation_date, node_date)
        assert curve.y_value(x) == pytest.approx(value)
    # flat beyond the last node
    assert curve.y_value(30.0) == pytest.approx(0.025)
    assert curve.discount_factor(1.0) < 1.0


def test_curve_requires_one_parameter_per_node(valuation_date):
    definition = _definition(
        "CurveA", [_node("FIX", "USD-LIBOR-3M", "", "A"), _node("IRS", "USD-FIXED-6M-LIBOR-3M", "2Y", "B")]
    )
    with pytest.raises(ValueError, match="expects 2 parameters, got 3"):
        definition.curve(valuation_date, [0.01, 0.02, 0.03])


def test_discount_factor_curve(valuation_date):
    settings = CurveSettings(
        value_type=ValueType.DISCOUNT_FACTOR,
        day_count=ACT_365F,
        interpolator=CurveInterpolator.LOG_LINEAR,
        left_extrapolator=CurveExtrapolator.FLAT,
        right_extrapolator=CurveExtrapolator.INTERPOLATOR,
    )
    definition = _definition(
        "EUR-Disc",
        [_node("OIS", "EUR-FIXED-1Y-ESTR-OIS", "1Y", "A"), _node("OIS", "EUR-FIXED-1Y-ESTR-OIS", "5Y", "B")],
        settings,
    )
    curve = definition.curve(valuation_date, [0.97, 0.85])

    x1, x5 = curve.x_values
    assert curve.discount_factor(x1) == pytest.approx(0.97)
    assert curve.zero_rate(x5) == pytest.approx(-math.log(0.85) / x5)


# Groups

def test_group_builder_last_curve_wins():
    first = _definition("First", [_node("FIX", "USD-LIBOR-3M", "")])
    second = _definition("Second", [_node("FIX", "USD-LIBOR-3M", "")])

    group = (
        CurveGroupDefinitionBuilder(CurveGroupName.of("G"))
        .add_discount_curve(first, USD)
        .add_discount_curve(second, USD)
        .add_forward_curve(first, USD_LIBOR_3M)
        .build()
    )

    assert group.discount_curve(USD) is second
    assert group.forward_curve("USD-LIBOR-3M") is first
    assert group.discount_curve(EUR) is None
    assert [c.name.name for c in group.curve_definitions()] == ["Second", "First"]


def test_group_maps_are_read_only():
    group = CurveGroupDefinitionBuilder(CurveGroupName.of("G")).build()
    with pytest.raises(TypeError):
        group.discount_curves[USD] = None
