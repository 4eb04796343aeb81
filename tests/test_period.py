"""Tests for periods, tenors and identifiers."""

from datetime import date

import pytest

from ratescalib.business_calendar.period import ZERO_PERIOD, Period, Tenor
from ratescalib.conventions.calendars import get_calendar
from ratescalib.conventions.indices import Currency, get_ibor_index, get_rate_index
from ratescalib.schema.ids import CurveName, FieldName, QuoteKey, StandardId


def test_period_text():
    assert str(ZERO_PERIOD) == "P0D"
    assert str(Period(years=1, months=6)) == "P1Y6M"
    assert str(Period.of_months(18)) == "P18M"


def test_period_is_not_normalised():
    period = Period.of_months(18)
    assert period.years == 0
    assert period.total_months() == 18
    assert period != Period(years=1, months=6)


def test_add_period_clips_to_month_end():
    assert Period.of_months(1).add_to(date(2024, 1, 31)) == date(2024, 2, 29)
    assert Period.of_years(1).add_to(date(2024, 2, 29)) == date(2025, 2, 28)


def test_period_addition():
    assert Period.of_years(1) + Period.of_months(3) == Period(years=1, months=3)


def test_tenor():
    assert Tenor.of_months(3).name == "3M"
    assert str(Tenor.of(Period(years=1, months=6))) == "1Y6M"
    with pytest.raises(ValueError):
        Tenor.of(Period.of_months(-1))


def test_identifiers():
    assert CurveName.of(" USD-Disc ") == CurveName("USD-Disc")
    assert str(StandardId("OG-Ticker", "T1")) == "OG-Ticker~T1"
    assert QuoteKey(StandardId("OG", "T1")).field_name == FieldName.MARKET_VALUE
    assert str(FieldName.MARKET_VALUE) == "MarketValue"
    with pytest.raises(ValueError):
        CurveName.of("  ")


def test_currency():
    assert Currency.of("usd") == Currency("USD")
    with pytest.raises(ValueError):
        Currency.of("US")


def test_index_and_calendar_lookup():
    index = get_ibor_index("usd-libor-3m")
    assert index.tenor == Tenor.of_months(3)
    assert get_rate_index("EUR-ESTR").currency == Currency("EUR")
    with pytest.raises(ValueError, match="Unknown Ibor index: EUR-ESTR"):
        get_ibor_index("EUR-ESTR")

    target = get_calendar("target")
    assert target.is_holiday(date(2024, 12, 25))
    assert not target.is_business_day(date(2024, 1, 6))
    assert target.add_business_days(date(2024, 1, 5), 1) == date(2024, 1, 8)
