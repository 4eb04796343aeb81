"""
Period and tenor value types.

A Period keeps its years, months and days exactly as written, so "18M" stays
18 months rather than being normalised to 1 year 6 months.
"""

from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class Period:
    """A date-based amount of time in years, months and days."""

    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def of_years(cls, years: int) -> "Period":
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> "Period":
        return cls(months=months)

    @classmethod
    def of_days(cls, days: int) -> "Period":
        return cls(days=days)

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def total_months(self) -> int:
        """Years and months expressed in months, ignoring days."""
        return self.years * 12 + self.months

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(years=self.years, months=self.months, days=self.days)

    def add_to(self, start: date) -> date:
        """Add the period to a date, clipping to month end where needed."""
        return start + self.to_relativedelta()

    def __add__(self, other: "Period") -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            self.years + other.years,
            self.months + other.months,
            self.days + other.days,
        )

    def __str__(self) -> str:
        if self.is_zero:
            return "P0D"
        text = "P"
        if self.years:
            text += f"{self.years}Y"
        if self.months:
            text += f"{self.months}M"
        if self.days:
            text += f"{self.days}D"
        return text


ZERO_PERIOD = Period()


@dataclass(frozen=True)
class Tenor:
    """A non-negative period used to describe an instrument's length."""

    period: Period

    def __post_init__(self):
        if self.period.is_negative:
            raise ValueError(f"Tenor period must not be negative: {self.period}")

    @classmethod
    def of(cls, period: Period) -> "Tenor":
        return cls(period)

    @classmethod
    def of_months(cls, months: int) -> "Tenor":
        return cls(Period.of_months(months))

    @classmethod
    def of_years(cls, years: int) -> "Tenor":
        return cls(Period.of_years(years))

    @property
    def name(self) -> str:
        """Market style name, e.g. '3M', '10Y' or '1Y6M'."""
        return str(self.period)[1:]

    def __str__(self) -> str:
        return self.name
