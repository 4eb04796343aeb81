"""
Parsers for the 'Time' column of the curve nodes file.

Two forms are accepted, both case-insensitive and matched against the whole
trimmed cell:

- FRA times, "3Mx6M", "3 X 6" or "P3MxP6M": months to start and months to end.
- Simple times, "1Y", "18M", "6M1Y", or empty for a zero period.

A leading ISO-8601 'P' is tolerated in both.
"""

import re
from typing import Tuple

from ratescalib.business_calendar.period import Period
from ratescalib.errors import TenorFormatError

# Regex to parse FRA time string
FRA_TIME_REGEX = re.compile(r"P?([0-9]+)M?\s*X\s*P?([0-9]+)M?")
# Regex to parse simple time string
SIMPLE_TIME_REGEX = re.compile(r"P?(?:([0-9]+)M)?(?:([0-9]+)Y)?")


def parse_fra_time(text: str, instrument: str = "FRA") -> Tuple[Period, Period]:
    """Parse a FRA time into (period to start, period to end), both in months."""
    match = FRA_TIME_REGEX.fullmatch(text.strip().upper())
    if match is None:
        raise TenorFormatError(instrument, text)
    return Period.of_months(int(match.group(1))), Period.of_months(int(match.group(2)))


def parse_simple_time(text: str, instrument: str) -> Period:
    """Parse a months-then-years time into a period; empty text is a zero period."""
    match = SIMPLE_TIME_REGEX.fullmatch(text.strip().upper())
    if match is None:
        raise TenorFormatError(instrument, text)
    months, years = match.groups()
    return Period(years=int(years or 0), months=int(months or 0))
