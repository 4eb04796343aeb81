from datetime import date
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def valuation_date():
    # Tuesday, 2024-01-02
    return date(2024, 1, 2)


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(name, text):
        path = tmp_path / name
        path.write_text(text.lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def single_fra_files(write_csv):
    """One group G1 with a USD discount curve CurveA made of one FRA node."""
    groups = write_csv(
        "groups.csv",
        """
Group Name,Curve Type,Reference,Curve Name
G1,discount,USD,CurveA
""",
    )
    settings = write_csv(
        "settings.csv",
        """
Curve Name,Value Type,Day Count,Interpolator,Left Extrapolator,Right Extrapolator
CurveA,zero,Act/365F,Linear,Flat,Flat
""",
    )
    nodes = write_csv(
        "nodes.csv",
        """
Curve Name,Label,Symbology,Ticker,Field Name,Type,Convention,Time,Spread
CurveA,,OG,T1,,FRA,USD-LIBOR-3M,3Mx6M,
""",
    )
    return groups, settings, nodes
