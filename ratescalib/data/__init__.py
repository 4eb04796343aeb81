"""
Loaders for the curve calibration CSV resources.

Main APIs:
---------
    - load: read groups, settings and node files into curve group definitions
    - load_curve_groups / load_curve_settings / load_curve_nodes: single file readers
    - create_curve_node: build one curve node from a nodes file row
    - parse_fra_time / parse_simple_time: 'Time' column grammars
"""

from .base import CsvFile, LoaderConfig, Resource, TabularSource
from .factory import create_curve_node
from .loaders import (
    build_curve_definitions,
    load,
    load_curve_groups,
    load_curve_nodes,
    load_curve_settings,
    map_groups,
)
from .tenors import FRA_TIME_REGEX, SIMPLE_TIME_REGEX, parse_fra_time, parse_simple_time

__all__ = [
    # Reading
    "Resource",
    "LoaderConfig",
    "TabularSource",
    "CsvFile",
    # Grammars
    "FRA_TIME_REGEX",
    "SIMPLE_TIME_REGEX",
    "parse_fra_time",
    "parse_simple_time",
    # Nodes
    "create_curve_node",
    # Loaders
    "load",
    "load_curve_groups",
    "load_curve_settings",
    "load_curve_nodes",
    "build_curve_definitions",
    "map_groups",
]
