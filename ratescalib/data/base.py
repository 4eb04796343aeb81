"""
Base abstractions for reading the curve calibration CSV resources.

A resource is a filesystem path or an open text stream. Every cell is read as
text and trimmed, so blank cells come back as empty strings.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Protocol, Union, runtime_checkable

import pandas as pd

from ratescalib.errors import CurveLoadError

Resource = Union[str, Path, IO[str]]


@dataclass
class LoaderConfig:
    """Configuration for reading the CSV resources."""

    delimiter: str = ","
    encoding: str = "utf-8"
    verbose: bool = False


@runtime_checkable
class TabularSource(Protocol):
    """
    Protocol for a header-plus-rows table with named-column lookup.

    The loaders only need a row count and a field lookup by row and header.
    """

    def row_count(self) -> int:
        ...

    def field(self, row: int, header: str) -> str:
        ...


class CsvFile:
    """CSV table read with pandas, all cells as trimmed strings."""

    def __init__(self, frame: pd.DataFrame, source: str = "<memory>"):
        self._frame = frame
        self.source = source

    @classmethod
    def of(cls, resource: Resource, config: LoaderConfig = None) -> "CsvFile":
        """
        Read a CSV resource.

        Args:
            resource: Path to the file or an open text stream
            config: Delimiter and encoding to read with

        Returns:
            CsvFile over the resource rows
        """
        config = config or LoaderConfig()
        frame = pd.read_csv(
            resource,
            sep=config.delimiter,
            encoding=config.encoding,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        ).fillna("")
        frame.columns = [str(column).strip() for column in frame.columns]
        return cls(frame, source=describe_resource(resource))

    @property
    def headers(self) -> List[str]:
        return list(self._frame.columns)

    def row_count(self) -> int:
        return len(self._frame)

    def field(self, row: int, header: str) -> str:
        if header not in self._frame.columns:
            raise CurveLoadError(
                f"Header not found: '{header}' in {self.source}. Headers found: {self.headers}"
            )
        value = self._frame.iat[row, self._frame.columns.get_loc(header)]
        return str(value).strip()


def describe_resource(resource: Resource) -> str:
    """Short human readable name of a resource for log and error messages."""
    if isinstance(resource, (str, Path)):
        return str(resource)
    return getattr(resource, "name", type(resource).__name__)
