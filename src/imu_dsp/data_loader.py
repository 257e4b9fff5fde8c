"""CSV loading utilities for IMU channel data."""

import polars as pl
import numpy as np
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Iterable, Optional


@dataclass
class ColumnData:
    """Values extracted from one CSV column."""
    column: int
    values: np.ndarray
    total_rows: int

    def __len__(self) -> int:
        return len(self.values)


class CsvColumnReader:
    """Extracts numeric columns from header-less IMU CSV files."""

    def __init__(self, path: Path, max_data_size: int = 100000, skip_rows: int = 0):
        """
        Initialize the reader.

        Args:
            path: CSV file to read
            max_data_size: Maximum number of values returned per column
            skip_rows: Number of leading rows to ignore (e.g. a header line)

        Raises:
            ValueError: If max_data_size or skip_rows is negative
        """
        if max_data_size < 0:
            raise ValueError(f"max_data_size must not be negative, got {max_data_size}")
        if skip_rows < 0:
            raise ValueError(f"skip_rows must not be negative, got {skip_rows}")

        self.path = Path(path)
        self.max_data_size = max_data_size
        self.skip_rows = skip_rows

    def _read_rows(self) -> pl.Series:
        """
        Read every line as a list of its comma-separated text fields.

        Lines are loaded whole (one field per line) and split afterwards, so
        each row keeps its own width regardless of the first row.

        Raises:
            FileNotFoundError: If the CSV file doesn't exist
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Unable to open file {self.path}")

        try:
            lines = pl.read_csv(
                self.path,
                has_header=False,
                separator="\x1f",
                quote_char=None,
                skip_rows=self.skip_rows,
                infer_schema_length=0,
            )
        except pl.exceptions.NoDataError:
            return pl.Series("fields", [], dtype=pl.List(pl.String))

        return lines.to_series(0).str.split(",")

    def _extract(self, rows: pl.Series, column: int) -> ColumnData:
        """
        Convert one field position to float64 values, capped at max_data_size.

        Rows too short to reach the column are skipped. Fields that aren't
        numbers read as 0.0, and so do empty fields: `a,,b` has three fields
        and column 2 is `b`. C's strtok would merge the two commas and put
        `b` in column 1 instead.
        """
        if column < 0:
            return ColumnData(column=column, values=np.array([], dtype=np.float64), total_rows=rows.len())

        values = (
            rows.list.get(column, null_on_oob=True)
            .drop_nulls()
            .str.strip_chars()
            .cast(pl.Float64, strict=False)
            .fill_null(0.0)
            .head(self.max_data_size)
            .to_numpy()
        )

        return ColumnData(column=column, values=values.astype(np.float64), total_rows=rows.len())

    def read_column(self, column: int) -> ColumnData:
        """
        Read a single column.

        Args:
            column: Zero-based column index

        Returns:
            ColumnData with the parsed values and the number of rows in the file

        Raises:
            FileNotFoundError: If the CSV file doesn't exist
        """
        return self._extract(self._read_rows(), column)

    def read_columns(self, columns: Optional[Iterable[int]] = None) -> Dict[int, ColumnData]:
        """
        Read several columns from a single pass over the file.

        Args:
            columns: Zero-based column indices, or None for every column
                up to the widest row

        Returns:
            Dictionary of column index -> ColumnData
        """
        rows = self._read_rows()
        if columns is None:
            columns = range(rows.list.len().max() or 0)
        return {column: self._extract(rows, column) for column in columns}
