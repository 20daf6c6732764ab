"""
Data table consumed by the chart service.

A table is a list of typed columns and rows of values. Charts built by the
``Chart`` builder use a DATE column for x and a NUMBER column for y.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from openpyxl import load_workbook

from ..exceptions import ChartError
from ..utils.enums import ColumnType

logger = logging.getLogger(__name__)


class DataTable:
    """Typed columns plus rows of values."""

    def __init__(self):
        self.columns: List[Tuple[ColumnType, str]] = []
        self.rows: List[Tuple[Any, ...]] = []

    def add_column(self, column_type: Union[ColumnType, str], label: str = "") -> "DataTable":
        self.columns.append((ColumnType(column_type), label))
        return self

    def add_row(self, *values: Any) -> "DataTable":
        """
        Append one row.

        Raises:
            ChartError: If the row width does not match the column count
        """
        if len(values) != len(self.columns):
            raise ChartError(
                "Row width does not match columns",
                f"expected {len(self.columns)}, got {len(values)}",
            )
        self.rows.append(tuple(values))
        return self

    def labels(self) -> List[str]:
        return [label for _, label in self.columns]

    def column_values(self, index: int) -> List[Any]:
        return [row[index] for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def from_xlsx(cls, path: Union[str, Path], sheet: Optional[str] = None) -> "DataTable":
        """
        Load a date/number series from the first two columns of a worksheet.

        The first row holds the column labels. Rows with an empty cell are skipped.

        Args:
            path: Workbook path
            sheet: Worksheet name (active sheet by default)
        """
        path = Path(path)
        if not path.exists():
            raise ChartError("Workbook not found", str(path))

        workbook = load_workbook(path, read_only=True, data_only=True)
        try:
            worksheet = workbook[sheet] if sheet else workbook.active
            rows = worksheet.iter_rows(min_col=1, max_col=2, values_only=True)
            header = next(rows, None)
            if header is None:
                raise ChartError("Worksheet is empty", str(path))

            table = cls()
            table.add_column(ColumnType.DATE, str(header[0] or ""))
            table.add_column(ColumnType.NUMBER, str(header[1] or ""))
            for x_value, y_value in rows:
                if x_value is None or y_value is None:
                    continue
                if isinstance(x_value, datetime):
                    x_value = x_value.date()
                if not isinstance(x_value, date):
                    raise ChartError("Expected a date in the first column", repr(x_value))
                table.add_row(x_value, float(y_value))
        finally:
            workbook.close()

        logger.debug(f"Loaded {len(table)} rows from {path}")
        return table

    @classmethod
    def from_points(cls, points: Sequence[Tuple[date, float]],
                    x_label: str = "Date", y_label: str = "Value") -> "DataTable":
        table = cls()
        table.add_column(ColumnType.DATE, x_label)
        table.add_column(ColumnType.NUMBER, y_label)
        for x_value, y_value in points:
            table.add_row(x_value, y_value)
        return table
