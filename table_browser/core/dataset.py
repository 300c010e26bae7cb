from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

import pandas as pd

from table_browser.core.exceptions import DatasetSchemaError, ShapeMismatchError

Row = Tuple[str, ...]


class Dataset:
    """
    Immutable rectangular table used throughout the browser.

    Includes:
    - Ordered headers (column names, order-significant)
    - Ordered rows of string cells, one cell per header
    - Shape validation at construction time

    Row order as provided is the natural (unsorted) order. Rows are stored as
    tuples so nothing downstream can reorder or edit them in place.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
        name: str = "Dataset",
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.file_path = file_path
        self._headers: Tuple[str, ...] = tuple(str(h) for h in headers)
        self._rows: Tuple[Row, ...] = self._validate_rows(rows)

    def _validate_rows(self, rows: Iterable[Sequence[str]]) -> Tuple[Row, ...]:
        expected = len(self._headers)
        validated = []
        for idx, row in enumerate(rows):
            if isinstance(row, str):
                raise DatasetSchemaError(f"Row {idx} is a plain string, expected a sequence of cells")
            cells = tuple(row)
            if len(cells) != expected:
                raise ShapeMismatchError(idx, expected, len(cells))
            for col, cell in enumerate(cells):
                if not isinstance(cell, str):
                    raise DatasetSchemaError(
                        f"Row {idx}, column {col}: cell is {type(cell).__name__}, expected str"
                    )
            validated.append(cells)
        return tuple(validated)

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------
    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        name: str = "Dataset",
        file_path: Optional[Path] = None,
    ) -> Dataset:
        """
        Build a Dataset from a DataFrame. Every cell is converted to str;
        missing values become empty strings.
        """
        headers = [str(c) for c in df.columns]
        frame = df.astype(object).where(pd.notna(df), "")
        rows = [tuple(str(v) for v in rec) for rec in frame.itertuples(index=False, name=None)]
        return cls(headers, rows, name=name, file_path=file_path)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def headers(self) -> Tuple[str, ...]:
        return self._headers

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_columns(self) -> int:
        return len(self._headers)

    def is_empty(self) -> bool:
        return not self._rows

    def row(self, index: int) -> Row:
        return self._rows[index]

    def column(self, index: int) -> Tuple[str, ...]:
        if not 0 <= index < len(self._headers):
            raise IndexError(f"Column index {index} out of range for {len(self._headers)} columns")
        return tuple(r[index] for r in self._rows)

    def has_column(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._headers)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self._rows), columns=list(self._headers))

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_rows={self.n_rows}, n_columns={self.n_columns})"
