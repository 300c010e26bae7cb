from __future__ import annotations


class TableBrowserError(Exception):
    """Base exception for all table_browser errors"""
    pass


class ConfigError(TableBrowserError):
    """Invalid or inconsistent global.json or dataset config"""
    pass


class DatasetSchemaError(TableBrowserError):
    """
    Tabular data doesn't match what Dataset expects:
    missing headers, ragged rows, non-string cells, etc
    """
    pass


class ShapeMismatchError(DatasetSchemaError):
    """A row's cell count differs from the number of headers"""

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} has {actual} cells, expected {expected} (one per header)"
        )


class DatasetLoadError(TableBrowserError):
    """A configured dataset file could not be read"""
    pass
