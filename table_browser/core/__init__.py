"""
Core domain layer: dataset abstraction, table state, the filter/sort/paginate
pipeline and the state controller that drives it
"""

from .controller import ControllerOptions, TableController
from .dataset import Dataset
from .table_state import PAGE_SIZE_OPTIONS, TableState
from .view import DerivedView, RangeSummary, derive_view

__all__ = [
    "ControllerOptions",
    "Dataset",
    "DerivedView",
    "PAGE_SIZE_OPTIONS",
    "RangeSummary",
    "TableController",
    "TableState",
    "derive_view",
]
