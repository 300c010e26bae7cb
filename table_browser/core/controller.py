from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from table_browser.core.dataset import Dataset
from table_browser.core.pagination import clamp_page
from table_browser.core.sorting import ASC, NONE, next_sort
from table_browser.core.table_state import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, TableState
from table_browser.core.view import DerivedView, derive_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerOptions:
    """
    Behavioural switches for TableController.

    - reset_page_on_search: go back to page 1 whenever the search term changes.
      When False the old page is kept and clamped into the new range.
    - default_sort_column: column sorted ascending on the initial state, or
      None to start in the dataset's natural order.
    - default_page_size: initial page size, one of PAGE_SIZE_OPTIONS.
    """
    reset_page_on_search: bool = True
    default_sort_column: Optional[int] = None
    default_page_size: int = DEFAULT_PAGE_SIZE


class TableController:
    """
    Owns the interaction state of one table and keeps its derived view in step.

    Every transition builds a new immutable TableState, recomputes the
    DerivedView from it and swaps both in under a single lock, so readers
    always see a state and a view that belong together.
    """

    def __init__(self, dataset: Dataset, options: Optional[ControllerOptions] = None) -> None:
        self.options = options or ControllerOptions()
        self._lock = threading.Lock()
        self._dataset = dataset
        self._state = self.initial_state(dataset, self.options)
        self._view = derive_view(self._state, dataset)

    @classmethod
    def from_state(
        cls,
        dataset: Dataset,
        state: TableState,
        options: Optional[ControllerOptions] = None,
    ) -> TableController:
        """Resume a controller from a previously stored state (e.g. a dcc.Store)."""
        controller = cls(dataset, options)
        with controller._lock:
            if state.sort_column is not None and not dataset.has_column(state.sort_column):
                state = state.evolve(sort_column=None, sort_direction=NONE)
            controller._commit(state)
        return controller

    @staticmethod
    def initial_state(dataset: Dataset, options: ControllerOptions) -> TableState:
        sort_column = options.default_sort_column
        if sort_column is not None and not dataset.has_column(sort_column):
            logger.warning(
                "Default sort column out of range; starting unsorted",
                extra={"dataset": dataset.name, "sort_column": sort_column},
            )
            sort_column = None
        return TableState(
            sort_column=sort_column,
            sort_direction=ASC if sort_column is not None else NONE,
            page_size=options.default_page_size,
        )

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------
    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def state(self) -> TableState:
        return self._state

    @property
    def view(self) -> DerivedView:
        return self._view

    def snapshot(self) -> Tuple[TableState, DerivedView]:
        """State and view read together, never straddling a transition."""
        with self._lock:
            return self._state, self._view

    def sort_indicator(self, column_index: int) -> str:
        return self._view.sort_indicator(column_index)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------
    def _commit(self, state: TableState, dataset: Optional[Dataset] = None) -> DerivedView:
        # Caller holds the lock
        if dataset is not None:
            self._dataset = dataset
        view = derive_view(state, self._dataset)
        if view.current_page != state.current_page:
            state = state.evolve(current_page=view.current_page)
        self._state = state
        self._view = view
        logger.debug(
            "Table view recomputed",
            extra={
                "dataset": self._dataset.name,
                "state": state.to_dict(),
                "filtered_count": len(view.filtered_rows),
                "total_pages": view.total_pages,
            },
        )
        return view

    def set_search_term(self, term: str) -> DerivedView:
        term = term or ""
        with self._lock:
            changes = {"search_term": term}
            if self.options.reset_page_on_search and term != self._state.search_term:
                changes["current_page"] = 1
            return self._commit(self._state.evolve(**changes))

    def set_sort(self, column_index: int) -> DerivedView:
        with self._lock:
            column, direction = next_sort(
                self._state.sort_column, self._state.sort_direction, column_index
            )
            return self._commit(self._state.evolve(sort_column=column, sort_direction=direction))

    def set_page_size(self, size: int) -> DerivedView:
        if size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page size must be one of {PAGE_SIZE_OPTIONS}, got {size}")
        with self._lock:
            return self._commit(self._state.evolve(page_size=size, current_page=1))

    def go_to_page(self, page: int) -> DerivedView:
        with self._lock:
            target = clamp_page(page, self._view.total_pages)
            return self._commit(self._state.evolve(current_page=target))

    def next_page(self) -> DerivedView:
        with self._lock:
            target = clamp_page(self._state.current_page + 1, self._view.total_pages)
            return self._commit(self._state.evolve(current_page=target))

    def previous_page(self) -> DerivedView:
        with self._lock:
            target = clamp_page(self._state.current_page - 1, self._view.total_pages)
            return self._commit(self._state.evolve(current_page=target))

    def set_dataset(self, dataset: Dataset) -> DerivedView:
        """
        Swap in a new dataset. The page goes back to 1; search, sort and page
        size carry over unless the sort column no longer exists.
        """
        with self._lock:
            state = self._state.evolve(current_page=1)
            if state.sort_column is not None and not dataset.has_column(state.sort_column):
                state = state.evolve(sort_column=None, sort_direction=NONE)
            logger.info(
                "Dataset replaced",
                extra={"dataset": dataset.name, "n_rows": dataset.n_rows},
            )
            return self._commit(state, dataset=dataset)
