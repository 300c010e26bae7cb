from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from table_browser.core.dataset import Dataset, Row
from table_browser.core.filtering import filter_rows
from table_browser.core.pagination import (
    PageButton,
    build_page_buttons,
    has_next,
    has_previous,
    paginate,
)
from table_browser.core.sorting import sort_indicator, sort_rows
from table_browser.core.table_state import TableState


@dataclass(frozen=True)
class RangeSummary:
    start_range: int
    end_range: int
    total_count: int
    filtered_count: int

    def describe(self, search_term: str = "") -> str:
        """'Showing X to Y of Z entries', noting the unfiltered total while searching."""
        start = 0 if self.filtered_count == 0 else self.start_range
        text = f"Showing {start} to {self.end_range} of {self.filtered_count} entries"
        if search_term.strip():
            text += f" (filtered from {self.total_count} total entries)"
        return text


@dataclass(frozen=True)
class DerivedView:
    """
    Everything a renderer needs for one state of the table.

    Pure function of (TableState, Dataset): recomputed on every transition,
    never edited in place.
    """
    headers: Tuple[str, ...]
    filtered_rows: Tuple[Row, ...]
    sorted_rows: Tuple[Row, ...]
    page_rows: Tuple[Row, ...]
    total_pages: int
    current_page: int
    start_range: int
    end_range: int
    page_buttons: Tuple[PageButton, ...]
    range_summary: RangeSummary
    no_data: bool
    no_matches: bool
    has_previous: bool
    has_next: bool
    sort_column: int | None
    sort_direction: str

    @property
    def visible_rows(self) -> Tuple[Row, ...]:
        return self.page_rows

    def sort_indicator(self, column_index: int) -> str:
        return sort_indicator(self.sort_column, self.sort_direction, column_index)


def derive_view(state: TableState, dataset: Dataset) -> DerivedView:
    """Run Filter -> Sort -> Paginate over the whole dataset."""
    filtered = filter_rows(dataset.rows, state.search_term)
    ordered = sort_rows(filtered, state.sort_column, state.sort_direction)
    page = paginate(ordered, state.page_size, state.current_page)

    summary = RangeSummary(
        start_range=page.start_range,
        end_range=page.end_range,
        total_count=dataset.n_rows,
        filtered_count=len(filtered),
    )

    return DerivedView(
        headers=dataset.headers,
        filtered_rows=tuple(filtered),
        sorted_rows=tuple(ordered),
        page_rows=page.page_rows,
        total_pages=page.total_pages,
        current_page=page.current_page,
        start_range=page.start_range,
        end_range=page.end_range,
        page_buttons=build_page_buttons(page.total_pages, page.current_page),
        range_summary=summary,
        no_data=dataset.is_empty() and state.search_term == "",
        no_matches=not filtered and state.search_term != "",
        has_previous=has_previous(page.current_page),
        has_next=has_next(page.current_page, page.total_pages),
        sort_column=state.sort_column,
        sort_direction=state.sort_direction,
    )
