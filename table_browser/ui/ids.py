from __future__ import annotations

__all__ = ["IDs", "sort_header_id", "page_button_id"]


class IDs:
    class Store:
        TABLE_STATE = "table-state"

    class Control:
        # Core selectors
        DATASET_SELECT = "dataset-select"

        # Table toolbar
        PAGE_SIZE_SELECT = "page-size-select"
        SEARCH_INPUT = "search-input"

        # Table body + info
        TABLE_HEADER_BAR = "table-header-bar"
        TABLE_CONTAINER = "table-container"
        TABLE_INFO = "table-info"

        # Pagination
        PAGINATION_BAR = "pagination-bar"
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "sort-header"
        PAGE_BUTTON = "page-button"


def sort_header_id(column_index: int) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": column_index}


def page_button_id(page_number: int) -> dict:
    return {"type": IDs.Pattern.PAGE_BUTTON, "index": page_number}
