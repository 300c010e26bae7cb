from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

R = TypeVar("R")

PAGE_NEIGHBORS = 1
FIRST_PAGE = 1

PAGE = "page"
ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class PageSlice(Generic[R]):
    """
    One page cut out of the ordered rows.

    - page_rows: rows on the current page (shorter than page_size on the last page)
    - current_page: the page actually shown, after clamping
    - start_range / end_range: 1-based row numbers for "Showing X to Y"
    """
    page_rows: Tuple[R, ...]
    total_pages: int
    current_page: int
    start_range: int
    end_range: int


@dataclass(frozen=True)
class PageButton:
    kind: str
    page_number: Optional[int] = None
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.kind == ELLIPSIS

    @property
    def is_activating(self) -> bool:
        return self.kind == PAGE and not self.is_current


def total_pages_for(n_rows: int, page_size: int) -> int:
    """0 pages for no rows, otherwise ceil(n_rows / page_size)."""
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")
    if n_rows <= 0:
        return 0
    return math.ceil(n_rows / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, FIRST_PAGE), max(FIRST_PAGE, total_pages))


def paginate(rows: Sequence[R], page_size: int, current_page: int) -> PageSlice[R]:
    total_pages = total_pages_for(len(rows), page_size)
    page = clamp_page(current_page, total_pages)

    start = (page - 1) * page_size
    end = page * page_size
    page_rows = tuple(rows[start:end])

    return PageSlice(
        page_rows=page_rows,
        total_pages=total_pages,
        current_page=page,
        start_range=start + 1 if rows else 0,
        end_range=min(end, len(rows)),
    )


def build_page_buttons(
    total_pages: int,
    current_page: int,
    neighbors: int = PAGE_NEIGHBORS,
) -> Tuple[PageButton, ...]:
    """
    Page-button layout for the pagination bar.

    First and last page are always shown, as is every page within
    `neighbors` of the current one. The slot right after the first page and
    the slot right before the last page turn into an ellipsis when they are
    not shown as a page; any other hidden page is dropped.
    """
    buttons: List[PageButton] = []
    for page in range(FIRST_PAGE, total_pages + 1):
        if (
            page == FIRST_PAGE
            or page == total_pages
            or current_page - neighbors <= page <= current_page + neighbors
        ):
            buttons.append(PageButton(kind=PAGE, page_number=page, is_current=page == current_page))
        elif page == FIRST_PAGE + 1 or page == total_pages - 1:
            buttons.append(PageButton(kind=ELLIPSIS))
    return tuple(buttons)


def has_previous(current_page: int) -> bool:
    return current_page > FIRST_PAGE


def has_next(current_page: int, total_pages: int) -> bool:
    return current_page < total_pages
