from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from table_browser.core.sorting import NONE, SORT_DIRECTIONS

PAGE_SIZE_OPTIONS = (10, 25, 50, 100)
DEFAULT_PAGE_SIZE = PAGE_SIZE_OPTIONS[0]


@dataclass(frozen=True)
class TableState:
    """
    Represents the current user interaction with a table.

    Fields:

    - search_term: Text typed into the search box, matched case-insensitively.
    - sort_column: Index of the active sort column, or None for no sort.
    - sort_direction: "asc", "desc" or "none".
    - page_size: Rows per page, one of PAGE_SIZE_OPTIONS.
    - current_page: 1-based page number.

    Instances are immutable; transitions build a new state with `evolve`.
    """

    search_term: str = ""
    sort_column: Optional[int] = None
    sort_direction: str = NONE
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.sort_direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction {self.sort_direction!r}")
        if self.page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(
                f"page_size must be one of {PAGE_SIZE_OPTIONS}, got {self.page_size}"
            )

    def evolve(self, **changes: Any) -> TableState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> TableState:
        data = data or {}
        sort_column = data.get("sort_column")
        return cls(
            search_term=str(data.get("search_term") or ""),
            sort_column=int(sort_column) if sort_column is not None else None,
            sort_direction=data.get("sort_direction", NONE) or NONE,
            page_size=int(data.get("page_size", DEFAULT_PAGE_SIZE)),
            current_page=max(1, int(data.get("current_page", 1))),
        )
