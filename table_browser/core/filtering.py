from __future__ import annotations

from typing import List, Sequence, TypeVar

R = TypeVar("R", bound=Sequence[str])

# The search box only forwards a term once it is this long (or cleared)
MIN_SEARCH_LENGTH = 3


def row_matches(row: Sequence[str], search_term: str) -> bool:
    """Case-insensitive substring test against the space-joined row text."""
    if not search_term:
        return True
    return search_term.casefold() in " ".join(row).casefold()


def filter_rows(rows: Sequence[R], search_term: str) -> List[R]:
    """
    Keep the rows matching `search_term`, preserving their relative order.

    The term is matched as given (not trimmed). An empty term keeps every row.
    """
    if not search_term:
        return list(rows)
    needle = search_term.casefold()
    return [row for row in rows if needle in " ".join(row).casefold()]


def should_apply_search(term: str | None) -> bool:
    """
    Whether a term typed into the search box should be forwarded to the
    controller: either cleared, or at least MIN_SEARCH_LENGTH characters.
    """
    if not term:
        return True
    return len(term) >= MIN_SEARCH_LENGTH
