from __future__ import annotations

import locale
import logging
import unicodedata
from typing import List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Sequence[str])

ASC = "asc"
DESC = "desc"
NONE = "none"

SORT_DIRECTIONS = (ASC, DESC, NONE)

SORT_GLYPHS = {ASC: "↑", DESC: "↓", NONE: ""}


def use_system_collation() -> str:
    """
    Adopt the user's LC_COLLATE from the environment so collation_key follows
    their locale. Python itself starts in the "C" locale.

    Returns the active collation locale name. A locale the C library does not
    know is logged and the current setting is kept.
    """
    try:
        return locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        current = locale.setlocale(locale.LC_COLLATE)
        logger.warning(
            "System collation locale unavailable; keeping current one",
            extra={"error": str(e), "lc_collate": current},
        )
        return current


def _base_letters(value: str) -> str:
    # "Émile" -> "emile": decompose, then drop the combining accents
    decomposed = unicodedata.normalize("NFKD", value.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(value: str) -> Tuple[str, str, str]:
    """
    Locale-aware sort key, compared level by level:

    1. base letters (accents and case removed), so "Émile" sorts with the Es
       even under the "C" locale
    2. case-folded value, so accented forms follow their plain form
    3. raw value, so "amy" and "Amy" still have a deterministic order

    Each level goes through locale.strxfrm and so follows LC_COLLATE.
    """
    return (
        locale.strxfrm(_base_letters(value)),
        locale.strxfrm(value.casefold()),
        locale.strxfrm(value),
    )


def _cell(row: Sequence[str], column_index: int) -> str:
    if 0 <= column_index < len(row):
        return str(row[column_index])
    return ""


def is_active(column_index: Optional[int], direction: Optional[str]) -> bool:
    return column_index is not None and direction in (ASC, DESC)


def sort_rows(
    rows: Sequence[R],
    column_index: Optional[int],
    direction: Optional[str],
) -> List[R]:
    """
    Return a new list of `rows` ordered by the cell at `column_index`.

    - direction None/"none" (or no column) keeps the input order
    - "desc" is the exact reverse of "asc"; equal keys keep their input order
      in both directions
    - a missing cell compares as ""

    The input sequence is never mutated.
    """
    if not is_active(column_index, direction):
        return list(rows)

    # sorted() is stable, and stays stable with reverse=True
    return sorted(
        rows,
        key=lambda row: collation_key(_cell(row, column_index)),
        reverse=direction == DESC,
    )


def next_sort(
    current_column: Optional[int],
    current_direction: Optional[str],
    column_index: int,
) -> Tuple[int, str]:
    """
    Header-click toggle: the active column flips asc <-> desc, any other
    column becomes the active one, ascending.
    """
    if column_index == current_column:
        return column_index, DESC if current_direction == ASC else ASC
    return column_index, ASC


def sort_indicator(
    current_column: Optional[int],
    current_direction: Optional[str],
    column_index: int,
) -> str:
    """Direction to show on a column header: "asc", "desc" or "none"."""
    if column_index == current_column and current_direction in (ASC, DESC):
        return current_direction
    return NONE
