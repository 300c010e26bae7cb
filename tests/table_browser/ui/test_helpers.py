from __future__ import annotations

from table_browser.core.dataset import Dataset
from table_browser.core.sorting import ASC
from table_browser.core.table_state import TableState
from table_browser.core.view import derive_view
from table_browser.ui.helpers import (
    NO_DATA_TEXT,
    NO_MATCHES_TEXT,
    page_size_options,
    render_body_rows,
    render_header_cells,
    render_page_buttons,
    render_table_info,
)


def _make_dataset():
    return Dataset(
        headers=["Name", "Age"],
        rows=[["Bob", "30"], ["Amy", "25"], ["Cid", "40"]],
    )


def test_page_size_options():
    assert [o["value"] for o in page_size_options()] == [10, 25, 50, 100]


def test_header_cells_show_sort_glyph():
    view = derive_view(TableState(sort_column=1, sort_direction=ASC), _make_dataset())

    cells = render_header_cells(view)

    assert len(cells) == 2
    name_glyph = cells[0].children.children[1].children
    age_glyph = cells[1].children.children[1].children
    assert name_glyph == ""
    assert age_glyph == "↑"


def test_body_rows_render_visible_rows():
    view = derive_view(TableState(), _make_dataset())

    rows = render_body_rows(view)

    assert len(rows) == 3
    assert [td.children for td in rows[0].children] == ["Bob", "30"]


def test_body_rows_empty_messages():
    no_data = derive_view(TableState(), Dataset(["Name", "Age"], []))
    no_matches = derive_view(TableState(search_term="zzz"), _make_dataset())

    assert render_body_rows(no_data)[0].children.children == NO_DATA_TEXT
    assert render_body_rows(no_matches)[0].children.children == NO_MATCHES_TEXT


def test_page_buttons_render_ellipsis_and_disable_current():
    ds = Dataset(["n"], [[str(i)] for i in range(95)])
    view = derive_view(TableState(current_page=5), ds)

    rendered = render_page_buttons(view)

    assert len(rendered) == 7
    assert rendered[1].children == "..."
    current = rendered[3]
    assert current.children == "5"
    assert current.disabled is True
    assert rendered[2].disabled is False


def test_table_info_line():
    view = derive_view(TableState(search_term="am"), _make_dataset())

    assert render_table_info(view, "am") == (
        "Showing 1 to 1 of 1 entries (filtered from 3 total entries)"
    )
