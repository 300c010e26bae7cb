from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from table_browser.core.pagination import PageButton
from table_browser.core.sorting import SORT_GLYPHS
from table_browser.core.table_state import PAGE_SIZE_OPTIONS
from table_browser.core.view import DerivedView
from table_browser.ui.ids import page_button_id, sort_header_id

NO_DATA_TEXT = "No data available in table"
NO_MATCHES_TEXT = "No matching records found"


def page_size_options() -> List[dict]:
    return [{"label": str(size), "value": size} for size in PAGE_SIZE_OPTIONS]


def render_header_cells(view: DerivedView) -> List[html.Th]:
    cells = []
    for idx, header in enumerate(view.headers):
        direction = view.sort_indicator(idx)
        cells.append(
            html.Th(
                html.Div(
                    [
                        html.Span(header),
                        html.Span(SORT_GLYPHS[direction], className=f"sort-icon {direction}"),
                    ],
                    id=sort_header_id(idx),
                    n_clicks=0,
                    className="d-flex justify-content-between align-items-center tb-sort-header",
                    style={"cursor": "pointer"},
                ),
            )
        )
    return cells


def render_body_rows(view: DerivedView) -> List[html.Tr]:
    n_cols = max(1, len(view.headers))

    if view.no_data:
        return [html.Tr(html.Td(NO_DATA_TEXT, colSpan=n_cols, className="text-muted"))]
    if view.no_matches:
        return [html.Tr(html.Td(NO_MATCHES_TEXT, colSpan=n_cols, className="text-muted"))]

    return [html.Tr([html.Td(cell) for cell in row]) for row in view.visible_rows]


def render_table(view: DerivedView) -> dbc.Table:
    """
    Build the table for the current page, with clickable sort headers.
    """
    return dbc.Table(
        [
            html.Thead(html.Tr(render_header_cells(view))),
            html.Tbody(render_body_rows(view)),
        ],
        bordered=True,
        hover=True,
        size="sm",
        className="tb-table",
    )


def _render_page_button(button: PageButton):
    if button.is_ellipsis:
        return html.Span("...", className="pagination-ellipsis px-2")
    return dbc.Button(
        str(button.page_number),
        id=page_button_id(button.page_number),
        n_clicks=0,
        disabled=button.is_current,
        color="primary",
        outline=not button.is_current,
        size="sm",
        className="mx-1",
    )


def render_page_buttons(view: DerivedView) -> list:
    return [_render_page_button(b) for b in view.page_buttons]


def render_table_info(view: DerivedView, search_term: str) -> str:
    return view.range_summary.describe(search_term)
