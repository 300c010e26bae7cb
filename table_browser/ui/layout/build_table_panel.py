from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_browser.core.table_state import DEFAULT_PAGE_SIZE
from table_browser.ui.helpers import page_size_options
from table_browser.ui.ids import IDs


def build_table_panel(title: str, default_page_size: int = DEFAULT_PAGE_SIZE) -> dbc.Card:
    """
    Table page:

    - Title bar (hidden when the dataset sets show_header=false)
    - "Show N entries" selector + search box
    - Table body, range info line, pagination controls
    """
    toolbar = dbc.Row(
        [
            dbc.Col(
                html.Div(
                    [
                        html.Span("Show", className="me-2"),
                        dcc.Dropdown(
                            id=IDs.Control.PAGE_SIZE_SELECT,
                            options=page_size_options(),
                            value=default_page_size,
                            clearable=False,
                            style={"width": "90px"},
                        ),
                        html.Span("entries", className="ms-2"),
                    ],
                    className="d-flex align-items-center",
                ),
                md=6,
            ),
            dbc.Col(
                html.Div(
                    [
                        html.Span("Search:", className="me-2"),
                        dcc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            type="text",
                            value="",
                            debounce=False,
                            className="form-control form-control-sm",
                            style={"maxWidth": "260px"},
                        ),
                    ],
                    className="d-flex align-items-center justify-content-end",
                ),
                md=6,
            ),
        ],
        className="mb-2",
    )

    pagination = html.Div(
        [
            dbc.Button("Previous", id=IDs.Control.PREV_PAGE_BTN, n_clicks=0, size="sm", className="mx-1"),
            html.Span(id=IDs.Control.PAGINATION_BAR),
            dbc.Button("Next", id=IDs.Control.NEXT_PAGE_BTN, n_clicks=0, size="sm", className="mx-1"),
        ],
        className="pagination-controls mt-3",
    )

    return dbc.Card(
        [
            dbc.CardHeader(html.H4(title, className="mb-0"), id=IDs.Control.TABLE_HEADER_BAR),
            dbc.CardBody(
                [
                    toolbar,
                    html.Div(id=IDs.Control.TABLE_CONTAINER),
                    html.Div(id=IDs.Control.TABLE_INFO, className="text-muted small"),
                    pagination,
                ],
                className="p-3",
            ),
        ],
        className="mt-3",
    )
