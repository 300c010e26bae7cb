from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_browser.config.model import GlobalConfig
from table_browser.ui.ids import IDs


def build_navbar(
    dataset_names: List[str],
    global_config: GlobalConfig,
    default_name: Optional[str],
) -> dbc.Navbar:
    title = global_config.ui_title
    dataset_options = [{"label": name, "value": name} for name in dataset_names]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            "Search, sort and page through tabular data",
                            className="text-muted",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Active Dataset", className="navbar-dataset-title"),
                        dcc.Dropdown(
                            id=IDs.Control.DATASET_SELECT,
                            options=dataset_options,
                            value=default_name,
                            clearable=False,
                            placeholder="Select dataset",
                            className="tb-dataset-dropdown mt-1",
                        ),
                    ],
                    className="ms-auto navbar-dataset-block",
                    style={
                        "minWidth": "280px",
                        "maxWidth": "380px",
                        "marginRight": "24px",
                    },
                ),
            ],
        ),
        dark=False,
        className="shadow-sm tb-navbar",
    )
