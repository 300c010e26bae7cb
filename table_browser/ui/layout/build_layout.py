from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from table_browser.ui.ids import IDs
from table_browser.ui.layout.build_navbar import build_navbar
from table_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from table_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.dataset_names, ctx.global_config, ctx.default_dataset_name)
    table_panel = build_table_panel(
        ctx.global_config.ui_title,
        default_page_size=ctx.global_config.default_page_size,
    )

    return dbc.Container(
        fluid=True,
        className="tb-root",
        children=[
            navbar,

            # Interaction state for the active table
            dcc.Store(id=IDs.Store.TABLE_STATE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(table_panel, md=12),
                ],
                className="gx-3",
            ),
        ],
    )
