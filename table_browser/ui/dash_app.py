from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from table_browser.config.loader import load_dataset_registry
from table_browser.services.dataset_service import DatasetManager
from table_browser.ui.callbacks.callbacks_table import register_table_callbacks
from table_browser.ui.config import AppConfig
from table_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def _choose_default_dataset(dataset_names: list[str], preferred: Optional[str]) -> Optional[str]:
    if not dataset_names:
        return None
    if preferred in dataset_names:
        return preferred
    if preferred:
        logger.warning(
            "Configured default dataset not found; falling back to first dataset",
            extra={"default_dataset": preferred},
        )
    return dataset_names[0]


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_name = load_dataset_registry(config_root)

    # 2) Service Layer (datasets are read lazily on first use)
    dataset_manager = DatasetManager(cfg_by_name)
    dataset_names = sorted(cfg_by_name.keys())

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset_names=dataset_names,
        dataset_by_name=dataset_manager,
        config_by_name=cfg_by_name,
        default_dataset_name=_choose_default_dataset(dataset_names, global_config.default_dataset),
    )
    ctx.validate()

    logger.info(
        "Starting table browser",
        extra={"config_root": str(config_root), "datasets": dataset_names},
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_table_callbacks(app, ctx)

    return app
