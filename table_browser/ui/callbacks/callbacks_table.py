from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
from dash import ALL, Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from table_browser.core.controller import TableController
from table_browser.core.filtering import should_apply_search
from table_browser.core.table_state import TableState
from table_browser.ui.callbacks.callbacks_utils import try_parse_table_state
from table_browser.ui.helpers import render_page_buttons, render_table, render_table_info
from table_browser.ui.ids import IDs

if TYPE_CHECKING:
    from table_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_table_event(controller: TableController, trigger: Any, value: Any) -> bool:
    """
    Apply one UI event to the controller.

    `trigger` is a Dash triggered id (a plain string or a pattern-matching
    dict) and `value` the property value that fired. Returns False when the
    event carries no change (e.g. a freshly rendered button reporting
    n_clicks=0).
    """
    if isinstance(trigger, dict):
        if not value:
            return False
        kind = trigger.get("type")
        index = int(trigger.get("index"))
        if kind == IDs.Pattern.SORT_HEADER:
            controller.set_sort(index)
            return True
        if kind == IDs.Pattern.PAGE_BUTTON:
            controller.go_to_page(index)
            return True
        return False

    if trigger == IDs.Control.SEARCH_INPUT:
        term = value or ""
        if not should_apply_search(term):
            return False
        controller.set_search_term(term)
        return True
    if trigger == IDs.Control.PAGE_SIZE_SELECT:
        if value is None:
            return False
        controller.set_page_size(int(value))
        return True
    if trigger == IDs.Control.PREV_PAGE_BTN:
        if not value:
            return False
        controller.previous_page()
        return True
    if trigger == IDs.Control.NEXT_PAGE_BTN:
        if not value:
            return False
        controller.next_page()
        return True
    return False


def _component_id(prop_id: str) -> Any:
    # "search-input.value" or '{"index":2,"type":"sort-header"}.n_clicks'
    component, _, _prop = prop_id.rpartition(".")
    if component.startswith("{"):
        return json.loads(component)
    return component


def triggered_value(triggered: List[dict], triggered_id: Any) -> Any:
    """
    Value of the input named by `triggered_id` in a Dash `ctx.triggered`
    list. When several inputs fire together, the others' values are ignored.
    """
    if triggered_id is None:
        return None
    for item in triggered:
        if _component_id(item.get("prop_id", "")) == triggered_id:
            return item.get("value")
    return None


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # State transitions -> table-state store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data"),
        Input(IDs.Control.DATASET_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
    )
    def update_table_state(dataset_name, _search, _size, _prev, _next, _sorts, _pages, state_data):
        ds = ctx.dataset_by_name.get(dataset_name) if dataset_name else None
        if ds is None:
            return None

        options = ctx.controller_options(dataset_name)
        stored: Optional[TableState] = try_parse_table_state(state_data)
        if stored is None:
            controller = TableController(ds, options)
        else:
            controller = TableController.from_state(ds, stored, options)

        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.DATASET_SELECT:
            controller.set_dataset(ds)
        elif trigger is not None:
            changed = apply_table_event(
                controller, trigger, triggered_value(dash.ctx.triggered, trigger)
            )
            if not changed and stored is not None:
                raise PreventUpdate

        logger.debug(
            "Table state updated",
            extra={"dataset": dataset_name, "trigger": str(trigger), "state": controller.state.to_dict()},
        )
        return controller.state.to_dict()

    # ---------------------------------------------------------
    # table-state store -> table, info line, pagination bar
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.TABLE_INFO, "children"),
        Output(IDs.Control.TABLE_INFO, "style"),
        Output(IDs.Control.TABLE_HEADER_BAR, "style"),
        Output(IDs.Control.PAGINATION_BAR, "children"),
        Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Input(IDs.Store.TABLE_STATE, "data"),
        State(IDs.Control.DATASET_SELECT, "value"),
    )
    def render_table_view(state_data, dataset_name):
        ds = ctx.dataset_by_name.get(dataset_name) if dataset_name else None
        if ds is None:
            return (
                "No dataset selected. Choose a dataset from the navbar dropdown.",
                "", {"display": "none"}, no_update, [], True, True,
            )

        state = try_parse_table_state(state_data)
        controller = (
            TableController.from_state(ds, state, ctx.controller_options(dataset_name))
            if state is not None
            else TableController(ds, ctx.controller_options(dataset_name))
        )
        view = controller.view

        cfg = ctx.config_by_name.get(dataset_name)
        show_info = cfg.show_table_info if cfg is not None else True
        show_header = cfg.show_header if cfg is not None else True

        return (
            render_table(view),
            render_table_info(view, controller.state.search_term),
            {} if show_info else {"display": "none"},
            {} if show_header else {"display": "none"},
            render_page_buttons(view),
            not view.has_previous,
            not view.has_next,
        )
