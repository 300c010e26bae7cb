from __future__ import annotations

from table_browser.core.controller import TableController
from table_browser.core.dataset import Dataset
from table_browser.core.sorting import ASC, DESC
from table_browser.ui.callbacks.callbacks_table import apply_table_event, triggered_value
from table_browser.ui.callbacks.callbacks_utils import try_parse_table_state
from table_browser.ui.ids import IDs, page_button_id, sort_header_id


def _controller(n: int = 95) -> TableController:
    ds = Dataset(["id", "label"], [[f"{i:03d}", f"row {i}"] for i in range(1, n + 1)])
    return TableController(ds)


def test_sort_header_click_toggles_sort():
    ctrl = _controller()

    assert apply_table_event(ctrl, sort_header_id(1), 1)
    assert (ctrl.state.sort_column, ctrl.state.sort_direction) == (1, ASC)

    assert apply_table_event(ctrl, sort_header_id(1), 2)
    assert ctrl.state.sort_direction == DESC


def test_freshly_rendered_buttons_are_ignored():
    ctrl = _controller()
    before = ctrl.state

    assert not apply_table_event(ctrl, sort_header_id(0), 0)
    assert not apply_table_event(ctrl, page_button_id(3), None)
    assert ctrl.state == before


def test_page_button_goes_to_page():
    ctrl = _controller()

    assert apply_table_event(ctrl, page_button_id(4), 1)
    assert ctrl.state.current_page == 4


def test_prev_next_buttons():
    ctrl = _controller()

    assert apply_table_event(ctrl, IDs.Control.NEXT_PAGE_BTN, 1)
    assert apply_table_event(ctrl, IDs.Control.NEXT_PAGE_BTN, 2)
    assert ctrl.state.current_page == 3

    assert apply_table_event(ctrl, IDs.Control.PREV_PAGE_BTN, 1)
    assert ctrl.state.current_page == 2


def test_short_search_terms_are_held_back():
    ctrl = _controller()

    assert not apply_table_event(ctrl, IDs.Control.SEARCH_INPUT, "ro")
    assert ctrl.state.search_term == ""

    assert apply_table_event(ctrl, IDs.Control.SEARCH_INPUT, "row 9")
    assert ctrl.state.search_term == "row 9"

    assert apply_table_event(ctrl, IDs.Control.SEARCH_INPUT, "")
    assert ctrl.state.search_term == ""


def test_page_size_change():
    ctrl = _controller()
    ctrl.go_to_page(3)

    assert apply_table_event(ctrl, IDs.Control.PAGE_SIZE_SELECT, 50)
    assert ctrl.state.page_size == 50
    assert ctrl.state.current_page == 1


def test_unknown_trigger_is_ignored():
    ctrl = _controller()

    assert not apply_table_event(ctrl, "something-else", 1)
    assert not apply_table_event(ctrl, {"type": "other", "index": 1}, 1)


def test_try_parse_table_state():
    assert try_parse_table_state(None) is None
    assert try_parse_table_state({}) is None
    assert try_parse_table_state({"page_size": 3}) is None

    st = try_parse_table_state({"search_term": "x", "page_size": 25, "current_page": 2})
    assert st is not None
    assert st.page_size == 25


def test_triggered_value_picks_the_named_input():
    triggered = [
        {"prop_id": f"{IDs.Control.SEARCH_INPUT}.value", "value": "alice"},
        {"prop_id": f"{IDs.Control.NEXT_PAGE_BTN}.n_clicks", "value": 3},
    ]

    assert triggered_value(triggered, IDs.Control.NEXT_PAGE_BTN) == 3
    assert triggered_value(triggered, IDs.Control.SEARCH_INPUT) == "alice"


def test_triggered_value_matches_pattern_ids():
    triggered = [
        {"prop_id": f"{IDs.Control.PAGE_SIZE_SELECT}.value", "value": 25},
        {"prop_id": '{"index":0,"type":"%s"}.n_clicks' % IDs.Pattern.SORT_HEADER, "value": 1},
        {"prop_id": '{"index":2,"type":"%s"}.n_clicks' % IDs.Pattern.SORT_HEADER, "value": 4},
    ]

    assert triggered_value(triggered, sort_header_id(2)) == 4
    assert triggered_value(triggered, sort_header_id(0)) == 1


def test_triggered_value_does_not_borrow_another_inputs_value():
    triggered = [
        {"prop_id": f"{IDs.Control.PREV_PAGE_BTN}.n_clicks", "value": None},
        {"prop_id": f"{IDs.Control.SEARCH_INPUT}.value", "value": "bob"},
    ]

    assert triggered_value(triggered, IDs.Control.PREV_PAGE_BTN) is None
    assert triggered_value(triggered, page_button_id(1)) is None
    assert triggered_value([{"prop_id": ".", "value": None}], None) is None
