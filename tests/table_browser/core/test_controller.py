from __future__ import annotations

import threading

import pytest

from table_browser.core.controller import ControllerOptions, TableController
from table_browser.core.dataset import Dataset
from table_browser.core.sorting import ASC, DESC, NONE
from table_browser.core.table_state import TableState


def _make_dataset():
    return Dataset(
        headers=["Name", "Age"],
        rows=[["Bob", "30"], ["Amy", "25"], ["Cid", "40"]],
        name="People",
    )


def _numbered_dataset(n: int):
    return Dataset(["id", "label"], [[f"{i:03d}", f"row {i}"] for i in range(1, n + 1)], name="Numbers")


def test_initial_state_is_unsorted_first_page():
    ctrl = TableController(_make_dataset())

    assert ctrl.state == TableState()
    assert ctrl.view.visible_rows == _make_dataset().rows


def test_default_sort_column_option():
    ctrl = TableController(_make_dataset(), ControllerOptions(default_sort_column=0))

    assert ctrl.state.sort_column == 0
    assert ctrl.state.sort_direction == ASC
    assert [r[0] for r in ctrl.view.visible_rows] == ["Amy", "Bob", "Cid"]


def test_default_sort_column_out_of_range_starts_unsorted():
    ctrl = TableController(_make_dataset(), ControllerOptions(default_sort_column=7))

    assert ctrl.state.sort_column is None
    assert ctrl.state.sort_direction == NONE


def test_set_sort_toggles_direction_on_same_column():
    ctrl = TableController(_make_dataset())

    ctrl.set_sort(1)
    assert (ctrl.state.sort_column, ctrl.state.sort_direction) == (1, ASC)
    assert [r[1] for r in ctrl.view.visible_rows] == ["25", "30", "40"]
    assert ctrl.sort_indicator(1) == ASC

    ctrl.set_sort(1)
    assert ctrl.state.sort_direction == DESC
    assert [r[1] for r in ctrl.view.visible_rows] == ["40", "30", "25"]

    ctrl.set_sort(0)
    assert (ctrl.state.sort_column, ctrl.state.sort_direction) == (0, ASC)
    assert ctrl.sort_indicator(1) == NONE


def test_set_sort_keeps_current_page():
    ctrl = TableController(_numbered_dataset(50))
    ctrl.go_to_page(3)

    ctrl.set_sort(0)

    assert ctrl.state.current_page == 3


def test_set_page_size_resets_page():
    ctrl = TableController(_numbered_dataset(95))
    ctrl.go_to_page(4)

    view = ctrl.set_page_size(25)

    assert ctrl.state.page_size == 25
    assert ctrl.state.current_page == 1
    assert view.total_pages == 4


def test_set_page_size_rejects_unknown_size():
    ctrl = TableController(_make_dataset())

    with pytest.raises(ValueError):
        ctrl.set_page_size(7)


def test_go_to_page_clamps():
    ctrl = TableController(_numbered_dataset(95))

    ctrl.go_to_page(42)
    assert ctrl.state.current_page == 10

    ctrl.go_to_page(-1)
    assert ctrl.state.current_page == 1


def test_next_and_previous_page_are_clamped():
    ctrl = TableController(_numbered_dataset(25))

    ctrl.previous_page()
    assert ctrl.state.current_page == 1

    ctrl.next_page()
    ctrl.next_page()
    ctrl.next_page()
    assert ctrl.state.current_page == 3
    assert not ctrl.view.has_next
    assert ctrl.view.has_previous

    ctrl.previous_page()
    assert ctrl.state.current_page == 2


def test_search_resets_page_by_default():
    ctrl = TableController(_numbered_dataset(95))
    ctrl.go_to_page(5)

    view = ctrl.set_search_term("row")

    assert ctrl.state.current_page == 1
    assert view.start_range == 1


def test_search_keeps_page_when_reset_disabled_and_clamps():
    ctrl = TableController(_numbered_dataset(95), ControllerOptions(reset_page_on_search=False))
    ctrl.go_to_page(5)

    ctrl.set_search_term("row")
    assert ctrl.state.current_page == 5

    # "row 1" plus "row 10".."row 19": 11 matches, 2 pages
    ctrl.set_search_term("row 1")
    assert ctrl.view.total_pages == 2
    assert ctrl.state.current_page == 2


def test_same_search_term_does_not_reset_page():
    ctrl = TableController(_numbered_dataset(95))
    ctrl.set_search_term("row")
    ctrl.go_to_page(3)

    ctrl.set_search_term("row")

    assert ctrl.state.current_page == 3


def test_empty_states_are_mutually_exclusive():
    ctrl = TableController(Dataset(["Name"], []))
    assert ctrl.view.no_data and not ctrl.view.no_matches

    ctrl.set_search_term("abc")
    assert ctrl.view.no_matches and not ctrl.view.no_data


def test_set_dataset_resets_page_and_keeps_other_state():
    ctrl = TableController(_numbered_dataset(95))
    ctrl.set_sort(1)
    ctrl.set_page_size(25)
    ctrl.go_to_page(3)

    ctrl.set_dataset(_make_dataset())

    assert ctrl.dataset.name == "People"
    assert ctrl.state.current_page == 1
    assert ctrl.state.page_size == 25
    assert ctrl.state.sort_column == 1


def test_set_dataset_drops_missing_sort_column():
    ctrl = TableController(_make_dataset())
    ctrl.set_sort(1)

    ctrl.set_dataset(Dataset(["Only"], [["x"]]))

    assert ctrl.state.sort_column is None
    assert ctrl.state.sort_direction == NONE


def test_from_state_resumes_and_clamps():
    stored = TableState(search_term="", sort_column=0, sort_direction=DESC, page_size=10, current_page=50)

    ctrl = TableController.from_state(_numbered_dataset(95), stored)

    assert ctrl.state.current_page == 10
    assert ctrl.state.sort_direction == DESC
    assert ctrl.view.visible_rows[-1] == ("001", "row 1")


def test_sort_asc_then_desc_reverses_filtered_order():
    ctrl = TableController(_numbered_dataset(30))
    ctrl.set_page_size(100)
    ctrl.set_search_term("row 1")

    ctrl.set_sort(0)
    asc = ctrl.view.sorted_rows
    ctrl.set_sort(0)
    desc = ctrl.view.sorted_rows

    assert desc == tuple(reversed(asc))


def test_concurrent_transitions_leave_consistent_state():
    ctrl = TableController(_numbered_dataset(200))

    def worker():
        for _ in range(50):
            ctrl.next_page()
            ctrl.set_sort(0)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    state, view = ctrl.snapshot()
    assert view.current_page == state.current_page
    assert 1 <= state.current_page <= view.total_pages
