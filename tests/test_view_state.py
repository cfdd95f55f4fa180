from __future__ import annotations

import pytest

from user_dashboard.table_view import TableViewState
from user_dashboard.view_state import (
    TableViewController,
    set_current_page,
    set_search_text,
    set_sort_key,
    set_sort_order,
)


def test_search_change_resets_page_to_first() -> None:
    state = TableViewState(current_page=3)

    updated = set_search_text(state, "ann")

    assert updated.search_text == "ann"
    assert updated.current_page == 1
    assert state.current_page == 3


def test_sort_changes_keep_current_page() -> None:
    state = TableViewState(current_page=2)

    state = set_sort_key(state, "createdAt")
    state = set_sort_order(state, "desc")

    assert (state.sort_key, state.sort_order, state.current_page) == ("createdAt", "desc", 2)


def test_set_current_page_has_no_upper_bound_but_stays_positive() -> None:
    state = TableViewState()

    assert set_current_page(state, 42).current_page == 42
    assert set_current_page(state, 0).current_page == 1
    assert set_current_page(state, -3).current_page == 1


def test_invalid_sort_transition_raises() -> None:
    with pytest.raises(ValueError):
        set_sort_key(TableViewState(), "avatar")


def test_unmatched_search_stays_empty_after_page_change(make_user) -> None:
    controller = TableViewController([make_user(index, name=f"user{index}") for index in range(12)])

    controller.set_search_text("zzz")
    first = controller.view()
    controller.set_current_page(1)
    second = controller.view()

    assert first.page_items == []
    assert first.total_pages == 0
    assert second.page_items == []


def test_controller_recomputes_view_after_each_transition(make_user) -> None:
    users = [make_user(index, name=f"user-{index:02d}") for index in range(15)]
    controller = TableViewController(users)

    controller.set_current_page(2)
    assert len(controller.view().page_items) == 5

    controller.set_sort_order("desc")
    assert controller.view().page_items[0].name == "user-04"

    controller.set_search_text("user-1")
    view = controller.view()
    assert controller.state.current_page == 1
    assert [user.name for user in view.page_items] == [f"user-{index}" for index in range(14, 9, -1)]


def test_selection_does_not_touch_view_state(make_user) -> None:
    user = make_user(1, name="Ann")
    controller = TableViewController([user])
    before = controller.state

    controller.select_record(user)
    assert controller.selected == user
    controller.clear_selection()

    assert controller.selected is None
    assert controller.state == before


def test_replace_records_keeps_state(make_user) -> None:
    controller = TableViewController([make_user(1)], page_size=1)
    controller.set_current_page(2)

    controller.replace_records([make_user(1), make_user(2, name="zed")])

    assert controller.state.current_page == 2
    assert controller.view().page_items[0].id == "2"
