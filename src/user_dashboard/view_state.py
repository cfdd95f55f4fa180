from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from .logger import get_logger, log_action
from .models import UserRecord
from .table_view import PAGE_SIZE, TableView, TableViewState, compute_view

logger = get_logger(__name__)


def set_search_text(state: TableViewState, search_text: str) -> TableViewState:
    return replace(state, search_text=search_text, current_page=1)


def set_sort_key(state: TableViewState, sort_key: str) -> TableViewState:
    return replace(state, sort_key=sort_key)


def set_sort_order(state: TableViewState, sort_order: str) -> TableViewState:
    return replace(state, sort_order=sort_order)


def set_current_page(state: TableViewState, page: int) -> TableViewState:
    return replace(state, current_page=max(1, page))


class TableViewController:
    """Owns the table snapshot, its view state and the selected record."""

    def __init__(
        self,
        records: Sequence[UserRecord] | None = None,
        state: TableViewState | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.records: tuple[UserRecord, ...] = tuple(records or ())
        self.state = state or TableViewState()
        self.page_size = page_size
        self.selected: UserRecord | None = None

    def replace_records(self, records: Sequence[UserRecord]) -> None:
        self.records = tuple(records)

    def set_search_text(self, search_text: str) -> TableViewState:
        return self._apply("set_search_text", set_search_text(self.state, search_text))

    def set_sort_key(self, sort_key: str) -> TableViewState:
        return self._apply("set_sort_key", set_sort_key(self.state, sort_key))

    def set_sort_order(self, sort_order: str) -> TableViewState:
        return self._apply("set_sort_order", set_sort_order(self.state, sort_order))

    def set_current_page(self, page: int) -> TableViewState:
        return self._apply("set_current_page", set_current_page(self.state, page))

    def select_record(self, record: UserRecord) -> None:
        self.selected = record

    def clear_selection(self) -> None:
        self.selected = None

    def view(self) -> TableView:
        return compute_view(self.records, self.state, self.page_size)

    def _apply(self, action: str, new_state: TableViewState) -> TableViewState:
        self.state = new_state
        log_action(
            logger,
            module="users_table",
            action=action,
            outcome="success",
            level=logging.DEBUG,
            search_text=new_state.search_text,
            sort_key=new_state.sort_key,
            sort_order=new_state.sort_order,
            current_page=new_state.current_page,
        )
        return new_state
