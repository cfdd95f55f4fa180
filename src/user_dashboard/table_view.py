from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .models import UserRecord

PAGE_SIZE = 10
SORT_KEYS = ("name", "createdAt")
SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class TableViewState:
    search_text: str = ""
    sort_key: str = "name"
    sort_order: str = "asc"
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unsupported sort key: {self.sort_key!r}")
        if self.sort_order not in SORT_ORDERS:
            raise ValueError(f"Unsupported sort order: {self.sort_order!r}")


@dataclass(frozen=True)
class TableView:
    page_items: list[UserRecord] = field(default_factory=list)
    total_pages: int = 0
    total_items: int = 0


def matches_search(record: UserRecord, search_text: str) -> bool:
    needle = search_text.lower()
    return needle in (record.name or "").lower() or needle in (record.email or "").lower()


def filter_records(records: Sequence[UserRecord], search_text: str) -> list[UserRecord]:
    if not search_text:
        return list(records)
    return [record for record in records if matches_search(record, search_text)]


def _created_at_key(record: UserRecord) -> tuple[int, float]:
    instant = record.created_at_ts
    # Unparseable dates sort after every valid one in ascending order.
    return (1, 0.0) if instant is None else (0, instant)


def sort_records(records: Sequence[UserRecord], sort_key: str, sort_order: str) -> list[UserRecord]:
    reverse = sort_order == "desc"
    if sort_key == "createdAt":
        return sorted(records, key=_created_at_key, reverse=reverse)
    return sorted(records, key=lambda record: record.name or "", reverse=reverse)


def total_pages_for(item_count: int, page_size: int = PAGE_SIZE) -> int:
    if item_count <= 0:
        return 0
    return math.ceil(item_count / page_size)


def paginate(records: Sequence[UserRecord], page: int, page_size: int = PAGE_SIZE) -> list[UserRecord]:
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(records[start : start + page_size])


def compute_view(records: Sequence[UserRecord], state: TableViewState, page_size: int = PAGE_SIZE) -> TableView:
    """Filter, sort and slice ``records`` for the table; never clamps the page."""
    filtered = filter_records(records, state.search_text)
    ordered = sort_records(filtered, state.sort_key, state.sort_order)
    return TableView(
        page_items=paginate(ordered, state.current_page, page_size),
        total_pages=total_pages_for(len(ordered), page_size),
        total_items=len(ordered),
    )
