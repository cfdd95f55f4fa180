"""JSON-serializable payloads handed to whatever renders the dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .models import DashboardSummary, UserRecord
from .table_view import TableView, TableViewState

EMPTY_VALUE = "—"
PLACEHOLDER_AVATAR_URL = "https://via.placeholder.com/{size}"
TABLE_AVATAR_SIZE = 40
DETAIL_AVATAR_SIZE = 80
AVATAR_LABELS = ("With Avatar", "Without Avatar")


def avatar_url(record: UserRecord, size: int = TABLE_AVATAR_SIZE) -> str:
    return record.avatar if record.has_avatar else PLACEHOLDER_AVATAR_URL.format(size=size)


def format_timestamp(value: datetime | None, date_only: bool = False) -> str:
    if value is None:
        return EMPTY_VALUE
    local = value.astimezone() if value.tzinfo is not None else value
    return local.strftime("%Y-%m-%d" if date_only else "%Y-%m-%d %H:%M:%S")


def record_payload(record: UserRecord, avatar_size: int = TABLE_AVATAR_SIZE) -> dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "email": record.email,
        "avatar": avatar_url(record, avatar_size),
        "has_avatar": record.has_avatar,
        "created_at": record.created_at,
        "created_at_display": format_timestamp(record.created_at_dt),
    }


def summary_payload(summary: DashboardSummary) -> dict[str, Any]:
    return {
        "total_users": summary.total_users,
        "daily": [{"date": item.date.isoformat(), "count": item.count} for item in summary.daily],
        "avatars": [
            {"name": AVATAR_LABELS[0], "value": summary.avatars.with_avatar},
            {"name": AVATAR_LABELS[1], "value": summary.avatars.without_avatar},
        ],
        "hourly": [{"hour": f"{item.hour}:00", "count": item.count} for item in summary.hourly],
        "recent": [
            {
                "id": record.id,
                "name": record.name,
                "avatar": record.avatar if record.has_avatar else None,
                "joined": format_timestamp(record.created_at_dt, date_only=True),
            }
            for record in summary.recent
        ],
    }


def page_buttons(total_pages: int, current_page: int) -> list[dict[str, Any]]:
    return [{"page": page, "active": page == current_page} for page in range(1, total_pages + 1)]


def table_payload(view: TableView, state: TableViewState, selected: UserRecord | None = None) -> dict[str, Any]:
    return {
        "state": {
            "search_text": state.search_text,
            "sort_key": state.sort_key,
            "sort_order": state.sort_order,
            "current_page": state.current_page,
        },
        "rows": [record_payload(record) for record in view.page_items],
        "total_pages": view.total_pages,
        "total_items": view.total_items,
        "pages": page_buttons(view.total_pages, state.current_page),
        "selected": record_payload(selected, DETAIL_AVATAR_SIZE) if selected is not None else None,
    }
