from .aggregation import avatar_split, daily_counts, hourly_signups, most_recent, summarize, total_users
from .clients import UsersClient
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    NotFoundError,
    PayloadError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)
from .http_client import HttpClient, NormalizedError
from .models import AvatarSplit, DailyCount, DashboardSummary, HourlyCount, UserRecord, parse_timestamp
from .session import DashboardSession
from .table_view import PAGE_SIZE, TableView, TableViewState, compute_view
from .view_state import (
    TableViewController,
    set_current_page,
    set_search_text,
    set_sort_key,
    set_sort_order,
)

__all__ = [
    "ApiError",
    "AvatarSplit",
    "ClientConfig",
    "ConfigError",
    "DailyCount",
    "DashboardSession",
    "DashboardSummary",
    "HourlyCount",
    "HttpClient",
    "NormalizedError",
    "NotFoundError",
    "PAGE_SIZE",
    "PayloadError",
    "RateLimitError",
    "ServerError",
    "TableView",
    "TableViewController",
    "TableViewState",
    "TransportError",
    "UserRecord",
    "UsersClient",
    "ValidationError",
    "avatar_split",
    "compute_view",
    "daily_counts",
    "hourly_signups",
    "load_config",
    "most_recent",
    "parse_timestamp",
    "set_current_page",
    "set_search_text",
    "set_sort_key",
    "set_sort_order",
    "summarize",
    "total_users",
]
