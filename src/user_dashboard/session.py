from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, tzinfo

from .aggregation import summarize
from .clients.users_client import UsersClient
from .config import ClientConfig
from .exceptions import ApiError
from .http_client import HttpClient, NormalizedError
from .logger import get_logger, log_action
from .models import DashboardSummary, UserRecord
from .view_state import TableViewController

logger = get_logger(__name__)


@dataclass
class DashboardSession:
    """One view session: fetches the user snapshot once and derives views from it."""

    config: ClientConfig
    http: HttpClient | None = None
    records: list[UserRecord] = field(default_factory=list)
    loading: bool = True
    error: NormalizedError | None = None
    _loaded: bool = False

    def __post_init__(self) -> None:
        self.http = self.http or HttpClient(config=self.config)

    def users_client(self) -> UsersClient:
        return UsersClient(http=self.http)

    def load(self) -> list[UserRecord]:
        if self._loaded:
            return self.records
        self._loaded = True
        try:
            self.records = self.users_client().list_users()
        except ApiError as exc:
            self.records = []
            self.error = self.http.normalize_error(exc)
            log_action(
                logger,
                module="users",
                action="load_snapshot",
                outcome="error",
                level=logging.ERROR,
                code=self.error.code,
                message=self.error.message,
            )
        else:
            log_action(logger, module="users", action="load_snapshot", outcome="success", count=len(self.records))
        finally:
            self.loading = False
        return self.records

    def summary(self, reference_date: date | None = None, tz: tzinfo | None = None) -> DashboardSummary:
        return summarize(self.records, reference_date=reference_date, recent_count=self.config.recent_count, tz=tz)

    def table_controller(self) -> TableViewController:
        return TableViewController(self.records, page_size=self.config.page_size)
