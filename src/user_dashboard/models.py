from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, keeping whatever offset it encodes.

    Returns None for missing, non-string or unparseable values.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    clean = value.strip()
    if not clean:
        return None
    if clean.endswith(("Z", "z")):
        clean = clean[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(clean)
    except ValueError:
        return None


class UserRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str
    name: str
    email: str
    avatar: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("avatar", "created_at", mode="before")
    @classmethod
    def _drop_non_strings(cls, value: Any) -> Any:
        # A malformed optional field degrades to "missing" instead of rejecting the record.
        return value if isinstance(value, str) else None

    @property
    def has_avatar(self) -> bool:
        return bool(self.avatar)

    @property
    def created_at_dt(self) -> datetime | None:
        return parse_timestamp(self.created_at)

    @property
    def created_at_ts(self) -> float | None:
        """POSIX instant of created_at; naive values are read as local time."""
        parsed = self.created_at_dt
        if parsed is None:
            return None
        try:
            return parsed.timestamp()
        except (OverflowError, OSError, ValueError):
            return None


@dataclass(frozen=True)
class DailyCount:
    date: date
    count: int


@dataclass(frozen=True)
class HourlyCount:
    hour: int
    count: int


@dataclass(frozen=True)
class AvatarSplit:
    with_avatar: int
    without_avatar: int


@dataclass(frozen=True)
class DashboardSummary:
    total_users: int
    daily: list[DailyCount]
    hourly: list[HourlyCount]
    avatars: AvatarSplit
    recent: list[UserRecord]
