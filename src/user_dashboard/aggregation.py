"""Dashboard aggregates derived from a user record snapshot.

Every function here is pure: the snapshot is the only input besides explicit
parameters, and records with a missing or unparseable ``createdAt`` are left
out of the time-based views instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone, tzinfo

from .models import AvatarSplit, DailyCount, DashboardSummary, HourlyCount, UserRecord

DAILY_WINDOW_DAYS = 30
HOURS_PER_DAY = 24
DEFAULT_RECENT_COUNT = 5


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def total_users(records: Sequence[UserRecord]) -> int:
    return len(records)


def daily_counts(records: Sequence[UserRecord], reference_date: date | None = None) -> list[DailyCount]:
    """Signups per calendar day for the 30 days ending on ``reference_date``.

    The bucket is the day written in the timestamp itself; no timezone
    conversion is applied. Days without signups are kept with a zero count.
    """
    end = reference_date or _today_utc()
    start = end - timedelta(days=DAILY_WINDOW_DAYS - 1)
    buckets = {start + timedelta(days=offset): 0 for offset in range(DAILY_WINDOW_DAYS)}
    for record in records:
        parsed = record.created_at_dt
        if parsed is None:
            continue
        day = parsed.date()
        if day in buckets:
            buckets[day] += 1
    return [DailyCount(date=day, count=count) for day, count in buckets.items()]


def avatar_split(records: Sequence[UserRecord]) -> AvatarSplit:
    with_avatar = sum(1 for record in records if record.has_avatar)
    return AvatarSplit(with_avatar=with_avatar, without_avatar=len(records) - with_avatar)


def _local_hour(parsed: datetime, tz: tzinfo | None) -> int | None:
    if parsed.tzinfo is None:
        return parsed.hour
    try:
        return parsed.astimezone(tz).hour
    except (OverflowError, OSError, ValueError):
        # Converted instant falls outside the representable range.
        return None


def hourly_signups(records: Sequence[UserRecord], tz: tzinfo | None = None) -> list[HourlyCount]:
    """Signups per hour of day (0..23) in ``tz``, or the local zone when omitted."""
    hours = [0] * HOURS_PER_DAY
    for record in records:
        parsed = record.created_at_dt
        if parsed is None:
            continue
        hour = _local_hour(parsed, tz)
        if hour is not None:
            hours[hour] += 1
    return [HourlyCount(hour=hour, count=count) for hour, count in enumerate(hours)]


def most_recent(records: Sequence[UserRecord], n: int = DEFAULT_RECENT_COUNT) -> list[UserRecord]:
    if n <= 0:
        return []
    dated = [(record.created_at_ts, record) for record in records]
    dated = [(instant, record) for instant, record in dated if instant is not None]
    # sorted() keeps input order for equal instants, reverse included.
    ordered = sorted(dated, key=lambda item: item[0], reverse=True)
    return [record for _, record in ordered[:n]]


def summarize(
    records: Sequence[UserRecord],
    reference_date: date | None = None,
    recent_count: int = DEFAULT_RECENT_COUNT,
    tz: tzinfo | None = None,
) -> DashboardSummary:
    return DashboardSummary(
        total_users=total_users(records),
        daily=daily_counts(records, reference_date),
        hourly=hourly_signups(records, tz),
        avatars=avatar_split(records),
        recent=most_recent(records, recent_count),
    )
