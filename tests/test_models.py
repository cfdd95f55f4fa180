from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from user_dashboard.models import UserRecord, parse_timestamp


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-01T10:00:00Z", datetime(2024, 1, 1, 10, tzinfo=timezone.utc)),
        ("2024-01-01T10:00:00.123Z", datetime(2024, 1, 1, 10, 0, 0, 123000, tzinfo=timezone.utc)),
        ("2024-01-01T10:00:00+02:00", datetime(2024, 1, 1, 10, tzinfo=timezone(timedelta(hours=2)))),
        ("2024-01-01", datetime(2024, 1, 1)),
    ],
)
def test_parse_timestamp_accepts_iso_forms(raw: str, expected: datetime) -> None:
    assert parse_timestamp(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "yesterday", 1704103200, "2024-13-45T00:00:00Z"])
def test_parse_timestamp_rejects_garbage(raw: object) -> None:
    assert parse_timestamp(raw) is None


def test_user_record_reads_wire_names_and_coerces_id() -> None:
    user = UserRecord.model_validate(
        {"id": 7, "name": "Ann", "email": "a@x.com", "createdAt": "2024-01-01T10:00:00Z", "extra": 1}
    )

    assert user.id == "7"
    assert user.created_at == "2024-01-01T10:00:00Z"
    assert user.created_at_dt == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert user.created_at_ts == datetime(2024, 1, 1, 10, tzinfo=timezone.utc).timestamp()
    assert user.has_avatar is False
