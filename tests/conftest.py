from __future__ import annotations

import os

import pytest

from user_dashboard.models import UserRecord


def _clear_dashboard_env() -> None:
    for key in list(os.environ):
        if key.startswith("USER_DASHBOARD_"):
            os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _isolated_env():
    _clear_dashboard_env()
    yield
    # load_dotenv writes straight into os.environ, outside monkeypatch.
    _clear_dashboard_env()


@pytest.fixture()
def make_user():
    def _make(
        user_id: str | int,
        name: str = "user",
        email: str | None = None,
        avatar: str | None = None,
        created_at: str | None = None,
    ) -> UserRecord:
        payload = {
            "id": user_id,
            "name": name,
            "email": email or f"{name.lower()}@example.com",
            "avatar": avatar,
            "createdAt": created_at,
        }
        return UserRecord.model_validate(payload)

    return _make
