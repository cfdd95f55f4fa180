from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as ModelValidationError

from ..exceptions import PayloadError
from ..logger import get_logger
from ..models import UserRecord
from .base import BaseClient

logger = get_logger(__name__)

USERS_PATH = "/users"


def _extract_items(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "data"):
            items = payload.get(key)
            if isinstance(items, list):
                return items
    raise PayloadError(
        code="INVALID_USERS_PAYLOAD",
        message="Expected a list of user records",
        details={"type": type(payload).__name__},
        status_code=200,
        raw_payload=payload,
    )


def parse_user_records(payload: Any) -> list[UserRecord]:
    """Build records from a users payload, skipping entries without id/name/email."""
    records: list[UserRecord] = []
    for position, item in enumerate(_extract_items(payload)):
        if not isinstance(item, dict):
            logger.warning("Skipping user entry %s: not an object", position)
            continue
        try:
            records.append(UserRecord.model_validate(item))
        except ModelValidationError as exc:
            logger.warning("Skipping user entry %s: %s", position, exc.errors(include_url=False))
    return records


@dataclass
class UsersClient(BaseClient):
    def list_users(self) -> list[UserRecord]:
        payload = self._request("GET", USERS_PATH, operation="list_users")
        return parse_user_records(payload)
