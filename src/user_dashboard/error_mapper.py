from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)


def map_error(status_code: int, payload: Mapping[str, object] | None) -> ApiError:
    payload = payload or {}
    code = str(payload.get("code") or "HTTP_ERROR")
    message = str(payload.get("message") or payload.get("error") or f"User directory API responded with HTTP {status_code}")
    mapped: type[ApiError]
    if status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=payload.get("details"),
        status_code=status_code,
        raw_payload=dict(payload),
    )
