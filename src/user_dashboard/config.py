from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://6874ce63dd06792b9c954fc7.mockapi.io/api/v1"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    retries: int = 2
    retry_backoff_seconds: float = 0.3
    max_connections: int = 4
    verify_ssl: bool = True
    page_size: int = 10
    recent_count: int = 5


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    api_base_url = (os.getenv("USER_DASHBOARD_API_BASE_URL") or "").strip() or DEFAULT_API_BASE_URL

    timeout_seconds = _read_float("USER_DASHBOARD_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid USER_DASHBOARD_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    connect_timeout_seconds = _read_float(
        "USER_DASHBOARD_CONNECT_TIMEOUT_SECONDS", str(min(timeout_seconds, 5.0))
    )
    _validate(
        connect_timeout_seconds > 0,
        f"Invalid USER_DASHBOARD_CONNECT_TIMEOUT_SECONDS: expected > 0, got {connect_timeout_seconds}",
    )

    read_timeout_seconds = _read_float(
        "USER_DASHBOARD_READ_TIMEOUT_SECONDS",
        str(max(timeout_seconds, connect_timeout_seconds)),
    )
    _validate(
        read_timeout_seconds > 0,
        f"Invalid USER_DASHBOARD_READ_TIMEOUT_SECONDS: expected > 0, got {read_timeout_seconds}",
    )

    retries = _read_int("USER_DASHBOARD_RETRIES", "2")
    _validate(retries >= 0, f"Invalid USER_DASHBOARD_RETRIES: expected >= 0, got {retries}")

    retry_backoff_seconds = _read_float("USER_DASHBOARD_RETRY_BACKOFF_SECONDS", "0.3")
    _validate(
        retry_backoff_seconds >= 0,
        f"Invalid USER_DASHBOARD_RETRY_BACKOFF_SECONDS: expected >= 0, got {retry_backoff_seconds}",
    )

    page_size = _read_int("USER_DASHBOARD_PAGE_SIZE", "10")
    _validate(page_size >= 1, f"Invalid USER_DASHBOARD_PAGE_SIZE: expected >= 1, got {page_size}")

    recent_count = _read_int("USER_DASHBOARD_RECENT_COUNT", "5")
    _validate(recent_count >= 0, f"Invalid USER_DASHBOARD_RECENT_COUNT: expected >= 0, got {recent_count}")

    max_connections = _read_int("USER_DASHBOARD_MAX_CONNECTIONS", "4")
    _validate(max_connections >= 1, f"Invalid USER_DASHBOARD_MAX_CONNECTIONS: expected >= 1, got {max_connections}")

    verify_ssl = _coerce_bool(os.getenv("USER_DASHBOARD_VERIFY_SSL"), True)

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        retries=retries,
        retry_backoff_seconds=retry_backoff_seconds,
        max_connections=max_connections,
        verify_ssl=verify_ssl,
        page_size=page_size,
        recent_count=recent_count,
    )
