from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import PayloadError, TransportError


def _error_type_from_status(status_code: int) -> str:
    if status_code <= 0:
        return "network"
    if status_code in {400, 404, 422}:
        return "validation"
    if status_code == 429:
        return "rate_limit"
    return "internal"


@dataclass(frozen=True)
class NormalizedError:
    code: str
    message: str
    type: str


@dataclass
class LastOperation:
    operation: str
    duration_ms: int
    result: str
    attempts: int


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        normalized_method = method.upper()
        url = self._build_url(path)

        attempts = self.config.retries + 1 if normalized_method in {"GET", "HEAD"} else 1
        started = time.monotonic()
        response: requests.Response | None = None
        used = 0
        for attempt in range(attempts):
            used = attempt + 1
            try:
                response = self.session.request(
                    method=normalized_method,
                    url=url,
                    headers={"Accept": "application/json"},
                    params=params,
                    timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                    verify=self.config.verify_ssl,
                )
            except requests.RequestException as exc:
                if attempt >= attempts - 1:
                    self._record_operation(operation, started, "error", used)
                    raise TransportError(
                        code="TRANSPORT_ERROR",
                        message=str(exc),
                        details={"type": type(exc).__name__},
                        status_code=0,
                    ) from exc
            else:
                if response.status_code < 500 or attempt >= attempts - 1:
                    break
            time.sleep(self.config.retry_backoff_seconds * (2**attempt))

        if response is None:
            raise RuntimeError("HTTP request failed without response")

        if response.ok:
            if not response.content:
                self._record_operation(operation, started, "success", used)
                return None
            try:
                parsed = response.json()
            except json.JSONDecodeError as exc:
                self._record_operation(operation, started, "error", used)
                raise PayloadError(
                    code="INVALID_JSON",
                    message=f"Response body from {path} is not valid JSON",
                    details={"content_type": response.headers.get("Content-Type")},
                    status_code=response.status_code,
                    raw_payload=response.text,
                ) from exc
            self._record_operation(operation, started, "success", used)
            return parsed

        try:
            payload = response.json()
        except json.JSONDecodeError:
            payload = {"message": response.text}
        self._record_operation(operation, started, "error", used)
        raise map_error(response.status_code, payload if isinstance(payload, dict) else {"details": payload})

    def normalize_error(self, error: Exception) -> NormalizedError:
        if isinstance(error, TransportError):
            return NormalizedError(code=error.code, message=error.message, type="network")
        code = getattr(error, "code", "UNKNOWN_ERROR")
        message = getattr(error, "message", str(error))
        status_code = int(getattr(error, "status_code", 0) or 0)
        return NormalizedError(
            code=str(code),
            message=str(message),
            type=_error_type_from_status(status_code),
        )

    def _record_operation(self, operation: str, started: float, result: str, attempts: int) -> None:
        self.last_operation = LastOperation(
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            attempts=attempts,
        )
