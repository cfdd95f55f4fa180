from __future__ import annotations

from dataclasses import dataclass

from ..http_client import HttpClient


@dataclass
class BaseClient:
    http: HttpClient

    def _request(self, method: str, path: str, **kwargs):
        return self.http.request(method, path, **kwargs)
