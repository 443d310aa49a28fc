"""Result models for paired backend calls."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from paritypack.catalog.models import Endpoint
from paritypack.diff.models import DiffResult


@dataclass(slots=True)
class BackendResult:
    """Outcome of one request against one backend.

    A transport failure leaves ``status`` as None and sets ``error``.
    ``url``, ``method`` and ``request_body`` are display-only.
    """

    status: int | None
    body: Any = None
    error: str | None = None
    response_time: int = 0
    url: str | None = None
    method: str | None = None
    request_body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status < 300

    def with_request(
        self,
        *,
        url: str,
        method: str,
        request_body: dict[str, Any],
    ) -> "BackendResult":
        return replace(self, url=url, method=method, request_body=dict(request_body))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": self.status,
            "body": self.body,
            "error": self.error,
            "response_time": self.response_time,
        }
        if self.url is not None:
            payload["url"] = self.url
        if self.method is not None:
            payload["method"] = self.method
        if self.request_body:
            payload["request_body"] = self.request_body
        return payload

    @classmethod
    def failure(cls, message: str) -> "BackendResult":
        return cls(status=None, body=None, error=message, response_time=0)


@dataclass(slots=True)
class DualResult:
    """Both backend results for one logical request."""

    real: BackendResult
    clone: BackendResult
    dual_duration: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "real": self.real.to_dict(),
            "clone": self.clone.to_dict(),
            "dual_duration": self.dual_duration,
        }


@dataclass(slots=True)
class ComparisonOutcome:
    """Dual call plus the diff of its two bodies."""

    endpoint: Endpoint
    dual: DualResult
    diff: DiffResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint.id,
            "method": self.endpoint.method,
            "path": self.endpoint.path,
            **self.dual.to_dict(),
            "diff": self.diff.to_dict(),
        }
