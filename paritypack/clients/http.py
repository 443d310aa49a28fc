"""httpx-backed client for one comparison backend."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import json
import logging
import time
from typing import Any, Literal

import httpx

from paritypack.clients.base import build_url
from paritypack.clients.encoding import prepare_request_body
from paritypack.compare.models import BackendResult

logger = logging.getLogger(__name__)

AuthKind = Literal["none", "bearer", "cookie"]


@dataclass(frozen=True, slots=True)
class BackendAuth:
    """Credentials attached to every request for one backend."""

    kind: AuthKind = "none"
    token: str | None = None
    cookie_name: str = "sessionId"

    def headers(self) -> dict[str, str]:
        if self.kind == "bearer" and self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def cookies(self) -> dict[str, str]:
        if self.kind == "cookie" and self.token:
            return {self.cookie_name: self.token}
        return {}


class HttpApiClient:
    """Executes requests against one base URL and never raises on failure."""

    def __init__(
        self,
        name: str,
        base_url: str,
        *,
        auth: BackendAuth | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self.base_url = base_url
        self.auth = auth or BackendAuth()
        self.timeout = timeout
        self._transport = transport

    def build_url(self, path: str, params: Mapping[str, Any]) -> str:
        return build_url(self.base_url, path, params)

    async def execute_request(
        self,
        endpoint: str,
        method: str,
        path_params: Mapping[str, Any],
        query_params: Mapping[str, Any],
        body_params: Mapping[str, Any],
    ) -> BackendResult:
        method = method.upper()
        url = self.build_url(endpoint, {**path_params, **query_params})
        body = prepare_request_body(endpoint, body_params)
        request_kwargs: dict[str, Any] = {
            "headers": {"Content-Type": "application/json", **self.auth.headers()},
        }
        if body and method != "GET":
            request_kwargs["content"] = json.dumps(body).encode("utf-8")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                cookies=self.auth.cookies(),
                transport=self._transport,
            ) as client:
                started = time.perf_counter()
                response = await client.request(method, url, **request_kwargs)
                response_time = int((time.perf_counter() - started) * 1000)
                parsed = parse_response_body(response)
        except (httpx.HTTPError, ValueError) as error:
            logger.warning("%s request failed: %s %s: %s", self.name, method, url, error)
            return BackendResult.failure(str(error) or error.__class__.__name__)

        logger.debug("%s responded %s in %dms", self.name, response.status_code, response_time)
        return BackendResult(
            status=response.status_code,
            body=parsed,
            error=None,
            response_time=response_time,
        )


def parse_response_body(response: httpx.Response) -> Any:
    """Decode a response body, substituting a marker object for empty ones."""
    if response.status_code == 204 or response.headers.get("content-length") == "0":
        return {"message": "Success - No content returned"}

    content_type = response.headers.get("content-type", "")
    text = response.text
    if "application/json" in content_type:
        return json.loads(text) if text else {"message": "Success - Empty response"}
    return text or {"message": "Success - No content"}
