"""Backend client contract and URL construction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote

if TYPE_CHECKING:
    from paritypack.compare.models import BackendResult


class ApiClient(Protocol):
    """Protocol for one backend the comparison engine can call."""

    name: str

    async def execute_request(
        self,
        endpoint: str,
        method: str,
        path_params: Mapping[str, Any],
        query_params: Mapping[str, Any],
        body_params: Mapping[str, Any],
    ) -> BackendResult:
        """Run one request and capture its outcome without raising."""

    def build_url(self, path: str, params: Mapping[str, Any]) -> str:
        """Resolve a path template plus params into a full URL."""


def build_url(base_url: str, path: str, params: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` placeholders and append the rest as a query string.

    Params used as placeholders are not repeated in the query string. Empty
    values are dropped; list values are comma-joined.
    """
    url = base_url.rstrip("/") + path if path.startswith("/") else base_url + path
    remaining = dict(params)

    for key in list(remaining.keys()):
        placeholder = "{" + str(key) + "}"
        if placeholder in url:
            url = url.replace(placeholder, quote(_param_text(remaining.pop(key)), safe=""), 1)

    query_parts = [
        f"{quote(str(key), safe='')}={quote(_param_text(value), safe='')}"
        for key, value in remaining.items()
        if value not in (None, "", [], ())
    ]
    if query_parts:
        url += "?" + "&".join(query_parts)
    return url


def _param_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
