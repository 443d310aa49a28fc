"""Request body encoding for mail-send style endpoints."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any


def encode_message(params: Mapping[str, Any]) -> dict[str, str]:
    """Encode ``to``/``subject``/``body`` as an RFC 2822 message, base64url without padding."""
    lines = [
        f"To: {params['to']}",
        f"Subject: {params['subject']}",
        "Content-Type: text/plain; charset=utf-8",
        "",
        str(params["body"]),
    ]
    raw = "\n".join(lines).encode("utf-8")
    encoded = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    return {"raw": encoded}


def prepare_request_body(endpoint: str, body: Mapping[str, Any]) -> dict[str, Any]:
    """Return the wire body for ``endpoint``.

    Composed messages sent to ``/messages/send`` are encoded in place; drafts
    wrap the encoded message in a ``message`` object. Other bodies pass through.
    """
    payload = dict(body)
    if not (payload.get("to") and payload.get("subject") and payload.get("body")):
        return payload
    if "/messages/send" in endpoint:
        return encode_message(payload)
    if "/drafts" in endpoint:
        return {"message": encode_message(payload)}
    return payload
