"""Backend clients for ParityKit."""

from paritypack.clients.base import ApiClient, build_url
from paritypack.clients.encoding import encode_message, prepare_request_body
from paritypack.clients.http import BackendAuth, HttpApiClient, parse_response_body

__all__ = [
    "ApiClient",
    "BackendAuth",
    "HttpApiClient",
    "build_url",
    "encode_message",
    "parse_response_body",
    "prepare_request_body",
]
