"""Endpoint catalog for ParityKit."""

from paritypack.catalog.endpoints import (
    BUILTIN_ENDPOINTS,
    PARAMS,
    get_endpoint,
    list_endpoint_ids,
    missing_required_params,
    split_params,
)
from paritypack.catalog.exceptions import CatalogError, MissingParameterError, UnknownEndpointError
from paritypack.catalog.models import Endpoint, ParamSpec

__all__ = [
    "BUILTIN_ENDPOINTS",
    "CatalogError",
    "Endpoint",
    "MissingParameterError",
    "PARAMS",
    "ParamSpec",
    "UnknownEndpointError",
    "get_endpoint",
    "list_endpoint_ids",
    "missing_required_params",
    "split_params",
]
