"""End-to-end comparison of one catalog endpoint."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from paritypack.cache import DualResponseCache
from paritypack.catalog.endpoints import split_params
from paritypack.catalog.models import Endpoint
from paritypack.compare.engine import ComparisonEngine
from paritypack.compare.models import ComparisonOutcome, DualResult
from paritypack.diff.ignore import IgnoreSpec

logger = logging.getLogger(__name__)


async def run_comparison(
    engine: ComparisonEngine,
    endpoint: Endpoint,
    values: Mapping[str, Any],
    *,
    ignore_fields: IgnoreSpec | Iterable[str] | None = None,
    cache: DualResponseCache | None = None,
) -> ComparisonOutcome:
    """Run ``endpoint`` on both backends, diff the bodies and cache list data.

    Raises ``MissingParameterError`` before any request when a required
    parameter is absent.
    """
    path_params, query_params, body_params = split_params(endpoint, values)
    dual = await engine.execute_dual(
        endpoint.path,
        endpoint.method,
        path_params,
        query_params,
        body_params,
    )
    diff = engine.generate_diff(dual.real.body, dual.clone.body, ignore_fields)

    url_params = {**path_params, **query_params}
    enriched = DualResult(
        real=dual.real.with_request(
            url=engine.real_client.build_url(endpoint.path, url_params),
            method=endpoint.method,
            request_body=body_params,
        ),
        clone=dual.clone.with_request(
            url=engine.clone_client.build_url(endpoint.path, url_params),
            method=endpoint.method,
            request_body=body_params,
        ),
        dual_duration=dual.dual_duration,
    )

    if cache is not None:
        if enriched.real.ok and enriched.real.body:
            cache.real.cache_response_data(enriched.real.body)
        if enriched.clone.ok and enriched.clone.body:
            cache.clone.cache_response_data(enriched.clone.body)

    logger.debug("comparison of %s finished: %s", endpoint.id, diff.summary())
    return ComparisonOutcome(endpoint=endpoint, dual=enriched, diff=diff)
