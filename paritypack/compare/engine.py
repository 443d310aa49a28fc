"""Paired execution against a reference and a candidate backend."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
import inspect
import logging
import time
from typing import Any

from paritypack.clients.base import ApiClient
from paritypack.compare.exceptions import DualExecutionError
from paritypack.compare.models import DualResult
from paritypack.diff.engine import generate_diff
from paritypack.diff.ignore import IgnoreSpec
from paritypack.diff.models import DiffResult

logger = logging.getLogger(__name__)


class ComparisonEngine:
    """Runs one logical request on both backends and diffs the bodies."""

    def __init__(
        self,
        real_client: ApiClient,
        clone_client: ApiClient,
        *,
        ignore_fields: IgnoreSpec | Iterable[str] | None = None,
    ) -> None:
        self.real_client = real_client
        self.clone_client = clone_client
        self.ignore = IgnoreSpec.of(ignore_fields)

    async def execute_dual(
        self,
        endpoint: str,
        method: str,
        path_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        body_params: Mapping[str, Any] | None = None,
    ) -> DualResult:
        """Call both backends concurrently and wait for both to settle.

        Backend failures come back inside each ``BackendResult``. Only a
        client that raises instead of returning a result makes this fail.
        """
        path_params = dict(path_params or {})
        query_params = dict(query_params or {})
        body_params = dict(body_params or {})
        logger.info("executing dual call: %s %s", method, endpoint)

        started = time.perf_counter()
        calls: list[Any] = []
        try:
            for client in (self.real_client, self.clone_client):
                calls.append(
                    client.execute_request(endpoint, method, path_params, query_params, body_params)
                )
        except Exception as error:
            # Calls already issued were never scheduled.
            for call in calls:
                if inspect.iscoroutine(call):
                    call.close()
            raise _dual_failure(error) from error

        try:
            outcomes = await asyncio.gather(*calls, return_exceptions=True)
        except Exception as error:
            raise _dual_failure(error) from error
        dual_duration = int((time.perf_counter() - started) * 1000)

        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                raise _dual_failure(outcome) from outcome

        real_result, clone_result = outcomes
        logger.info(
            "dual call completed: real_status=%s clone_status=%s duration_ms=%d",
            real_result.status,
            clone_result.status,
            dual_duration,
        )
        return DualResult(real=real_result, clone=clone_result, dual_duration=dual_duration)

    def generate_diff(
        self,
        real_body: Any,
        clone_body: Any,
        ignore_fields: IgnoreSpec | Iterable[str] | None = None,
    ) -> DiffResult:
        spec = self.ignore if ignore_fields is None else IgnoreSpec.of(ignore_fields)
        diff = generate_diff(real_body, clone_body, spec)
        logger.info("diff generated: %d difference(s)", len(diff.details))
        return diff

    def diff_dual(self, dual: DualResult) -> DiffResult:
        # Transport errors are not inspected; a failed side diffs as an absent body.
        return self.generate_diff(dual.real.body, dual.clone.body)


def _dual_failure(error: Exception) -> DualExecutionError:
    logger.error("dual execution failed: %s", error)
    return DualExecutionError(f"Dual execution failed: {error}")
