"""Stable public API surface for ParityKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from paritypack.cache import DualResponseCache, ResponseCache
from paritypack.catalog import (
    BUILTIN_ENDPOINTS,
    Endpoint,
    ParamSpec,
    get_endpoint,
    split_params,
)
from paritypack.clients import ApiClient, BackendAuth, HttpApiClient
from paritypack.compare import (
    BackendResult,
    ComparisonEngine,
    ComparisonOutcome,
    DualExecutionError,
    DualResult,
    run_comparison,
)
from paritypack.config import ComparisonConfig, ConfigError, load_comparison_config
from paritypack.core.types import DEFAULT_IGNORE_FIELDS
from paritypack.diff import (
    DiffRecord,
    DiffResult,
    IgnoreSpec,
    generate_diff,
    should_ignore_field,
)
from paritypack.render import (
    get_diff_class_for_path,
    highlight_json_with_diff,
    render_comparison_view,
    render_report_page,
)

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "BUILTIN_ENDPOINTS",
    "BackendAuth",
    "BackendResult",
    "ComparisonConfig",
    "ComparisonEngine",
    "ComparisonOutcome",
    "ConfigError",
    "DEFAULT_IGNORE_FIELDS",
    "DiffRecord",
    "DiffResult",
    "DualExecutionError",
    "DualResponseCache",
    "DualResult",
    "Endpoint",
    "HttpApiClient",
    "IgnoreSpec",
    "ParamSpec",
    "ResponseCache",
    "__version__",
    "generate_diff",
    "get_diff_class_for_path",
    "get_endpoint",
    "highlight_json_with_diff",
    "load_comparison_config",
    "render_comparison_view",
    "render_report_page",
    "run_comparison",
    "should_ignore_field",
    "split_params",
]
