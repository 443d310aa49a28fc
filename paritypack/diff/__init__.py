"""Diff subsystem for ParityKit."""

from paritypack.diff.engine import compare_arrays, compare_values, generate_diff
from paritypack.diff.formatting import (
    format_diff_message,
    ordered_by_severity,
    render_diff_summary,
    status_line,
)
from paritypack.diff.ignore import (
    DEFAULT_IGNORE_SPEC,
    IgnorePatternError,
    IgnoreSpec,
    should_ignore_field,
)
from paritypack.diff.models import DiffRecord, DiffResult

__all__ = [
    "DEFAULT_IGNORE_SPEC",
    "DiffRecord",
    "DiffResult",
    "IgnorePatternError",
    "IgnoreSpec",
    "compare_arrays",
    "compare_values",
    "format_diff_message",
    "generate_diff",
    "ordered_by_severity",
    "render_diff_summary",
    "should_ignore_field",
    "status_line",
]
