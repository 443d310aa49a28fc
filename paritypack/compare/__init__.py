"""Dual-backend comparison subsystem for ParityKit."""

from paritypack.compare.models import BackendResult, ComparisonOutcome, DualResult
from paritypack.compare.exceptions import ComparisonError, DualExecutionError
from paritypack.compare.engine import ComparisonEngine
from paritypack.compare.session import run_comparison

__all__ = [
    "BackendResult",
    "ComparisonEngine",
    "ComparisonError",
    "ComparisonOutcome",
    "DualExecutionError",
    "DualResult",
    "run_comparison",
]
