"""Comparison subsystem exceptions."""


class ComparisonError(Exception):
    """Base class for comparison errors."""


class DualExecutionError(ComparisonError):
    """Orchestrating the paired backend calls failed."""
