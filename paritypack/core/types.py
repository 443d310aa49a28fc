"""Type definitions shared by the diff and render subsystems."""

from typing import Literal

DiffType = Literal[
    "type_mismatch",
    "value_mismatch",
    "missing_in_real",
    "missing_in_clone",
    "array_length_mismatch",
    "missing_response",
]

DIFF_TYPES: tuple[str, ...] = (
    "type_mismatch",
    "value_mismatch",
    "missing_in_real",
    "missing_in_clone",
    "array_length_mismatch",
    "missing_response",
)

Severity = Literal["high", "medium", "low"]

SEVERITY_ORDER: tuple[str, ...] = ("high", "medium", "low")

Side = Literal["real", "clone"]

SIDES: tuple[str, ...] = ("real", "clone")

Classification = Literal["match", "mismatch", "ignored", "none"]

JsonKind = Literal["null", "array", "object", "boolean", "number", "string"]

ROOT_PATH = "<root>"

DEFAULT_IGNORE_FIELDS: tuple[str, ...] = (
    "id",
    "labelId",
    "threadId",
    "messageId",
    "historyId",
    "internalDate",
    "sizeEstimate",
)
