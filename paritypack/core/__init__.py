"""Shared types and path helpers for ParityKit."""

from paritypack.core.paths import (
    display_value,
    field_name,
    join_index,
    join_key,
    json_kind,
    json_text,
    parent_path,
)
from paritypack.core.types import (
    DEFAULT_IGNORE_FIELDS,
    DIFF_TYPES,
    ROOT_PATH,
    SEVERITY_ORDER,
    SIDES,
    Classification,
    DiffType,
    JsonKind,
    Severity,
    Side,
)

__all__ = [
    "DEFAULT_IGNORE_FIELDS",
    "DIFF_TYPES",
    "ROOT_PATH",
    "SEVERITY_ORDER",
    "SIDES",
    "Classification",
    "DiffType",
    "JsonKind",
    "Severity",
    "Side",
    "display_value",
    "field_name",
    "join_index",
    "join_key",
    "json_kind",
    "json_text",
    "parent_path",
]
