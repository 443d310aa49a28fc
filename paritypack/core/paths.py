"""Path addressing and value-kind helpers for JSON documents.

Paths use dot notation for object keys and brackets for array indices,
e.g. ``labels[1].visibility``. The empty path addresses the document root.
"""

from __future__ import annotations

import json
import math
from typing import Any

from paritypack.core.types import JsonKind


def json_kind(value: Any) -> JsonKind | str:
    """Return the JSON kind of a decoded value.

    ``bool`` is checked before numbers because it subclasses ``int``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def join_key(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"


def parent_path(path: str) -> str:
    """Return the immediate parent of ``path`` (``""`` for top-level entries)."""
    cut = max(path.rfind("."), path.rfind("["))
    if cut <= 0:
        return ""
    return path[:cut]


def field_name(path: str) -> str:
    """Return the last key of ``path`` with any index suffix removed."""
    return path.split(".")[-1].split("[")[0]


def display_value(value: Any) -> str:
    """Stringify a primitive the way it reads in a JSON document."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple, dict)):
        return json_text(value)
    return str(value)


def json_text(value: Any) -> str:
    """Compact JSON text for summary messages."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)
