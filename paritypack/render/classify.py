"""Per-path match classification derived from a flat diff."""

from __future__ import annotations

from paritypack.core.paths import field_name, parent_path
from paritypack.core.types import ROOT_PATH, Classification, Side
from paritypack.diff.models import DiffResult

IGNORED_DISPLAY_FIELDS: frozenset[str] = frozenset(
    {"id", "labelId", "threadId", "messageId", "historyId"}
)

CSS_CLASSES: dict[str, str] = {
    "match": "diff-match",
    "mismatch": "diff-mismatch",
    "ignored": "diff-ignored",
    "none": "",
}

_BOTH_SIDES = frozenset({"type_mismatch", "value_mismatch", "array_length_mismatch"})


def get_diff_class_for_path(
    diff: DiffResult | None,
    path: str,
    side: Side,
    *,
    ignored_fields: frozenset[str] = IGNORED_DISPLAY_FIELDS,
) -> Classification:
    """Classify the node at ``path`` as rendered on ``side``.

    A missing-key record flags only the side that has the value. Below a
    type mismatch (at the parent or the root) every node is a mismatch.
    """
    if diff is None:
        return "none"

    record = diff.find(path)
    if record is not None:
        if record.type in _BOTH_SIDES:
            return "mismatch"
        if record.type == "missing_in_real":
            return "mismatch" if side == "clone" else "none"
        if record.type == "missing_in_clone":
            return "mismatch" if side == "real" else "none"
        return "none"

    if field_name(path) in ignored_fields:
        return "ignored"

    if not diff.has_differences or not path:
        return "none"

    parent = diff.find(parent_path(path))
    if parent is not None and parent.type == "type_mismatch":
        return "mismatch"

    root = diff.find(ROOT_PATH)
    if root is not None and root.type == "type_mismatch":
        return "mismatch"

    return "match"


def css_class(classification: Classification) -> str:
    return CSS_CLASSES[classification]
