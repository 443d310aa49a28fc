"""CLI-friendly rendering for diff results."""

from __future__ import annotations

from paritypack.core.paths import display_value, json_text
from paritypack.core.types import SEVERITY_ORDER
from paritypack.diff.models import DiffRecord, DiffResult


def format_diff_message(record: DiffRecord) -> str:
    """Human message for one record, keyed by its type."""
    if record.type == "value_mismatch":
        return f'Real="{display_value(record.real)}" vs Clone="{display_value(record.clone)}"'
    if record.type == "type_mismatch":
        return f"Type mismatch ({record.message})"
    if record.type == "missing_in_real":
        return f"Missing in Real (Clone has: {json_text(record.clone)})"
    if record.type == "missing_in_clone":
        return f"Missing in Clone (Real has: {json_text(record.real)})"
    if record.type == "array_length_mismatch":
        return f"Array length: Real[{record.real}] vs Clone[{record.clone}]"
    return record.message or "Unknown difference"


def ordered_by_severity(diff: DiffResult) -> list[DiffRecord]:
    """Records grouped high, medium, low; order within a group is kept."""
    ordered: list[DiffRecord] = []
    for severity in SEVERITY_ORDER:
        ordered.extend(diff.by_severity(severity))
    return ordered


def status_line(diff: DiffResult) -> str:
    if not diff.has_differences:
        return "Responses Match"
    count = len(diff.details)
    return f"{count} Difference{'s' if count != 1 else ''} Found"


def render_diff_summary(diff: DiffResult, *, max_records: int | None = None) -> str:
    lines = [status_line(diff)]
    records = ordered_by_severity(diff)
    shown = records if max_records is None else records[:max_records]
    for record in shown:
        lines.append(f"  [{record.severity}] {record.path}: {format_diff_message(record)}")
    if len(shown) < len(records):
        lines.append(f"  ... {len(records) - len(shown)} additional difference(s) omitted")
    return "\n".join(lines)
