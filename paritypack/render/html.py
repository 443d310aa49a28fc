"""HTML comparison view with per-node diff highlighting."""

from __future__ import annotations

from html import escape
from http import HTTPStatus
import json
from typing import Any

from paritypack.compare.models import BackendResult
from paritypack.core.paths import display_value, join_index, join_key
from paritypack.core.types import SEVERITY_ORDER, Side
from paritypack.diff.formatting import format_diff_message, status_line
from paritypack.diff.models import DiffRecord, DiffResult
from paritypack.render.classify import css_class, get_diff_class_for_path

_SIDE_LABELS = {"real": "Reference", "clone": "Candidate"}

_SEVERITY_ITEM_TEMPLATES = {
    "high": "<li><strong>{path}</strong>: {message}</li>",
    "medium": "<li>{path}: {message}</li>",
    "low": '<li class="diff-low">{path}: {message}</li>',
}


def render_comparison_view(
    real_result: BackendResult,
    clone_result: BackendResult,
    diff: DiffResult,
) -> str:
    """Summary, reference section, separator, candidate section."""
    return "\n".join(
        [
            '<div class="comparison-container">',
            render_summary_block(diff),
            render_api_section(real_result, "real", diff),
            '<div class="comparison-divider">vs</div>',
            render_api_section(clone_result, "clone", diff),
            "</div>",
        ]
    )


def render_summary_block(diff: DiffResult) -> str:
    is_match = not diff.has_differences
    status_class = "match" if is_match else "mismatch"
    badge_class = "success" if is_match else "warning"
    icon = "&#10003;" if is_match else "&#9888;"

    details_html = ""
    if not is_match:
        details_html = (
            '<div class="diff-details"><strong>Differences:</strong>'
            f"<ul>{format_diff_details(diff.details)}</ul></div>"
        )

    return (
        f'<div class="diff-summary {status_class}">'
        f'<div><span class="diff-status {badge_class}">{icon} {escape(status_line(diff))}</span></div>'
        f"{details_html}</div>"
    )


def format_diff_details(details: list[DiffRecord]) -> str:
    """List items grouped high, then medium, then low severity."""
    items: list[str] = []
    for severity in SEVERITY_ORDER:
        template = _SEVERITY_ITEM_TEMPLATES[severity]
        for record in details:
            if record.severity != severity:
                continue
            items.append(
                template.format(
                    path=escape(record.path),
                    message=escape(format_diff_message(record)),
                )
            )
    return "".join(items)


def render_api_section(result: BackendResult, side: Side, diff: DiffResult) -> str:
    status_class = "status-success"
    if result.status is not None and result.status >= 500:
        status_class = "status-error"
    elif result.status is not None and result.status >= 400:
        status_class = "status-warning"

    parts = [
        f'<div class="comparison-section {side}">',
        '<div class="comparison-header">',
        f'<span class="mode-badge {side}">{_SIDE_LABELS[side]}</span>',
        f'<span class="{status_class}">{result.status or "Error"} {status_text(result.status)}</span>',
        f'<span class="response-time">| {result.response_time or 0}ms</span>',
        "</div>",
    ]

    if result.url:
        request_lines = [f"<div><strong>{escape(result.method or 'GET')}</strong> {escape(result.url)}</div>"]
        if result.request_body:
            rendered_body = json.dumps(result.request_body, indent=2, ensure_ascii=False)
            request_lines.append(f'<div class="request-body">Body: {escape(rendered_body)}</div>')
        parts.append(
            '<div class="comparison-request"><strong>Request:</strong>'
            f'<div class="code-block">{"".join(request_lines)}</div></div>'
        )

    parts.append(
        '<div class="comparison-response"><strong>Response:</strong>'
        f'<div class="code-block"><pre>{highlight_json_with_diff(result.body, diff, side)}</pre></div></div>'
    )
    if result.error:
        parts.append(f'<div class="error-message">Error: {escape(result.error)}</div>')
    parts.append("</div>")
    return "\n".join(parts)


def highlight_json_with_diff(
    value: Any,
    diff: DiffResult | None,
    side: Side,
    path: str = "",
    indent: int = 0,
) -> str:
    """Render ``value`` as indented JSON with every leaf and key tagged.

    Walks only this side's tree; paths that exist only on the other side are
    never looked up.
    """
    indent_str = "  " * indent

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = [
            f"{indent_str}  {highlight_json_with_diff(item, diff, side, join_index(path, idx), indent + 1)}"
            for idx, item in enumerate(value)
        ]
        return "[\n" + ",\n".join(items) + f"\n{indent_str}]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        items = []
        for key, child in value.items():
            child_path = join_key(path, str(key))
            rendered = highlight_json_with_diff(child, diff, side, child_path, indent + 1)
            span_class = css_class(get_diff_class_for_path(diff, child_path, side))
            items.append(
                f'{indent_str}  <span class="{span_class}">"{escape(str(key))}": {rendered}</span>'
            )
        return "{\n" + ",\n".join(items) + f"\n{indent_str}}}"

    span_class = css_class(get_diff_class_for_path(diff, path, side))
    if isinstance(value, str):
        text = f'"{escape(value)}"'
    else:
        text = escape(display_value(value))
    return f'<span class="{span_class}">{text}</span>'


def status_text(status: int | None) -> str:
    if status is None:
        return ""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
