"""Diff-driven rendering for ParityKit comparison views."""

from paritypack.render.classify import (
    CSS_CLASSES,
    IGNORED_DISPLAY_FIELDS,
    css_class,
    get_diff_class_for_path,
)
from paritypack.render.html import (
    format_diff_details,
    highlight_json_with_diff,
    render_api_section,
    render_comparison_view,
    render_summary_block,
    status_text,
)
from paritypack.render.page import render_report_page

__all__ = [
    "CSS_CLASSES",
    "IGNORED_DISPLAY_FIELDS",
    "css_class",
    "format_diff_details",
    "get_diff_class_for_path",
    "highlight_json_with_diff",
    "render_api_section",
    "render_comparison_view",
    "render_report_page",
    "render_summary_block",
    "status_text",
]
