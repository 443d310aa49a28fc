"""Standalone HTML report page wrapping the comparison view."""

from __future__ import annotations

from html import escape

from paritypack.compare.models import BackendResult
from paritypack.diff.models import DiffResult
from paritypack.render.html import render_comparison_view

_REPORT_CSS = """
body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; margin: 24px; color: #202124; }
h1 { font-size: 18px; margin-bottom: 12px; }
.comparison-container { display: flex; flex-direction: column; gap: 16px; }
.diff-summary { border-radius: 6px; padding: 12px 16px; }
.diff-summary.match { background: #e6f4ea; }
.diff-summary.mismatch { background: #fef7e0; }
.diff-low { color: #5f6368; }
.comparison-section { border: 1px solid #dadce0; border-radius: 6px; padding: 12px 16px; }
.comparison-header { display: flex; gap: 12px; align-items: center; margin-bottom: 8px; }
.mode-badge { border-radius: 4px; padding: 2px 8px; font-weight: 600; color: #fff; }
.mode-badge.real { background: #1a73e8; }
.mode-badge.clone { background: #9334e6; }
.comparison-divider { text-align: center; color: #5f6368; font-weight: 600; }
.code-block pre { background: #f8f9fa; padding: 12px; overflow-x: auto; font-size: 12px; }
.status-success { color: #188038; }
.status-warning { color: #e37400; }
.status-error { color: #d93025; }
.response-time { color: #5f6368; }
.error-message { color: #d93025; margin-top: 8px; }
.diff-match { background: #e6f4ea; }
.diff-mismatch { background: #fce8e6; }
.diff-ignored { color: #9aa0a6; }
"""


def render_report_page(
    real_result: BackendResult,
    clone_result: BackendResult,
    diff: DiffResult,
    *,
    title: str = "ParityKit comparison",
) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{escape(title)}</title>
  <style>{_REPORT_CSS}</style>
</head>
<body>
  <h1>{escape(title)}</h1>
{render_comparison_view(real_result, clone_result, diff)}
</body>
</html>
"""
