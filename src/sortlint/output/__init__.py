"""Report rendering for lint results."""

from .report import (
    collect_violations,
    render,
    render_json,
    render_xcode,
    report_to_list,
    summarize,
    write_report_json,
)

__all__ = [
    "collect_violations",
    "render",
    "render_json",
    "render_xcode",
    "report_to_list",
    "summarize",
    "write_report_json",
]
