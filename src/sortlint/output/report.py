"""
Rendering of lint results.

Supports Xcode-style text lines, which editors and CI log parsers pick up, and
a JSON document for tooling.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..config import Severity
from ..engine.runner import FileReport
from ..rules.model import StyleViolation
from ..logging import get_logger

logger = get_logger(__name__)


def collect_violations(reports: Sequence[FileReport]) -> List[StyleViolation]:
    return [violation for report in reports for violation in report.violations]


def render_xcode(reports: Sequence[FileReport]) -> List[str]:
    """One ``path:line:character: severity: ...`` line per violation."""
    return [str(violation) for violation in collect_violations(reports)]


def report_to_list(reports: Sequence[FileReport]) -> List[Dict[str, Any]]:
    return [violation.to_dict() for violation in collect_violations(reports)]


def render_json(reports: Sequence[FileReport]) -> str:
    return json.dumps(report_to_list(reports), indent=2, ensure_ascii=False)


def render(reports: Sequence[FileReport], reporter: str) -> List[str]:
    """Render reports with the named reporter (``xcode`` or ``json``)."""
    if reporter == "json":
        return [render_json(reports)]
    return render_xcode(reports)


def summarize(reports: Sequence[FileReport]) -> str:
    violations = collect_violations(reports)
    serious = sum(1 for v in violations if v.severity is Severity.ERROR)
    file_count = len(reports)
    file_word = "file" if file_count == 1 else "files"
    violation_word = "violation" if len(violations) == 1 else "violations"
    return (
        f"Done linting! Found {len(violations)} {violation_word}, "
        f"{serious} serious in {file_count} {file_word}."
    )


def write_report_json(reports: Sequence[FileReport], report_path: Path) -> Path:
    """
    Write the JSON report to ``report_path``.

    Args:
        reports: Per-file lint results
        report_path: Destination file; parent directories are created

    Returns:
        Path to the written report
    """
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(report_to_list(reports), f, indent=2, ensure_ascii=False)

        logger.info(f"Wrote report to {report_path}")
        return report_path

    except Exception as exc:
        logger.error(f"Failed to write report to {report_path}: {exc}")
        raise
