"""Machine-readable batch report (tab-separated)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog

from .errors import InputError
from .models import BatchResult

log = structlog.get_logger(__name__)

REPORT_COLUMNS = (
    "Package Name",
    "Status",
    "Expected Versions",
    "Found Versions",
    "Locations",
    "Original Status",
    "Detection Date",
)


def report_row(result: BatchResult) -> list[str]:
    target = result.target
    found = result.findings
    return [
        target.name,
        result.status.value,
        ", ".join(target.versions) or "Any",
        ", ".join(result.found_versions) or "None",
        "; ".join(f"{f.location} ({f.dependency_type})" for f in found) or "None",
        target.status or "",
        target.detection_date or "",
    ]


def render_report(results: Sequence[BatchResult]) -> str:
    """Return the TSV report: a header row plus one row per result, in order."""
    lines = ["\t".join(REPORT_COLUMNS)]
    lines.extend("\t".join(report_row(result)) for result in results)
    return "\n".join(lines) + "\n"


def write_report(results: Sequence[BatchResult], path: Path) -> None:
    try:
        path.write_text(render_report(results), encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot create output file '{path}': {exc}") from exc
    log.info("report.written", path=str(path), rows=len(results))
