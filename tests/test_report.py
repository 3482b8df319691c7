from __future__ import annotations

from pathlib import Path

import pytest

from pnpm_package_check.errors import InputError
from pnpm_package_check.models import BatchResult, BatchTarget, CheckStatus, Finding
from pnpm_package_check.report import REPORT_COLUMNS, render_report, write_report


def _results() -> list[BatchResult]:
    return [
        BatchResult(
            target=BatchTarget(
                "antd", ("4.8.3",), status="Confirmed", detection_date="2025-09-16"
            ),
            findings=(
                Finding("root", "^4.8.3", "4.8.3", "dependencies"),
                Finding("snapshots section", "", "4.8.3", "snapshots"),
            ),
            status=CheckStatus.PARTIAL_MATCH,
        ),
        BatchResult(
            target=BatchTarget("left-pad"),
            findings=(),
            status=CheckStatus.NOT_FOUND,
        ),
    ]


def test_render_report_header() -> None:
    header = render_report([]).splitlines()[0]

    assert header.split("\t") == list(REPORT_COLUMNS)
    assert header == (
        "Package Name\tStatus\tExpected Versions\tFound Versions\tLocations"
        "\tOriginal Status\tDetection Date"
    )


def test_render_report_rows() -> None:
    lines = render_report(_results()).splitlines()

    assert lines[1].split("\t") == [
        "antd",
        "Partial Match",
        "4.8.3",
        "4.8.3, 4.8.3",
        "root (dependencies); snapshots section (snapshots)",
        "Confirmed",
        "2025-09-16",
    ]
    assert lines[2].split("\t") == ["left-pad", "Not Found", "Any", "None", "None", "", ""]


def test_write_report(tmp_path: Path) -> None:
    path = tmp_path / "report.tsv"

    write_report(_results(), path)

    assert path.read_text(encoding="utf-8") == render_report(_results())


def test_write_report_unwritable_path(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        write_report(_results(), tmp_path / "missing-dir" / "report.tsv")
