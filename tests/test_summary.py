from __future__ import annotations

from pnpm_package_check.core import check_batch, check_package
from pnpm_package_check.messages import ZH
from pnpm_package_check.models import BatchTarget, LockDocument
from pnpm_package_check.summary import (
    render_batch,
    render_batch_header,
    render_single,
    render_single_header,
)


def test_render_single_found(lock_doc: LockDocument) -> None:
    out = render_single(check_package(lock_doc, "antd"))

    assert out.splitlines() == [
        "✅ Found package: antd",
        "   root @ 4.8.3 (dependencies)",
        "   snapshots section @ 4.8.3 (snapshots)",
    ]


def test_render_single_found_at_version_lists_only_matches(lock_doc: LockDocument) -> None:
    out = render_single(check_package(lock_doc, "react", "18.2"))

    assert out.splitlines() == [
        "✅ Found package: react @ 18.2",
        "   packages/web @ 18.2.0 (dependencies)",
        "   snapshots section @ 18.2.0 (snapshots)",
    ]


def test_render_single_verbose(lock_doc: LockDocument) -> None:
    out = render_single(check_package(lock_doc, "antd", "4"), verbose=True)

    assert "   📍 Location: root" in out
    assert "      Type: dependencies" in out
    assert "      Specifier: ^4.8.3" in out
    assert "      Version: 4.8.3" in out
    # findings outside importers have no specifier line
    assert out.count("Specifier:") == 1


def test_render_single_mismatch(lock_doc: LockDocument) -> None:
    out = render_single(check_package(lock_doc, "antd", "5.0.0"))

    assert out.splitlines()[:4] == [
        "❌ Found package 'antd' but no version matches",
        "   Expected version: 5.0.0",
        "   Actual versions:",
        "   - 4.8.3 (root)",
    ]


def test_render_single_not_found(lock_doc: LockDocument) -> None:
    out = render_single(check_package(lock_doc, "left-pad"))

    assert out == "❌ Package not found: left-pad\n"


def test_render_single_header(lock_doc: LockDocument) -> None:
    assert render_single_header(lock_doc, "antd", "4.8.3").splitlines() == [
        "Lockfile version: 9.0",
        "Looking for package: antd",
        "Requested version: 4.8.3",
        "---",
    ]


def test_render_batch(lock_doc: LockDocument) -> None:
    results = check_batch(
        lock_doc,
        [
            BatchTarget("antd"),
            BatchTarget("react", ("17",), status="Confirmed", detection_date="2025-09-16"),
            BatchTarget("left-pad", ("1.3.0",)),
        ],
    )

    lines = render_batch(results).splitlines()

    assert lines[:3] == ["📊 Batch check results:", "", "✅ antd"]
    assert "⚠️ react" in lines
    assert "   Expected versions: 17" in lines
    assert "   - root @ 18.3.1 (dependencies)" in lines
    assert "   Status: Confirmed" in lines
    assert "   Detection date: 2025-09-16" in lines
    assert "❌ left-pad" in lines
    # not-found packages list no actual versions
    left_pad = lines.index("❌ left-pad")
    assert lines[left_pad + 1 : left_pad + 3] == ["   Expected versions: 1.3.0", ""]
    assert lines[-6:] == [
        "🎯 Statistics:",
        "   Total: 3",
        "   ✅ Found: 1",
        "   🟡 Partial match: 0",
        "   ⚠️ Version mismatch: 1",
        "   ❌ Not found: 1",
    ]


def test_render_batch_verbose_details_found(lock_doc: LockDocument) -> None:
    results = check_batch(lock_doc, [BatchTarget("antd")])

    lines = render_batch(results, verbose=True).splitlines()

    assert lines[3] == "   Expected versions: any version"


def test_render_batch_header_zh(lock_doc: LockDocument) -> None:
    assert render_batch_header(lock_doc, 2, ZH).splitlines() == [
        "Lockfile 版本: 9.0",
        "批量检查模式: 2 个包",
        "---",
    ]
