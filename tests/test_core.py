from __future__ import annotations

from pnpm_package_check.core import check_batch, check_package
from pnpm_package_check.models import BatchTarget, CheckStatus, LockDocument


def test_check_package_without_version(lock_doc: LockDocument) -> None:
    result = check_package(lock_doc, "react")

    assert result.status is CheckStatus.FOUND
    assert result.ok
    assert result.matched == result.findings


def test_check_package_single_exact_match_is_found() -> None:
    doc = LockDocument.from_dict(
        {
            "lockfileVersion": "9.0",
            "importers": {
                ".": {"dependencies": {"antd": {"specifier": "^4.8.3", "version": "4.8.3"}}}
            },
        }
    )

    result = check_package(doc, "antd", "4.8.3")

    assert result.status is CheckStatus.FOUND
    assert result.ok


def test_check_package_keeps_only_matching_findings(lock_doc: LockDocument) -> None:
    result = check_package(lock_doc, "react", "18.2.0")

    # packages/web and the react@18.2.0 snapshot both match one expected version
    assert result.status is CheckStatus.PARTIAL_MATCH
    assert result.ok
    assert [f.location for f in result.matched] == ["packages/web", "snapshots section"]


def test_check_package_prefix_matches_every_minor(lock_doc: LockDocument) -> None:
    result = check_package(lock_doc, "react", "18")

    assert result.ok
    assert len(result.matched) == len(result.findings) == 4


def test_check_package_version_mismatch(lock_doc: LockDocument) -> None:
    result = check_package(lock_doc, "antd", "5.0.0")

    assert result.status is CheckStatus.VERSION_MISMATCH
    assert not result.ok
    assert result.matched == ()


def test_check_package_not_found(lock_doc: LockDocument) -> None:
    result = check_package(lock_doc, "left-pad")

    assert result.status is CheckStatus.NOT_FOUND
    assert not result.ok


def test_check_batch_preserves_order(lock_doc: LockDocument) -> None:
    targets = [
        BatchTarget("left-pad"),
        BatchTarget("antd"),
        BatchTarget("react", ("18.3.1", "18.2.0")),
        BatchTarget("@ant-design/icons", ("5",)),
    ]

    results = check_batch(lock_doc, targets)

    assert [r.target for r in results] == targets
    assert [r.status for r in results] == [
        CheckStatus.NOT_FOUND,
        CheckStatus.FOUND,
        CheckStatus.PARTIAL_MATCH,
        CheckStatus.VERSION_MISMATCH,
    ]
