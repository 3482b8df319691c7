"""Core check entrypoints.

This module MUST NOT print or exit; the CLI decides what a result means for
the process. Callers load the lockfile once and reuse it for every package.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from .locator import locate
from .messages import EN, Messages
from .models import BatchResult, BatchTarget, CheckStatus, LockDocument, SingleCheckResult
from .reconcile import classify, matching_findings

log = structlog.get_logger(__name__)


def check_package(
    doc: LockDocument,
    name: str,
    version: str | None = None,
    *,
    messages: Messages = EN,
) -> SingleCheckResult:
    """Check one package, optionally pinned to ``version``.

    ``matched`` holds every finding when no version is requested, otherwise
    only the findings whose version matches it.
    """
    findings = tuple(locate(doc, name, messages=messages))
    expected = (version,) if version else ()
    status = classify(expected, findings)
    matched = tuple(matching_findings(expected, findings)) if expected else findings

    log.info(
        "check.single",
        package=name,
        version=version,
        findings=len(findings),
        status=status.value,
    )
    return SingleCheckResult(
        name=name,
        requested_version=version,
        findings=findings,
        matched=matched,
        status=status,
    )


def check_target(
    doc: LockDocument, target: BatchTarget, *, messages: Messages = EN
) -> BatchResult:
    findings = tuple(locate(doc, target.name, messages=messages))
    return BatchResult(
        target=target,
        findings=findings,
        status=classify(target.versions, findings),
    )


def check_batch(
    doc: LockDocument,
    targets: Iterable[BatchTarget],
    *,
    messages: Messages = EN,
) -> list[BatchResult]:
    """Check every target; results keep the order of ``targets``."""
    results = [check_target(doc, target, messages=messages) for target in targets]
    log.info(
        "check.batch",
        packages=len(results),
        found=sum(r.status is CheckStatus.FOUND for r in results),
    )
    return results
