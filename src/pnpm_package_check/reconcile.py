"""Classify what was found against what was expected."""

from __future__ import annotations

from collections.abc import Sequence

from .models import CheckStatus, Finding
from .parsers.semver import matches_any


def matching_findings(
    expected_versions: Sequence[str], findings: Sequence[Finding]
) -> list[Finding]:
    """Return the findings whose version satisfies any expected version."""
    return [f for f in findings if matches_any(f.version, expected_versions)]


def classify(expected_versions: Sequence[str], findings: Sequence[Finding]) -> CheckStatus:
    """Reconcile expected versions with findings.

    - no findings: NOT_FOUND
    - no expected versions: FOUND (presence is enough)
    - no finding matches any expected version: VERSION_MISMATCH
    - as many matching findings as expected versions: FOUND
    - otherwise: PARTIAL_MATCH

    The last two rules compare counts. Two findings matching the same
    expected version still count twice, so this is not a proof that every
    expected version was seen.
    """
    if not findings:
        return CheckStatus.NOT_FOUND
    if not expected_versions:
        return CheckStatus.FOUND

    matched = matching_findings(expected_versions, findings)
    if not matched:
        return CheckStatus.VERSION_MISMATCH
    if len(matched) == len(expected_versions):
        return CheckStatus.FOUND
    return CheckStatus.PARTIAL_MATCH
