"""Check outcomes and per-package results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .batch_target import BatchTarget
from .finding import Finding


class CheckStatus(str, Enum):
    """Outcome of reconciling expected versions against findings.

    Values are the labels used in the machine-readable report.
    """

    FOUND = "Found"
    VERSION_MISMATCH = "Version Mismatch"
    NOT_FOUND = "Not Found"
    PARTIAL_MATCH = "Partial Match"


@dataclass(frozen=True)
class BatchResult:
    target: BatchTarget
    findings: tuple[Finding, ...]
    status: CheckStatus

    @property
    def found_versions(self) -> list[str]:
        return [finding.version for finding in self.findings]


@dataclass(frozen=True)
class SingleCheckResult:
    """Result of checking one package, optionally pinned to one version."""

    name: str
    requested_version: str | None
    findings: tuple[Finding, ...]
    matched: tuple[Finding, ...]
    status: CheckStatus

    @property
    def ok(self) -> bool:
        """True when the package is present (at the requested version, if any)."""
        return self.status in {CheckStatus.FOUND, CheckStatus.PARTIAL_MATCH}
