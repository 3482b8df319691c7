"""Data models for lockfile checks."""

from __future__ import annotations

from .batch_target import BatchTarget
from .check_result import BatchResult, CheckStatus, SingleCheckResult
from .finding import Finding
from .lock_document import (
    DependencyDeclaration,
    Importer,
    LockDocument,
    PackageRecord,
    Resolution,
    SnapshotRecord,
)

__all__ = [
    "BatchResult",
    "BatchTarget",
    "CheckStatus",
    "DependencyDeclaration",
    "Finding",
    "Importer",
    "LockDocument",
    "PackageRecord",
    "Resolution",
    "SingleCheckResult",
    "SnapshotRecord",
]
