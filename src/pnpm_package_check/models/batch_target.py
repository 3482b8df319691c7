"""Batch target model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class BatchTarget:
    """A package to check in batch mode.

    An empty ``versions`` tuple means any installed version counts as found.
    ``status`` and ``detection_date`` are carried through from the list file.
    """

    name: str
    versions: tuple[str, ...] = ()
    status: str | None = None
    detection_date: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")

    @classmethod
    def from_fields(
        cls,
        name: str,
        versions: Iterable[str],
        *,
        status: str | None = None,
        detection_date: str | None = None,
    ) -> BatchTarget:
        return cls(
            name=name,
            versions=tuple(versions),
            status=status,
            detection_date=detection_date,
        )
