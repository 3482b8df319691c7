"""Finding model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Finding:
    """One place a package was located in the lockfile.

    ``version`` is always canonical (no peer annotations). ``specifier`` is
    empty for findings outside the importers section.
    """

    location: str
    specifier: str
    version: str
    dependency_type: str
