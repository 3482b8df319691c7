"""In-memory representation of a parsed pnpm lockfile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _str_map(data: Mapping[str, Any] | None) -> dict[str, str]:
    return {str(k): str(v) for k, v in (data or {}).items()}


@dataclass(frozen=True)
class DependencyDeclaration:
    """A direct dependency as written in an importer."""

    specifier: str
    version: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DependencyDeclaration:
        return cls(specifier=str(data["specifier"]), version=str(data["version"]))


@dataclass(frozen=True)
class Importer:
    """A project or workspace package declaring direct dependencies."""

    dependencies: Mapping[str, DependencyDeclaration] = field(default_factory=dict)
    dev_dependencies: Mapping[str, DependencyDeclaration] = field(default_factory=dict)
    optional_dependencies: Mapping[str, DependencyDeclaration] = field(default_factory=dict)

    def sections(self) -> tuple[tuple[str, Mapping[str, DependencyDeclaration]], ...]:
        """Return (lockfile section name, declarations) pairs in lockfile order."""
        return (
            ("dependencies", self.dependencies),
            ("devDependencies", self.dev_dependencies),
            ("optionalDependencies", self.optional_dependencies),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Importer:
        data = data or {}

        def decls(section: str) -> dict[str, DependencyDeclaration]:
            return {
                str(name): DependencyDeclaration.from_dict(decl)
                for name, decl in (data.get(section) or {}).items()
            }

        return cls(
            dependencies=decls("dependencies"),
            dev_dependencies=decls("devDependencies"),
            optional_dependencies=decls("optionalDependencies"),
        )


@dataclass(frozen=True)
class Resolution:
    integrity: str
    tarball: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Resolution:
        data = data or {}
        tarball = data.get("tarball")
        return cls(
            integrity=str(data.get("integrity") or ""),
            tarball=str(tarball) if tarball is not None else None,
        )


@dataclass(frozen=True)
class PackageRecord:
    """An entry of the global ``packages`` table."""

    resolution: Resolution
    dependencies: Mapping[str, str] = field(default_factory=dict)
    peer_dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PackageRecord:
        data = data or {}
        return cls(
            resolution=Resolution.from_dict(data.get("resolution")),
            dependencies=_str_map(data.get("dependencies")),
            peer_dependencies=_str_map(data.get("peerDependencies")),
            dev_dependencies=_str_map(data.get("devDependencies")),
        )


@dataclass(frozen=True)
class SnapshotRecord:
    """An entry of the ``snapshots`` table: dependency edges of one resolved version."""

    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    optional_dependencies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SnapshotRecord:
        data = data or {}
        return cls(
            dependencies=_str_map(data.get("dependencies")),
            dev_dependencies=_str_map(data.get("devDependencies")),
            optional_dependencies=_str_map(data.get("optionalDependencies")),
        )


@dataclass(frozen=True)
class LockDocument:
    """Immutable view over the sections of a pnpm lockfile."""

    lockfile_version: str
    importers: Mapping[str, Importer] = field(default_factory=dict)
    packages: Mapping[str, PackageRecord] = field(default_factory=dict)
    snapshots: Mapping[str, SnapshotRecord] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LockDocument:
        """Build a document from an already validated YAML mapping."""
        return cls(
            lockfile_version=str(data["lockfileVersion"]),
            importers={
                str(path): Importer.from_dict(imp)
                for path, imp in (data.get("importers") or {}).items()
            },
            packages={
                str(key): PackageRecord.from_dict(rec)
                for key, rec in (data.get("packages") or {}).items()
            },
            snapshots={
                str(key): SnapshotRecord.from_dict(rec)
                for key, rec in (data.get("snapshots") or {}).items()
            },
        )
