"""Locate a package across the sections of a pnpm lockfile.

Three independent passes are made:

1. ``importers``: direct dependencies declared by the root project and by
   workspace packages, with the user's specifier.
2. ``packages``: the global resolved-package table. Only keys are inspected.
3. ``snapshots``: per-version dependency edges. A package that is only ever
   pulled in transitively surfaces here through another snapshot's
   ``dependencies`` map.

Keys are matched by substring, so a lookup is a linear scan over each table.
"""

from __future__ import annotations

import structlog

from .messages import EN, Messages
from .models import Finding, LockDocument
from .parsers.lock_keys import (
    name_from_snapshot_key,
    normalize_version,
    package_key_mentions,
    version_from_package_key,
    version_from_snapshot_key,
)

log = structlog.get_logger(__name__)


def _find_in_importers(doc: LockDocument, name: str, messages: Messages) -> list[Finding]:
    found: list[Finding] = []
    for path, importer in doc.importers.items():
        location = messages.root_label if path == "." else path
        for section, declarations in importer.sections():
            decl = declarations.get(name)
            if decl is None:
                continue
            found.append(
                Finding(
                    location=location,
                    specifier=decl.specifier,
                    version=normalize_version(decl.version),
                    dependency_type=section,
                )
            )
    return found


def _find_in_packages(
    doc: LockDocument, name: str, messages: Messages, found: list[Finding]
) -> list[Finding]:
    """Scan package keys; a version already present in ``found`` is not repeated."""
    known = {finding.version for finding in found}
    new: list[Finding] = []
    for key in doc.packages:
        if not package_key_mentions(key, name):
            continue
        version = version_from_package_key(key, name)
        if not version or version in known:
            continue
        known.add(version)
        new.append(
            Finding(
                location=messages.packages_section,
                specifier="",
                version=version,
                dependency_type="packages",
            )
        )
    return new


def _find_in_snapshots(
    doc: LockDocument, name: str, messages: Messages, found: list[Finding]
) -> list[Finding]:
    location = messages.snapshots_section
    seen = {(f.version, f.location) for f in found}
    new: list[Finding] = []

    def add(version: str, dependency_type: str) -> None:
        if (version, location) in seen:
            return
        seen.add((version, location))
        new.append(
            Finding(
                location=location,
                specifier="",
                version=version,
                dependency_type=dependency_type,
            )
        )

    for key, snapshot in doc.snapshots.items():
        dep_version = snapshot.dependencies.get(name)
        if dep_version is not None:
            add(normalize_version(dep_version), f"snapshots[{key}].dependencies")

        own_name = name_from_snapshot_key(key)
        if own_name == name or own_name.endswith(f"/{name}"):
            version = version_from_snapshot_key(key)
            if version:
                add(version, "snapshots")
    return new


def locate(doc: LockDocument, name: str, *, messages: Messages = EN) -> list[Finding]:
    """Return every distinct place ``name`` occurs in ``doc``.

    The packages pass skips versions already found anywhere; the snapshots
    pass skips (version, location) pairs already found. An absent package
    yields an empty list.
    """
    findings = _find_in_importers(doc, name, messages)
    log.debug("locator.pass_complete", section="importers", package=name, total=len(findings))

    findings.extend(_find_in_packages(doc, name, messages, findings))
    log.debug("locator.pass_complete", section="packages", package=name, total=len(findings))

    findings.extend(_find_in_snapshots(doc, name, messages, findings))
    log.debug("locator.pass_complete", section="snapshots", package=name, total=len(findings))

    return findings
