"""Version and composite-key parsing for pnpm lockfile entries.

pnpm encodes name, resolved version and peer annotations into one key, e.g.
``/@ant-design/icons@4.8.3_react@18.3.1`` (lockfile v5) or
``@ahooksjs/use-request@2.8.15(react@18.3.1)`` (v6 and later). Version values
inside dependency maps carry the same annotations:
``4.8.3(react-dom@18.3.1)(react@18.3.1)``.
"""

from __future__ import annotations


def normalize_version(raw: str) -> str:
    """Strip peer annotations from a version string.

    >>> normalize_version("4.8.3(react-dom@18.3.1)(react@18.3.1)")
    '4.8.3'
    """
    head, _, _ = raw.partition("(")
    return head


def _strip_annotations(key: str) -> str:
    # annotations carry their own "@" and must not be read as the separator
    return normalize_version(key)


def _package_key_separators(name: str) -> tuple[str, str]:
    return f"{name}@", f"/{name}@"


def package_key_mentions(key: str, name: str) -> bool:
    """Return True if a ``packages`` key contains either name separator."""
    bare = _strip_annotations(key)
    return any(sep in bare for sep in _package_key_separators(name))


def version_from_package_key(key: str, name: str) -> str:
    """Return the version encoded in a ``packages`` key for ``name``.

    Everything after the separator up to the first ``_`` (the v5 peer
    suffix) is the version. Returns ``""`` when ``name`` does not occur.
    """
    bare = _strip_annotations(key)
    for sep in _package_key_separators(name):
        pos = bare.find(sep)
        if pos != -1:
            rest = bare[pos + len(sep):]
            return rest.split("_", 1)[0]
    return ""


def name_from_snapshot_key(key: str) -> str:
    """Return the package name of a ``snapshots`` key.

    Scoped names start with ``@``, so the name/version separator is the last
    ``@`` of the unannotated key.
    """
    bare = _strip_annotations(key)
    at = bare.rfind("@")
    if at > 0:
        return bare[:at]
    return bare


def version_from_snapshot_key(key: str) -> str:
    """Return the version of a ``snapshots`` key, or ``""`` without one."""
    bare = _strip_annotations(key)
    at = bare.rfind("@")
    if at > 0:
        return bare[at + 1:]
    return ""
