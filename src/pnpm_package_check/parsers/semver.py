"""Relaxed version matching.

Supported expressions:
- exact versions (e.g., "1.2.3")
- dot prefixes: "18" and "18.3" both match "18.3.1"

Caret, tilde and comparator ranges are not supported; "^18" never matches.
A prefix only matches at a dot boundary, so "1" does not match "10.0.0".
"""

from __future__ import annotations

from collections.abc import Iterable


def version_matches(actual: str, expected: str) -> bool:
    return actual == expected or actual.startswith(f"{expected}.")


def matches_any(actual: str, expected: Iterable[str]) -> bool:
    """Return True if ``actual`` satisfies at least one expected version."""
    return any(version_matches(actual, exp) for exp in expected)
