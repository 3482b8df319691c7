"""pnpm-package-check core package.

Look up packages in a pnpm lockfile and reconcile the versions found with the
versions expected, one package at a time or from a batch list.
"""

__version__ = "0.1.0"

__all__ = [
    "core",
]
