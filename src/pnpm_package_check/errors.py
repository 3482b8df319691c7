"""Error taxonomy shared by the lockfile checker.

Lookup misses (package absent, version mismatch) are results, not errors; they
never raise.
"""

from __future__ import annotations


class CheckError(RuntimeError):
    """Base error for failures that prevent a check from running."""


class InputError(CheckError):
    """Raised when an input cannot be read or an output cannot be written."""


class FormatError(CheckError):
    """Raised when an input is readable but structurally invalid."""


class ConfigError(CheckError):
    """Raised when the settings file or environment overrides are invalid."""
