"""Load pnpm-lock.yaml into a LockDocument.

The YAML is validated against a JSON Schema before conversion so that every
structural problem is reported at once, with a pointer to where it occurred.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import yaml
from jsonschema import Draft202012Validator

from ..errors import FormatError, InputError
from ..models import LockDocument

log = structlog.get_logger(__name__)

_STRING_MAP: dict[str, Any] = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string"},
}

_DECLARATION: dict[str, Any] = {
    "type": "object",
    "required": ["specifier", "version"],
    "properties": {
        "specifier": {"type": "string"},
        "version": {"type": "string"},
    },
}

_DECLARATION_MAP: dict[str, Any] = {
    "type": ["object", "null"],
    "additionalProperties": _DECLARATION,
}

LOCKFILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["lockfileVersion"],
    "properties": {
        "lockfileVersion": {"type": ["string", "number"]},
        "importers": {
            "type": ["object", "null"],
            "additionalProperties": {
                "type": ["object", "null"],
                "properties": {
                    "dependencies": _DECLARATION_MAP,
                    "devDependencies": _DECLARATION_MAP,
                    "optionalDependencies": _DECLARATION_MAP,
                },
            },
        },
        "packages": {
            "type": ["object", "null"],
            "additionalProperties": {
                "type": "object",
                "required": ["resolution"],
                "properties": {
                    "resolution": {
                        "type": "object",
                        "properties": {
                            "integrity": {"type": "string"},
                            "tarball": {"type": "string"},
                        },
                        # git/directory resolutions carry no integrity hash
                        "anyOf": [
                            {"required": ["integrity"]},
                            {"required": ["tarball"]},
                            {"required": ["directory"]},
                            {"required": ["repo", "commit"]},
                        ],
                    },
                    "dependencies": _STRING_MAP,
                    "peerDependencies": _STRING_MAP,
                    "devDependencies": _STRING_MAP,
                },
            },
        },
        "snapshots": {
            "type": ["object", "null"],
            "additionalProperties": {
                "type": ["object", "null"],
                "properties": {
                    "dependencies": _STRING_MAP,
                    "devDependencies": _STRING_MAP,
                    "optionalDependencies": _STRING_MAP,
                },
            },
        },
    },
}


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate(data: Any) -> None:
    """Raise FormatError if ``data`` is not a structurally valid lockfile."""
    validator = Draft202012Validator(LOCKFILE_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
    if errors:
        raise FormatError("Invalid pnpm lockfile structure:\n" + _format_errors(errors))


def loads(text: str) -> LockDocument:
    """Parse lockfile YAML text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatError(f"Failed to parse pnpm lockfile: {exc}") from exc

    validate(data)
    return LockDocument.from_dict(data)


def load(path: Path) -> LockDocument:
    """Read and parse the lockfile at ``path``."""
    if not path.exists():
        raise InputError(f"File '{path}' does not exist")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read file '{path}': {exc}") from exc

    document = loads(text)
    log.info(
        "lockfile.loaded",
        path=str(path),
        lockfile_version=document.lockfile_version,
        importers=len(document.importers),
        packages=len(document.packages),
        snapshots=len(document.snapshots),
    )
    return document
