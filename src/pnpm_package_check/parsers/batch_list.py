"""Parse tab-separated package lists for batch checks.

Two list layouts are recognised from their header line:

- simple: ``<index>\\tPackage Name\\tVersion(s)``
- compromised: ``Package Name\\tCompromised Version(s)\\tDetection Date\\tStatus``

Versions are ``", "``-separated; an empty version field means any version.
Rows with too few fields, and rows whose package name is empty, are skipped
without raising, so such a row is silently absent from the results.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from ..errors import FormatError, InputError
from ..models import BatchTarget

log = structlog.get_logger(__name__)


def split_versions(field: str) -> tuple[str, ...]:
    field = field.strip()
    if not field:
        return ()
    return tuple(v.strip() for v in field.split(", "))


def _simple_row(parts: list[str]) -> BatchTarget:
    return BatchTarget.from_fields(parts[1].strip(), split_versions(parts[2]))


def _compromised_row(parts: list[str]) -> BatchTarget:
    return BatchTarget.from_fields(
        parts[0].strip(),
        split_versions(parts[1]),
        detection_date=parts[2].strip(),
        status=parts[3].strip(),
    )


@dataclass(frozen=True)
class BatchFormat:
    """A list layout: how to recognise its header and how to read a row."""

    id: str
    signature: str
    min_fields: int
    read_row: Callable[[list[str]], BatchTarget]


SIMPLE_FORMAT = BatchFormat(
    id="simple",
    signature="Package Name\tVersion(s)",
    min_fields=3,
    read_row=_simple_row,
)

COMPROMISED_FORMAT = BatchFormat(
    id="compromised",
    signature="Package Name\tCompromised Version(s)\tDetection Date\tStatus",
    min_fields=4,
    read_row=_compromised_row,
)

BATCH_FORMATS: tuple[BatchFormat, ...] = (SIMPLE_FORMAT, COMPROMISED_FORMAT)


def detect_format(header: str) -> BatchFormat:
    """Return the format whose signature occurs in ``header``."""
    for fmt in BATCH_FORMATS:
        if fmt.signature in header:
            return fmt
    raise FormatError(f"Unrecognised batch file format: {header}")


def parse_lines(lines: Iterable[str]) -> list[BatchTarget]:
    """Parse a list given as lines, the first being the header."""
    iterator = iter(lines)
    header = next(iterator, None)
    if header is None:
        return []

    fmt = detect_format(header)
    log.debug("batch.format_detected", format=fmt.id)

    targets: list[BatchTarget] = []
    for lineno, line in enumerate(iterator, start=2):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < fmt.min_fields:
            log.debug("batch.row_skipped", line=lineno, reason="too few fields")
            continue
        try:
            targets.append(fmt.read_row(parts))
        except ValueError as exc:
            log.debug("batch.row_skipped", line=lineno, reason=str(exc))
    return targets


def parse_text(text: str) -> list[BatchTarget]:
    return parse_lines(text.lstrip("\ufeff").splitlines())


def read_text(source: str) -> str:
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read batch file '{source}': {exc}") from exc


def parse(source: str) -> list[BatchTarget]:
    """Load and parse a package list from a local file."""
    targets = parse_text(read_text(source))
    log.info("batch.parsed", source=source, packages=len(targets))
    return targets
