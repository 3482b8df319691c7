"""Human-readable rendering of check results for the terminal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .messages import EN, Messages
from .models import BatchResult, CheckStatus, Finding, LockDocument, SingleCheckResult

STATUS_ICONS: dict[CheckStatus, str] = {
    CheckStatus.FOUND: "✅",
    CheckStatus.PARTIAL_MATCH: "🟡",
    CheckStatus.VERSION_MISMATCH: "⚠️",
    CheckStatus.NOT_FOUND: "❌",
}


def _finding_lines(finding: Finding, verbose: bool, messages: Messages) -> list[str]:
    if not verbose:
        return [f"   {finding.location} @ {finding.version} ({finding.dependency_type})"]

    lines = [
        messages.location.format(location=finding.location),
        messages.type.format(type=finding.dependency_type),
    ]
    if finding.specifier:
        lines.append(messages.specifier.format(specifier=finding.specifier))
    lines.append(messages.version.format(version=finding.version))
    lines.append("")
    return lines


def render_single_header(
    doc: LockDocument, name: str, version: str | None, messages: Messages = EN
) -> str:
    lines = [
        messages.lockfile_version.format(version=doc.lockfile_version),
        messages.looking_for.format(name=name),
    ]
    if version:
        lines.append(messages.requested_version.format(version=version))
    lines.append("---")
    return "\n".join(lines) + "\n"


def render_single(
    result: SingleCheckResult, verbose: bool = False, messages: Messages = EN
) -> str:
    """Return the report for a single-package check."""
    lines: list[str] = []

    if result.status is CheckStatus.NOT_FOUND:
        lines.append(messages.not_found.format(name=result.name))
    elif result.status is CheckStatus.VERSION_MISMATCH:
        lines.append(messages.version_mismatch.format(name=result.name))
        lines.append(messages.expected_version.format(version=result.requested_version))
        lines.append(messages.actual_versions)
        for finding in result.findings:
            lines.append(f"   - {finding.version} ({finding.location})")
    else:
        if result.requested_version:
            lines.append(
                messages.found_at_version.format(
                    name=result.name, version=result.requested_version
                )
            )
        else:
            lines.append(messages.found.format(name=result.name))
        for finding in result.matched:
            lines.extend(_finding_lines(finding, verbose, messages))

    return "\n".join(lines) + "\n"


def render_batch_header(doc: LockDocument, count: int, messages: Messages = EN) -> str:
    lines = [
        messages.lockfile_version.format(version=doc.lockfile_version),
        messages.batch_mode.format(count=count),
        "---",
    ]
    return "\n".join(lines) + "\n"


def render_batch(
    results: Sequence[BatchResult], verbose: bool = False, messages: Messages = EN
) -> str:
    """Return per-package lines followed by status counts.

    Details are shown for every package that is not plainly found, and for
    all packages when ``verbose`` is set.
    """
    lines = [messages.batch_results, ""]
    counts: Counter[CheckStatus] = Counter()

    for result in results:
        counts[result.status] += 1
        lines.append(f"{STATUS_ICONS[result.status]} {result.target.name}")

        if not verbose and result.status is CheckStatus.FOUND:
            continue

        expected = ", ".join(result.target.versions) or messages.any_version
        lines.append(messages.expected_versions.format(versions=expected))

        if result.status is not CheckStatus.NOT_FOUND:
            lines.append(messages.actual_versions)
            for finding in result.findings:
                lines.append(
                    f"   - {finding.location} @ {finding.version} ({finding.dependency_type})"
                )

        if result.target.status is not None:
            lines.append(messages.status.format(status=result.target.status))
        if result.target.detection_date is not None:
            lines.append(messages.detection_date.format(date=result.target.detection_date))
        lines.append("")

    lines.extend(
        [
            messages.statistics,
            messages.total.format(count=len(results)),
            messages.found_count.format(count=counts[CheckStatus.FOUND]),
            messages.partial_count.format(count=counts[CheckStatus.PARTIAL_MATCH]),
            messages.mismatch_count.format(count=counts[CheckStatus.VERSION_MISMATCH]),
            messages.not_found_count.format(count=counts[CheckStatus.NOT_FOUND]),
        ]
    )
    return "\n".join(lines) + "\n"
