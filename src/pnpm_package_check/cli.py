"""Check whether pnpm-lock.yaml contains a package, optionally at a version."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from .config import Settings, load_settings
from .core import check_batch, check_package
from .errors import CheckError
from .logging import setup_logging
from .messages import CATALOGUES, Messages, get_messages
from .models import LockDocument
from .parsers import batch_list, pnpm_lock
from .report import write_report
from .summary import render_batch, render_batch_header, render_single, render_single_header

log = structlog.get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pnpm-package-check", description=__doc__)
    parser.add_argument(
        "package",
        nargs="?",
        help="Package name to look for (e.g. antd or @ant-design/icons)",
    )
    parser.add_argument(
        "version",
        nargs="?",
        help="Version to match; omitted means any version. '18' matches 18.x.y",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to pnpm-lock.yaml (default: pnpm-lock.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed output")
    parser.add_argument(
        "-b",
        "--batch",
        default=None,
        help="Batch mode: path to a tab-separated package list",
    )
    parser.add_argument("--output", default=None, help="Write a TSV report (batch mode)")
    parser.add_argument("--config", default=None, help="Path to a JSON settings file")
    parser.add_argument(
        "--lang",
        choices=sorted(CATALOGUES),
        default=None,
        help="Output language (default: en)",
    )
    return parser.parse_args(argv)


def _log_level(settings: Settings, verbose: bool) -> str:
    if verbose and settings.log_level_number > logging.INFO:
        return "INFO"
    return settings.log_level


def run_single(
    args: argparse.Namespace, doc: LockDocument, name: str, messages: Messages
) -> int:
    if args.output:
        log.warning("cli.output_ignored", reason="--output only applies to batch mode")
    if args.verbose:
        print(render_single_header(doc, name, args.version, messages), end="")

    result = check_package(doc, name, args.version, messages=messages)
    print(render_single(result, args.verbose, messages), end="")
    return 0 if result.ok else 1


def run_batch(args: argparse.Namespace, doc: LockDocument, messages: Messages) -> int:
    targets = batch_list.parse(args.batch)
    if args.verbose:
        print(render_batch_header(doc, len(targets), messages), end="")

    results = check_batch(doc, targets, messages=messages)
    print(render_batch(results, args.verbose, messages), end="")

    if args.output:
        write_report(results, Path(args.output))
        print()
        print(messages.report_written.format(path=args.output))

    # batch mode reports; it never gates on outcomes
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except CheckError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    setup_logging(_log_level(settings, args.verbose), settings.log_format)
    messages = get_messages(args.lang or settings.lang)

    try:
        doc = pnpm_lock.load(Path(args.file or settings.lockfile))
        if args.batch:
            return run_batch(args, doc, messages)
        if not args.package:
            print(
                "ERROR: A package name is required unless batch mode (-b/--batch) is used",
                file=sys.stderr,
            )
            return 1
        return run_single(args, doc, args.package, messages)
    except CheckError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
