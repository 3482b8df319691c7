#!/usr/bin/env python3
"""Local entrypoint to run the checker from a source checkout.

Usage:
  python scripts/check.py antd 4.8.3 --file path/to/pnpm-lock.yaml
  python scripts/check.py --batch packages.tsv --output report.tsv

This calls the same cli.main used by the installed ``pnpm-package-check``.
"""

from __future__ import annotations

from pnpm_package_check.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
