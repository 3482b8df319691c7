"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pnpm_package_check.logging import setup_logging
from pnpm_package_check.models import LockDocument
from pnpm_package_check.parsers import pnpm_lock

LOCKFILE_V9 = """\
lockfileVersion: '9.0'

settings:
  autoInstallPeers: true
  excludeLinksFromLockfile: false

importers:

  .:
    dependencies:
      antd:
        specifier: ^4.8.3
        version: 4.8.3(react-dom@18.3.1(react@18.3.1))(react@18.3.1)
      react:
        specifier: ^18.3.1
        version: 18.3.1
    devDependencies:
      '@ant-design/icons':
        specifier: ^4.8.3
        version: 4.8.3(react@18.3.1)

  packages/web:
    dependencies:
      react:
        specifier: ^18.2.0
        version: 18.2.0

packages:

  '@ahooksjs/use-request@2.8.15':
    resolution: {integrity: sha512-aaaa}
    peerDependencies:
      react: ^16.8.0 || ^17.0.0 || ^18.0.0

  '@ant-design/icons@4.8.3':
    resolution: {integrity: sha512-bbbb}
    peerDependencies:
      react: '>=16.0.0'

  antd@4.8.3:
    resolution: {integrity: sha512-cccc}

  react-dom@18.3.1:
    resolution: {integrity: sha512-dddd}

  react@18.2.0:
    resolution: {integrity: sha512-eeee}

  react@18.3.1:
    resolution: {integrity: sha512-ffff}

  scheduler@0.23.2:
    resolution: {integrity: sha512-gggg}

snapshots:

  '@ahooksjs/use-request@2.8.15(react@18.3.1)':
    dependencies:
      react: 18.3.1

  '@ant-design/icons@4.8.3(react@18.3.1)':
    dependencies:
      react: 18.3.1

  antd@4.8.3(react-dom@18.3.1(react@18.3.1))(react@18.3.1):
    dependencies:
      '@ahooksjs/use-request': 2.8.15(react@18.3.1)
      '@ant-design/icons': 4.8.3(react@18.3.1)
      react-dom: 18.3.1(react@18.3.1)

  react-dom@18.3.1(react@18.3.1):
    dependencies:
      react: 18.3.1
      scheduler: 0.23.2

  react@18.2.0: {}

  react@18.3.1: {}

  scheduler@0.23.2: {}
"""

_ENV_VARS = (
    "PNPM_PACKAGE_CHECK_CONFIG",
    "PNPM_PACKAGE_CHECK_LANG",
    "PNPM_PACKAGE_CHECK_LOG_LEVEL",
    "PNPM_PACKAGE_CHECK_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    setup_logging("WARNING")


@pytest.fixture
def lock_doc() -> LockDocument:
    return pnpm_lock.loads(LOCKFILE_V9)


@pytest.fixture
def lockfile_path(tmp_path: Path) -> Path:
    path = tmp_path / "pnpm-lock.yaml"
    path.write_text(LOCKFILE_V9, encoding="utf-8")
    return path
