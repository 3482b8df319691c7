"""Localised output strings.

``en`` is the default catalogue; ``zh`` reproduces the wording of the
original Chinese-language tool.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    root_label: str
    packages_section: str
    snapshots_section: str
    lockfile_version: str
    looking_for: str
    requested_version: str
    not_found: str
    version_mismatch: str
    expected_version: str
    actual_versions: str
    found: str
    found_at_version: str
    location: str
    type: str
    specifier: str
    version: str
    batch_mode: str
    batch_results: str
    expected_versions: str
    any_version: str
    status: str
    detection_date: str
    statistics: str
    total: str
    found_count: str
    partial_count: str
    mismatch_count: str
    not_found_count: str
    report_written: str


EN = Messages(
    root_label="root",
    packages_section="packages section",
    snapshots_section="snapshots section",
    lockfile_version="Lockfile version: {version}",
    looking_for="Looking for package: {name}",
    requested_version="Requested version: {version}",
    not_found="❌ Package not found: {name}",
    version_mismatch="❌ Found package '{name}' but no version matches",
    expected_version="   Expected version: {version}",
    actual_versions="   Actual versions:",
    found="✅ Found package: {name}",
    found_at_version="✅ Found package: {name} @ {version}",
    location="   📍 Location: {location}",
    type="      Type: {type}",
    specifier="      Specifier: {specifier}",
    version="      Version: {version}",
    batch_mode="Batch mode: {count} packages",
    batch_results="📊 Batch check results:",
    expected_versions="   Expected versions: {versions}",
    any_version="any version",
    status="   Status: {status}",
    detection_date="   Detection date: {date}",
    statistics="🎯 Statistics:",
    total="   Total: {count}",
    found_count="   ✅ Found: {count}",
    partial_count="   🟡 Partial match: {count}",
    mismatch_count="   ⚠️ Version mismatch: {count}",
    not_found_count="   ❌ Not found: {count}",
    report_written="📊 Report written to: {path}",
)

ZH = Messages(
    root_label="根目录",
    packages_section="packages节点",
    snapshots_section="snapshots节点",
    lockfile_version="Lockfile 版本: {version}",
    looking_for="正在查找包: {name}",
    requested_version="指定版本: {version}",
    not_found="❌ 未找到包: {name}",
    version_mismatch="❌ 找到包 '{name}' 但版本不匹配",
    expected_version="   期望版本: {version}",
    actual_versions="   实际版本:",
    found="✅ 找到包: {name}",
    found_at_version="✅ 找到包: {name} @ {version}",
    location="   📍 位置: {location}",
    type="      类型: {type}",
    specifier="      规格: {specifier}",
    version="      版本: {version}",
    batch_mode="批量检查模式: {count} 个包",
    batch_results="📊 批量检查结果:",
    expected_versions="   预期版本: {versions}",
    any_version="任意版本",
    status="   状态: {status}",
    detection_date="   检测日期: {date}",
    statistics="🎯 统计信息:",
    total="   总数: {count}",
    found_count="   ✅ 找到: {count}",
    partial_count="   🟡 部分匹配: {count}",
    mismatch_count="   ⚠️ 版本不匹配: {count}",
    not_found_count="   ❌ 未找到: {count}",
    report_written="📊 报告已写入: {path}",
)

CATALOGUES: dict[str, Messages] = {"en": EN, "zh": ZH}


def get_messages(lang: str) -> Messages:
    """Return the catalogue for ``lang``; raise KeyError for unknown languages."""
    try:
        return CATALOGUES[lang]
    except KeyError:
        known = ", ".join(sorted(CATALOGUES))
        raise KeyError(f"Unknown language '{lang}'. Known languages: {known}") from None
