"""
清单读取器 - 读取 Cargo.toml

职责：
- 读取并解析TOML
- 按固定路径提取 version / name / description / authors[0]
- [bin] name 可选，缺省回退为包名

每次运行读取一次，不缓存。

使用方式：
    manifest = load_manifest("Cargo.toml")
    print(manifest.bin_name)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ..interfaces import CargoWixError, IManifestReader
from ..models import PackageManifest

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_FILE = Path("Cargo.toml")


class ManifestReader(IManifestReader):
    """Cargo.toml 读取器"""

    def read(self, manifest_path: Path = DEFAULT_MANIFEST_FILE) -> PackageManifest:
        """读取清单并提取字段"""
        path = Path(manifest_path)
        logger.debug(f"manifest_path = {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CargoWixError.io(e) from e

        try:
            values = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise CargoWixError.parse_failure(e) from e

        return self.extract(values)

    def extract(self, values: dict[str, Any]) -> PackageManifest:
        """从已解析的文档中提取字段（顺序固定: version, name, description, authors）"""
        package = values.get("package")
        if not isinstance(package, dict):
            package = {}

        version = _require_str(package, "version")
        logger.debug(f"pkg_version = {version!r}")
        name = _require_str(package, "name")
        logger.debug(f"pkg_name = {name!r}")
        description = _require_str(package, "description")
        logger.debug(f"pkg_description = {description!r}")

        # 暂时只使用第一个作者
        authors = package.get("authors")
        if not isinstance(authors, list) or not authors or not isinstance(authors[0], str):
            raise CargoWixError.manifest("authors")
        author = authors[0]
        logger.debug(f"pkg_author = {author!r}")

        bin_name = name
        bin_table = values.get("bin")
        if isinstance(bin_table, dict) and isinstance(bin_table.get("name"), str):
            bin_name = bin_table["name"]
        logger.debug(f"bin_name = {bin_name!r}")

        return PackageManifest(
            version=version,
            name=name,
            description=description,
            author=author,
            bin_name=bin_name,
        )


def _require_str(table: dict[str, Any], key: str) -> str:
    value = table.get(key)
    if not isinstance(value, str):
        raise CargoWixError.manifest(key)
    return value


# 便捷函数
def load_manifest(manifest_path: str | Path = DEFAULT_MANIFEST_FILE) -> PackageManifest:
    """读取 Cargo.toml"""
    return ManifestReader().read(Path(manifest_path))
