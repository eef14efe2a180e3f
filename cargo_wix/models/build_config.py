"""
构建配置模型 - 单次流水线运行期间不可变的数据

- PackageManifest: 从 Cargo.toml 提取的包元数据
- BuildConfig: 贯穿各阶段的参数集合
- PathArtifacts: 由配置推导出的三个文件路径
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .platform import Platform


class PackageManifest(BaseModel):
    """清单字段"""
    version: str
    name: str
    description: str
    author: str = Field(..., description="authors 列表中的第一个")
    bin_name: str = Field(..., description="[bin] name，缺省为包名")

    model_config = {"frozen": True}


class BuildConfig(BaseModel):
    """流水线配置（构造后不再修改）"""
    name: str
    version: str
    description: str
    author: str
    bin_name: str
    platform: Platform
    sign: bool = False
    capture_output: bool = True

    model_config = {"frozen": True}

    @classmethod
    def from_manifest(
        cls,
        manifest: PackageManifest,
        platform: Platform,
        sign: bool = False,
        capture_output: bool = True,
    ) -> BuildConfig:
        return cls(
            name=manifest.name,
            version=manifest.version,
            description=manifest.description,
            author=manifest.author,
            bin_name=manifest.bin_name,
            platform=platform,
            sign=sign,
            capture_output=capture_output,
        )

    @property
    def installer_name(self) -> str:
        """安装包文件名: {name}-{version}-{arch}.msi"""
        # 不能用 with_suffix：版本号含点，会被当作扩展名替换掉
        return f"{self.name}-{self.version}-{self.platform.arch}.msi"


class PathArtifacts(BaseModel):
    """各阶段的输入输出路径（相对于工作目录）"""
    source: Path = Field(..., description="WiX 源文件 (.wxs)")
    wixobj: Path = Field(..., description="编译中间产物 (.wixobj)")
    installer: Path = Field(..., description="最终安装包 (.msi)")

    model_config = {"frozen": True}

    @classmethod
    def resolve(
        cls,
        config: BuildConfig,
        source_dir: Path = Path("wix"),
        output_dir: Path = Path("target/wix"),
        build_dir: Path = Path("target/wix/build"),
        main_name: str = "main",
    ) -> PathArtifacts:
        """推导路径"""
        return cls(
            source=source_dir / f"{main_name}.wxs",
            wixobj=build_dir / f"{main_name}.wixobj",
            installer=output_dir / config.installer_name,
        )
