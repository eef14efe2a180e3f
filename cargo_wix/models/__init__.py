"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Platform: 目标平台（x86/x64）
- PackageManifest: Cargo.toml 中提取的字段
- BuildConfig: 单次运行的不可变配置
- PathArtifacts: wxs → wixobj → msi 路径
"""

from .build_config import BuildConfig, PackageManifest, PathArtifacts
from .platform import Platform

__all__ = [
    "Platform",
    "PackageManifest",
    "BuildConfig",
    "PathArtifacts",
]
