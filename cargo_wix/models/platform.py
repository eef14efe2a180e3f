"""
目标平台 - 安装包架构

由运行期主机架构决定（而非编译期常量），便于测试
"""

from __future__ import annotations

import platform as _platform
from enum import Enum

# platform.machine() 在各系统上的64位写法
_X64_MACHINES = frozenset({"x86_64", "amd64", "x64"})


class Platform(str, Enum):
    """安装包平台（值为短名称，用于文件名和 -dPlatform 参数）"""
    X86 = "x86"
    X64 = "x64"

    @property
    def arch(self) -> str:
        """目标三元组中的架构标识"""
        return "x86_64" if self is Platform.X64 else "i686"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_machine(cls, machine: str) -> Platform:
        """根据主机架构名选择平台"""
        if machine.strip().lower() in _X64_MACHINES:
            return cls.X64
        return cls.X86

    @classmethod
    def detect(cls) -> Platform:
        """读取当前主机架构"""
        return cls.from_machine(_platform.machine())
