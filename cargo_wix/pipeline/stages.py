"""
流水线阶段定义

职责：
1. 定义各阶段的名称、顺序与失败类别
2. 提供阶段失败时的固定诊断信息

测试要点：
- test_stage_order: 阶段顺序固定
- test_stage_error_kind: 阶段与错误类别对应
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..interfaces import CargoWixError, ErrorKind


class StageEnum(str, Enum):
    """流水线阶段枚举"""
    BUILD = "BUILD"
    COMPILE = "COMPILE"
    LINK = "LINK"
    SIGN = "SIGN"


@dataclass(frozen=True)
class PipelineStage:
    """流水线阶段"""
    name: str
    error_kind: ErrorKind
    progress_message: str  # 阶段开始时的日志
    failure_message: str   # 退出码非零时的错误信息
    optional: bool = False  # 仅在 sign=True 时执行

    def failure(self) -> CargoWixError:
        """构造阶段失败错误"""
        return CargoWixError(self.error_kind, self.failure_message)


# 安装包流水线各阶段配置
INSTALLER_STAGES: list[PipelineStage] = [
    PipelineStage(
        StageEnum.BUILD.value,
        ErrorKind.BUILD,
        "构建 release 二进制",
        "Failed to build the release executable",
    ),
    PipelineStage(
        StageEnum.COMPILE.value,
        ErrorKind.COMPILE,
        "编译安装包",
        "Failed to compile the installer",
    ),
    PipelineStage(
        StageEnum.LINK.value,
        ErrorKind.LINK,
        "链接安装包",
        "Failed to link the installer",
    ),
    PipelineStage(
        StageEnum.SIGN.value,
        ErrorKind.SIGN,
        "签名安装包",
        "Failed to sign the installer",
        optional=True,
    ),
]
