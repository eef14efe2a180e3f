"""
流水线模块 - 安装包构建编排

子模块：
- stages: 流水线各阶段定义
- commands: 各阶段命令参数构造
- process: 外部进程执行
- executor: 流水线执行器
- template: 示例 WiX 源文件
"""

from .commands import ArgumentList, build_command, compile_command, link_command, sign_command
from .executor import PipelineExecutor, run
from .process import SubprocessRunner
from .stages import INSTALLER_STAGES, PipelineStage, StageEnum
from .template import get_template, print_template

__all__ = [
    "ArgumentList",
    "build_command",
    "compile_command",
    "link_command",
    "sign_command",
    "PipelineExecutor",
    "run",
    "SubprocessRunner",
    "PipelineStage",
    "StageEnum",
    "INSTALLER_STAGES",
    "get_template",
    "print_template",
]
