"""
进程执行器 - subprocess 封装

职责：
- 同步启动外部进程并等待结束（无超时、无取消）
- capture_output=True 时丢弃 stdout/stderr，否则继承调用方
- 返回退出码，启动失败时抛出 OSError 由调用方处理
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from ..interfaces import IProcessRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(IProcessRunner):
    """基于 subprocess.run 的实现"""

    def run(
        self,
        argv: Sequence[str],
        capture_output: bool = True,
        cwd: Path | None = None,
    ) -> int:
        stream = subprocess.DEVNULL if capture_output else None
        logger.debug(f"command = {list(argv)}")
        result = subprocess.run(
            list(argv),
            stdout=stream,
            stderr=stream,
            check=False,
            cwd=str(cwd) if cwd else None,
        )
        logger.debug(f"exit status = {result.returncode}")
        return result.returncode
