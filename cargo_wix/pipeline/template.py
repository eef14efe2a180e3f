"""
示例 WiX 源文件（templates/main.wxs）

内容固定，随包分发，不做解析。
"""

from __future__ import annotations

import sys
from functools import lru_cache
from importlib import resources
from typing import TextIO

from ..interfaces import CargoWixError

TEMPLATE_PACKAGE = "cargo_wix.templates"
TEMPLATE_NAME = "main.wxs"


@lru_cache(maxsize=1)
def get_template() -> str:
    """读取模板内容"""
    return resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_NAME).read_text(encoding="utf-8")


def print_template(stream: TextIO | None = None) -> None:
    """输出模板（默认 stdout）"""
    out = stream if stream is not None else sys.stdout
    try:
        out.write(get_template())
        out.flush()
    except OSError as e:
        raise CargoWixError.io(e) from e
