"""
模块接口契约 - 定义各模块的抽象接口与错误分类

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 外部进程只经由 IProcessRunner 启动，便于单元测试和mock替换
3. 错误分类为封闭集合，每一类对应固定的退出码

使用方式：
    from cargo_wix.interfaces import CargoWixError, ErrorKind

    try:
        PipelineExecutor().run()
    except CargoWixError as e:
        sys.exit(e.code)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models import PackageManifest


# ============================================================================
# 清单与进程接口
# ============================================================================

class IManifestReader(ABC):
    """清单读取器接口 - 读取 Cargo.toml"""

    @abstractmethod
    def read(self, manifest_path: Path) -> PackageManifest:
        """
        读取并提取必需字段

        Args:
            manifest_path: 清单文件路径

        Returns:
            提取后的包元数据

        Raises:
            CargoWixError: Io / ParseFailure / Manifest
        """
        ...


class IProcessRunner(ABC):
    """外部进程执行器接口"""

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        capture_output: bool = True,
        cwd: Path | None = None,
    ) -> int:
        """
        启动进程并同步等待结束

        Args:
            argv: 程序名+参数列表
            capture_output: True 时丢弃子进程 stdout/stderr，否则继承调用方
            cwd: 工作目录

        Returns:
            进程退出码

        Raises:
            OSError: 进程无法启动
        """
        ...


# ============================================================================
# 错误定义
# ============================================================================

class ErrorKind(IntEnum):
    """错误类别（值即退出码）"""
    BUILD = 1
    COMPILE = 2
    GENERIC = 3
    IO = 4
    LINK = 5
    MANIFEST = 6
    SIGN = 7
    PARSE_FAILURE = 8

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: dict[ErrorKind, str] = {
    ErrorKind.BUILD: "Build",
    ErrorKind.COMPILE: "Compile",
    ErrorKind.GENERIC: "Generic",
    ErrorKind.IO: "Io",
    ErrorKind.LINK: "Link",
    ErrorKind.MANIFEST: "Manifest",
    ErrorKind.SIGN: "Sign",
    ErrorKind.PARSE_FAILURE: "ParseFailure",
}


class CargoWixError(Exception):
    """
    统一异常类型，由 ErrorKind 区分类别

    Manifest 类只携带缺失的字段名；Io / ParseFailure 通过 __cause__ 保留底层异常。
    """

    def __init__(self, kind: ErrorKind, message: str = "", field: str | None = None):
        if kind is ErrorKind.MANIFEST:
            if not field:
                raise ValueError("Manifest errors require a field name")
            message = f"no '{field}' field found in the manifest."
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field

    @property
    def code(self) -> int:
        """退出码"""
        return int(self.kind)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.kind is ErrorKind.MANIFEST:
            return f"CargoWixError({self.kind.label}, field={self.field!r})"
        return f"CargoWixError({self.kind.label}, {self.message!r})"

    # === 构造方法 ===

    @classmethod
    def build(cls, message: str) -> CargoWixError:
        return cls(ErrorKind.BUILD, message)

    @classmethod
    def compile(cls, message: str) -> CargoWixError:
        return cls(ErrorKind.COMPILE, message)

    @classmethod
    def generic(cls, message: str) -> CargoWixError:
        return cls(ErrorKind.GENERIC, message)

    @classmethod
    def link(cls, message: str) -> CargoWixError:
        return cls(ErrorKind.LINK, message)

    @classmethod
    def sign(cls, message: str) -> CargoWixError:
        return cls(ErrorKind.SIGN, message)

    @classmethod
    def manifest(cls, field: str) -> CargoWixError:
        return cls(ErrorKind.MANIFEST, field=field)

    @classmethod
    def io(cls, err: OSError, message: str | None = None) -> CargoWixError:
        """包装I/O错误（调用方需 raise ... from err 保留原因）"""
        return cls(ErrorKind.IO, message or str(err))

    @classmethod
    def parse_failure(cls, err: Exception) -> CargoWixError:
        """包装清单解析错误（调用方需 raise ... from err 保留原因）"""
        return cls(ErrorKind.PARSE_FAILURE, str(err))
