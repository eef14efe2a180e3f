"""
命令行构造 - 各阶段外部进程的参数列表

职责：
- 以参数列表（而非拼接字符串）构造命令，不经过shell
- 校验插值内容：不允许空程序名、非法变量名、NUL/换行
- 提供 build / compile / link / sign 四个阶段的命令

测试要点：
- test_compile_command: 预处理变量顺序与输出路径
- test_link_command: UI扩展与语言参数
- test_reject_control_chars: 非法值拒绝
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config.runtime_config import LinkerConfig, SigningConfig, ToolsConfig
from ..interfaces import CargoWixError
from ..models import BuildConfig, PathArtifacts

_DEFINE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")
_FORBIDDEN_CHARS = ("\x00", "\n", "\r")


class ArgumentList:
    """参数列表构造器"""

    def __init__(self, program: str):
        if not program or not program.strip():
            raise CargoWixError.generic("External program name must not be empty")
        self._argv: list[str] = [self._check(program)]

    @staticmethod
    def _check(value: str) -> str:
        for ch in _FORBIDDEN_CHARS:
            if ch in value:
                raise CargoWixError.generic(
                    f"Invalid character {ch!r} in command argument: {value!r}"
                )
        return value

    def flag(self, *flags: str) -> ArgumentList:
        """固定开关"""
        for f in flags:
            self._argv.append(self._check(f))
        return self

    def option(self, name: str, value: str | Path) -> ArgumentList:
        """开关+值（两个独立参数）"""
        self._argv.append(self._check(name))
        self._argv.append(self._check(str(value)))
        return self

    def define(self, key: str, value: str) -> ArgumentList:
        """预处理变量: -d<Key>=<Value>"""
        if not _DEFINE_KEY.match(key):
            raise CargoWixError.generic(f"Invalid preprocessor variable name: {key!r}")
        self._argv.append(self._check(f"-d{key}={value}"))
        return self

    def path(self, value: str | Path) -> ArgumentList:
        """位置参数（路径）"""
        self._argv.append(self._check(str(value)))
        return self

    def to_list(self) -> list[str]:
        return list(self._argv)


def build_command(tools: ToolsConfig) -> list[str]:
    """cargo build --release"""
    return ArgumentList(tools.cargo).flag("build", "--release").to_list()


def compile_command(
    config: BuildConfig, paths: PathArtifacts, tools: ToolsConfig
) -> list[str]:
    """candle -dVersion=... -o <wixobj> <wxs>"""
    return (
        ArgumentList(tools.compiler)
        .define("Version", config.version)
        .define("Platform", str(config.platform))
        .define("ProductName", config.name)
        .define("BinaryName", config.bin_name)
        .define("Description", config.description)
        .define("Author", config.author)
        .option("-o", paths.wixobj)
        .path(paths.source)
        .to_list()
    )


def link_command(
    paths: PathArtifacts, tools: ToolsConfig, linker: LinkerConfig | None = None
) -> list[str]:
    """light -ext WixUIExtension -cultures:en-us <wixobj> -out <msi>"""
    linker = linker or LinkerConfig()
    return (
        ArgumentList(tools.linker)
        .option("-ext", linker.ui_extension)
        .flag(f"-cultures:{linker.culture}")
        .path(paths.wixobj)
        .option("-out", paths.installer)
        .to_list()
    )


def sign_command(
    paths: PathArtifacts, tools: ToolsConfig, signing: SigningConfig | None = None
) -> list[str]:
    """signtool sign /a [/t <url>] <msi>"""
    signing = signing or SigningConfig()
    args = ArgumentList(tools.signer).flag("sign", "/a")
    if signing.timestamp_url:
        args.option("/t", signing.timestamp_url)
    return args.path(paths.installer).to_list()
