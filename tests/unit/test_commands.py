"""
命令构造单元测试

每个模块完成后必须运行：pytest tests/unit/test_commands.py -v
"""

from pathlib import Path

import pytest

from cargo_wix.config.runtime_config import LinkerConfig, SigningConfig, ToolsConfig
from cargo_wix.interfaces import CargoWixError, ErrorKind
from cargo_wix.pipeline import (
    ArgumentList,
    build_command,
    compile_command,
    link_command,
    sign_command,
)


class TestArgumentList:
    """参数列表测试"""

    def test_define(self):
        """测试预处理变量格式"""
        argv = ArgumentList("candle").define("Version", "1.0.0").to_list()
        assert argv == ["candle", "-dVersion=1.0.0"]

    def test_value_with_spaces_is_single_argument(self):
        """测试含空格的值保持为一个参数"""
        argv = ArgumentList("candle").define("Author", "Jane Doe <jane@example.com>").to_list()
        assert argv[1] == "-dAuthor=Jane Doe <jane@example.com>"
        assert len(argv) == 2

    @pytest.mark.parametrize("value", ["line1\nline2", "nul\x00", "cr\r"])
    def test_reject_control_chars(self, value):
        """测试拒绝控制字符"""
        with pytest.raises(CargoWixError) as exc_info:
            ArgumentList("candle").define("Description", value)
        assert exc_info.value.kind is ErrorKind.GENERIC

    @pytest.mark.parametrize("key", ["", "1abc", "Bad Key", "a=b"])
    def test_reject_invalid_define_key(self, key):
        """测试拒绝非法变量名"""
        with pytest.raises(CargoWixError):
            ArgumentList("candle").define(key, "x")

    def test_reject_empty_program(self):
        with pytest.raises(CargoWixError):
            ArgumentList("  ")

    def test_to_list_returns_copy(self):
        """测试 to_list 返回独立副本，可继续追加参数"""
        args = ArgumentList("signtool").flag("sign", "/a")
        first = args.to_list()
        first.append("extra")
        assert args.path("demo.msi").to_list() == ["signtool", "sign", "/a", "demo.msi"]


class TestStageCommands:
    """阶段命令测试"""

    def test_build_command(self):
        assert build_command(ToolsConfig()) == ["cargo", "build", "--release"]

    def test_compile_command(self, sample_build_config, sample_paths):
        """测试编译命令"""
        argv = compile_command(sample_build_config, sample_paths, ToolsConfig())
        assert argv == [
            "candle",
            "-dVersion=2.1.0",
            "-dPlatform=x64",
            "-dProductName=demo",
            "-dBinaryName=demo-cli",
            "-dDescription=A demo command line application",
            "-dAuthor=Jane Doe <jane@example.com>",
            "-o",
            str(Path("target/wix/build/main.wixobj")),
            str(Path("wix/main.wxs")),
        ]

    def test_link_command(self, sample_paths):
        """测试链接命令"""
        argv = link_command(sample_paths, ToolsConfig())
        assert argv == [
            "light",
            "-ext",
            "WixUIExtension",
            "-cultures:en-us",
            str(Path("target/wix/build/main.wixobj")),
            "-out",
            str(Path("target/wix/demo-2.1.0-x86_64.msi")),
        ]

    def test_link_command_culture(self, sample_paths):
        argv = link_command(sample_paths, ToolsConfig(), LinkerConfig(culture="de-de"))
        assert "-cultures:de-de" in argv

    def test_sign_command(self, sample_paths):
        """测试签名命令"""
        argv = sign_command(sample_paths, ToolsConfig())
        assert argv == ["signtool", "sign", "/a", str(Path("target/wix/demo-2.1.0-x86_64.msi"))]

    def test_sign_command_timestamp(self, sample_paths):
        """测试签名时间戳服务器"""
        signing = SigningConfig(timestamp_url="http://timestamp.example.com")
        argv = sign_command(sample_paths, ToolsConfig(), signing)
        assert argv[:5] == ["signtool", "sign", "/a", "/t", "http://timestamp.example.com"]
        assert argv[-1].endswith(".msi")

    def test_custom_tool_paths(self, sample_paths):
        tools = ToolsConfig(linker=r"C:\WiX\bin\light.exe")
        assert link_command(sample_paths, tools)[0] == r"C:\WiX\bin\light.exe"
