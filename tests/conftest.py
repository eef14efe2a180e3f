"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(project_dir, fake_runner):
        PipelineExecutor(runner=fake_runner, work_dir=project_dir).run()
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from cargo_wix.config import RuntimeConfig
from cargo_wix.interfaces import IProcessRunner
from cargo_wix.models import BuildConfig, PathArtifacts, Platform


SAMPLE_MANIFEST = """\
[package]
name = "demo"
version = "2.1.0"
description = "A demo command line application"
authors = ["Jane Doe <jane@example.com>", "John Roe"]
"""


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """包含 Cargo.toml 与 wix/main.wxs 的项目目录"""
    (tmp_path / "Cargo.toml").write_text(SAMPLE_MANIFEST, encoding="utf-8")
    (tmp_path / "wix").mkdir()
    (tmp_path / "wix" / "main.wxs").write_text("<Wix/>", encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_manifest(tmp_path: Path):
    """写入自定义 Cargo.toml 并返回路径"""

    def _write(content: str) -> Path:
        path = tmp_path / "Cargo.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def sample_build_config() -> BuildConfig:
    """示例构建配置"""
    return BuildConfig(
        name="demo",
        version="2.1.0",
        description="A demo command line application",
        author="Jane Doe <jane@example.com>",
        bin_name="demo-cli",
        platform=Platform.X64,
    )


@pytest.fixture
def sample_paths(sample_build_config: BuildConfig) -> PathArtifacts:
    """示例路径"""
    return PathArtifacts.resolve(sample_build_config)


# ============================================================================
# 外部进程 Fixtures
# ============================================================================

class FakeRunner(IProcessRunner):
    """
    记录调用的假进程执行器

    statuses: 程序名 → 退出码（缺省0）
    missing: 无法启动的程序名（抛出 FileNotFoundError）
    成功时模拟产物：-o 后的 wixobj、-out 后的 msi
    """

    def __init__(self):
        self.calls: list[dict] = []
        self.statuses: dict[str, int] = {}
        self.missing: set[str] = set()

    def run(
        self,
        argv: Sequence[str],
        capture_output: bool = True,
        cwd: Path | None = None,
    ) -> int:
        argv = list(argv)
        self.calls.append({"argv": argv, "capture_output": capture_output, "cwd": cwd})
        program = argv[0]
        if program in self.missing:
            raise FileNotFoundError(2, "No such file or directory", program)
        status = self.statuses.get(program, 0)
        if status == 0:
            for flag in ("-o", "-out"):
                if flag in argv:
                    output = Path(argv[argv.index(flag) + 1])
                    if cwd is not None and not output.is_absolute():
                        output = Path(cwd) / output
                    output.parent.mkdir(parents=True, exist_ok=True)
                    output.write_bytes(b"")
        return status

    @property
    def programs(self) -> list[str]:
        return [c["argv"][0] for c in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
