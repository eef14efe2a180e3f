"""
流水线执行器 - 编排各阶段执行

职责：
1. 读取 Cargo.toml，构造不可变的 BuildConfig 与 PathArtifacts
2. 按 build → compile → link → sign 顺序执行外部进程
3. 第一个失败阶段立即返回对应错误，后续阶段不执行

测试要点：
- test_execute_full_pipeline: 完整流水线执行
- test_stage_failure_handling: 阶段失败处理
- test_sign_disabled_ignores_signer: 不签名时不调用签名工具
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..config import ManifestReader, get_config
from ..config.runtime_config import DEFAULT_CONFIG_PATH, RuntimeConfig
from ..interfaces import CargoWixError, IManifestReader, IProcessRunner
from ..models import BuildConfig, PathArtifacts, Platform
from .commands import build_command, compile_command, link_command, sign_command
from .process import SubprocessRunner
from .stages import INSTALLER_STAGES, PipelineStage, StageEnum

logger = logging.getLogger(__name__)


class PipelineExecutor:
    """安装包流水线"""

    def __init__(
        self,
        sign: bool = False,
        capture_output: bool = True,
        config: RuntimeConfig | None = None,
        runner: IProcessRunner | None = None,
        manifest_reader: IManifestReader | None = None,
        work_dir: Path | None = None,
        platform: Platform | None = None,
    ):
        self.sign = sign
        self.capture_output = capture_output
        self.work_dir = Path(work_dir) if work_dir else None
        self.config = config or self._load_config()
        self.runner = runner or SubprocessRunner()
        self.manifest_reader = manifest_reader or ManifestReader()
        self.platform = platform

    def _load_config(self) -> RuntimeConfig:
        """未指定工作目录时使用全局配置，否则读取工作目录下的配置文件"""
        if self.work_dir is None:
            return get_config()
        return RuntimeConfig.from_yaml(self.work_dir / DEFAULT_CONFIG_PATH)

    def _resolve(self, path: Path) -> Path:
        """相对路径基于工作目录"""
        if self.work_dir is None or path.is_absolute():
            return path
        return self.work_dir / path

    def prepare(self, manifest_path: Path | None = None) -> tuple[BuildConfig, PathArtifacts]:
        """读取清单并推导配置与路径"""
        manifest_file = self._resolve(Path(manifest_path or self.config.paths.manifest_file))
        manifest = self.manifest_reader.read(manifest_file)

        platform = self.platform or Platform.detect()
        logger.debug(f"platform = {platform.name}")

        build_config = BuildConfig.from_manifest(
            manifest,
            platform=platform,
            sign=self.sign,
            capture_output=self.capture_output,
        )
        paths_cfg = self.config.paths
        artifacts = PathArtifacts.resolve(
            build_config,
            source_dir=paths_cfg.source_dir,
            output_dir=paths_cfg.output_dir,
            build_dir=paths_cfg.build_dir,
            main_name=paths_cfg.main_name,
        )
        logger.debug(f"main_wxs = {artifacts.source}")
        logger.debug(f"main_wixobj = {artifacts.wixobj}")
        logger.debug(f"main_msi = {artifacts.installer}")
        return build_config, artifacts

    def run(self, manifest_path: Path | None = None) -> None:
        """
        构建 release 二进制，编译、链接并（可选）签名安装包

        Raises:
            CargoWixError: 第一个失败阶段对应的错误
        """
        build_config, artifacts = self.prepare(manifest_path)

        commands: dict[str, Callable[[], list[str]]] = {
            StageEnum.BUILD.value: lambda: build_command(self.config.tools),
            StageEnum.COMPILE.value: lambda: compile_command(
                build_config, artifacts, self.config.tools
            ),
            StageEnum.LINK.value: lambda: link_command(
                artifacts, self.config.tools, self.config.linker
            ),
            StageEnum.SIGN.value: lambda: sign_command(
                artifacts, self.config.tools, self.config.signing
            ),
        }

        for stage in INSTALLER_STAGES:
            if stage.optional and not build_config.sign:
                logger.debug(f"跳过阶段: {stage.name}")
                continue
            if stage.name == StageEnum.COMPILE.value:
                self._ensure_dir(artifacts.wixobj.parent)
            self._execute_stage(stage, commands[stage.name](), build_config)

    def _ensure_dir(self, directory: Path) -> None:
        target = self._resolve(directory)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CargoWixError.io(e) from e

    def _execute_stage(
        self, stage: PipelineStage, argv: list[str], build_config: BuildConfig
    ) -> None:
        """执行单个阶段"""
        logger.info(stage.progress_message)
        try:
            status = self.runner.run(
                argv,
                capture_output=build_config.capture_output,
                cwd=self.work_dir,
            )
        except OSError as e:
            logger.error(f"阶段 {stage.name} 无法启动 {argv[0]}: {e}")
            raise CargoWixError.io(e, f"Failed to start '{argv[0]}': {e}") from e

        if status != 0:
            logger.error(f"阶段失败 {stage.name}: exit status {status}")
            raise stage.failure()


def run(
    sign: bool = False,
    capture_output: bool = True,
    manifest_path: Path | None = None,
    **kwargs,
) -> None:
    """便捷函数：PipelineExecutor(...).run()"""
    PipelineExecutor(sign=sign, capture_output=capture_output, **kwargs).run(manifest_path)
