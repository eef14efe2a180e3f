"""
运行期配置 - 读取 wix/cargo_wix.yaml

职责：
- 加载外部工具名、固定路径、链接/签名参数、日志参数
- 提供环境变量覆盖机制（CARGO_WIX_ 前缀，优先于YAML）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
)

DEFAULT_CONFIG_PATH = Path("wix/cargo_wix.yaml")
CONFIG_SECTIONS = ("tools", "paths", "linker", "signing", "logging")


class ToolsConfig(BaseModel):
    """外部工具（程序名或绝对路径）"""

    cargo: str = "cargo"
    compiler: str = "candle"
    linker: str = "light"
    signer: str = "signtool"


class PathsConfig(BaseModel):
    """固定路径（相对于工作目录）"""

    manifest_file: Path = Path("Cargo.toml")
    source_dir: Path = Path("wix")
    output_dir: Path = Path("target/wix")
    build_dir: Path = Path("target/wix/build")
    main_name: str = "main"


class LinkerConfig(BaseModel):
    """链接器参数"""

    ui_extension: str = "WixUIExtension"
    culture: str = "en-us"


class SigningConfig(BaseModel):
    """签名参数"""

    timestamp_url: str | None = None


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: Path = Path("target/wix/cargo-wix.log")


class RuntimeConfig(BaseSettings):
    """运行期配置（环境变量优先于YAML）"""

    _yaml_data: ClassVar[dict[str, Any] | None] = None

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    linker: LinkerConfig = Field(default_factory=LinkerConfig)
    signing: SigningConfig = Field(default_factory=SigningConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "CARGO_WIX_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """优先级: 构造参数 > 环境变量 > .env > YAML"""
        yaml_settings = InitSettingsSource(settings_cls, init_kwargs=cls._yaml_data or {})
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（只包含文件中出现的配置段）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options") or {}

        cls._yaml_data = {
            key: cls._extract(runtime_opts, key)
            for key in CONFIG_SECTIONS
            if runtime_opts.get(key)
        }
        try:
            return cls()
        finally:
            cls._yaml_data = None

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
