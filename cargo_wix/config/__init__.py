"""
配置层 - 加载运行期配置与项目清单

职责：
- 加载 wix/cargo_wix.yaml（运行期参数，可被环境变量覆盖）
- 读取 Cargo.toml（包元数据）
- 提供类型安全的配置访问接口
"""

from .manifest_loader import ManifestReader, load_manifest
from .runtime_config import RuntimeConfig, get_config, reload_config

__all__ = [
    "ManifestReader",
    "load_manifest",
    "RuntimeConfig",
    "get_config",
    "reload_config",
]
