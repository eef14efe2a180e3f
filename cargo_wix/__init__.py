"""
cargo-wix - 将 Rust 二进制打包为 Windows Installer (MSI)

模块结构：
- config/     运行期配置与 Cargo.toml 读取
- models/     数据模型定义（平台/构建配置/路径）
- pipeline/   流水线编排（build → compile → link → sign）
- interfaces  接口契约与错误分类
"""

from .interfaces import CargoWixError, ErrorKind
from .pipeline import PipelineExecutor, print_template, run

__version__ = "0.1.0"

__all__ = [
    "CargoWixError",
    "ErrorKind",
    "PipelineExecutor",
    "print_template",
    "run",
]
