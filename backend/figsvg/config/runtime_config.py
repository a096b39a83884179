"""
运行期配置 - 读取 config/figsvg.yaml

职责：
- 加载输出路径/打包/日志等运行参数
- 提供环境变量覆盖机制（FIGSVG_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_PATH = Path("config/figsvg.yaml")


class OutputConfig(BaseModel):
    """输出路径配置"""

    asset_dir: str = "images"
    svg_suffix: str = ".svg"
    element_prefix: str = "rendered_"
    work_root: Path = Path("storage")


class PackageConfig(BaseModel):
    """打包配置"""

    manifest_name: str = "nodes.json"
    compress: bool = True
    schema_version: str = "1.0"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "figsvg.log"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    output: OutputConfig = Field(default_factory=OutputConfig)
    package: PackageConfig = Field(default_factory=PackageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "FIGSVG_",
        "env_nested_delimiter": "__",
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
        # 优先级：环境变量 > YAML（以构造参数传入） > 默认值
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（FIGSVG_ 环境变量按字段覆盖YAML）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以dict传入，便于与环境变量逐字段合并
        config = cls(
            output=cls._extract(runtime_opts, "output"),
            package=cls._extract(runtime_opts, "package"),
            logging=cls._extract(runtime_opts, "logging"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: x} 写法）"""
        section = data.get(key, {}) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对路径配置为绝对路径（基于配置文件所在目录）"""
        if not self.output.work_root.is_absolute():
            self.output.work_root = (base_dir / self.output.work_root).resolve()

    def get_job_dir(self, job_id: str) -> Path:
        """获取任务工作目录"""
        return self.output.work_root / "jobs" / job_id


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
