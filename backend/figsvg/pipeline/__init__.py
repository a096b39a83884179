"""
流水线模块 - 任务编排与执行

子模块：
- stages: 流水线各阶段定义
- executor: 流水线执行器
- sinks: SVG/PNG 写出
- packager: 打包与清单生成
"""

from .executor import PipelineExecutor
from .packager import Packager
from .sinks import (
    DirectoryRasterSink,
    DirectoryVectorSink,
    MemoryVectorSink,
    normalize_asset_path,
)
from .stages import CONVERSION_STAGES, PipelineStage, StageEnum

__all__ = [
    "PipelineStage",
    "StageEnum",
    "CONVERSION_STAGES",
    "PipelineExecutor",
    "Packager",
    "DirectoryVectorSink",
    "DirectoryRasterSink",
    "MemoryVectorSink",
    "normalize_asset_path",
]
