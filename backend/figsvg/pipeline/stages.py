"""
流水线阶段定义

职责：
1. 定义各阶段的名称和进度区间
2. 提供执行钩子
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..models import ConversionJob


class StageEnum(str, Enum):
    """流水线阶段枚举"""
    LOAD_INPUT = "LOAD_INPUT"
    EXTRACT_VECTORS = "EXTRACT_VECTORS"
    COLLECT_RASTERS = "COLLECT_RASTERS"
    WRITE_ASSETS = "WRITE_ASSETS"
    PACKAGE_ZIP = "PACKAGE_ZIP"


@dataclass
class PipelineStage:
    """流水线阶段"""
    name: str
    progress_start: int  # 进度起点（0-100）
    progress_end: int    # 进度终点
    handler: Callable[[ConversionJob], None] | None = None

    def execute(self, job: ConversionJob) -> None:
        """执行阶段"""
        if self.handler:
            self.handler(job)


# 转换流水线各阶段配置
CONVERSION_STAGES: list[PipelineStage] = [
    PipelineStage(StageEnum.LOAD_INPUT.value, 0, 10),
    PipelineStage(StageEnum.EXTRACT_VECTORS.value, 10, 50),
    PipelineStage(StageEnum.COLLECT_RASTERS.value, 50, 60),
    PipelineStage(StageEnum.WRITE_ASSETS.value, 60, 85),
    PipelineStage(StageEnum.PACKAGE_ZIP.value, 85, 100),
]
