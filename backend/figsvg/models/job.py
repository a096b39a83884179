"""
任务模型 - 定义转换任务状态与生命周期
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """任务状态枚举"""
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class JobType(str, Enum):
    """任务类型"""
    TREE = "tree"           # 流水线A: 节点树 -> SVG
    ELEMENTS = "elements"   # 流水线B: 能力标签元素 -> SVG


class JobArtifacts(BaseModel):
    """任务产物"""
    package_zip: Path | None = None
    output_dir: Path | None = None
    rendered_count: int = 0
    skipped_count: int = 0
    raster_count: int = 0


class JobProgress(BaseModel):
    """任务进度"""
    stage: str = "INIT"
    percent: int = 0
    message: str = ""


class ConversionJob(BaseModel):
    """转换任务实体"""
    job_id: str = Field(..., description="UUID")
    job_type: JobType

    # 输入
    input_file: Path
    image_dir: Path | None = Field(None, description="已有位图资源目录")
    output_zip: Path | None = None

    # 状态
    status: JobStatus = JobStatus.QUEUED
    progress: JobProgress = Field(default_factory=JobProgress)

    # 产物
    artifacts: JobArtifacts = Field(default_factory=JobArtifacts)

    # 结果
    flags: list[str] = Field(default_factory=list, description="告警标记")
    errors: list[str] = Field(default_factory=list, description="错误信息")

    # 时间戳
    created_at: datetime = Field(default_factory=datetime.now)
    started_at: datetime | None = None
    finished_at: datetime | None = None

    # 工作目录（运行时设置）
    work_dir: Path | None = None

    def mark_running(self, stage: str = "LOAD_INPUT") -> None:
        """标记为运行中"""
        self.status = JobStatus.RUNNING
        self.started_at = datetime.now()
        self.progress.stage = stage

    def mark_succeeded(self) -> None:
        """标记为成功"""
        self.status = JobStatus.SUCCEEDED
        self.finished_at = datetime.now()
        self.progress.percent = 100

    def mark_failed(self, error: str) -> None:
        """标记为失败"""
        self.status = JobStatus.FAILED
        self.finished_at = datetime.now()
        self.errors.append(error)

    def add_flag(self, flag: str) -> None:
        """添加告警标记（不中断）"""
        if flag not in self.flags:
            self.flags.append(flag)
