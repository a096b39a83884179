"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Node: 设计树节点（树形输入）
- Element: 能力标签元素（扁平输入）
- VectorDocument: 单矩形SVG文档
- ConversionJob: 任务状态与生命周期
"""

from .element import (
    BLANK_FILL,
    BLANK_STROKE,
    BoundingBox,
    Element,
    ElementPaint,
    Fill,
    ImageRef,
    RoundedRectangle,
    Stroke,
)
from .geometry import Color, Rect, Rgba8
from .job import ConversionJob, JobArtifacts, JobProgress, JobStatus, JobType
from .node import (
    FRAME_KINDS,
    PAINT_TYPE_IMAGE,
    PAINT_TYPE_SOLID,
    VECTOR_KINDS,
    Node,
    NodeKind,
    Paint,
)
from .vector import (
    ElementRenderResult,
    RenderedElement,
    SkippedElement,
    SvgFileInfo,
    SvgRectangle,
    VectorDocument,
)

__all__ = [
    "Rect",
    "Color",
    "Rgba8",
    "Node",
    "NodeKind",
    "Paint",
    "FRAME_KINDS",
    "VECTOR_KINDS",
    "PAINT_TYPE_SOLID",
    "PAINT_TYPE_IMAGE",
    "Element",
    "BoundingBox",
    "ElementPaint",
    "Fill",
    "Stroke",
    "BLANK_FILL",
    "BLANK_STROKE",
    "RoundedRectangle",
    "ImageRef",
    "SvgRectangle",
    "VectorDocument",
    "SvgFileInfo",
    "RenderedElement",
    "SkippedElement",
    "ElementRenderResult",
    "ConversionJob",
    "JobStatus",
    "JobType",
    "JobArtifacts",
    "JobProgress",
]
