"""
矢量文档与提取结果模型

- VectorDocument: 画布（宽高）+ 唯一矩形
- SvgFileInfo: 树形提取结果（文档 + 包内路径）
- ElementRenderResult: 能力标签渲染结果（Rendered / Skipped）
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field

from .element import Element
from .geometry import Rgba8
from .node import Node


class SvgRectangle(BaseModel):
    """矩形图元（局部坐标）"""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill: Rgba8 | None = None
    stroke: Rgba8 | None = None
    stroke_width: float | None = None
    rx: float | None = None
    ry: float | None = None

    model_config = {"frozen": True}


class VectorDocument(BaseModel):
    """SVG文档：画布原点固定 (0,0)，仅含一个矩形"""
    width: float = 0.0
    height: float = 0.0
    shape: SvgRectangle = Field(default_factory=SvgRectangle)

    model_config = {"frozen": True}

    def inflated(self, amount: float) -> VectorDocument:
        """宽高各增加 amount（描边外扩）"""
        return self.model_copy(update={
            "width": self.width + amount,
            "height": self.height + amount,
        })

    def with_shape(self, shape: SvgRectangle) -> VectorDocument:
        return self.model_copy(update={"shape": shape})


class SvgFileInfo(BaseModel):
    """树形提取结果"""
    document: VectorDocument
    path: str
    source: Node

    model_config = {"frozen": True}


class RenderedElement(BaseModel):
    """渲染成功（元素已追加Image能力）"""
    status: Literal["rendered"] = "rendered"
    document: VectorDocument
    path: str
    element: Element

    model_config = {"frozen": True}


class SkippedElement(BaseModel):
    """跳过渲染（元素可能已移除Paint能力）"""
    status: Literal["skipped"] = "skipped"
    element: Element

    model_config = {"frozen": True}


ElementRenderResult = Union[RenderedElement, SkippedElement]
