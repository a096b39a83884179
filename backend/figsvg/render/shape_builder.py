"""
矩形构建 - 按边界框尺寸生成单矩形SVG文档

只保留宽高，丢弃绝对位置；文档与矩形均位于局部原点 (0,0)
"""

from __future__ import annotations

from ..models import BoundingBox, Rect, SvgRectangle, VectorDocument


def build_shape(bound: Rect | BoundingBox) -> tuple[VectorDocument, SvgRectangle]:
    """生成 (文档, 矩形)，矩形为文档唯一图元"""
    rectangle = SvgRectangle(x=0, y=0, width=bound.width, height=bound.height)
    document = VectorDocument(width=bound.width, height=bound.height, shape=rectangle)
    return document, rectangle
