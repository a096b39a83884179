"""
样式应用 - 填充 / 描边 / 圆角

每一步返回新的矩形与 updated 标记；只有填充或描边至少一项 updated，
节点才会输出文档。圆角不影响可渲染判定。

描边外扩：矩形平移 weight/2，画布宽高各增加 weight（由调用方应用到文档），
避免描边外侧被画布裁切。
"""

from __future__ import annotations

from typing import Sequence

from ..models import Paint, SvgRectangle


def apply_fill(rectangle: SvgRectangle, paints: Sequence[Paint]) -> tuple[SvgRectangle, bool]:
    """应用第一个填充；IMAGE 填充不作为颜色渲染"""
    if not paints:
        return rectangle, False

    fill = paints[0]

    if fill.is_image or fill.color is None:
        return rectangle, False

    return rectangle.model_copy(update={"fill": fill.color.to_rgba8()}), True


def apply_stroke(
    rectangle: SvgRectangle,
    paints: Sequence[Paint],
    weight: float,
) -> tuple[SvgRectangle, float, bool]:
    """
    应用第一个描边

    Returns:
        (新矩形, 画布外扩量, updated)
    """
    if not paints:
        return rectangle, 0.0, False

    stroke = paints[0]

    if stroke.color is None:
        return rectangle, 0.0, False

    # 画布只增不减
    weight = max(0.0, weight)

    updated = rectangle.model_copy(update={
        "stroke": stroke.color.to_rgba8(),
        "stroke_width": weight,
        # 描边宽度的一半向内平移
        "x": rectangle.x + weight / 2,
        "y": rectangle.y + weight / 2,
    })
    return updated, weight, True


def apply_corner_radius(rectangle: SvgRectangle, radius: float) -> SvgRectangle:
    """各向同性圆角（rx = ry）"""
    return rectangle.model_copy(update={"rx": radius, "ry": radius})
