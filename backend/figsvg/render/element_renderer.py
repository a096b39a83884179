"""
元素渲染器 - 从能力标签元素列表渲染SVG

规则：
- 无 Paint 能力 → Skipped（元素原样返回）
- 无 BoundingBox，或 Fill/Stroke 均为空白 → Skipped（移除 Paint 能力）
- 其余 → Rendered（元素追加 Image("<element_prefix><id>")，其余能力保留；
  Image ID 与文件名取自同一路径解析器）

圆角只读取 left_bottom 并统一应用到四角。
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..interfaces import IAssetPathResolver, IElementRenderer
from ..models import (
    Element,
    ElementRenderResult,
    Paint,
    RenderedElement,
    SkippedElement,
)
from .asset_paths import AssetPathResolver
from .eligibility import is_element_renderable
from .shape_builder import build_shape
from .style import apply_corner_radius, apply_fill, apply_stroke

logger = logging.getLogger(__name__)


class ElementRenderer(IElementRenderer):
    """元素渲染器实现"""

    def __init__(self, path_resolver: IAssetPathResolver | None = None):
        self.path_resolver = path_resolver or AssetPathResolver()

    def run(self, elements: Sequence[Element]) -> list[ElementRenderResult]:
        """每个元素恰好产出一个结果"""
        results: list[ElementRenderResult] = []
        for element in elements:
            if element.paint is None:
                results.append(SkippedElement(element=element))
            else:
                results.append(self._render_rounded_rectangle(element))

        rendered = sum(1 for r in results if isinstance(r, RenderedElement))
        logger.debug(f"元素渲染完成: rendered={rendered} total={len(results)}")
        return results

    def _render_rounded_rectangle(self, element: Element) -> ElementRenderResult:
        if not is_element_renderable(element):
            return SkippedElement(element=element.without_paint())

        paint = element.paint
        document, rect = build_shape(element.bounding_box)

        fills = [] if paint.fill.is_blank else [Paint(color=paint.fill.color)]
        strokes = [] if paint.stroke.is_blank else [Paint(color=paint.stroke.color)]

        rect, filled = apply_fill(rect, fills)
        rect, inflation, stroked = apply_stroke(rect, strokes, paint.stroke.weight)

        if element.rounded_rectangle is not None:
            rect = apply_corner_radius(rect, element.rounded_rectangle.left_bottom)

        if not (filled or stroked):
            return SkippedElement(element=element.without_paint())

        document = document.inflated(inflation).with_shape(rect)
        new_element = element.with_image(self.path_resolver.image_id_of(element))

        return RenderedElement(
            document=document,
            path=self.path_resolver.asset_path_of(element),
            element=new_element,
        )
