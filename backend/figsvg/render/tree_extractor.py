"""
树形提取器 - 从设计树提取SVG

职责：
1. 后序遍历（子节点结果先于父节点，兄弟按顺序）
2. 跳过不可见节点自身（不可见性不向下继承）
3. 可渲染判定 → 构建矩形 → 应用填充/描边/圆角

纯函数式计算：不修改输入树，不做I/O，同一输入多次运行结果一致。

测试要点：
- test_fill_only_frame: 仅填充的Frame
- test_stroke_inflation: 描边外扩
- test_image_fill_not_rendered: IMAGE填充不渲染
- test_invisible_parent: 不可见父节点
- test_post_order: 遍历顺序
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..interfaces import IAssetPathResolver, IVectorExtractor
from ..models import Node, SvgFileInfo, VectorDocument
from .asset_paths import AssetPathResolver
from .eligibility import is_render_candidate
from .shape_builder import build_shape
from .style import apply_corner_radius, apply_fill, apply_stroke

logger = logging.getLogger(__name__)


class TreeExtractor(IVectorExtractor):
    """树形提取器实现"""

    def __init__(self, path_resolver: IAssetPathResolver | None = None):
        self.path_resolver = path_resolver or AssetPathResolver()

    def extract(self, roots: Sequence[Node]) -> list[SvgFileInfo]:
        """提取所有根节点下的SVG"""
        results: list[SvgFileInfo] = []
        for root in roots:
            results.extend(self._extract_node(root))

        logger.debug(f"提取完成: {len(results)} 个SVG")
        return results

    def _extract_node(self, pivot: Node) -> list[SvgFileInfo]:
        results: list[SvgFileInfo] = []
        for child in pivot.children:
            results.extend(self._extract_node(child))

        if not pivot.visible:
            return results

        document = self.render_node(pivot)
        if document is not None:
            path = self.path_resolver.asset_path_of(pivot)
            results.append(SvgFileInfo(document=document, path=path, source=pivot))

        return results

    def render_node(self, node: Node) -> VectorDocument | None:
        """渲染单个节点；不可渲染返回 None"""
        if not is_render_candidate(node):
            return None

        if node.bounding_box is None:
            logger.debug(f"节点缺少边界框，跳过: {node.id}")
            return None

        document, rect = build_shape(node.bounding_box)
        rect, filled = apply_fill(rect, node.fills)
        rect, inflation, stroked = apply_stroke(rect, node.strokes, node.stroke_weight)

        if node.has_corner_radius:
            rect = apply_corner_radius(rect, node.corner_radius or 0.0)

        if not (filled or stroked):
            return None

        return document.inflated(inflation).with_shape(rect)
