"""
可渲染判定 - 决定节点是否输出SVG

规则（按顺序，先命中先生效）：
1. Text 节点 → 不渲染（即使存在 Fill/Stroke）
2. Fill 与 Stroke 均为空 → 不渲染
3. 其余 → 渲染候选

Frame 系节点不可能是 Text，但仍需满足规则2；
既非 Frame 系也非 Vector 系的节点（Canvas/Slice 等）一律不渲染。
"""

from __future__ import annotations

from ..models import Element, Node, NodeKind


def is_render_candidate(node: Node) -> bool:
    """树形节点可渲染判定"""
    if node.is_frame:
        return _has_paint(node)

    if node.is_vector:
        if node.kind == NodeKind.TEXT:
            return False
        return _has_paint(node)

    return False


def _has_paint(node: Node) -> bool:
    return bool(node.fills) or bool(node.strokes)


def is_element_renderable(element: Element) -> bool:
    """能力标签元素可渲染判定：有边界框且 Fill/Stroke 不全为空白"""
    if element.paint is None or element.bounding_box is None:
        return False
    return not element.paint.is_blank
