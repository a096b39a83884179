"""
Figma JSON 加载 - REST 文件数据 → Node 树

支持三种输入：
- 完整文件 {"document": {...}}：根节点为各 Canvas 的子节点
- 单个 DOCUMENT / CANVAS 节点：同上
- 任意单个节点：自身为根节点

字段映射：
    id / name / type / visible / absoluteBoundingBox / fills / strokes /
    strokeWeight / cornerRadius / children

visible=false 的 Paint 不参与渲染，加载时丢弃。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..interfaces import NodeTreeError
from ..models import Color, Node, NodeKind, Paint, Rect

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> list[Node]:
    """读取JSON文件并返回根节点列表"""
    path = Path(path)
    if not path.exists():
        raise NodeTreeError(f"输入文件不存在: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise NodeTreeError(f"JSON解析失败: {path}: {e}") from e

    return parse_document(data)


def parse_document(data: Any) -> list[Node]:
    """解析JSON数据为根节点列表"""
    if not isinstance(data, dict):
        raise NodeTreeError("输入必须是JSON对象")

    if "document" in data:
        data = data["document"]
        if not isinstance(data, dict):
            raise NodeTreeError("document 字段必须是JSON对象")

    root = parse_node(data)

    if root.kind == NodeKind.DOCUMENT:
        return [node for canvas in root.children for node in _canvas_children(canvas)]
    if root.kind == NodeKind.CANVAS:
        return list(root.children)
    return [root]


def _canvas_children(node: Node) -> list[Node]:
    if node.kind == NodeKind.CANVAS:
        return list(node.children)
    return [node]


def parse_node(data: dict[str, Any]) -> Node:
    """递归解析单个节点"""
    if not isinstance(data, dict):
        raise NodeTreeError(f"节点必须是JSON对象: {data!r}")

    node_id = data.get("id")
    if node_id is None:
        raise NodeTreeError(f"节点缺少id: name={data.get('name')!r}")

    children_raw = data.get("children") or []
    if not isinstance(children_raw, list):
        raise NodeTreeError(f"children 必须是数组: {node_id}")

    kind = NodeKind.parse(data.get("type"))
    if kind == NodeKind.UNKNOWN:
        logger.debug(f"未知节点类型 {data.get('type')!r}: {node_id}")

    try:
        return Node(
            id=str(node_id),
            name=data.get("name") or "",
            kind=kind,
            visible=data.get("visible", True),
            bounding_box=_parse_rect(data.get("absoluteBoundingBox")),
            fills=_parse_paints(data.get("fills")),
            strokes=_parse_paints(data.get("strokes")),
            stroke_weight=data.get("strokeWeight") or 0.0,
            corner_radius=data.get("cornerRadius"),
            children=[parse_node(child) for child in children_raw],
        )
    except ValidationError as e:
        raise NodeTreeError(f"节点字段非法: {node_id}: {e}") from e


def _parse_rect(raw: Any) -> Rect | None:
    if not isinstance(raw, dict):
        return None
    return Rect(
        x=raw.get("x") or 0.0,
        y=raw.get("y") or 0.0,
        width=raw.get("width") or 0.0,
        height=raw.get("height") or 0.0,
    )


def _parse_paints(raw: Any) -> list[Paint]:
    if not isinstance(raw, list):
        return []

    paints = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("visible", True):
            continue
        color = item.get("color")
        paints.append(Paint(
            type=str(item.get("type") or ""),
            color=Color(**color) if isinstance(color, dict) else None,
        ))
    return paints
