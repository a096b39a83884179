"""
元素列表加载 - JSON → Element 列表

输入格式：
    [
      {"id": "1",
       "boundingBox": {"x": 0, "y": 0, "width": 10, "height": 10},
       "paint": {"fill": {"r":1,"g":0,"b":0,"a":1},
                 "stroke": {"r":0,"g":0,"b":0,"a":1,"weight":2}},
       "roundedRectangle": {"leftTop":0,"rightTop":0,"rightBottom":0,"leftBottom":4},
       "image": {"assetId": "..."}}
    ]

也接受 {"elements": [...]} 包装形式。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..interfaces import NodeTreeError
from ..models import (
    BoundingBox,
    Element,
    ElementPaint,
    Fill,
    ImageRef,
    RoundedRectangle,
    Stroke,
)


def load_elements(path: str | Path) -> list[Element]:
    """读取JSON文件并返回元素列表"""
    path = Path(path)
    if not path.exists():
        raise NodeTreeError(f"输入文件不存在: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise NodeTreeError(f"JSON解析失败: {path}: {e}") from e

    return parse_elements(data)


def parse_elements(data: Any) -> list[Element]:
    if isinstance(data, dict):
        data = data.get("elements")
    if not isinstance(data, list):
        raise NodeTreeError("元素列表必须是JSON数组")

    return [parse_element(item) for item in data]


def parse_element(data: Any) -> Element:
    """解析单个元素"""
    if not isinstance(data, dict) or "id" not in data:
        raise NodeTreeError(f"元素缺少id: {data!r}")

    try:
        return Element(
            id=str(data["id"]),
            bounding_box=_optional(BoundingBox, data.get("boundingBox")),
            paint=_parse_paint(data.get("paint")),
            rounded_rectangle=_parse_rounded(data.get("roundedRectangle")),
            image=_parse_image(data.get("image")),
        )
    except ValidationError as e:
        raise NodeTreeError(f"元素字段非法: {data['id']}: {e}") from e


def _optional(model, raw: Any):
    return model(**raw) if isinstance(raw, dict) else None


def _parse_paint(raw: Any) -> ElementPaint | None:
    if not isinstance(raw, dict):
        return None
    return ElementPaint(
        fill=_optional(Fill, raw.get("fill")) or Fill(),
        stroke=_optional(Stroke, raw.get("stroke")) or Stroke(),
    )


def _parse_rounded(raw: Any) -> RoundedRectangle | None:
    if not isinstance(raw, dict):
        return None
    return RoundedRectangle(
        left_top=raw.get("leftTop", 0.0),
        right_top=raw.get("rightTop", 0.0),
        right_bottom=raw.get("rightBottom", 0.0),
        left_bottom=raw.get("leftBottom", 0.0),
    )


def _parse_image(raw: Any) -> ImageRef | None:
    if not isinstance(raw, dict) or "assetId" not in raw:
        return None
    return ImageRef(asset_id=str(raw["assetId"]))
