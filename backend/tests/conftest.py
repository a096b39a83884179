"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(red_frame, extractor):
        assert extractor.extract([red_frame])
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from PIL import Image

from figsvg.config import OutputConfig, RuntimeConfig
from figsvg.models import (
    BoundingBox,
    Color,
    Element,
    ElementPaint,
    Fill,
    Node,
    NodeKind,
    Paint,
    Rect,
    RoundedRectangle,
    Stroke,
)
from figsvg.render import ElementRenderer, TreeExtractor


# ============================================================================
# 节点构造
# ============================================================================

def solid(r: float, g: float, b: float, a: float = 1.0) -> Paint:
    """纯色Paint"""
    return Paint(type="SOLID", color=Color(r=r, g=g, b=b, a=a))


def make_node(
    node_id: str,
    kind: NodeKind = NodeKind.FRAME,
    *,
    box: tuple[float, float, float, float] = (0, 0, 10, 10),
    fills: list[Paint] | None = None,
    strokes: list[Paint] | None = None,
    stroke_weight: float = 0.0,
    corner_radius: float | None = None,
    visible: bool = True,
    children: list[Node] | None = None,
) -> Node:
    x, y, w, h = box
    return Node(
        id=node_id,
        name=node_id,
        kind=kind,
        visible=visible,
        bounding_box=Rect(x=x, y=y, width=w, height=h),
        fills=fills or [],
        strokes=strokes or [],
        stroke_weight=stroke_weight,
        corner_radius=corner_radius,
        children=children or [],
    )


# ============================================================================
# 渲染 Fixtures
# ============================================================================

@pytest.fixture
def extractor() -> TreeExtractor:
    return TreeExtractor()


@pytest.fixture
def renderer() -> ElementRenderer:
    return ElementRenderer()


@pytest.fixture
def red_frame() -> Node:
    """100x50 红色填充Frame"""
    return make_node("1:2", NodeKind.FRAME, box=(0, 0, 100, 50), fills=[solid(1, 0, 0)])


@pytest.fixture
def blue_stroked_vector() -> Node:
    """10x10 蓝色描边Vector（线宽2）"""
    return make_node(
        "1:3",
        NodeKind.VECTOR,
        box=(0, 0, 10, 10),
        strokes=[solid(0, 0, 1)],
        stroke_weight=2,
    )


@pytest.fixture
def painted_element() -> Element:
    """红色填充 + 黑色描边 + 圆角元素"""
    return Element(
        id="42",
        bounding_box=BoundingBox(x=5, y=5, width=20, height=10),
        paint=ElementPaint(
            fill=Fill(r=1, g=0, b=0, a=1),
            stroke=Stroke(r=0, g=0, b=0, a=1, weight=4),
        ),
        rounded_rectangle=RoundedRectangle(left_top=1, right_top=2, right_bottom=3, left_bottom=6),
    )


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config(temp_dir: Path) -> RuntimeConfig:
    """运行期配置（工作目录指向临时目录）"""
    return RuntimeConfig(output=OutputConfig(work_root=temp_dir / "storage"))


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def figma_payload() -> dict:
    """最小 Figma 文件结构：一个Canvas，Frame内含Text与Rectangle"""
    return {
        "name": "sample",
        "document": {
            "id": "0:0",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "type": "CANVAS",
                    "children": [
                        {
                            "id": "1:1",
                            "name": "Card",
                            "type": "FRAME",
                            "absoluteBoundingBox": {"x": 100, "y": 200, "width": 300, "height": 150},
                            "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
                            "strokes": [],
                            "strokeWeight": 1,
                            "cornerRadius": 8,
                            "children": [
                                {
                                    "id": "1:2",
                                    "name": "Title",
                                    "type": "TEXT",
                                    "absoluteBoundingBox": {"x": 110, "y": 210, "width": 80, "height": 20},
                                    "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}],
                                },
                                {
                                    "id": "1:3",
                                    "name": "Badge",
                                    "type": "RECTANGLE",
                                    "absoluteBoundingBox": {"x": 120, "y": 240, "width": 40, "height": 40},
                                    "fills": [],
                                    "strokes": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 1, "a": 1}}],
                                    "strokeWeight": 2,
                                    "cornerRadius": 4,
                                },
                                {
                                    "id": "1:4",
                                    "name": "Photo",
                                    "type": "RECTANGLE",
                                    "absoluteBoundingBox": {"x": 200, "y": 240, "width": 60, "height": 60},
                                    "fills": [{"type": "IMAGE", "imageRef": "abc"}],
                                },
                            ],
                        }
                    ],
                }
            ],
        },
    }


@pytest.fixture
def figma_json_path(temp_dir: Path, figma_payload: dict) -> Path:
    path = temp_dir / "design.json"
    path.write_text(json.dumps(figma_payload), encoding="utf-8")
    return path


@pytest.fixture
def elements_json_path(temp_dir: Path) -> Path:
    data = [
        {
            "id": "10",
            "boundingBox": {"x": 0, "y": 0, "width": 30, "height": 20},
            "paint": {"fill": {"r": 0, "g": 1, "b": 0, "a": 1}},
            "roundedRectangle": {"leftTop": 1, "rightTop": 1, "rightBottom": 1, "leftBottom": 5},
        },
        {"id": "11", "boundingBox": {"x": 0, "y": 0, "width": 5, "height": 5}},
        {"id": "12", "paint": {"fill": {"r": 1, "g": 0, "b": 0, "a": 1}}},
    ]
    path = temp_dir / "elements.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def image_dir(temp_dir: Path) -> Path:
    """含一张PNG与一个损坏文件的位图目录"""
    images = temp_dir / "bitmaps"
    images.mkdir()
    Image.new("RGBA", (4, 3), (255, 0, 0, 255)).save(images / "photo.png")
    (images / "broken.png").write_bytes(b"not an image")
    return images
