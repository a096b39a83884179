"""
设计树节点模型 - 树形输入

对应设计工具导出的节点（Frame/Vector/Text/Rectangle 等）
子节点顺序即绘制顺序，每个节点独占其子节点
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .geometry import Color, Rect

PAINT_TYPE_SOLID = "SOLID"
PAINT_TYPE_IMAGE = "IMAGE"


class NodeKind(str, Enum):
    """节点类型枚举"""
    # Frame 系
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    SECTION = "SECTION"

    # Vector 系
    VECTOR = "VECTOR"
    RECTANGLE = "RECTANGLE"           # 圆角矩形
    ELLIPSE = "ELLIPSE"
    LINE = "LINE"
    STAR = "STAR"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    TEXT = "TEXT"

    # 其他（不渲染）
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    SLICE = "SLICE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str | None) -> NodeKind:
        """未知类型归为 UNKNOWN"""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


FRAME_KINDS = frozenset({
    NodeKind.FRAME,
    NodeKind.GROUP,
    NodeKind.COMPONENT,
    NodeKind.COMPONENT_SET,
    NodeKind.INSTANCE,
    NodeKind.SECTION,
})

VECTOR_KINDS = frozenset({
    NodeKind.VECTOR,
    NodeKind.RECTANGLE,
    NodeKind.ELLIPSE,
    NodeKind.LINE,
    NodeKind.STAR,
    NodeKind.REGULAR_POLYGON,
    NodeKind.BOOLEAN_OPERATION,
    NodeKind.TEXT,
})


class Paint(BaseModel):
    """填充/描边"""
    type: str = PAINT_TYPE_SOLID
    color: Color | None = None

    model_config = {"frozen": True}

    @property
    def is_image(self) -> bool:
        return self.type == PAINT_TYPE_IMAGE


class Node(BaseModel):
    """设计树节点"""
    id: str
    name: str = ""
    kind: NodeKind = NodeKind.UNKNOWN
    visible: bool = True
    bounding_box: Rect | None = None
    fills: list[Paint] = Field(default_factory=list)
    strokes: list[Paint] = Field(default_factory=list)
    stroke_weight: float = 0.0
    corner_radius: float | None = Field(None, description="仅Frame系/RECTANGLE有效")
    children: list[Node] = Field(default_factory=list)

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def is_frame(self) -> bool:
        return self.kind in FRAME_KINDS

    @property
    def is_vector(self) -> bool:
        return self.kind in VECTOR_KINDS

    @property
    def has_corner_radius(self) -> bool:
        """Frame系与RECTANGLE携带圆角属性"""
        return self.is_frame or self.kind == NodeKind.RECTANGLE

    def iter_tree(self):
        """后序遍历（子节点先于自身）"""
        for child in self.children:
            yield from child.iter_tree()
        yield self
