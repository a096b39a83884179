"""
能力标签元素模型 - 扁平列表输入

每个元素至多持有每种能力各一个：
- BoundingBox: 边界框
- Paint: 填充(Fill) + 描边(Stroke)
- RoundedRectangle: 四角圆角
- Image: 外部位图引用

元素不可变，"更新"即返回新的元素
"""

from __future__ import annotations

from pydantic import BaseModel

from .geometry import Color


class BoundingBox(BaseModel):
    """边界框能力"""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    model_config = {"frozen": True, "allow_inf_nan": False}


class Fill(BaseModel):
    """填充色（全零即空白）"""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def is_blank(self) -> bool:
        return self == BLANK_FILL

    @property
    def color(self) -> Color:
        return Color(r=self.r, g=self.g, b=self.b, a=self.a)


class Stroke(BaseModel):
    """描边色与线宽（全零即空白）"""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    weight: float = 0.0

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def is_blank(self) -> bool:
        return self == BLANK_STROKE

    @property
    def color(self) -> Color:
        return Color(r=self.r, g=self.g, b=self.b, a=self.a)


BLANK_FILL = Fill()
BLANK_STROKE = Stroke()


class ElementPaint(BaseModel):
    """Paint能力"""
    fill: Fill = BLANK_FILL
    stroke: Stroke = BLANK_STROKE

    model_config = {"frozen": True}

    @property
    def is_blank(self) -> bool:
        return self.fill.is_blank and self.stroke.is_blank


class RoundedRectangle(BaseModel):
    """四角圆角能力"""
    left_top: float = 0.0
    right_top: float = 0.0
    right_bottom: float = 0.0
    left_bottom: float = 0.0

    model_config = {"frozen": True, "allow_inf_nan": False}


class ImageRef(BaseModel):
    """位图引用能力"""
    asset_id: str

    model_config = {"frozen": True}


class Element(BaseModel):
    """能力标签元素"""
    id: str
    bounding_box: BoundingBox | None = None
    paint: ElementPaint | None = None
    rounded_rectangle: RoundedRectangle | None = None
    image: ImageRef | None = None

    model_config = {"frozen": True}

    def without_paint(self) -> Element:
        """移除Paint能力"""
        return self.model_copy(update={"paint": None})

    def with_image(self, asset_id: str) -> Element:
        """追加Image能力（已有则替换）"""
        return self.model_copy(update={"image": ImageRef(asset_id=asset_id)})
