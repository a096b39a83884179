"""
几何与颜色模型 - 边界框 / RGBA颜色

坐标与尺寸均为像素单位，不做单位换算
数值字段拒绝 NaN / Infinity（json.load 可解析出这些值）
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """绝对坐标边界框"""
    x: float = 0.0
    y: float = 0.0
    width: float = Field(0.0, ge=0)
    height: float = Field(0.0, ge=0)

    model_config = {"frozen": True, "allow_inf_nan": False}


class Color(BaseModel):
    """RGBA颜色（各通道取值 0~1）"""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    model_config = {"frozen": True, "allow_inf_nan": False}

    def to_rgba8(self) -> Rgba8:
        """转换为8位通道（各通道独立四舍五入）"""
        return Rgba8(
            r=_to_byte(self.r),
            g=_to_byte(self.g),
            b=_to_byte(self.b),
            a=_to_byte(self.a),
        )


class Rgba8(BaseModel):
    """8位RGBA颜色"""
    r: int = Field(0, ge=0, le=255)
    g: int = Field(0, ge=0, le=255)
    b: int = Field(0, ge=0, le=255)
    a: int = Field(255, ge=0, le=255)

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def hex(self) -> str:
        """#RRGGBB（不含alpha）"""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opacity(self) -> float:
        return self.a / 255


def _to_byte(channel: float) -> int:
    # 超出 [0,1] 的输入截断到合法范围
    return min(255, max(0, round(channel * 255)))
