"""
SVG序列化 - VectorDocument → SVG 文本

输出结构：
    <svg xmlns=... version="1.1" x="0px" y="0px" width="Wpx" height="Hpx">
      <rect x=.. y=.. width=.. height=.. fill=.. [stroke=.. stroke-width=..] [rx ry] />
    </svg>

未填充时 fill="none"（SVG默认填充为黑色）
"""

from __future__ import annotations

from xml.etree import ElementTree as ET

from ..models import Rgba8, SvgRectangle, VectorDocument

SVG_NS = "http://www.w3.org/2000/svg"

ET.register_namespace("", SVG_NS)


def format_number(value: float) -> str:
    """数值格式化：整数不带小数点，其余最多保留4位"""
    rounded = round(float(value), 4)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.4f}".rstrip("0").rstrip(".")


def _px(value: float) -> str:
    return f"{format_number(value)}px"


def _color_attrs(prefix: str, color: Rgba8) -> dict[str, str]:
    attrs = {prefix: color.hex}
    if color.a < 255:
        attrs[f"{prefix}-opacity"] = format_number(color.opacity)
    return attrs


def rectangle_attrs(rect: SvgRectangle) -> dict[str, str]:
    """矩形属性表"""
    attrs = {
        "x": format_number(rect.x),
        "y": format_number(rect.y),
        "width": format_number(rect.width),
        "height": format_number(rect.height),
    }

    if rect.rx is not None:
        attrs["rx"] = format_number(rect.rx)
    if rect.ry is not None:
        attrs["ry"] = format_number(rect.ry)

    if rect.fill is not None:
        attrs.update(_color_attrs("fill", rect.fill))
    else:
        attrs["fill"] = "none"

    if rect.stroke is not None:
        attrs.update(_color_attrs("stroke", rect.stroke))
        attrs["stroke-width"] = format_number(rect.stroke_width or 0)

    return attrs


def to_element(document: VectorDocument) -> ET.Element:
    root = ET.Element(f"{{{SVG_NS}}}svg", {
        "version": "1.1",
        "x": _px(0),
        "y": _px(0),
        "width": _px(document.width),
        "height": _px(document.height),
    })
    ET.SubElement(root, f"{{{SVG_NS}}}rect", rectangle_attrs(document.shape))
    return root


def to_svg(document: VectorDocument) -> str:
    """序列化为带XML声明的SVG文本"""
    body = ET.tostring(to_element(document), encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def to_svg_bytes(document: VectorDocument) -> bytes:
    return to_svg(document).encode("utf-8")
