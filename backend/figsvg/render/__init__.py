"""
渲染模块 - 节点/元素 → 单矩形SVG

子模块：
- eligibility: 可渲染判定
- shape_builder: 按边界框生成文档+矩形
- style: 填充/描边/圆角
- tree_extractor: 树形流水线（后序遍历）
- element_renderer: 能力标签流水线
- asset_paths: 包内路径
- svg_writer: SVG序列化
"""

from .asset_paths import AssetPathResolver, rendered_image_id, safe_file_stem
from .element_renderer import ElementRenderer
from .eligibility import is_element_renderable, is_render_candidate
from .shape_builder import build_shape
from .style import apply_corner_radius, apply_fill, apply_stroke
from .svg_writer import to_svg, to_svg_bytes
from .tree_extractor import TreeExtractor

__all__ = [
    "TreeExtractor",
    "ElementRenderer",
    "AssetPathResolver",
    "rendered_image_id",
    "safe_file_stem",
    "is_render_candidate",
    "is_element_renderable",
    "build_shape",
    "apply_fill",
    "apply_stroke",
    "apply_corner_radius",
    "to_svg",
    "to_svg_bytes",
]
