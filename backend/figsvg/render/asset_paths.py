"""
资源路径 - 节点/元素 → 包内路径

节点ID中的 ':' ';' 等字符在文件名中不安全，统一替换为 '_'
"""

from __future__ import annotations

import re

from ..config import OutputConfig
from ..interfaces import IAssetPathResolver
from ..models import Element, Node

_UNSAFE_CHARS = re.compile(r"[^0-9A-Za-z_.-]")


def safe_file_stem(raw_id: str) -> str:
    """ID 转文件名主干"""
    stem = _UNSAFE_CHARS.sub("_", raw_id)
    return stem or "_"


def rendered_image_id(element: Element, prefix: str = "rendered_") -> str:
    """渲染后追加的 Image 能力引用ID"""
    return f"{prefix}{element.id}"


class AssetPathResolver(IAssetPathResolver):
    """按配置生成包内路径：<asset_dir>/<id>.svg"""

    def __init__(self, output: OutputConfig | None = None):
        self.output = output or OutputConfig()

    def image_id_of(self, element: Element) -> str:
        return rendered_image_id(element, self.output.element_prefix)

    def asset_path_of(self, source: Node | Element) -> str:
        if isinstance(source, Element):
            stem = safe_file_stem(self.image_id_of(source))
        else:
            stem = safe_file_stem(source.id)

        file_name = f"{stem}{self.output.svg_suffix}"
        asset_dir = self.output.asset_dir.strip("/")
        return f"{asset_dir}/{file_name}" if asset_dir else file_name
