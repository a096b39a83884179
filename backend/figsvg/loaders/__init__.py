"""
输入加载模块 - JSON → 模型

子模块：
- figma_json: Figma REST 文件 → Node 树
- elements_json: 能力标签元素列表
"""

from .elements_json import load_elements, parse_elements
from .figma_json import load_document, parse_document, parse_node

__all__ = [
    "load_document",
    "parse_document",
    "parse_node",
    "load_elements",
    "parse_elements",
]
