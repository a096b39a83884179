"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from figsvg.interfaces import IVectorSink

    class MyVectorSink(IVectorSink):
        def write(self, document: VectorDocument, path: str) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from PIL import Image

    from .models import (
        Element,
        ElementRenderResult,
        Node,
        SvgFileInfo,
        VectorDocument,
    )


# ============================================================================
# 矢量提取模块接口
# ============================================================================

class IAssetPathResolver(ABC):
    """资源路径解析接口 - 为节点/元素分配包内路径"""

    @abstractmethod
    def asset_path_of(self, source: Node | Element) -> str:
        """
        获取节点渲染产物在包内的相对路径

        Args:
            source: 节点（树形）或元素（能力标签）

        Returns:
            包内相对路径（POSIX分隔符）
        """
        ...

    @abstractmethod
    def image_id_of(self, element: Element) -> str:
        """渲染后追加到元素上的 Image 能力ID（与文件名同源）"""
        ...


class IVectorExtractor(ABC):
    """树形提取器接口 - 从节点树提取SVG"""

    @abstractmethod
    def extract(self, roots: Sequence[Node]) -> list[SvgFileInfo]:
        """
        提取所有可渲染节点的SVG文档

        流程：
        1. 后序遍历（子节点先于自身）
        2. 可渲染判定（非Text且存在Fill/Stroke）
        3. 构建矩形 + 应用样式

        Args:
            roots: 根节点序列

        Returns:
            SVG文档与目标路径列表（不可渲染的节点不出现）
        """
        ...


class IElementRenderer(ABC):
    """元素渲染器接口 - 从能力标签元素列表渲染SVG"""

    @abstractmethod
    def run(self, elements: Sequence[Element]) -> list[ElementRenderResult]:
        """
        渲染元素列表

        Args:
            elements: 元素列表

        Returns:
            每个元素恰好一个结果（Rendered 或 Skipped）
        """
        ...


# ============================================================================
# 输出模块接口
# ============================================================================

class IVectorSink(ABC):
    """矢量输出接口"""

    @abstractmethod
    def write(self, document: VectorDocument, path: str) -> None:
        """写出单个SVG文档"""
        ...


class IRasterSink(ABC):
    """位图输出接口"""

    @abstractmethod
    def write(self, image: Image.Image, path: str) -> None:
        """写出单个位图（PNG）"""
        ...


class IPackager(ABC):
    """打包器接口"""

    @abstractmethod
    def save(
        self,
        path: Path,
        manifest: dict[str, Any],
        vectors: Sequence[tuple[VectorDocument, str]],
        rasters: Sequence[tuple[Image.Image, str]],
    ) -> Path:
        """
        打包为单个zip

        Args:
            path: 输出zip路径
            manifest: 节点清单（写入 nodes.json）
            vectors: (SVG文档, 包内路径)
            rasters: (位图, 包内路径)

        Returns:
            zip 路径

        Raises:
            DuplicateAssetPathError: 包内路径重复
            PackageError: 写出失败
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class FigSvgError(Exception):
    """基础异常"""
    pass


class NodeTreeError(FigSvgError):
    """输入节点树解析错误"""
    pass


class PackageError(FigSvgError):
    """打包/写出错误"""
    pass


class DuplicateAssetPathError(PackageError):
    """同一输出集合内路径重复"""

    def __init__(self, path: str):
        super().__init__(f"资源路径重复: {path}")
        self.path = path
