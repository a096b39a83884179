"""
输出端 - SVG/位图写出

- DirectoryVectorSink: SVG写入目录
- DirectoryRasterSink: 位图以PNG写入目录（Pillow）
- MemoryVectorSink: 内存收集（打包/测试用）

包内路径必须是相对路径，且不得跳出根目录
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from PIL import Image

from ..interfaces import IRasterSink, IVectorSink, PackageError
from ..models import VectorDocument
from ..render import to_svg

logger = logging.getLogger(__name__)


def normalize_asset_path(path: str) -> str:
    """校验并规范化包内路径"""
    posix = PurePosixPath(path.replace("\\", "/"))
    if not path or posix.is_absolute() or ".." in posix.parts:
        raise PackageError(f"非法资源路径: {path!r}")
    return str(posix)


class DirectoryVectorSink(IVectorSink):
    """SVG写入目录"""

    def __init__(self, root: Path):
        self.root = Path(root)

    def write(self, document: VectorDocument, path: str) -> None:
        target = self.root / normalize_asset_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(to_svg(document), encoding="utf-8")
        except OSError as e:
            raise PackageError(f"SVG写出失败: {target}: {e}") from e
        logger.debug(f"SVG已写出: {target}")


class DirectoryRasterSink(IRasterSink):
    """位图以PNG写入目录"""

    def __init__(self, root: Path):
        self.root = Path(root)

    def write(self, image: Image.Image, path: str) -> None:
        target = self.root / normalize_asset_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            image.save(target, format="PNG")
        except OSError as e:
            raise PackageError(f"PNG写出失败: {target}: {e}") from e
        logger.debug(f"PNG已写出: {target}")


class MemoryVectorSink(IVectorSink):
    """内存收集 (document, path)"""

    def __init__(self):
        self.items: list[tuple[VectorDocument, str]] = []

    def write(self, document: VectorDocument, path: str) -> None:
        self.items.append((document, normalize_asset_path(path)))
