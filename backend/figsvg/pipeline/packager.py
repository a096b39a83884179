"""
打包器 - 生成资源包和节点清单

职责：
1. 清单写入 nodes.json（UTF-8，缩进JSON）
2. SVG文档按包内路径写入
3. 已有位图以PNG写入
4. 同一包内路径重复视为错误

测试要点：
- test_package_zip: ZIP打包
- test_manifest_structure: 清单结构
- test_duplicate_path: 路径重复
"""

from __future__ import annotations

import io
import json
import logging
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from ..config import PackageConfig
from ..interfaces import DuplicateAssetPathError, IPackager, PackageError
from ..models import ElementRenderResult, Node, RenderedElement, SvgFileInfo
from ..render import to_svg_bytes
from .sinks import normalize_asset_path

if TYPE_CHECKING:
    from PIL import Image

    from ..models import VectorDocument

logger = logging.getLogger(__name__)


class Packager(IPackager):
    """打包器实现"""

    def __init__(self, config: PackageConfig | None = None):
        self.config = config or PackageConfig()

    def save(
        self,
        path: Path,
        manifest: dict[str, Any],
        vectors: Sequence[tuple[VectorDocument, str]],
        rasters: Sequence[tuple[Image.Image, str]] = (),
    ) -> Path:
        """打包为单个zip"""
        path = Path(path)
        compression = zipfile.ZIP_DEFLATED if self.config.compress else zipfile.ZIP_STORED
        written: set[str] = set()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(path, "w", compression) as zf:
                self._archive_manifest(zf, manifest, written)
                for document, asset_path in vectors:
                    name = self._claim(asset_path, written)
                    zf.writestr(name, to_svg_bytes(document))
                for image, asset_path in rasters:
                    name = self._claim(asset_path, written)
                    zf.writestr(name, _png_bytes(image))
        except PackageError:
            path.unlink(missing_ok=True)
            raise
        except OSError as e:
            raise PackageError(f"打包失败: {path}: {e}") from e

        logger.info(f"打包完成: {path} (svg={len(vectors)}, png={len(rasters)})")
        return path

    def _archive_manifest(
        self, zf: zipfile.ZipFile, manifest: dict[str, Any], written: set[str]
    ) -> None:
        name = self._claim(self.config.manifest_name, written)
        text = json.dumps(manifest, ensure_ascii=False, indent=2)
        zf.writestr(name, text + "\n")

    @staticmethod
    def _claim(asset_path: str, written: set[str]) -> str:
        name = normalize_asset_path(asset_path)
        if name in written:
            raise DuplicateAssetPathError(name)
        written.add(name)
        return name

    # === 清单 ===

    def build_tree_manifest(
        self, roots: Sequence[Node], rendered: Sequence[SvgFileInfo]
    ) -> dict[str, Any]:
        """树形流水线清单：完整节点树 + 资源列表"""
        return {
            "schema_version": self.config.schema_version,
            "source": "tree",
            "nodes": [root.model_dump(mode="json") for root in roots],
            "assets": [
                {"node_id": info.source.id, "path": info.path}
                for info in rendered
            ],
        }

    def build_element_manifest(
        self, results: Sequence[ElementRenderResult]
    ) -> dict[str, Any]:
        """能力标签流水线清单：更新后的元素列表 + 资源列表"""
        return {
            "schema_version": self.config.schema_version,
            "source": "elements",
            "elements": [r.element.model_dump(mode="json") for r in results],
            "assets": [
                {"element_id": r.element.id, "path": r.path}
                for r in results
                if isinstance(r, RenderedElement)
            ],
        }


def _png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
