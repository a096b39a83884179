"""
流水线执行器 - 编排各阶段执行

职责：
1. 按顺序执行各阶段
2. 更新任务进度并落盘 job.json
3. 处理错误（位图读取失败/路径冲突仅告警，其余失败中断）
4. 生成清单并打包

测试要点：
- test_execute_tree_job: 树形流水线完整执行
- test_execute_elements_job: 能力标签流水线完整执行
- test_stage_failure_handling: 阶段失败处理
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from PIL import Image, UnidentifiedImageError

from ..config import RuntimeConfig, get_config
from ..loaders import load_document, load_elements
from ..models import JobType, RenderedElement
from ..render import AssetPathResolver, ElementRenderer, TreeExtractor
from .packager import Packager
from .sinks import DirectoryRasterSink, DirectoryVectorSink
from .stages import CONVERSION_STAGES, PipelineStage, StageEnum

if TYPE_CHECKING:
    from ..models import ConversionJob

logger = logging.getLogger(__name__)

RASTER_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"})
PNG_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


class PipelineExecutor:
    """流水线执行器"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()

        self.path_resolver = AssetPathResolver(self.config.output)
        self.tree_extractor = TreeExtractor(self.path_resolver)
        self.element_renderer = ElementRenderer(self.path_resolver)
        self.packager = Packager(self.config.package)

    def execute(self, job: ConversionJob) -> Path:
        """执行流水线，返回zip路径"""
        job.mark_running()

        try:
            if job.work_dir is None:
                job.work_dir = self.config.get_job_dir(job.job_id)
            job.work_dir.mkdir(parents=True, exist_ok=True)

            # 中间数据存储
            context: dict[str, Any] = {
                "input": [],
                "vectors": [],
                "rasters": [],
                "manifest": {},
            }

            for stage in CONVERSION_STAGES:
                self._execute_stage(job, stage, context)

            job.mark_succeeded()
            self._persist_job(job)

        except Exception as e:
            logger.exception(f"流水线执行失败: {job.job_id}")
            job.mark_failed(str(e))
            if job.work_dir is not None and job.work_dir.exists():
                self._persist_job(job)
            raise

        return job.artifacts.package_zip

    def _execute_stage(self, job: ConversionJob, stage: PipelineStage, context: dict) -> None:
        """执行单个阶段"""
        job.progress.stage = stage.name
        job.progress.percent = stage.progress_start
        logger.info(f"[{job.job_id}] 开始阶段: {stage.name}")

        try:
            if stage.name == StageEnum.LOAD_INPUT.value:
                self._stage_load(job, context)

            elif stage.name == StageEnum.EXTRACT_VECTORS.value:
                self._stage_extract(job, context)

            elif stage.name == StageEnum.COLLECT_RASTERS.value:
                self._stage_collect_rasters(job, context)

            elif stage.name == StageEnum.WRITE_ASSETS.value:
                self._stage_write_assets(job, context)

            elif stage.name == StageEnum.PACKAGE_ZIP.value:
                self._stage_package(job, context)

            else:
                stage.execute(job)

        except Exception as e:
            logger.error(f"[{job.job_id}] 阶段失败 {stage.name}: {e}")
            job.add_flag(f"阶段失败:{stage.name}")
            raise

        job.progress.percent = stage.progress_end
        job.progress.message = f"完成阶段: {stage.name}"
        self._persist_job(job)

    def _stage_load(self, job: ConversionJob, context: dict) -> None:
        """读取输入"""
        if job.job_type == JobType.TREE:
            context["input"] = load_document(job.input_file)
        else:
            context["input"] = load_elements(job.input_file)
        logger.info(f"[{job.job_id}] 输入读取完成: {len(context['input'])} 项")

    def _stage_extract(self, job: ConversionJob, context: dict) -> None:
        """提取SVG"""
        if job.job_type == JobType.TREE:
            rendered = self.tree_extractor.extract(context["input"])
            context["vectors"] = [(info.document, info.path) for info in rendered]
            context["manifest"] = self.packager.build_tree_manifest(context["input"], rendered)
            job.artifacts.rendered_count = len(rendered)
        else:
            results = self.element_renderer.run(context["input"])
            context["vectors"] = [
                (r.document, r.path) for r in results if isinstance(r, RenderedElement)
            ]
            context["manifest"] = self.packager.build_element_manifest(results)
            job.artifacts.rendered_count = len(context["vectors"])
            job.artifacts.skipped_count = len(results) - len(context["vectors"])

        job.progress.message = f"SVG提取完成: {job.artifacts.rendered_count}"

    def _stage_collect_rasters(self, job: ConversionJob, context: dict) -> None:
        """收集已有位图（读取失败/路径冲突仅告警）"""
        if job.image_dir is None:
            return
        if not job.image_dir.is_dir():
            logger.warning(f"位图目录不存在: {job.image_dir}")
            job.add_flag(f"位图目录不存在:{job.image_dir.name}")
            return

        asset_dir = self.config.output.asset_dir.strip("/")
        claimed: set[str] = set()
        for file in sorted(job.image_dir.rglob("*")):
            if not file.is_file() or file.suffix.lower() not in RASTER_SUFFIXES:
                continue
            try:
                with Image.open(file) as img:
                    img.load()
                    image = _png_compatible(img)
            except (OSError, ValueError, UnidentifiedImageError, Image.DecompressionBombError) as e:
                logger.warning(f"位图读取失败: {file}: {e}")
                job.add_flag(f"位图读取失败:{file.name}")
                continue

            path = raster_asset_path(file.relative_to(job.image_dir), asset_dir)
            if path in claimed:
                logger.warning(f"位图路径重复，已跳过: {file}")
                job.add_flag(f"位图路径重复:{file.name}")
                continue
            claimed.add(path)
            context["rasters"].append((image, path))

        job.artifacts.raster_count = len(context["rasters"])

    def _stage_write_assets(self, job: ConversionJob, context: dict) -> None:
        """资源落盘（output目录）"""
        output_dir = job.work_dir / "output"
        vector_sink = DirectoryVectorSink(output_dir)
        raster_sink = DirectoryRasterSink(output_dir)

        for document, path in context["vectors"]:
            vector_sink.write(document, path)
        for image, path in context["rasters"]:
            raster_sink.write(image, path)

        job.artifacts.output_dir = output_dir

    def _stage_package(self, job: ConversionJob, context: dict) -> None:
        """打包"""
        zip_path = job.output_zip or job.work_dir / "package.zip"
        job.artifacts.package_zip = self.packager.save(
            zip_path,
            context["manifest"],
            context["vectors"],
            context["rasters"],
        )

    def _persist_job(self, job: ConversionJob) -> None:
        job_file = job.work_dir / "job.json"
        with open(job_file, "w", encoding="utf-8") as f:
            json.dump(job.model_dump(mode="json"), f, ensure_ascii=False, indent=2, default=str)


def raster_asset_path(relative: Path, asset_dir: str) -> str:
    """位图包内路径：PNG 原名保留，其余格式追加 .png（logo.jpg → logo.jpg.png）"""
    if relative.suffix.lower() == ".png":
        name = relative.with_suffix(".png").as_posix()
    else:
        name = f"{relative.as_posix()}.png"
    return f"{asset_dir}/{name}" if asset_dir else name


def _png_compatible(image: Image.Image) -> Image.Image:
    """转换为PNG可写的模式（CMYK/YCbCr 等）"""
    if image.mode in PNG_MODES:
        return image.copy()
    return image.convert("RGBA" if "A" in image.getbands() else "RGB")
