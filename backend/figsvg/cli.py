"""
命令行入口

    figsvg tree design.json -o assets.zip [--images DIR]
    figsvg elements elements.json -o assets.zip
"""

from __future__ import annotations

import argparse
import logging
import uuid
from pathlib import Path

from .config import LoggingConfig, get_config, reload_config
from .interfaces import FigSvgError
from .models import ConversionJob, JobType
from .pipeline import PipelineExecutor

logger = logging.getLogger("figsvg")


def setup_logging(config: LoggingConfig, work_dir: Path | None = None) -> None:
    """按配置初始化日志"""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_to_file and work_dir is not None:
        work_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(work_dir / config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figsvg",
        description="Extract rectangle SVG assets from a design tree and package them.",
    )
    parser.add_argument("--config", default="", help="运行期配置YAML（默认：config/figsvg.yaml）")
    parser.add_argument("--work-dir", default="", help="工作目录（默认：<work_root>/jobs/<job_id>）")

    sub = parser.add_subparsers(dest="mode", required=True)

    tree = sub.add_parser("tree", help="Figma JSON 节点树")
    tree.add_argument("input", help="Figma JSON 文件")
    tree.add_argument("-o", "--output", required=True, help="输出zip路径")
    tree.add_argument("--images", default="", help="可选：已有位图目录（打包为PNG）")

    elements = sub.add_parser("elements", help="能力标签元素列表")
    elements.add_argument("input", help="元素列表JSON文件")
    elements.add_argument("-o", "--output", required=True, help="输出zip路径")
    elements.add_argument("--images", default="", help="可选：已有位图目录（打包为PNG）")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()

    job = ConversionJob(
        job_id=str(uuid.uuid4()),
        job_type=JobType(args.mode),
        input_file=Path(args.input),
        image_dir=Path(args.images) if args.images else None,
        output_zip=Path(args.output),
        work_dir=Path(args.work_dir) if args.work_dir else None,
    )

    setup_logging(config.logging, job.work_dir or config.get_job_dir(job.job_id))

    try:
        zip_path = PipelineExecutor(config).execute(job)
    except FigSvgError as e:
        logger.error(f"转换失败: {e}")
        return 1

    logger.info(
        f"完成: {zip_path} rendered={job.artifacts.rendered_count} "
        f"skipped={job.artifacts.skipped_count} flags={job.flags}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
