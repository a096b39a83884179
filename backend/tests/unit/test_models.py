"""
数据模型单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_models.py -v
"""

import uuid
from pathlib import Path

import pytest
from pydantic import ValidationError

from conftest import make_node, solid
from figsvg.models import (
    BLANK_FILL,
    Color,
    ConversionJob,
    Element,
    ElementPaint,
    Fill,
    JobStatus,
    JobType,
    NodeKind,
    Rect,
    Rgba8,
    Stroke,
    VectorDocument,
)


class TestColor:
    """颜色测试"""

    def test_to_rgba8(self):
        assert Color(r=1, g=0, b=0, a=1).to_rgba8() == Rgba8(r=255, g=0, b=0, a=255)

    def test_to_rgba8_rounding(self):
        rgba = Color(r=0.1, g=0.9, b=0.004, a=0.998).to_rgba8()
        assert rgba.as_tuple() == (26, 230, 1, 254)

    def test_to_rgba8_clamped(self):
        assert Color(r=1.2, g=-0.1, b=0, a=1).to_rgba8().as_tuple() == (255, 0, 0, 255)

    def test_hex_and_opacity(self):
        rgba = Rgba8(r=18, g=52, b=86, a=0)
        assert rgba.hex == "#123456"
        assert rgba.opacity == 0


class TestRect:
    """边界框测试"""

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Rect(width=-1, height=2)


class TestNode:
    """节点测试"""

    def test_kind_families(self):
        assert make_node("f", NodeKind.INSTANCE).is_frame
        assert make_node("t", NodeKind.TEXT).is_vector
        canvas = make_node("c", NodeKind.CANVAS)
        assert not canvas.is_frame and not canvas.is_vector

    def test_has_corner_radius(self):
        assert make_node("f", NodeKind.FRAME).has_corner_radius
        assert make_node("r", NodeKind.RECTANGLE).has_corner_radius
        assert not make_node("v", NodeKind.VECTOR).has_corner_radius

    def test_kind_parse(self):
        assert NodeKind.parse("FRAME") == NodeKind.FRAME
        assert NodeKind.parse("STICKY") == NodeKind.UNKNOWN
        assert NodeKind.parse(None) == NodeKind.UNKNOWN

    def test_iter_tree_post_order(self):
        leaf = make_node("leaf")
        mid = make_node("mid", children=[leaf])
        root = make_node("root", children=[mid, make_node("sib")])
        assert [n.id for n in root.iter_tree()] == ["leaf", "mid", "sib", "root"]

    def test_frozen(self):
        node = make_node("n", fills=[solid(1, 0, 0)])
        with pytest.raises(ValidationError):
            node.visible = False


class TestElement:
    """元素测试"""

    def test_blank(self):
        assert Fill().is_blank
        assert Stroke().is_blank
        assert not Stroke(weight=1).is_blank
        assert ElementPaint().is_blank
        assert not ElementPaint(fill=Fill(a=1)).is_blank

    def test_without_paint_returns_copy(self):
        element = Element(id="1", paint=ElementPaint(fill=BLANK_FILL))
        stripped = element.without_paint()
        assert stripped.paint is None
        assert element.paint is not None

    def test_with_image(self):
        element = Element(id="1")
        updated = element.with_image("rendered_1")
        assert updated.image.asset_id == "rendered_1"
        assert element.image is None


class TestVectorDocument:
    """文档测试"""

    def test_inflated(self):
        document = VectorDocument(width=10, height=4)
        grown = document.inflated(2)
        assert (grown.width, grown.height) == (12, 6)
        assert (document.width, document.height) == (10, 4)


class TestConversionJob:
    """任务模型测试"""

    @pytest.fixture
    def job(self) -> ConversionJob:
        return ConversionJob(job_id=str(uuid.uuid4()), job_type=JobType.TREE, input_file=Path("in.json"))

    def test_mark_running(self, job: ConversionJob):
        job.mark_running("EXTRACT_VECTORS")
        assert job.status == JobStatus.RUNNING
        assert job.progress.stage == "EXTRACT_VECTORS"
        assert job.started_at is not None

    def test_mark_succeeded(self, job: ConversionJob):
        job.mark_running()
        job.mark_succeeded()
        assert job.status == JobStatus.SUCCEEDED
        assert job.progress.percent == 100

    def test_mark_failed(self, job: ConversionJob):
        job.mark_running()
        job.mark_failed("Test error")
        assert job.status == JobStatus.FAILED
        assert "Test error" in job.errors

    def test_add_flag(self, job: ConversionJob):
        job.add_flag("位图读取失败:a.png")
        job.add_flag("位图读取失败:a.png")
        assert job.flags == ["位图读取失败:a.png"]
