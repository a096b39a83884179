"""
元素渲染单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_element_renderer.py -v
"""

from figsvg.config import OutputConfig
from figsvg.models import (
    BoundingBox,
    Element,
    ElementPaint,
    Fill,
    ImageRef,
    RenderedElement,
    SkippedElement,
    Stroke,
)
from figsvg.render import AssetPathResolver, ElementRenderer


class TestElementRenderer:
    """能力标签流水线测试"""

    def test_one_result_per_element(self, renderer: ElementRenderer, painted_element: Element):
        elements = [painted_element, Element(id="plain"), Element(id="blank", paint=ElementPaint())]
        results = renderer.run(elements)
        assert len(results) == 3
        assert [r.element.id for r in results] == ["42", "plain", "blank"]

    def test_no_paint_passthrough(self, renderer: ElementRenderer):
        """测试无Paint能力原样返回"""
        element = Element(id="1", bounding_box=BoundingBox(width=3, height=3))
        (result,) = renderer.run([element])
        assert isinstance(result, SkippedElement)
        assert result.element == element

    def test_missing_bbox_strips_paint(self, renderer: ElementRenderer):
        """测试缺少边界框时移除Paint"""
        element = Element(id="1", paint=ElementPaint(fill=Fill(r=1, a=1)))
        (result,) = renderer.run([element])
        assert isinstance(result, SkippedElement)
        assert result.element.paint is None
        assert result.element.image is None

    def test_blank_paint_strips_paint(self, renderer: ElementRenderer):
        element = Element(id="1", bounding_box=BoundingBox(width=3, height=3), paint=ElementPaint())
        (result,) = renderer.run([element])
        assert isinstance(result, SkippedElement)
        assert result.element.paint is None
        assert result.element.bounding_box == element.bounding_box

    def test_rendered_appends_image(self, renderer: ElementRenderer, painted_element: Element):
        """测试渲染成功追加Image能力，保留其余能力"""
        (result,) = renderer.run([painted_element])
        assert isinstance(result, RenderedElement)
        assert result.element.image == ImageRef(asset_id="rendered_42")
        assert result.element.paint == painted_element.paint
        assert result.element.rounded_rectangle == painted_element.rounded_rectangle
        assert result.path == "images/rendered_42.svg"

    def test_input_not_mutated(self, renderer: ElementRenderer, painted_element: Element):
        renderer.run([painted_element])
        assert painted_element.image is None

    def test_document_geometry(self, renderer: ElementRenderer, painted_element: Element):
        (result,) = renderer.run([painted_element])
        document = result.document
        assert (document.width, document.height) == (24, 14)
        assert (document.shape.x, document.shape.y) == (2, 2)
        assert document.shape.fill.as_tuple() == (255, 0, 0, 255)
        assert document.shape.stroke.as_tuple() == (0, 0, 0, 255)
        assert document.shape.stroke_width == 4

    def test_corner_radius_from_left_bottom(self, renderer: ElementRenderer, painted_element: Element):
        """测试圆角只取 left_bottom 并统一应用"""
        (result,) = renderer.run([painted_element])
        assert result.document.shape.rx == 6
        assert result.document.shape.ry == 6

    def test_fill_only(self, renderer: ElementRenderer):
        element = Element(
            id="f",
            bounding_box=BoundingBox(width=8, height=6),
            paint=ElementPaint(fill=Fill(r=0, g=0, b=1, a=0.5)),
        )
        (result,) = renderer.run([element])
        assert isinstance(result, RenderedElement)
        assert (result.document.width, result.document.height) == (8, 6)
        assert result.document.shape.stroke is None
        assert result.document.shape.fill.a == 128

    def test_stroke_only(self, renderer: ElementRenderer):
        element = Element(
            id="s",
            bounding_box=BoundingBox(width=8, height=6),
            paint=ElementPaint(stroke=Stroke(r=1, a=1, weight=2)),
        )
        (result,) = renderer.run([element])
        assert isinstance(result, RenderedElement)
        assert (result.document.width, result.document.height) == (10, 8)
        assert result.document.shape.fill is None

    def test_custom_prefix(self):
        """Image 能力ID与文件名使用同一前缀"""
        renderer = ElementRenderer(AssetPathResolver(OutputConfig(element_prefix="svg_")))
        element = Element(
            id="7",
            bounding_box=BoundingBox(width=1, height=1),
            paint=ElementPaint(fill=Fill(r=1, a=1)),
        )
        (result,) = renderer.run([element])
        assert result.element.image.asset_id == "svg_7"
        assert result.path == "images/svg_7.svg"
