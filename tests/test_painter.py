"""Tests for the rectangle painter."""

from PIL import Image

from render_engine.css.values import Color
from render_engine.layout import Dimensions, LayoutEngine
from render_engine.rendering import Painter

WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def paint(resolve, html, css, width=100, height=100):
    roots = resolve(html, css)
    boxes = LayoutEngine().layout(roots, Dimensions(width, height))
    painter = Painter(width, height)
    painted = painter.paint_all(boxes)
    return painter, painted


class TestPainter:
    def test_blank_surface(self):
        painter = Painter(4, 3)

        assert painter.image.size == (4, 3)
        assert painter.get_pixel(0, 0) == WHITE

    def test_custom_background(self):
        assert Painter(2, 2, BLUE).get_pixel(1, 1) == BLUE

    def test_fills_box(self, resolve):
        painter, painted = paint(resolve, "<div></div>",
                                 "div { height: 10px; width: 20px; background-color: #f00; }")

        assert painted == 1
        assert painter.get_pixel(0, 0) == RED
        assert painter.get_pixel(19, 9) == RED
        assert painter.get_pixel(20, 9) == WHITE
        assert painter.get_pixel(19, 10) == WHITE

    def test_children_paint_over_parents(self, resolve):
        css = ("div { height: 50px; background-color: #f00; } "
               "p { height: 10px; background-color: #00f; }")
        painter, painted = paint(resolve, "<div><p></p></div>", css)

        assert painted == 2
        assert painter.get_pixel(5, 5) == BLUE
        assert painter.get_pixel(5, 20) == RED

    def test_hidden_subtree_skipped(self, resolve):
        css = ("div { display: none; height: 10px; background-color: #f00; } "
               "p { height: 10px; background-color: #00f; }")
        painter, painted = paint(resolve, "<div><p></p></div>", css)

        assert painted == 0
        assert painter.get_pixel(5, 5) == WHITE

    def test_zero_area_skipped(self, resolve):
        painter, painted = paint(resolve, "<div></div>", "div { background-color: #f00; }")

        assert painted == 0
        assert painter.get_pixel(0, 0) == WHITE

    def test_non_color_background_is_inert(self, resolve):
        painter, painted = paint(resolve, "<div></div>", "div { height: 10px; background-color: red; }")

        assert painted == 0
        assert painter.get_pixel(0, 0) == WHITE

    def test_box_larger_than_surface_is_clipped(self, resolve):
        painter, painted = paint(resolve, "<div></div>",
                                 "div { height: 500px; width: 500px; background-color: #00f; }",
                                 width=10, height=10)

        assert painted == 1
        assert painter.get_pixel(9, 9) == BLUE

    def test_save(self, tmp_path):
        painter = Painter(3, 3, RED)
        path = str(tmp_path / "out.png")

        painter.save(path)

        with Image.open(path) as image:
            assert image.size == (3, 3)
            assert image.convert("RGB").getpixel((1, 1)) == (255, 0, 0)
