"""Tests for the RenderEngine pipeline facade."""

import pytest

from render_engine import RenderEngine
from render_engine.css import CSSParseError, Color, StringValue
from render_engine.layout import Dimensions, Position


@pytest.fixture
def engine(config):
    return RenderEngine(config)


class TestRender:
    def test_fragment_pipeline(self, engine):
        result = engine.render("<div><p></p><p></p></div>", "p { height: 100px; }", fragment=True)

        assert len(result.layout) == 1
        div = result.layout[0]
        assert div.dimensions == Dimensions(640, 200)
        assert div.children[1].position == Position(0, 100)
        assert result.viewport == Dimensions(640, 480)

    def test_embedded_style_sheets(self, engine):
        html = ("<html><head><style>p { color: blue; }</style></head>"
                "<body><p></p></body></html>")

        result = engine.render(html, "p { color: red; }")

        p = next(node for node in result.resolved[0].iter_tree()
                 if node.node.is_element and node.node.tag_name == "p")
        assert p.declarations["color"] == StringValue("blue")
        assert len(result.rule_groups) == 2

    def test_explicit_viewport(self, engine):
        result = engine.render("<div></div>", viewport=Dimensions(100, 50), fragment=True)
        assert result.layout[0].dimensions.width == 100

    def test_parse_errors_propagate(self, engine):
        with pytest.raises(CSSParseError):
            engine.render("<div></div>", "div { width: 10em; }", fragment=True)

    def test_debug_tree(self, engine):
        result = engine.render("<div></div>", "div { height: 5px; }", fragment=True)
        assert result.debug_tree() == "<div> block x=0 y=0 w=640 h=5"


class TestConfiguration:
    def test_viewport_from_config(self, config):
        config.set('viewport.width', 200)
        config.set('viewport.height', 100)

        result = RenderEngine(config).render("<div></div>", fragment=True)

        assert result.viewport == Dimensions(200, 100)
        assert result.layout[0].dimensions.width == 200

    def test_anchor_from_config(self, config):
        config.set('viewport.anchor_x', 4)
        config.set('viewport.anchor_y', 8)

        result = RenderEngine(config).render("<div></div>", fragment=True)

        assert result.layout[0].position == Position(4, 8)

    def test_strict_ids_from_config(self, config):
        html = '<p class="foo"></p>'
        css = ".foo{color:green} p, #bar{color:red}"
        result = RenderEngine(config).render(html, css, fragment=True)
        assert result.resolved[0].declarations["color"] == StringValue("red")

        config.set('cascade.strict_id_matching', True)
        result = RenderEngine(config).render(html, css, fragment=True)
        assert result.resolved[0].declarations["color"] == StringValue("green")

    def test_background_color(self, config):
        config.set('rendering.background', '#000')
        assert RenderEngine(config).background_color() == Color(0, 0, 0)


class TestPaint:
    def test_paint(self, engine):
        result = engine.render("<div></div>", "div { height: 10px; background-color: #00ff00; }",
                               viewport=Dimensions(20, 20), fragment=True)

        image = engine.paint(result.layout, result.viewport)

        assert image.size == (20, 20)
        assert image.getpixel((0, 0)) == (0, 255, 0)
        assert image.getpixel((0, 15)) == (255, 255, 255)
