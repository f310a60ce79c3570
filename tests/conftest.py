"""Shared fixtures for the render engine tests."""

import os

import pytest

from render_engine.css import CascadeResolver, parse_stylesheet
from render_engine.dom import parse_html
from render_engine.layout import Dimensions, LayoutEngine, Position
from render_engine.utils.config import Config


@pytest.fixture
def config(tmp_path):
    """A configuration that never touches the real home directory."""
    return Config(os.path.join(str(tmp_path), "config.json"))


@pytest.fixture
def resolve():
    """Resolve an HTML fragment against style text; returns the root resolved nodes."""
    def _resolve(html, css="", strict_ids=False):
        document = parse_html(html, fragment=True)
        resolver = CascadeResolver(parse_stylesheet(css), strict_ids=strict_ids)
        return resolver.resolve_document(document)
    return _resolve


@pytest.fixture
def layout(resolve):
    """Lay out an HTML fragment in a 640x480 viewport; returns the first root box."""
    def _layout(html, css="", viewport=None):
        roots = resolve(html, css)
        engine = LayoutEngine()
        return engine.build(roots[0], viewport or Dimensions(640, 480), Position(0, 0))
    return _layout
