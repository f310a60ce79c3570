"""
Render engine pipeline.

This module provides the RenderEngine class that ties together document
parsing, style parsing, the cascade, layout and painting. Every call runs
its stages from scratch; nothing is cached between runs.
"""

import logging
from typing import List, Optional

from PIL import Image

from render_engine.css import CascadeResolver, CSSParser, RuleGroup, ResolvedNode, Color
from render_engine.dom import Document, parse_html
from render_engine.layout import Dimensions, LayoutEngine, LayoutNode, Position
from render_engine.rendering import Painter
from render_engine.utils.config import Config
from render_engine.utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


class RenderResult:
    """Everything one pipeline run produced."""

    def __init__(self,
                 document: Document,
                 rule_groups: List[RuleGroup],
                 resolved: List[ResolvedNode],
                 layout: List[LayoutNode],
                 viewport: Dimensions):
        self.document = document
        self.rule_groups = rule_groups
        self.resolved = resolved
        self.layout = layout
        self.viewport = viewport

    def debug_tree(self) -> str:
        """Outline of every layout tree."""
        return "\n".join(root.debug_tree() for root in self.layout)


class RenderEngine:
    """
    Render engine facade.

    Settings (viewport, id matching, surface background) come from a
    ``Config``; arguments passed to individual calls take precedence.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the render engine.

        Args:
            config: Configuration; a default ``Config`` is loaded when omitted
        """
        self.config = config if config is not None else Config()
        self.layout_engine = LayoutEngine()
        self.perf = PerformanceLogger(logger, "RenderEngine")

        logger.debug("Render engine initialized")

    @property
    def strict_ids(self) -> bool:
        return bool(self.config.get('cascade.strict_id_matching', False))

    def default_viewport(self) -> Dimensions:
        return Dimensions(int(self.config.get('viewport.width', 640)),
                          int(self.config.get('viewport.height', 480)))

    def default_anchor(self) -> Position:
        return Position(int(self.config.get('viewport.anchor_x', 0)),
                        int(self.config.get('viewport.anchor_y', 0)))

    def background_color(self) -> Color:
        """The configured surface background, parsed like a declared color."""
        return CSSParser(self.config.get('rendering.background', '#ffffff')).parse_color_value()

    def parse_stylesheet(self, css_text: str) -> List[RuleGroup]:
        """
        Parse style text.

        Args:
            css_text: Style text

        Returns:
            List[RuleGroup]: Rule groups in source order
        """
        self.perf.start("parse_stylesheet")
        rule_groups = CSSParser(css_text).parse()
        self.perf.end("parse_stylesheet")
        return rule_groups

    def load_document(self, html_content: str, fragment: bool = False) -> Document:
        """
        Parse HTML into a document.

        Args:
            html_content: HTML text
            fragment: Parse as a fragment instead of a full document

        Returns:
            Document: The parsed document
        """
        self.perf.start("load_document")
        document = parse_html(html_content, fragment=fragment)
        self.perf.end("load_document")
        return document

    def resolve(self, document: Document, rule_groups: List[RuleGroup]) -> List[ResolvedNode]:
        """
        Run the cascade over a document.

        Args:
            document: The document
            rule_groups: Rule groups in source order

        Returns:
            List[ResolvedNode]: One resolved tree per document root
        """
        self.perf.start("resolve")
        resolved = CascadeResolver(rule_groups, strict_ids=self.strict_ids).resolve_document(document)
        self.perf.end("resolve")
        return resolved

    def layout(self,
               resolved: List[ResolvedNode],
               viewport: Optional[Dimensions] = None,
               anchor: Optional[Position] = None) -> List[LayoutNode]:
        """
        Lay out resolved trees.

        Args:
            resolved: Resolved root nodes
            viewport: Initial containing block (configured viewport by default)
            anchor: Position of the first root (configured anchor by default)

        Returns:
            List[LayoutNode]: One layout tree per root
        """
        self.perf.start("layout")
        roots = self.layout_engine.layout(
            resolved,
            viewport or self.default_viewport(),
            anchor or self.default_anchor(),
        )
        self.perf.end("layout")
        return roots

    def render(self,
               html_content: str,
               css_text: str = "",
               viewport: Optional[Dimensions] = None,
               fragment: bool = False) -> RenderResult:
        """
        Run the whole pipeline: document, styles, cascade and layout.

        Style sheets embedded in ``<style>`` elements are applied after
        ``css_text``, so they win ties against it.

        Args:
            html_content: HTML text
            css_text: External style text
            viewport: Initial containing block
            fragment: Parse the HTML as a fragment

        Returns:
            RenderResult: Every intermediate tree of the run
        """
        viewport = viewport or self.default_viewport()
        document = self.load_document(html_content, fragment=fragment)

        rule_groups = self.parse_stylesheet(css_text)
        for sheet in document.style_sheets:
            rule_groups.extend(self.parse_stylesheet(sheet))

        resolved = self.resolve(document, rule_groups)
        layout = self.layout(resolved, viewport)

        logger.info(f"Rendered {document.node_count} nodes with {len(rule_groups)} rule groups")
        return RenderResult(document, rule_groups, resolved, layout, viewport)

    def paint(self, layout: List[LayoutNode], viewport: Optional[Dimensions] = None) -> Image.Image:
        """
        Paint layout trees onto a fresh surface.

        Args:
            layout: Layout root boxes
            viewport: Surface size (configured viewport by default)

        Returns:
            Image.Image: The painted surface
        """
        viewport = viewport or self.default_viewport()
        self.perf.start("paint")
        painter = Painter(viewport.width, viewport.height, self.background_color())
        painted = painter.paint_all(layout)
        self.perf.end("paint")
        logger.debug(f"Painted {painted} rectangles")
        return painter.image
