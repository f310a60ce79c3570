"""
Rectangle painter.
This module fills each laid out box's background color into a Pillow image.
"""

import logging
from typing import Iterable, Optional

from PIL import Image, ImageDraw

from ..css.cascade import DisplayType
from ..css.values import Color
from ..layout import LayoutNode

logger = logging.getLogger(__name__)

WHITE = Color(255, 255, 255)


class Painter:
    """
    Paints layout trees into an RGB pixel buffer.

    Only ``background-color`` is painted, and only when it is a color value.
    Parents are painted before their children, so children draw on top.
    """

    def __init__(self, width: int, height: int, background: Optional[Color] = None):
        """
        Initialize the painter.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels
            background: Initial fill of the surface (white by default)
        """
        self.width = width
        self.height = height
        self.background = background or WHITE

        self._image = Image.new("RGB", (width, height), self.background.as_tuple())
        self._draw = ImageDraw.Draw(self._image)

        logger.debug(f"Painter initialized with a {width}x{height} surface")

    @property
    def image(self) -> Image.Image:
        """The painted surface."""
        return self._image

    def paint(self, node: LayoutNode) -> int:
        """
        Paint a layout tree.

        Args:
            node: Root of the tree

        Returns:
            int: Number of rectangles filled
        """
        if node.display is DisplayType.NONE:
            return 0

        painted = 0
        background = node.declarations.get('background-color')
        if isinstance(background, Color):
            painted += self.paint_rect(
                node.position.x, node.position.y,
                node.dimensions.width, node.dimensions.height,
                background,
            )

        for child in node.children:
            painted += self.paint(child)

        return painted

    def paint_all(self, roots: Iterable[LayoutNode]) -> int:
        """Paint several layout trees in order."""
        return sum(self.paint(root) for root in roots)

    def paint_rect(self, x: int, y: int, width: int, height: int, color: Color) -> int:
        """
        Fill the rectangle ``[x, x + width) x [y, y + height)``.

        Returns:
            int: 1 if anything was drawn, 0 for an empty rectangle
        """
        if width <= 0 or height <= 0:
            return 0

        # Pillow rectangles include their end coordinates
        self._draw.rectangle([x, y, x + width - 1, y + height - 1], fill=color.as_tuple())
        return 1

    def get_pixel(self, x: int, y: int) -> Color:
        """Read back a pixel."""
        return Color(*self._image.getpixel((x, y)))

    def save(self, path: str) -> None:
        """
        Save the surface to an image file.

        Args:
            path: Output path; the format follows the extension
        """
        self._image.save(path)
        logger.info(f"Saved {self.width}x{self.height} image to {path}")
