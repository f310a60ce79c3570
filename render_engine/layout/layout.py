"""
Layout Engine implementation.
This module computes absolute positions and sizes for a resolved tree.

Boxes stack vertically. Each box takes the full width of its containing
block unless it declares a ``width``; a box without an explicit ``height`` is
as tall as the sum of its children. Width is therefore settled before the
children are laid out and height after them.
"""

import logging
from typing import Any, Iterator, List, Optional

from ..css.cascade import DisplayType, ResolvedNode
from ..css.errors import ErrorKind, LayoutError
from ..css.values import Declarations, NumericValue, StringValue

logger = logging.getLogger(__name__)


class Dimensions:
    """Width and height in pixels."""

    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __repr__(self) -> str:
        return f"Dimensions({self.width}, {self.height})"


class Position:
    """Absolute x/y coordinates in pixels."""

    def __init__(self, x: int = 0, y: int = 0):
        self.x = x
        self.y = y

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"


class LayoutNode:
    """
    A positioned and sized box for one resolved node.
    """

    def __init__(self, resolved: ResolvedNode, dimensions: Dimensions, position: Position):
        """
        Initialize a layout node.

        Args:
            resolved: The resolved node this box is built from
            dimensions: Computed width and height
            position: Absolute position of the top-left corner
        """
        self.resolved = resolved
        self.dimensions = dimensions
        self.position = position
        self.children: List[LayoutNode] = []

    @property
    def declarations(self) -> Declarations:
        return self.resolved.declarations

    @property
    def display(self) -> DisplayType:
        return self.resolved.display

    @property
    def node_id(self) -> int:
        return self.resolved.node_id

    def iter_tree(self) -> Iterator['LayoutNode']:
        """Yield this box and every descendant, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def debug_tree(self, level: int = 0) -> str:
        """
        Render an indented outline of the layout tree.

        Returns:
            str: One line per box
        """
        node = self.resolved.node
        label = f"<{node.tag_name}>" if node.is_element else "#text"
        lines = [
            f"{'  ' * level}{label} {self.display.value} "
            f"x={self.position.x} y={self.position.y} "
            f"w={self.dimensions.width} h={self.dimensions.height}"
        ]
        for child in self.children:
            lines.append(child.debug_tree(level + 1))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LayoutNode({self.resolved.node!r}, {self.position!r}, {self.dimensions!r})"


def resolve_length(declarations: Declarations, property_name: str, reference: int) -> Optional[int]:
    """
    Convert an explicit ``width``/``height`` declaration to pixels.

    Args:
        declarations: The node's declarations
        property_name: ``width`` or ``height``
        reference: Containing block length percentages are taken of

    Returns:
        Optional[int]: Pixels, or None when the property is absent or ``auto``

    Raises:
        LayoutError: If the declared value is not a length
    """
    value = declarations.get(property_name)

    if value is None:
        return None

    if isinstance(value, NumericValue):
        return value.to_pixels(reference)

    if isinstance(value, StringValue) and value.text == 'auto':
        return None

    raise LayoutError(ErrorKind.INVALID_DIMENSION, property_name, value)


class LayoutEngine:
    """
    Vertical block layout.

    This class turns resolved trees into layout trees. It keeps no state
    between calls; every call rebuilds the whole tree.
    """

    def build(self, resolved: ResolvedNode, containing: Dimensions, anchor: Position) -> LayoutNode:
        """
        Lay out a resolved node and its subtree.

        Args:
            resolved: The node to lay out
            containing: The containing block's width and (so far) height
            anchor: Where the node's top-left corner goes

        Returns:
            LayoutNode: The positioned, sized box
        """
        declarations = resolved.declarations
        position = Position(anchor.x, anchor.y)

        width = resolve_length(declarations, 'width', containing.width)
        if width is None:
            width = containing.width

        explicit_height = resolve_length(declarations, 'height', containing.height)
        height = explicit_height if explicit_height is not None else 0

        node = LayoutNode(resolved, Dimensions(width, height), position)

        # Children see this box's width and provisional height
        box = Dimensions(width, height)
        cursor = Position(position.x, position.y)

        for resolved_child in resolved.children:
            child = self.build(resolved_child, box, cursor)
            node.children.append(child)
            cursor = Position(cursor.x, cursor.y + child.dimensions.height)

        if explicit_height is None:
            node.dimensions.height = sum(child.dimensions.height for child in node.children)

        return node

    def layout(self,
               roots: List[ResolvedNode],
               viewport: Dimensions,
               anchor: Optional[Position] = None) -> List[LayoutNode]:
        """
        Lay out a forest of resolved trees, stacked vertically.

        Args:
            roots: Resolved root nodes in document order
            viewport: The initial containing block
            anchor: Top-left corner of the first root (defaults to the origin)

        Returns:
            List[LayoutNode]: One layout tree per root
        """
        cursor = Position(anchor.x, anchor.y) if anchor else Position(0, 0)
        layout_roots = []

        for root in roots:
            layout_root = self.build(root, viewport, cursor)
            layout_roots.append(layout_root)
            cursor = Position(cursor.x, cursor.y + layout_root.dimensions.height)

        logger.debug(f"Laid out {len(layout_roots)} root boxes in a "
                     f"{viewport.width}x{viewport.height} viewport")
        return layout_roots
