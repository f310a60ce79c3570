"""
Text node implementation for the document tree.
"""

from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation.

    This class represents a text leaf in the document tree.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)

        self.node_name = "#text"
        self.data = data or ""

    def append_child(self, child: Node) -> Node:
        raise ValueError("Text nodes cannot have children")

    def __repr__(self) -> str:
        preview = self.data if len(self.data) <= 20 else self.data[:17] + "..."
        return f"<Text {preview!r} id={self.node_id}>"
