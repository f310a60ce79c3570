"""
Node implementation for the document tree.
This module implements the base node shared by elements and text.
"""

from enum import IntEnum
from typing import List, Optional, Iterator


class NodeType(IntEnum):
    """Node types, numbered as in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    DOCUMENT_NODE = 9


class Node:
    """
    Base Node implementation for the document tree.

    Every node is registered in its owner document's arena and is identified
    by ``node_id``, its index in that arena.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document
        self.node_id: int = -1

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []

        self.node_name: str = "#node"

    @property
    def is_element(self) -> bool:
        """Whether this node is an element."""
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        """Whether this node is a text node."""
        return self.node_type == NodeType.TEXT_NODE

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.is_element]

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        if child is self:
            raise ValueError("A node cannot be its own child")

        # If child already has a parent, remove it first
        if child.parent_node is not None:
            child.parent_node.remove_child(child)

        child.parent_node = self
        self.child_nodes.append(child)

        return child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node
        """
        if child not in self.child_nodes:
            raise ValueError("Child not found in child nodes")

        self.child_nodes.remove(child)
        child.parent_node = None

        return child

    def iter_descendants(self) -> Iterator['Node']:
        """Yield every descendant in document order (pre-order)."""
        for child in self.child_nodes:
            yield child
            yield from child.iter_descendants()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name} id={self.node_id}>"
