"""
Element implementation for the document tree.
"""

from typing import Dict, Optional, Set
from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation.

    An element has a tag name, an ordered list of children and a
    name-to-value attribute mapping.
    """

    def __init__(self,
                 tag_name: str,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name.lower()
        self.node_name = self.tag_name.upper()
        self.attributes: Dict[str, str] = {}

        # Collected text of <style> elements
        self.style_content: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        """Get the ID of the element, or None when the attribute is absent."""
        return self.attributes.get('id')

    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        return set(self.attributes.get('class', '').split())

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if not present
        """
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value.

        Args:
            name: Attribute name
            value: Attribute value
        """
        self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        """Check whether the attribute is present."""
        return name in self.attributes

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} id={self.node_id}>"
