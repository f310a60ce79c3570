"""
Document implementation.
The document owns every node in an arena and builds its tree from HTML with html5lib.
"""

import logging
from typing import List, Optional
import html5lib

from .node import Node, NodeType
from .element import Element
from .text import Text

logger = logging.getLogger(__name__)

# Elements whose text content is never imported as child nodes
RAW_TEXT_ELEMENTS = {'script', 'style'}


class Document(Node):
    """
    Document node and node arena.

    Nodes created through the document are appended to an arena and receive
    their arena index as ``node_id``. Derived trees refer to document nodes by
    that id, so the document must outlive them.
    """

    def __init__(self):
        """Initialize an empty document."""
        super().__init__(NodeType.DOCUMENT_NODE, None)
        self.owner_document = self
        self.node_name = "#document"

        self._nodes: List[Node] = []
        self.style_sheets: List[str] = []

    @property
    def document_element(self) -> Optional[Element]:
        """Get the first root element, if any."""
        for child in self.child_nodes:
            if child.is_element:
                return child
        return None

    @property
    def node_count(self) -> int:
        """Number of nodes registered in the arena."""
        return len(self._nodes)

    def create_element(self, tag_name: str) -> Element:
        """
        Create an element owned by this document.

        Args:
            tag_name: Tag name of the element

        Returns:
            The new element
        """
        return self._register(Element(tag_name, self))

    def create_text_node(self, data: str) -> Text:
        """
        Create a text node owned by this document.

        Args:
            data: Text content

        Returns:
            The new text node
        """
        return self._register(Text(data, self))

    def get_node(self, node_id: int) -> Node:
        """
        Look up a node by arena id.

        Args:
            node_id: Arena index of the node

        Returns:
            The node

        Raises:
            KeyError: If no node has that id
        """
        if node_id < 0 or node_id >= len(self._nodes):
            raise KeyError(node_id)
        return self._nodes[node_id]

    def parse_html(self, html_content: str) -> 'Document':
        """
        Parse a complete HTML document into this document.

        Args:
            html_content: The HTML content to parse

        Returns:
            This document
        """
        logger.debug(f"Parsing HTML document (first 100 chars): {html_content[:100]}")
        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        parsed = parser.parse(html_content)
        self._convert_children(parsed, self)
        logger.debug(f"Document parsed into {self.node_count} nodes")
        return self

    def parse_fragment(self, html_content: str) -> 'Document':
        """
        Parse an HTML fragment; its top-level nodes become the document's roots.

        Args:
            html_content: The HTML fragment to parse

        Returns:
            This document
        """
        logger.debug(f"Parsing HTML fragment (first 100 chars): {html_content[:100]}")
        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        fragment = parser.parseFragment(html_content)
        self._convert_children(fragment, self)
        logger.debug(f"Fragment parsed into {self.node_count} nodes")
        return self

    def _register(self, node: Node) -> Node:
        node.node_id = len(self._nodes)
        self._nodes.append(node)
        return node

    def _convert_children(self, parsed_parent, parent: Node) -> None:
        """
        Convert the children of a parsed html5lib node into our tree.

        Args:
            parsed_parent: The parsed (minidom) node whose children to convert
            parent: The node in our tree receiving the converted children
        """
        for child in parsed_parent.childNodes:
            if child.nodeType == child.TEXT_NODE:
                # Whitespace between tags is formatting, not content
                if child.nodeValue and child.nodeValue.strip():
                    parent.append_child(self.create_text_node(child.nodeValue))
            elif child.nodeType == child.ELEMENT_NODE:
                parent.append_child(self._convert_element(child))

    def _convert_element(self, parsed_element) -> Element:
        """
        Convert an html5lib element and its subtree.

        Args:
            parsed_element: The element from html5lib to convert

        Returns:
            Our Element implementation
        """
        element = self.create_element(parsed_element.tagName)

        for name, value in parsed_element.attributes.items():
            element.set_attribute(name, value)

        if element.tag_name in RAW_TEXT_ELEMENTS:
            if element.tag_name == 'style':
                content = "".join(
                    child.nodeValue for child in parsed_element.childNodes
                    if child.nodeType == child.TEXT_NODE
                )
                element.style_content = content
                self.style_sheets.append(content)
            return element

        self._convert_children(parsed_element, element)
        return element
