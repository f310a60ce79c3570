"""
Document tree for the render engine.
This package provides the node arena consumed read-only by the cascade and layout stages.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .document import Document


def parse_html(html_content: str, fragment: bool = False) -> Document:
    """
    Parse HTML content into a new Document.

    Args:
        html_content: The HTML content to parse
        fragment: Parse as a fragment, making its top-level nodes the roots

    Returns:
        The parsed Document
    """
    document = Document()
    if fragment:
        return document.parse_fragment(html_content)
    return document.parse_html(html_content)


__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Document', 'parse_html'
]
