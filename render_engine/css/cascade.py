"""
Cascade resolution.
This module matches rule groups against document elements, merges the winning
declarations and classifies each node's display type.

For an element, every selector of every rule group that matches contributes
its group's declarations. Contributions are applied in ascending specificity;
ties keep source order, so a later rule group beats an earlier one of equal
specificity. The merge is per property: a lower-specificity rule still
supplies any property the higher ones never set.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..dom import Document, Element, Node
from .selector import RuleGroup, Selector
from .values import Declarations, StringValue

logger = logging.getLogger(__name__)

# Metadata and other non-rendered elements
HIDDEN_ELEMENTS = frozenset({
    'area', 'base', 'basefont', 'datalist', 'head', 'link', 'meta', 'noembed',
    'noframes', 'param', 'rp', 'script', 'style', 'template', 'title',
})

# Elements that are block-level by default
BLOCK_ELEMENTS = frozenset({
    'address', 'blockquote', 'center', 'dialog', 'div', 'figure', 'figcaption',
    'footer', 'form', 'header', 'hr', 'legend', 'listing', 'main', 'p',
    'plaintext', 'pre', 'xmp',
})


class DisplayType(Enum):
    """Display categories a node can resolve to."""
    NONE = "none"
    BLOCK = "block"
    INLINE = "inline"


def element_matches_selector(element: Element, selector: Selector, strict_ids: bool = False) -> bool:
    """
    Check whether an element matches a compound selector.

    Args:
        element: The element to test
        selector: The selector to match
        strict_ids: Reject an id selector when the element has no id. By
            default an element without an id attribute satisfies any id
            constraint, for compatibility with existing style sheets.

    Returns:
        bool: True if every constraint of the selector holds
    """
    if selector.tag is not None and selector.tag != element.tag_name:
        return False

    if selector.id is not None:
        element_id = element.get_attribute('id')
        if element_id is None:
            if strict_ids:
                return False
        elif element_id != selector.id:
            return False

    if selector.classes and not selector.classes <= element.class_list:
        return False

    for name, value in selector.attrs.items():
        if element.get_attribute(name) != value:
            return False

    return True


def matching_rules(element: Element,
                   rule_groups: Iterable[RuleGroup],
                   strict_ids: bool = False) -> List[Tuple[Selector, Declarations]]:
    """
    Collect every matching selector, ordered by ascending specificity.

    Args:
        element: The element to match
        rule_groups: Rule groups in source order
        strict_ids: See ``element_matches_selector``

    Returns:
        List of ``(selector, declarations)`` pairs; ties keep source order
    """
    matches = []

    # Every selector of a comma list is matched on its own
    for rule_group in rule_groups:
        for selector in rule_group.selectors:
            if element_matches_selector(element, selector, strict_ids):
                matches.append((selector, rule_group.declarations))

    # sorted() is stable, so equal specificities stay in source order
    return sorted(matches, key=lambda match: match[0].specificity())


def declarations_for_element(element: Element,
                             rule_groups: Iterable[RuleGroup],
                             strict_ids: bool = False) -> Declarations:
    """
    Compute the cascaded declarations of an element.

    Args:
        element: The element to resolve
        rule_groups: Rule groups in source order
        strict_ids: See ``element_matches_selector``

    Returns:
        Declarations: Merged property map
    """
    declarations: Declarations = {}

    for _, matched in matching_rules(element, rule_groups, strict_ids):
        declarations.update(matched)

    return declarations


def display_type_for(node: Node, declarations: Declarations) -> DisplayType:
    """
    Classify a node.

    Text nodes are inline. An explicit ``display`` of ``none``, ``block`` or
    ``inline`` wins; otherwise the tag decides, defaulting to inline.

    Args:
        node: The document node
        declarations: The node's cascaded declarations

    Returns:
        DisplayType: The display category
    """
    if not node.is_element:
        return DisplayType.INLINE

    display = declarations.get('display')
    if isinstance(display, StringValue):
        for display_type in DisplayType:
            if display.text == display_type.value:
                return display_type

    if node.tag_name in HIDDEN_ELEMENTS:
        return DisplayType.NONE

    if node.tag_name in BLOCK_ELEMENTS:
        return DisplayType.BLOCK

    return DisplayType.INLINE


class ResolvedNode:
    """
    A document node annotated with its cascaded style.

    The resolved tree mirrors the document tree child for child and refers
    back to it by arena id only.
    """

    def __init__(self,
                 document: Document,
                 node_id: int,
                 declarations: Declarations,
                 display: DisplayType,
                 children: Optional[List['ResolvedNode']] = None):
        """
        Initialize a resolved node.

        Args:
            document: Arena holding the source node
            node_id: Arena id of the source node
            declarations: Cascaded declarations
            display: Computed display type
            children: Resolved children in document order
        """
        self.document = document
        self.node_id = node_id
        self.declarations = declarations
        self.display = display
        self.children: List[ResolvedNode] = children or []

    @property
    def node(self) -> Node:
        """The source document node."""
        return self.document.get_node(self.node_id)

    def iter_tree(self):
        """Yield this node and every descendant, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def __repr__(self) -> str:
        return (f"ResolvedNode({self.node!r}, display={self.display.value}, "
                f"{len(self.declarations)} declarations, {len(self.children)} children)")


class CascadeResolver:
    """
    Builds resolved trees from a document and a list of rule groups.

    The resolver never mutates its inputs; every call builds a fresh tree.
    """

    def __init__(self, rule_groups: List[RuleGroup], strict_ids: bool = False):
        """
        Initialize the resolver.

        Args:
            rule_groups: Rule groups in source order
            strict_ids: Treat an id selector as unmatched on elements without an id
        """
        self.rule_groups = list(rule_groups)
        self.strict_ids = strict_ids

    def resolve(self, node: Node) -> ResolvedNode:
        """
        Resolve a node and its whole subtree.

        Args:
            node: The document node; its owner document must be its arena

        Returns:
            ResolvedNode: Root of the resolved subtree
        """
        if not node.is_element:
            return ResolvedNode(node.owner_document, node.node_id, {}, DisplayType.INLINE)

        declarations = declarations_for_element(node, self.rule_groups, self.strict_ids)
        children = [self.resolve(child) for child in node.child_nodes]

        return ResolvedNode(
            node.owner_document,
            node.node_id,
            declarations,
            display_type_for(node, declarations),
            children,
        )

    def resolve_document(self, document: Document) -> List[ResolvedNode]:
        """
        Resolve every root of a document.

        Args:
            document: The document to resolve

        Returns:
            List[ResolvedNode]: One resolved tree per root node
        """
        roots = [self.resolve(node) for node in document.child_nodes]
        logger.debug(f"Resolved {len(roots)} root nodes against {len(self.rule_groups)} rule groups")
        return roots
