"""
Compound selectors, their specificity and rule groups.

A selector is a tag name, an id, a set of classes and a set of required
attribute values, any of which may be absent. Selectors are built with the
chainable ``with_*`` methods, each of which returns an updated copy::

    Selector().with_tag("p").with_class("intro").with_attr("lang", "en")
"""

from functools import total_ordering
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .values import Declarations


@total_ordering
class Specificity:
    """
    Matching priority of a selector.

    Ordered lexicographically on ``(ids, classes, elements)``.
    """

    def __init__(self, ids: int = 0, classes: int = 0, elements: int = 0):
        self.ids = ids
        self.classes = classes
        self.elements = elements

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.ids, self.classes, self.elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Specificity):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Specificity):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"Specificity({self.ids}, {self.classes}, {self.elements})"


class Selector:
    """
    A compound selector.

    Instances are never mutated; the builder methods return new selectors.
    """

    def __init__(self,
                 tag: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Iterable[str] = (),
                 attrs: Optional[Mapping[str, str]] = None):
        """
        Initialize a selector.

        Args:
            tag: Required tag name
            id: Required id
            classes: Required class names
            attrs: Required attribute values by attribute name
        """
        self._tag = tag
        self._id = id
        self._classes = frozenset(classes)
        self._attrs = MappingProxyType(dict(attrs or {}))

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def classes(self) -> FrozenSet[str]:
        return self._classes

    @property
    def attrs(self) -> Mapping[str, str]:
        return self._attrs

    def with_tag(self, tag: str) -> 'Selector':
        return Selector(tag, self._id, self._classes, self._attrs)

    def with_id(self, id: str) -> 'Selector':
        return Selector(self._tag, id, self._classes, self._attrs)

    def with_class(self, class_name: str) -> 'Selector':
        return Selector(self._tag, self._id, self._classes | {class_name}, self._attrs)

    def with_attr(self, name: str, value: str) -> 'Selector':
        attrs = dict(self._attrs)
        attrs[name] = value
        return Selector(self._tag, self._id, self._classes, attrs)

    def specificity(self) -> Specificity:
        """
        Compute the specificity of this selector.

        Returns:
            Specificity: ids, classes plus attributes, and tag count
        """
        return Specificity(
            1 if self._id is not None else 0,
            len(self._classes) + len(self._attrs),
            1 if self._tag is not None else 0,
        )

    def is_empty(self) -> bool:
        """Whether the selector constrains nothing."""
        return (self._tag is None and self._id is None
                and not self._classes and not self._attrs)

    def _key(self) -> Tuple:
        return (self._tag, self._id, self._classes, frozenset(self._attrs.items()))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        parts = [self._tag or ""]
        if self._id is not None:
            parts.append(f"#{self._id}")
        parts.extend(f".{name}" for name in sorted(self._classes))
        parts.extend(f'[{name}="{value}"]' for name, value in sorted(self._attrs.items()))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Selector({str(self)!r})"


class RuleGroup:
    """
    One or more selectors sharing a declaration map.
    """

    def __init__(self, selectors: List[Selector], declarations: Declarations):
        """
        Initialize a rule group.

        Args:
            selectors: The comma-separated selectors, in source order
            declarations: Property name to value
        """
        self.selectors = list(selectors)
        self.declarations: Declarations = dict(declarations)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RuleGroup):
            return NotImplemented
        return self.selectors == other.selectors and self.declarations == other.declarations

    def __repr__(self) -> str:
        selectors = ", ".join(str(selector) for selector in self.selectors)
        return f"RuleGroup({selectors!r}, {len(self.declarations)} declarations)"
