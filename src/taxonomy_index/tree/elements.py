"""Adapters exposing parsed markup as generic elements.

A taxonomy is built from anything that looks like an element: a tag, an
ordered sequence of attribute values and an ordered sequence of children.
Children may include entries that are not elements at all (text, comments),
which the builder treats as formatting noise.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence, Tuple
from xml.dom import Node
from xml.etree import ElementTree


class ElementLike(Protocol):
    """Structural interface consumed by ``Taxon.from_element``."""

    @property
    def tag(self) -> str: ...

    @property
    def attributes(self) -> Sequence[str]: ...

    @property
    def children(self) -> Sequence["ElementLike"]: ...

    @property
    def is_element(self) -> bool: ...


@dataclass(frozen=True)
class Element:
    """In-memory element, handy for building trees by hand."""
    tag: str
    attributes: Tuple[str, ...] = ()
    children: Tuple["Element", ...] = ()
    is_element: bool = True

    @classmethod
    def node(cls, tag: str, *attributes: str, children: Sequence["Element"] = ()) -> "Element":
        return cls(tag=tag, attributes=tuple(attributes), children=tuple(children))

    @classmethod
    def text(cls, content: str = "\n") -> "Element":
        """A non-element entry, as found between elements in indented markup."""
        return cls(tag="#text", attributes=(content,), is_element=False)


@dataclass(frozen=True)
class DomElement:
    """Wraps an ``xml.dom.minidom`` node.

    Whitespace-only text nodes are dropped from ``children``; other text,
    comments and processing instructions are kept as non-elements.
    """
    node: Any
    _children: Tuple["DomElement", ...] = field(default=(), repr=False)

    @classmethod
    def wrap(cls, node: Any) -> "DomElement":
        if node.nodeType == Node.DOCUMENT_NODE:
            node = node.documentElement
        children = tuple(
            cls.wrap(child)
            for child in node.childNodes
            if not _is_ignorable_whitespace(child)
        )
        return cls(node=node, _children=children)

    @property
    def tag(self) -> str:
        return self.node.nodeName

    @property
    def attributes(self) -> Tuple[str, ...]:
        if not self.is_element:
            return ()
        attrs = self.node.attributes
        if attrs is None:
            return ()
        return tuple(attrs.item(i).value for i in range(attrs.length))

    @property
    def children(self) -> Tuple["DomElement", ...]:
        return self._children

    @property
    def is_element(self) -> bool:
        return self.node.nodeType == Node.ELEMENT_NODE


@dataclass(frozen=True)
class EtreeElement:
    """Wraps an ``xml.etree.ElementTree`` element.

    ElementTree keeps text on ``.text``/``.tail`` rather than as nodes, so only
    comments and processing instructions surface as non-elements.
    """
    element: Any

    @classmethod
    def wrap(cls, element: Any) -> "EtreeElement":
        if isinstance(element, ElementTree.ElementTree):
            element = element.getroot()
        return cls(element=element)

    @property
    def tag(self) -> str:
        tag = self.element.tag
        return tag if isinstance(tag, str) else "#special"

    @property
    def attributes(self) -> Tuple[str, ...]:
        if not self.is_element:
            return ()
        return tuple(self.element.attrib.values())

    @property
    def children(self) -> Tuple["EtreeElement", ...]:
        return tuple(EtreeElement(child) for child in self.element)

    @property
    def is_element(self) -> bool:
        return isinstance(self.element.tag, str)


def _is_ignorable_whitespace(node: Any) -> bool:
    return node.nodeType == Node.TEXT_NODE and not node.data.strip()


def first_attribute(element: ElementLike) -> Optional[str]:
    """Return the text of the first attribute of an element, if any."""
    if not element.is_element:
        return None
    attributes = element.attributes
    if not attributes:
        return None
    return attributes[0]
