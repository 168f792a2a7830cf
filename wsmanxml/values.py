"""Values a tag can carry: plain text or nothing at all."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from .builder import Element
from .errors import InvalidXml
from .parser import Node, XmlDeserialize, XmlVisitor


class TagValue(ABC):
    """Something that can fill in the content of a builder element."""

    @abstractmethod
    def append_to_element(self, element: Element) -> Element:
        """Add this value to the element and return the element."""


class _TextVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._value: Optional[Text] = None

    def visit_node(self, node: Node) -> None:
        pass

    def visit_children(self, children: Iterable[Node]) -> None:
        nodes = list(children)
        if len(nodes) != 1:
            raise InvalidXml(f"Expected exactly one text node, found {len(nodes)} children")
        child = nodes[0]
        if not child.is_text():
            raise InvalidXml("Expected text node, found non-text child")
        if child.text is not None:
            self._value = Text(child.text.strip())

    def finish(self) -> Text:
        if self._value is None:
            raise InvalidXml("No text found in the node")
        return self._value


@dataclass(frozen=True)
class Text(TagValue, XmlDeserialize):
    """Text content of a tag, stored without surrounding whitespace when parsed."""

    value: str

    def __str__(self) -> str:
        return self.value

    def append_to_element(self, element: Element) -> Element:
        return element.set_text(self.value)

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _TextVisitor()

    @classmethod
    def from_node(cls, node: Node) -> Text:
        """Text is read from a tag's children; reading a lone node finds none."""
        return super().from_node(node)

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> Text:
        """Read the single text child, trimmed."""
        return super().from_children(children)


class _EmptyVisitor(XmlVisitor):
    def visit_node(self, node: Node) -> None:
        pass

    def visit_children(self, children: Iterable[Node]) -> None:
        count = sum(1 for _ in children)
        if count:
            raise InvalidXml(f"Expected empty tag with no children, found {count} children")

    def finish(self) -> Empty:
        return Empty()


@dataclass(frozen=True)
class Empty(TagValue, XmlDeserialize):
    """The value of a tag without content."""

    def append_to_element(self, element: Element) -> Element:
        return element

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _EmptyVisitor()

    @classmethod
    def from_node(cls, node: Node) -> Empty:
        return super().from_node(node)

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> Empty:
        """Accept no children at all."""
        return super().from_children(children)