"""WS-Management values: enumeration bodies, selector sets and option sets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .attributes import MustComply, Name
from .builder import Element
from .parser import Node, XmlDeserialize, XmlVisitor
from .tag import Tag
from .tagnames import OPTION
from .values import TagValue, Text

_log = logging.getLogger(__name__)

WS_ENUMERATION_NAMESPACE = "http://schemas.xmlsoap.org/ws/2004/09/enumeration"


def _as_text(value: Any) -> Text:
    return value if isinstance(value, Text) else Text(str(value))


def _context_element(context: Text) -> Element:
    return (
        Element("EnumerationContext")
        .set_namespace(WS_ENUMERATION_NAMESPACE)
        .set_text(context)
    )


@dataclass
class EnumerateValue:
    """Parameters of an Enumerate request."""

    optimize_enumeration: Optional[bool] = None
    max_elements: Optional[int] = None
    filter: Optional[Text] = None

    def __post_init__(self) -> None:
        if self.filter is not None:
            self.filter = _as_text(self.filter)

    def with_optimization(self, optimize: bool) -> EnumerateValue:
        self.optimize_enumeration = optimize
        return self

    def with_max_elements(self, max_elements: int) -> EnumerateValue:
        self.max_elements = max_elements
        return self

    def with_filter(self, filter: Any) -> EnumerateValue:
        self.filter = _as_text(filter)
        return self


@dataclass
class PullValue(TagValue):
    """The body of a Pull request."""

    enumeration_context: Text
    max_elements: Optional[int] = None

    def __post_init__(self) -> None:
        self.enumeration_context = _as_text(self.enumeration_context)

    def with_max_elements(self, max_elements: int) -> PullValue:
        self.max_elements = max_elements
        return self

    def append_to_element(self, element: Element) -> Element:
        element.add_child(_context_element(self.enumeration_context))
        if self.max_elements is not None:
            element.add_child(Element("MaxElements").set_text(str(self.max_elements)))
        return element


@dataclass
class ReleaseValue(TagValue):
    """The body of a Release request."""

    enumeration_context: Text

    def __post_init__(self) -> None:
        self.enumeration_context = _as_text(self.enumeration_context)

    def append_to_element(self, element: Element) -> Element:
        return element.add_child(_context_element(self.enumeration_context))


@dataclass
class GetStatusValue(TagValue):
    """The body of a GetStatus request."""

    enumeration_context: Text

    def __post_init__(self) -> None:
        self.enumeration_context = _as_text(self.enumeration_context)

    def append_to_element(self, element: Element) -> Element:
        return element.add_child(_context_element(self.enumeration_context))


@dataclass
class SelectorSetValue(TagValue):
    """A set of selectors, each written as a Selector child."""

    selectors: set[Text] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.selectors = {_as_text(selector) for selector in self.selectors}

    def append_to_element(self, element: Element) -> Element:
        for selector in self.selectors:
            element.add_child(Element("Selector").set_text(selector))
        return element


class _OptionSetVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._options: list[Tag] = []

    def visit_node(self, node: Node) -> None:
        pass

    def visit_children(self, children: Iterable[Node]) -> None:
        for child in children:
            if not child.is_element():
                continue
            if (child.name, child.namespace) == (OPTION.name, OPTION.namespace):
                self._options.append(Tag.from_node(child, Text, OPTION))
            else:
                _log.warning(
                    "Unexpected child element in OptionSetValue: %s (namespace: %r)",
                    child.name,
                    child.namespace,
                )

    def finish(self) -> OptionSetValue:
        return OptionSetValue(self._options)


@dataclass
class OptionSetValue(TagValue, XmlDeserialize):
    """A list of Option tags, each named by its Name attribute."""

    options: list[Tag] = field(default_factory=list)

    def add_option(
        self, name: str, value: str, must_comply: Optional[bool] = None
    ) -> OptionSetValue:
        """Add `<Option Name="name">value</Option>`, with MustComply if given."""
        tag = Tag(Text(value), OPTION).with_attribute(Name(name))
        if must_comply is not None:
            tag.with_attribute(MustComply(must_comply))
        self.options.append(tag)
        return self

    def append_to_element(self, element: Element) -> Element:
        for tag in self.options:
            element.add_child(tag.into_element())
        return element

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _OptionSetVisitor()

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> OptionSetValue:
        """Read every Option child; other elements are ignored with a warning."""
        return super().from_children(children)