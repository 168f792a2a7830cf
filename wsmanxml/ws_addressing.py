"""WS-Addressing values carried inside header tags."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .builder import Element
from .errors import InvalidXml
from .parser import Node, XmlDeserialize, XmlVisitor
from .tag import Tag
from .tagnames import ADDRESS
from .values import TagValue, Text

_log = logging.getLogger(__name__)


class _AddressVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._address: Optional[AddressValue] = None

    def visit_node(self, node: Node) -> None:
        self.visit_children(node.children())

    def visit_children(self, children: Iterable[Node]) -> None:
        for child in children:
            if not child.is_element():
                continue
            if (child.name, child.namespace) == (ADDRESS.name, ADDRESS.namespace):
                self._address = AddressValue(Tag.from_node(child, Text, ADDRESS))
            else:
                _log.warning("Unexpected child element in AddressValue: %s", child.name)

    def finish(self) -> AddressValue:
        if self._address is None:
            raise InvalidXml("No Address found in AddressValue")
        return self._address


@dataclass
class AddressValue(TagValue, XmlDeserialize):
    """An endpoint reference holding a single Address tag.

    The url may be given as a Tag, a Text or a plain string.
    """

    url: Any

    def __post_init__(self) -> None:
        if not isinstance(self.url, Tag):
            self.url = Tag(self.url, ADDRESS)

    def append_to_element(self, element: Element) -> Element:
        return element.add_child(self.url.into_element())

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _AddressVisitor()

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> AddressValue:
        """Read the Address child; other elements are ignored with a warning."""
        return super().from_children(children)