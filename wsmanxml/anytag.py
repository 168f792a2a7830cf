"""Tags whose kind is decided by their name, and lists of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .builder import Element
from .errors import InvalidXml
from .parser import Node, XmlDeserialize, XmlVisitor
from .tag import Tag
from .tagnames import (
    ACTION,
    ADDRESS,
    BODY,
    BUFFER_MODE,
    CLIENT_IP,
    COMPRESSION_MODE,
    CREATION_XML,
    DATA_LOCALE,
    ENCODING,
    ENVELOPE,
    FAULT_TO,
    FROM,
    HEADER,
    IDLE_TIME_OUT,
    INPUT_STREAMS,
    LOCALE,
    MAX_IDLE_TIME_OUT,
    MESSAGE_ID,
    NAME,
    OUTPUT_STREAMS,
    OWNER,
    PROCESS_ID,
    PROFILE_LOADED,
    RELATES_TO,
    REPLY_TO,
    SHELL_ID,
    SHELL_INACTIVITY,
    SHELL_RESOURCE_URI,
    SHELL_RUN_TIME,
    STATE,
    TO,
    TagName,
)
from .values import TagValue, Text


class _TagListVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._items: list[Tag] = []

    def visit_node(self, node: Node) -> None:
        raise InvalidXml("TagListVisitor should not be called with a single node")

    def visit_children(self, children: Iterable[Node]) -> None:
        for child in children:
            if not child.is_element():
                raise InvalidXml(f"Expected element child, found: {child.node_type.name}")
            self._items.append(parse_any_tag(child))

    def finish(self) -> TagList:
        return TagList(self._items)


@dataclass
class TagList(TagValue, XmlDeserialize):
    """An ordered list of tags of any known kind."""

    items: list[Tag] = field(default_factory=list)

    def add_tag(self, tag: Tag) -> None:
        self.items.append(tag)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def append_to_element(self, element: Element) -> Element:
        return element.add_children(tag.into_element() for tag in self.items)

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _TagListVisitor()

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> TagList:
        """Read every child as a known tag; any non-element child is an error."""
        return super().from_children(children)


_KINDS: list[tuple[TagName, type]] = [
    (ENVELOPE, TagList),
    (HEADER, TagList),
    (BODY, TagList),
    (ACTION, Text),
    (TO, Text),
    (MESSAGE_ID, Text),
    (RELATES_TO, Text),
    (REPLY_TO, TagList),
    (FAULT_TO, Text),
    (FROM, Text),
    (ADDRESS, Text),
    (SHELL_ID, Text),
    (NAME, Text),
    (SHELL_RESOURCE_URI, Text),
    (OWNER, Text),
    (CLIENT_IP, Text),
    (PROCESS_ID, Text),
    (IDLE_TIME_OUT, Text),
    (INPUT_STREAMS, Text),
    (OUTPUT_STREAMS, Text),
    (MAX_IDLE_TIME_OUT, Text),
    (LOCALE, Text),
    (DATA_LOCALE, Text),
    (COMPRESSION_MODE, Text),
    (PROFILE_LOADED, Text),
    (ENCODING, Text),
    (BUFFER_MODE, Text),
    (STATE, Text),
    (SHELL_RUN_TIME, Text),
    (SHELL_INACTIVITY, Text),
    (CREATION_XML, TagList),
]

_BY_NAME = {tag_name.name: (tag_name, value_type) for tag_name, value_type in _KINDS}


def parse_any_tag(node: Node) -> Tag:
    """Read a tag whose name and value type are chosen by the node's local name."""
    try:
        tag_name, value_type = _BY_NAME[node.name]
    except KeyError:
        raise InvalidXml(f"Unknown tag: {node.name}") from None
    return Tag.from_node(node, value_type, tag_name)