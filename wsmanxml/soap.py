"""SOAP envelopes with WS-Management headers and bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .anytag import TagList
from .builder import Element
from .errors import InvalidXml, XmlError
from .parser import Node, XmlDeserialize, XmlVisitor
from .rsp import ShellValue
from .tag import Tag, TagContainer
from .tagnames import (
    ACTION,
    BODY,
    COMMAND,
    COMPRESSION_TYPE,
    CREATE,
    DATA_LOCALE,
    DELETE,
    ENUMERATE,
    GET,
    GET_STATUS,
    HEADER,
    IDENTIFY,
    LOCALE,
    MAX_ENVELOPE_SIZE,
    MESSAGE_ID,
    OPERATION_ID,
    OPERATION_TIMEOUT,
    OPTION_SET,
    PULL,
    PUT,
    RECEIVE,
    RELATES_TO,
    RELEASE,
    REPLY_TO,
    RESOURCE_URI,
    SEND,
    SEQUENCE_ID,
    SESSION_ID,
    SHELL,
    SIGNAL,
    TO,
    TagName,
)
from .values import Empty, TagValue, Text
from .ws_addressing import AddressValue
from .ws_management import OptionSetValue


@dataclass
class SoapHeaders(TagContainer):
    """The WS-Addressing and WS-Management headers of a SOAP message.

    Fields accept a Tag of the right name or a bare value for it.
    """

    TAGS = {
        "to": (TO, Text),
        "action": (ACTION, Text),
        "reply_to": (REPLY_TO, AddressValue),
        "message_id": (MESSAGE_ID, Text),
        "relates_to": (RELATES_TO, Text),
        "resource_uri": (RESOURCE_URI, Text),
        "max_envelope_size": (MAX_ENVELOPE_SIZE, Text),
        "locale": (LOCALE, Text),
        "data_locale": (DATA_LOCALE, Text),
        "session_id": (SESSION_ID, Text),
        "operation_id": (OPERATION_ID, Text),
        "sequence_id": (SEQUENCE_ID, Text),
        "option_set": (OPTION_SET, OptionSetValue),
        "operation_timeout": (OPERATION_TIMEOUT, Text),
        "compression_type": (COMPRESSION_TYPE, Text),
    }

    to: Optional[Any] = None
    action: Optional[Any] = None
    reply_to: Optional[Any] = None
    message_id: Optional[Any] = None
    relates_to: Optional[Any] = None
    resource_uri: Optional[Any] = None
    max_envelope_size: Optional[Any] = None
    locale: Optional[Any] = None
    data_locale: Optional[Any] = None
    session_id: Optional[Any] = None
    operation_id: Optional[Any] = None
    sequence_id: Optional[Any] = None
    option_set: Optional[Any] = None
    operation_timeout: Optional[Any] = None
    compression_type: Optional[Any] = None


@dataclass
class SoapBody(TagContainer):
    """The operations a SOAP body may carry.

    Fields accept a Tag of the right name or a bare value for it.
    """

    TAGS = {
        "identify": (IDENTIFY, Empty),
        "get": (GET, Text),
        "put": (PUT, Text),
        "create": (CREATE, Text),
        "delete": (DELETE, Text),
        "enumerate": (ENUMERATE, TagList),
        "pull": (PULL, TagList),
        "release": (RELEASE, TagList),
        "get_status": (GET_STATUS, TagList),
        "shell": (SHELL, ShellValue),
        "command": (COMMAND, TagList),
        "receive": (RECEIVE, TagList),
        "send": (SEND, TagList),
        "signal": (SIGNAL, TagList),
    }

    identify: Optional[Any] = None
    get: Optional[Any] = None
    put: Optional[Any] = None
    create: Optional[Any] = None
    delete: Optional[Any] = None
    enumerate: Optional[Any] = None
    pull: Optional[Any] = None
    release: Optional[Any] = None
    get_status: Optional[Any] = None
    shell: Optional[Any] = None
    command: Optional[Any] = None
    receive: Optional[Any] = None
    send: Optional[Any] = None
    signal: Optional[Any] = None


def _as_tag(value: Any, tag_name: TagName, field_name: str) -> Tag:
    if isinstance(value, Tag):
        if value.tag_name != tag_name:
            raise ValueError(
                f"field '{field_name}' takes tag '{tag_name.name}', got '{value.tag_name.name}'"
            )
        return value
    return Tag(value, tag_name)


def _envelope_element(node: Node) -> Node:
    if node.is_root():
        element = next((child for child in node.children() if child.is_element()), None)
        if element is not None:
            return element
    elif node.is_element() and node.parent is not None and node.parent.is_root():
        return node
    raise InvalidXml("SoapEnvelope must be a root element")


def _read_child(envelope: Node, tag_name: TagName, value_type: type) -> Optional[Tag]:
    child = next((c for c in envelope.children() if c.name == tag_name.name), None)
    if child is None:
        return None
    try:
        return Tag.from_node(child, value_type, tag_name)
    except XmlError as exc:
        raise InvalidXml(str(exc)) from exc


class _SoapEnvelopeVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._header: Optional[Tag] = None
        self._body: Optional[Tag] = None

    def visit_node(self, node: Node) -> None:
        envelope = _envelope_element(node)
        self._header = _read_child(envelope, HEADER, SoapHeaders)
        self._body = _read_child(envelope, BODY, SoapBody)
        if self._body is None:
            raise InvalidXml("SoapEnvelope must contain a Body element")

    def visit_children(self, children: Iterable[Node]) -> None:
        count = sum(1 for _ in children)
        raise InvalidXml(f"Expected a single envelope, found {count} children")

    def finish(self) -> SoapEnvelope:
        if self._body is None:
            raise InvalidXml("Missing Soap Body")
        return SoapEnvelope(self._body, self._header)


@dataclass
class SoapEnvelope(TagValue, XmlDeserialize):
    """A SOAP envelope: a required Body tag and an optional Header tag.

    Either may be given as a Tag or as the bare SoapBody / SoapHeaders value.
    """

    body: Any
    header: Optional[Any] = None

    def __post_init__(self) -> None:
        self.body = _as_tag(self.body, BODY, "body")
        if self.header is not None:
            self.header = _as_tag(self.header, HEADER, "header")

    def append_to_element(self, element: Element) -> Element:
        """Add the header, if any, and then the body as children."""
        if self.header is not None:
            element.add_child(self.header.into_element())
        return element.add_child(self.body.into_element())

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _SoapEnvelopeVisitor()

    @classmethod
    def from_node(cls, node: Node) -> SoapEnvelope:
        """Read an envelope from a document root or its root element."""
        return super().from_node(node)