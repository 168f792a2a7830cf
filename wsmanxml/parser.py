"""A read-only XML document tree and the visitor protocol used to deserialize it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional
from xml.parsers import expat

from .builder import Element, Namespace
from .errors import InvalidNodeType, ParserError

_SEPARATOR = " "


class NodeType(Enum):
    """The kind of a node in a parsed document."""

    ROOT = "root"
    ELEMENT = "element"
    PROCESSING_INSTRUCTION = "processing-instruction"
    COMMENT = "comment"
    TEXT = "text"


@dataclass(frozen=True)
class NodeAttribute:
    """An attribute of a parsed element; `name` is the local name."""

    name: str
    value: str
    namespace: Optional[str] = None


@dataclass(frozen=True)
class NodeNamespace:
    """A namespace declaration: a prefix (None for the default) and its URI."""

    name: Optional[str]
    uri: str


class Node:
    """One node of a parsed document."""

    __slots__ = (
        "node_type",
        "name",
        "namespace",
        "attributes",
        "declarations",
        "parent",
        "_children",
        "_text",
    )

    def __init__(
        self,
        node_type: NodeType,
        *,
        name: str = "",
        namespace: Optional[str] = None,
        attributes: tuple[NodeAttribute, ...] = (),
        declarations: tuple[NodeNamespace, ...] = (),
        parent: Optional[Node] = None,
        text: Optional[str] = None,
    ) -> None:
        self.node_type = node_type
        self.name = name
        self.namespace = namespace
        self.attributes = attributes
        self.declarations = declarations
        self.parent = parent
        self._children: list[Node] = []
        self._text = text

    def children(self) -> Iterator[Node]:
        """Iterate over the direct children, in document order."""
        return iter(self._children)

    def is_element(self) -> bool:
        return self.node_type is NodeType.ELEMENT

    def is_text(self) -> bool:
        return self.node_type is NodeType.TEXT

    def is_root(self) -> bool:
        return self.node_type is NodeType.ROOT

    @property
    def text(self) -> Optional[str]:
        """The node's own text, or for an element the text of its first child."""
        if self.node_type is NodeType.ELEMENT:
            first = self._children[0] if self._children else None
            return first._text if first is not None and first.is_text() else None
        return self._text

    @property
    def namespaces(self) -> tuple[NodeNamespace, ...]:
        """Every namespace declaration in scope at this node."""
        chain = []
        node: Optional[Node] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        scope: dict[Optional[str], NodeNamespace] = {}
        for ancestor in reversed(chain):
            for declaration in ancestor.declarations:
                scope[declaration.name] = declaration
        return tuple(scope.values())

    def __repr__(self) -> str:
        if self.is_element():
            return f"Node(ELEMENT, name={self.name!r}, namespace={self.namespace!r})"
        return f"Node({self.node_type.name}, text={self._text!r})"


class Document:
    """A parsed XML document."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def root_element(self) -> Node:
        return next(child for child in self.root.children() if child.is_element())


def _split(name: str) -> tuple[Optional[str], str]:
    namespace, separator, local = name.rpartition(_SEPARATOR)
    return (namespace, local) if separator else (None, name)


class _TreeBuilder:
    def __init__(self) -> None:
        self.root = Node(NodeType.ROOT)
        self._stack = [self.root]
        self._pending: list[NodeNamespace] = []

    def _append(self, node: Node) -> None:
        self._stack[-1]._children.append(node)

    def start_namespace(self, prefix: Optional[str], uri: str) -> None:
        self._pending.append(NodeNamespace(prefix or None, uri))

    def start_element(self, name: str, attrs: list[str]) -> None:
        namespace, local = _split(name)
        attributes = []
        for raw_name, value in zip(attrs[::2], attrs[1::2]):
            attr_namespace, attr_name = _split(raw_name)
            attributes.append(NodeAttribute(attr_name, value, attr_namespace))
        node = Node(
            NodeType.ELEMENT,
            name=local,
            namespace=namespace,
            attributes=tuple(attributes),
            declarations=tuple(self._pending),
            parent=self._stack[-1],
        )
        self._pending = []
        self._append(node)
        self._stack.append(node)

    def end_element(self, _name: str) -> None:
        self._stack.pop()

    def character_data(self, data: str) -> None:
        parent = self._stack[-1]
        if parent.is_root():
            return
        if parent._children and parent._children[-1].is_text():
            parent._children[-1]._text += data
        else:
            self._append(Node(NodeType.TEXT, parent=parent, text=data))

    def comment(self, data: str) -> None:
        self._append(Node(NodeType.COMMENT, parent=self._stack[-1], text=data))

    def processing_instruction(self, target: str, data: str) -> None:
        self._append(
            Node(
                NodeType.PROCESSING_INSTRUCTION,
                name=target,
                parent=self._stack[-1],
                text=data,
            )
        )


def parse(xml: str) -> Document:
    """Parse XML text into a document; raise ParserError if it is not well formed."""
    builder = _TreeBuilder()
    parser = expat.ParserCreate(namespace_separator=_SEPARATOR)
    parser.buffer_text = True
    parser.ordered_attributes = True
    parser.StartNamespaceDeclHandler = builder.start_namespace
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.character_data
    parser.CommentHandler = builder.comment
    parser.ProcessingInstructionHandler = builder.processing_instruction
    try:
        parser.Parse(xml, True)
    except expat.ExpatError as exc:
        raise ParserError(exc) from exc
    return Document(builder.root)


def element_from_node(node: Node) -> Element:
    """Create an empty builder element with the node's name and namespace."""
    if not node.is_element():
        raise InvalidNodeType(NodeType.ELEMENT, node.node_type)
    return Element(node.name, namespace=Namespace(node.namespace) if node.namespace else None)


class XmlVisitor(ABC):
    """Collects a value from a node or from a sequence of child nodes."""

    @abstractmethod
    def visit_node(self, node: Node) -> None:
        """Visit a single node."""

    @abstractmethod
    def visit_children(self, children: Iterable[Node]) -> None:
        """Visit the children of a node."""

    @abstractmethod
    def finish(self) -> Any:
        """Return the value built by the visits."""


def deserialize(node: Node, visitor: XmlVisitor) -> Any:
    """Drive a visitor over one node and return what it built."""
    visitor.visit_node(node)
    return visitor.finish()


class XmlDeserialize(ABC):
    """A type that can be read from parsed XML through its visitor."""

    @classmethod
    @abstractmethod
    def visitor(cls) -> XmlVisitor:
        """Create a fresh visitor that builds an instance of this type."""

    @classmethod
    def from_node(cls, node: Node) -> Any:
        return deserialize(node, cls.visitor())

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> Any:
        visitor = cls.visitor()
        visitor.visit_children(children)
        return visitor.finish()