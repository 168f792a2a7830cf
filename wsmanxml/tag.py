"""A named tag carrying a value, attributes and namespace declarations."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Mapping

from .attributes import Attribute
from .builder import Element
from .errors import InvalidXml
from .namespaces import Namespace, NamespaceDeclaration
from .parser import Node, XmlDeserialize, XmlVisitor
from .tagnames import TagName
from .values import TagValue, Text

_log = logging.getLogger(__name__)


@dataclass
class Tag:
    """A tag: its name, its value and the attributes and namespaces it declares.

    A plain string given as the value is taken as Text.
    """

    value: Any
    tag_name: TagName
    attributes: list[Attribute] = field(default_factory=list)
    namespaces_declaration: NamespaceDeclaration = field(default_factory=NamespaceDeclaration)

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            self.value = Text(self.value)

    @property
    def name(self) -> str:
        return self.tag_name.name

    def with_attribute(self, attribute: Attribute) -> Tag:
        self.attributes.append(attribute)
        return self

    def with_declaration(self, declaration: Namespace) -> Tag:
        self.namespaces_declaration.push(declaration)
        return self

    def into_element(self) -> Element:
        """Build the XML element for this tag and its value."""
        element = Element(self.tag_name.name)
        if self.tag_name.namespace is not None:
            element.set_namespace(self.tag_name.namespace)
        for namespace in self.namespaces_declaration:
            url, alias = namespace.as_tuple()
            element.add_namespace_declaration(url, alias)
        for attribute in self.attributes:
            element.add_attribute(attribute.to_xml())
        return self.value.append_to_element(element)

    @classmethod
    def from_node(cls, node: Node, value_type: type, tag_name: TagName) -> Tag:
        """Read a tag of the given name whose value is read by `value_type`."""
        _log.debug(
            "Reading tag %r (expected %r, namespace %r)",
            node.name,
            tag_name.name,
            node.namespace,
        )
        value = None
        if node.is_element() and node.name == tag_name.name:
            value = value_type.from_children(
                child for child in node.children() if child.is_element() or child.is_text()
            )

        attributes: list[Attribute] = []
        for raw in node.attributes:
            try:
                attributes.append(Attribute.from_node(node))
            except InvalidXml:
                _log.debug("Failed to parse attribute: %s", raw.name)

        declarations = NamespaceDeclaration.from_node(node)

        if value is None:
            raise InvalidXml("TagVisitor did not find a valid tag")
        return cls(value, tag_name, attributes, declarations)


class _ContainerVisitor(XmlVisitor):
    def __init__(self, container: type[TagContainer]) -> None:
        self._container = container
        self._by_name = {
            tag_name.name: (attr, tag_name, value_type)
            for attr, (tag_name, value_type) in container.TAGS.items()
        }
        self._values: dict[str, Tag] = {}

    def visit_node(self, node: Node) -> None:
        self.visit_children(node.children())

    def visit_children(self, children: Iterable[Node]) -> None:
        for child in children:
            if not child.is_element():
                continue
            entry = self._by_name.get(child.name)
            if entry is None:
                _log.debug(
                    "Ignoring unexpected child %r in %s", child.name, self._container.__name__
                )
                continue
            attr, tag_name, value_type = entry
            self._values[attr] = Tag.from_node(child, value_type, tag_name)

    def finish(self) -> TagContainer:
        return self._container(**self._values)


class TagContainer(TagValue, XmlDeserialize):
    """Base for dataclasses whose fields are optional tags.

    Subclasses list their tag fields in `TAGS`, mapping each field name to the
    tag name and the value type of the tag, in the order they are written.
    A field may be given a bare value; it is wrapped in a Tag of that name.
    """

    TAGS: ClassVar[Mapping[str, tuple[TagName, type]]] = {}

    def __post_init__(self) -> None:
        for attr, (tag_name, _value_type) in self.TAGS.items():
            current = getattr(self, attr)
            if current is None:
                continue
            if isinstance(current, Tag):
                if current.tag_name != tag_name:
                    raise ValueError(
                        f"field '{attr}' takes tag '{tag_name.name}', "
                        f"got '{current.tag_name.name}'"
                    )
            else:
                setattr(self, attr, Tag(current, tag_name))

    def append_to_element(self, element: Element) -> Element:
        """Add every present tag as a child element, in `TAGS` order."""
        for attr in self.TAGS:
            tag = getattr(self, attr)
            if tag is not None:
                element.add_child(tag.into_element())
        return element

    @classmethod
    def visitor(cls) -> XmlVisitor:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")
        return _ContainerVisitor(cls)

    @classmethod
    def from_children(cls, children: Iterable[Node]) -> TagContainer:
        """Fill the fields from child elements; unknown children are ignored."""
        return super().from_children(children)