"""Building XML documents from elements, attributes and namespace declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

from .errors import GenericError


@dataclass(frozen=True)
class Namespace:
    """An XML namespace, identified by its URL."""

    url: str

    def __str__(self) -> str:
        return self.url


NamespaceLike = Union[Namespace, str]
AliasMap = Mapping[Namespace, str]


def _to_namespace(namespace: Optional[NamespaceLike]) -> Optional[Namespace]:
    if namespace is None or isinstance(namespace, Namespace):
        return namespace
    return Namespace(str(namespace))


def _prefixed(alias: Optional[str], name: str) -> str:
    return name if alias is None else f"{alias}:{name}"


@dataclass
class Attribute:
    """An XML attribute, optionally in a namespace."""

    name: str
    value: str
    namespace: Optional[Namespace] = None

    def __post_init__(self) -> None:
        self.namespace = _to_namespace(self.namespace)

    def set_namespace(self, namespace: Optional[NamespaceLike]) -> Attribute:
        """Put the attribute in a namespace and return it."""
        self.namespace = _to_namespace(namespace)
        return self

    def collect_namespaces(self, namespaces: set[Namespace]) -> set[Namespace]:
        """Add this attribute's namespace, if any, to the set and return the set."""
        if self.namespace is not None:
            namespaces.add(self.namespace)
        return namespaces

    def format(self, alias_map: Optional[AliasMap] = None) -> str:
        """Render as ` name="value"`, prefixed by the namespace alias in scope."""
        alias = None
        if self.namespace is not None:
            if alias_map is None:
                raise GenericError(
                    f"no namespace declarations in scope for attribute '{self.name}'"
                )
            alias = alias_map.get(self.namespace)
        return f' {_prefixed(alias, self.name)}="{self.value}"'


@dataclass
class Element:
    """An XML element holding either text, child elements or nothing."""

    name: str
    namespace: Optional[Namespace] = None
    attributes: list[Attribute] = field(default_factory=list)
    content: Union[str, list["Element"], None] = None
    namespaces: Optional[dict[Namespace, str]] = None

    def __post_init__(self) -> None:
        self.namespace = _to_namespace(self.namespace)

    def set_namespace(self, namespace: Optional[NamespaceLike]) -> Element:
        """Put the element in a namespace (or none) and return it."""
        self.namespace = _to_namespace(namespace)
        return self

    def add_namespace_declaration(self, namespace: NamespaceLike, alias: str) -> Element:
        """Declare an alias for a namespace on this element and its descendants."""
        if self.namespaces is None:
            self.namespaces = {}
        self.namespaces[_to_namespace(namespace)] = alias
        return self

    def add_attribute(self, attribute: Attribute) -> Element:
        self.attributes.append(attribute)
        return self

    def add_child(self, child: Element) -> Element:
        """Append a child element; any text content is replaced."""
        if isinstance(self.content, list):
            self.content.append(child)
        else:
            self.content = [child]
        return self

    def add_children(self, children: Iterable[Element]) -> Element:
        for child in children:
            self.add_child(child)
        return self

    def set_text(self, text: object) -> Element:
        """Set text content; any child elements are replaced."""
        self.content = str(text)
        return self

    def _scope(self, alias_map: Optional[AliasMap]) -> Optional[AliasMap]:
        if alias_map is None:
            return None if self.namespaces is None else dict(self.namespaces)
        if self.namespaces is None:
            return alias_map
        return {**alias_map, **self.namespaces}

    def format(self, alias_map: Optional[AliasMap] = None) -> str:
        """Render the element and its content with the aliases inherited from parents."""
        scope = self._scope(alias_map)

        alias = None
        if self.namespace is not None:
            if scope is None:
                raise GenericError(
                    f"no namespace declarations in scope for element '{self.name}'"
                )
            alias = scope.get(self.namespace)

        tag = _prefixed(alias, self.name)
        parts = [f"<{tag}"]
        parts.extend(
            f' xmlns:{ns_alias}="{namespace.url}"'
            for namespace, ns_alias in (self.namespaces or {}).items()
        )
        parts.extend(attribute.format(scope) for attribute in self.attributes)

        if self.content is None:
            parts.append("/>")
        elif isinstance(self.content, str):
            parts.append(f">{self.content}</{tag}>")
        else:
            parts.append(">")
            parts.extend(child.format(scope) for child in self.content)
            parts.append(f"</{tag}>")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()


@dataclass
class Declaration:
    """The `<?xml ...?>` declaration at the head of a document."""

    version: str
    encoding: str
    standalone: Optional[bool] = None

    def with_standalone(self, standalone: bool) -> Declaration:
        self.standalone = standalone
        return self

    def __str__(self) -> str:
        text = f'<?xml version="{self.version}" encoding="{self.encoding}"'
        if self.standalone is not None:
            text += f' standalone="{"yes" if self.standalone else "no"}"'
        return text + "?>"


@dataclass
class Builder:
    """A whole XML document: an optional declaration and a root element."""

    declaration: Optional[Declaration]
    element: Element

    def __str__(self) -> str:
        head = "" if self.declaration is None else f"{self.declaration} \n"
        return head + self.element.format()