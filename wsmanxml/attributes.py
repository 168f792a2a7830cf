"""The attributes the protocol understands on its tags."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from . import builder
from .errors import InvalidXml
from .parser import Node

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attribute:
    """A recognised attribute; each subclass stands for one attribute name."""

    value: Any

    xml_name: ClassVar[str]
    _by_name: ClassVar[dict[str, type["Attribute"]]] = {}

    def __init_subclass__(cls, xml_name: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if xml_name is not None:
            cls.xml_name = xml_name
            Attribute._by_name[xml_name] = cls

    @classmethod
    def _parse_value(cls, text: str) -> Any:
        return text

    def _format_value(self) -> str:
        return str(self.value)

    @classmethod
    def from_name_and_value(cls, name: str, value: str) -> Optional[Attribute]:
        """Build the attribute for an XML name, or None if the name is not known."""
        kind = Attribute._by_name.get(name)
        if kind is None:
            return None
        try:
            return kind(kind._parse_value(value))
        except ValueError as exc:
            raise InvalidXml(f"Invalid value for {name}: {exc}") from exc

    @classmethod
    def from_node(cls, node: Node) -> Attribute:
        """The first recognised attribute of an element."""
        for attribute in node.attributes:
            parsed = Attribute.from_name_and_value(attribute.name, attribute.value)
            if parsed is not None:
                return parsed
            _log.debug("Ignoring unknown attribute: %s", attribute.name)
        raise InvalidXml("No valid attribute found")

    def attribute_name(self) -> str:
        return self.xml_name

    def to_xml(self) -> builder.Attribute:
        return builder.Attribute(self.xml_name, self._format_value())


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


@dataclass(frozen=True)
class _BoolAttribute(Attribute):
    value: bool

    @classmethod
    def _parse_value(cls, text: str) -> bool:
        return _parse_bool(text)

    def _format_value(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class _TextAttribute(Attribute):
    value: str


@dataclass(frozen=True)
class MustUnderstand(_BoolAttribute, xml_name="mustUnderstand"):
    """The SOAP mustUnderstand flag."""


@dataclass(frozen=True)
class Name(_TextAttribute, xml_name="Name"):
    """A Name attribute, as on options and shells."""


@dataclass(frozen=True)
class MustComply(_BoolAttribute, xml_name="MustComply"):
    """The WS-Management MustComply flag on options."""


@dataclass(frozen=True)
class ShellId(_TextAttribute, xml_name="ShellId"):
    """The identifier of a remote shell."""