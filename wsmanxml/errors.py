"""Exception types for XML handling and for the SOAP protocol layer."""

from __future__ import annotations

from typing import Any


def _node_type_name(node_type: Any) -> str:
    return str(getattr(node_type, "name", node_type))


class XmlError(Exception):
    """Base class for errors raised while building or reading XML."""


class ParserError(XmlError):
    """The document text could not be parsed."""

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"Invalid XML: {reason}")


class XmlInvalidNamespace(XmlError):
    """An element carried a namespace other than the expected one."""

    def __init__(self, expected: str, found: str | None) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid namespace: expected '{expected}', found '{found!r}'")


class XmlInvalidTag(XmlError):
    """An element had a different tag name than the expected one."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid tag: expected '{expected}', found '{found!r}'")


class TagCountInvalid(XmlError):
    """A tag occurred an unacceptable number of times."""

    def __init__(self, tag: str, value: int) -> None:
        self.tag = tag
        self.value = value
        super().__init__(f"Invalid number of tags for {tag}: found {value}")


class InvalidXml(XmlError):
    """The document is well formed but does not have the expected shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid XML: {reason}")


class GenericError(XmlError):
    """Any other XML error, described by its message alone."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnexpectedTag(XmlError):
    """A tag appeared where it is not allowed."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unexpected tag: {tag}")


class InvalidNodeType(XmlError):
    """A node of one kind was found where another kind was required."""

    def __init__(self, expected: Any, found: Any) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Invalid node type: expected '{_node_type_name(expected)}', "
            f"found {_node_type_name(found)}"
        )


class ProtocolError(Exception):
    """Base class for errors raised by the SOAP protocol layer."""


class InvalidSoapVersion(ProtocolError):
    """The SOAP version is not supported."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid SOAP version: {version}")


class MissingSoapEnvelope(ProtocolError):
    """The message has no SOAP envelope."""

    def __init__(self) -> None:
        super().__init__("SOAP envelope is missing")


class MissingSoapBody(ProtocolError):
    """The envelope has no SOAP body."""

    def __init__(self) -> None:
        super().__init__("SOAP body is missing")


class MissingSoapHeader(ProtocolError):
    """The envelope has no SOAP header."""

    def __init__(self) -> None:
        super().__init__("SOAP header is missing")


class XmlParsingError(ProtocolError):
    """The XML of a SOAP message could not be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"XML parsing error: {reason}")


class UnexpectedError(ProtocolError):
    """Any other protocol failure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unexpected error: {reason}")