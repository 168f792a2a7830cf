import enum

import pytest

from wsmanxml.errors import (
    GenericError,
    InvalidNodeType,
    InvalidSoapVersion,
    InvalidXml,
    MissingSoapBody,
    MissingSoapEnvelope,
    MissingSoapHeader,
    ParserError,
    ProtocolError,
    TagCountInvalid,
    UnexpectedError,
    UnexpectedTag,
    XmlError,
    XmlInvalidNamespace,
    XmlInvalidTag,
    XmlParsingError,
)


class _Kind(enum.Enum):
    ELEMENT = 1
    TEXT = 2


@pytest.mark.parametrize(
    "factory, fragment",
    [
        (lambda: ParserError("unclosed tag"), "unclosed tag"),
        (lambda: XmlInvalidNamespace("urn:a", None), "urn:a"),
        (lambda: XmlInvalidTag("Body", "Header"), "Body"),
        (lambda: TagCountInvalid("Body", 2), "Body"),
        (lambda: InvalidXml("broken"), "broken"),
        (lambda: GenericError("anything"), "anything"),
        (lambda: UnexpectedTag("Foo"), "Foo"),
        (lambda: InvalidNodeType(_Kind.ELEMENT, _Kind.TEXT), "ELEMENT"),
    ],
)
def test_xml_errors_share_base(factory, fragment):
    err = factory()
    message = str(err)
    assert fragment in message
    assert isinstance(err, XmlError)
    assert isinstance(err, Exception)
    assert not isinstance(err, ProtocolError)


@pytest.mark.parametrize(
    "factory, fragment",
    [
        (lambda: InvalidSoapVersion("1.3"), "1.3"),
        (lambda: MissingSoapEnvelope(), "envelope"),
        (lambda: MissingSoapBody(), "body"),
        (lambda: MissingSoapHeader(), "header"),
        (lambda: XmlParsingError("bad"), "bad"),
        (lambda: UnexpectedError("boom"), "boom"),
    ],
)
def test_protocol_errors_share_base(factory, fragment):
    err = factory()
    message = str(err)
    assert fragment in message
    assert isinstance(err, ProtocolError)
    assert isinstance(err, Exception)
    assert not isinstance(err, XmlError)


def test_fixed_messages():
    assert str(MissingSoapEnvelope()) == "SOAP envelope is missing"
    assert str(MissingSoapBody()) == "SOAP body is missing"
    assert str(MissingSoapHeader()) == "SOAP header is missing"


def test_messages_carry_details():
    assert str(InvalidXml("broken")).endswith("broken")
    assert "Invalid XML" in str(InvalidXml("broken"))
    assert str(GenericError("anything")) == "anything"
    assert str(UnexpectedTag("Foo")).endswith("Foo")
    assert str(InvalidSoapVersion("1.3")).endswith("1.3")
    assert str(XmlParsingError("bad")).endswith("bad")
    assert str(UnexpectedError("boom")).endswith("boom")


def test_fields_are_kept():
    err = TagCountInvalid("Body", 2)
    assert err.tag == "Body"
    assert err.value == 2
    assert "Body" in str(err) and "2" in str(err)

    tag_err = XmlInvalidTag("Body", "Header")
    assert (tag_err.expected, tag_err.found) == ("Body", "Header")
    assert "Header" in str(tag_err)


def test_invalid_namespace_message_mentions_missing_found():
    err = XmlInvalidNamespace("urn:a", None)
    assert err.found is None
    assert "urn:a" in str(err)
    assert "None" in str(err)


def test_invalid_node_type_uses_member_names():
    err = InvalidNodeType(_Kind.ELEMENT, _Kind.TEXT)
    assert "ELEMENT" in str(err)
    assert "TEXT" in str(err)
    assert err.expected is _Kind.ELEMENT