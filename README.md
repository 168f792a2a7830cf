# wsmanxml

A small toolkit for producing and reading the XML used by SOAP,
WS-Addressing and WS-Management messages. This includes the PowerShell
remoting shell (`rsp`) payloads.

It needs Python 3.10 or later and has no runtime dependencies. Parsing
uses the standard library's expat parser.

## Layout

The generic XML layer:

- `wsmanxml.builder`: `Element`, `Attribute`, `Namespace`,
  `Declaration` and `Builder`. Namespace prefixes are resolved from the
  `add_namespace_declaration` calls made on an element and its ancestors.
- `wsmanxml.parser`: `parse(text)` returns a `Document`. Its nodes are
  `Node` objects with `name`, `namespace`, `attributes`, `text`,
  `namespaces`, `children()`, `is_element()`, `is_text()` and `is_root()`.
  The module also has the `XmlVisitor` / `XmlDeserialize` protocol and
  `deserialize(node, visitor)`, which turn nodes into typed values, and
  `element_from_node(node)`.
- `wsmanxml.errors`: `XmlError` and its subclasses, such as `ParserError`
  and `InvalidXml`, plus the `ProtocolError` family.

The protocol layer:

- `wsmanxml.namespaces`: the known namespaces, as the `Namespace` enum,
  and `NamespaceDeclaration`.
- `wsmanxml.tagnames`: `TagName` and the constants for every known tag,
  such as `ENVELOPE`, `ACTION`, `SHELL` and `OPTION`.
- `wsmanxml.attributes`: the recognised attributes `MustUnderstand`,
  `Name`, `MustComply` and `ShellId`.
- `wsmanxml.values`: the tag values `Text` and `Empty`.
- `wsmanxml.tag`: `Tag`, a tag name with a value, attributes and namespace
  declarations. It also has `TagContainer`, the base for values made of
  optional child tags.
- `wsmanxml.anytag`: `TagList` and `parse_any_tag(node)`.
- `wsmanxml.ws_addressing`: `AddressValue`.
- `wsmanxml.ws_management`: `OptionSetValue`, `SelectorSetValue`,
  `PullValue`, `ReleaseValue`, `GetStatusValue` and `EnumerateValue`.
- `wsmanxml.rsp`: `ShellValue`.
- `wsmanxml.soap`: `SoapEnvelope`, `SoapHeaders` and `SoapBody`.

## Building a document

```python
from wsmanxml.builder import Attribute, Builder, Declaration, Element

root = (
    Element("root")
    .add_namespace_declaration("http://example.com/ns1", "ns1")
    .add_attribute(Attribute("attr1", "value1"))
    .add_child(Element("child").set_namespace("http://example.com/ns1"))
    .add_child(Element("message").set_text("Hello, world!"))
)

print(Builder(Declaration("1.0", "UTF-8").with_standalone(True), root))
```

An element holds either text or child elements:

- `add_child` replaces any text.
- `set_text` replaces any children.

## Building a SOAP message

```python
from wsmanxml.attributes import MustUnderstand
from wsmanxml.builder import Builder
from wsmanxml.namespaces import Namespace
from wsmanxml.rsp import ShellValue
from wsmanxml.soap import SoapBody, SoapEnvelope, SoapHeaders
from wsmanxml.tag import Tag
from wsmanxml.tagnames import ACTION, ENVELOPE, OPTION_SET
from wsmanxml.ws_management import OptionSetValue

options = OptionSetValue().add_option("protocolversion", "2.3", True)
envelope = SoapEnvelope(
    body=SoapBody(shell=ShellValue(name="Runspace1", input_streams="stdin pr")),
    header=SoapHeaders(
        action=Tag("http://schemas.xmlsoap.org/ws/2004/09/transfer/Create", ACTION)
        .with_attribute(MustUnderstand(True)),
        message_id="uuid:00000000-0000-0000-0000-000000000001",
        option_set=Tag(options, OPTION_SET),
    ),
)

tag = Tag(envelope, ENVELOPE)
for namespace in (Namespace.SOAP, Namespace.WS_ADDRESSING,
                  Namespace.MS_WS_MANAGEMENT, Namespace.RSP_SHELL):
    tag.with_declaration(namespace)

print(Builder(None, tag.into_element()))
```

Fields of `SoapHeaders`, `SoapBody` and `ShellValue` accept either of two
things:

- a `Tag` with the matching name;
- a bare value, which is wrapped in such a tag. A plain string becomes
  `Text`.

## Parsing

```python
from wsmanxml.parser import parse
from wsmanxml.soap import SoapEnvelope, SoapHeaders

document = parse(xml_text)
envelope = document.root_element()
header = next(n for n in envelope.children() if n.name == "Header")
headers = SoapHeaders.from_node(header)
print(headers.action.value)

message = SoapEnvelope.from_node(document.root)
```

When reading, text values are trimmed of surrounding whitespace. Child
elements that a container does not know are ignored. `SoapEnvelope.from_node`
accepts the document root or its root element, and it requires a Body.

The two layers raise different errors:

- Malformed text raises `ParserError`.
- A document of the wrong shape raises `InvalidXml`.

Both are subclasses of `wsmanxml.errors.XmlError`.

## Demo command

`wsmanxml-demo` prints a sample document that uses nested namespaces,
attributes and text content:

```
wsmanxml-demo
```

`wsmanxml-demo parse` prints an indented outline of the elements of a
built-in sample SOAP message. `wsmanxml-demo parse FILE` does the same for
an XML file.

## What it does not do

- It only builds and reads XML. It does not send or receive WS-Management
  messages over HTTP, and it has no client or session handling.
- `EnumerateValue` only holds the parameters of an Enumerate request. It
  cannot be written out as XML.

## Running the tests

```
pip install .[test]
pytest
```