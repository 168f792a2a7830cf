"""Example command: build a small namespaced document, or outline a parsed one."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .builder import Attribute, Builder, Declaration, Element
from .errors import ParserError
from .parser import Node, parse

NS1 = "http://example.com/ns1"
NS2 = "http://example.com/ns2"
NS1_ALIAS = "ns1"
NS2_ALIAS = "ns2"

_ANONYMOUS = "http://schemas.xmlsoap.org/ws/2004/08/addressing/role/anonymous"

_SAMPLE_PREFIXES = (
    ("s", "http://www.w3.org/2003/05/soap-envelope"),
    ("wsa", "http://schemas.xmlsoap.org/ws/2004/08/addressing"),
    ("wsman", "http://schemas.dmtf.org/wbem/wsman/1/wsman.xsd"),
)

# (qualified name, attributes, content) for each header of the sample message.
_SAMPLE_HEADERS = (
    ("wsa:To", ' s:mustUnderstand="true"', _ANONYMOUS),
    ("wsa:ReplyTo", "", f"<wsa:Address>{_ANONYMOUS}</wsa:Address>"),
    ("wsa:Action", "", "http://schemas.xmlsoap.org/ws/2004/09/transfer/Get"),
    ("wsa:MessageID", "", "uuid:00000000-0000-0000-0000-000000000000"),
    (
        "wsman:ResourceURI",
        "",
        "http://schemas.microsoft.com/wbem/wsman/1/wmi/root/cimv2/Win32_OperatingSystem",
    ),
    ("wsman:OperationTimeout", "", "PT60.000S"),
    ("wsman:Locale", ' xml:lang="en-US"', ""),
    ("wsman:OptionSet", "", '<wsman:Option Name="OptimizeEnumeration">true</wsman:Option>'),
    ("wsman:MaxEnvelopeSize", ' s:mustUnderstand="true"', "153600"),
)


def _sample_soap() -> str:
    declarations = "".join(f' xmlns:{prefix}="{url}"' for prefix, url in _SAMPLE_PREFIXES)
    headers = "\n".join(
        f"    <{name}{attrs}>{content}</{name}>" for name, attrs, content in _SAMPLE_HEADERS
    )
    return f"<s:Envelope{declarations}>\n  <s:Header>\n{headers}\n  </s:Header>\n  <s:Body/>\n</s:Envelope>\n"


SAMPLE_SOAP = _sample_soap()


def build_example_document() -> Builder:
    """A document with a declaration, attributes, namespaces and text."""
    grandchild = Element("grandchild").set_namespace(NS2).add_attribute(Attribute("attr", "value"))
    first = Element("child1").set_namespace(NS1).add_child(grandchild)
    second = (
        Element("child2")
        .set_namespace(NS2)
        .add_namespace_declaration(NS2, NS2_ALIAS)
        .set_text("Text content for child2")
        .add_attribute(Attribute("attr2", "value2").set_namespace(NS1))
    )

    root = Element("root")
    for name, value in (("attr1", "value1"), ("attr2", "value2")):
        root = root.add_attribute(Attribute(name, value))
    root = root.add_children([first, second, Element("child3")])
    root = root.add_namespace_declaration(NS1, NS1_ALIAS)

    return Builder(Declaration("1.0", "UTF-8").with_standalone(True), root)


def _outline(node: Node, depth: int = 0) -> Iterator[str]:
    for child in node.children():
        if child.is_element():
            suffix = f" ({child.namespace})" if child.namespace else ""
            yield f"{'  ' * depth}{child.name}{suffix}"
            yield from _outline(child, depth + 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wsmanxml-demo",
        description="Print an example XML document, or outline the elements of a parsed one.",
    )
    parser.add_argument("command", nargs="?", choices=("build", "parse"), default="build")
    parser.add_argument("file", nargs="?", help="XML file to parse (default: a sample SOAP message)")
    args = parser.parse_args(argv)

    if args.command == "build":
        print(build_example_document())
        return 0

    try:
        source = SAMPLE_SOAP if args.file is None else Path(args.file).read_text(encoding="utf-8")
        document = parse(source)
    except (OSError, ParserError) as exc:
        print(exc, file=sys.stderr)
        return 1

    for line in _outline(document.root):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())