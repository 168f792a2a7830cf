import pytest

from wsmanxml.attributes import MustComply, MustUnderstand, Name
from wsmanxml.builder import Element, Namespace as XmlNamespace
from wsmanxml.errors import GenericError
from wsmanxml.namespaces import MS_WSMAN_NAMESPACE, Namespace
from wsmanxml.parser import parse
from wsmanxml.tag import Tag
from wsmanxml.tagnames import OPTION_SET
from wsmanxml.values import Text
from wsmanxml.ws_management import (
    WS_ENUMERATION_NAMESPACE,
    EnumerateValue,
    GetStatusValue,
    OptionSetValue,
    PullValue,
    ReleaseValue,
    SelectorSetValue,
)


def _option_named(option_set, name):
    return next(
        opt
        for opt in option_set.options
        if any(isinstance(attr, Name) and attr.value == name for attr in opt.attributes)
    )


def test_option_set_creation():
    option_set = (
        OptionSetValue()
        .add_option("WINRS_CONSOLEMODE_STDIN", "TRUE", None)
        .add_option("protocolversion", "2.3", True)
    )

    assert len(option_set.options) == 2

    console_option = _option_named(option_set, "WINRS_CONSOLEMODE_STDIN")
    assert console_option.value == Text("TRUE")
    assert not any(isinstance(attr, MustComply) for attr in console_option.attributes)

    protocol_option = _option_named(option_set, "protocolversion")
    assert protocol_option.value == Text("2.3")
    must_comply = next(
        attr.value for attr in protocol_option.attributes if isinstance(attr, MustComply)
    )
    assert must_comply is True


def test_option_set_renders_options():
    option_set = (
        OptionSetValue()
        .add_option("WINRS_CONSOLEMODE_STDIN", "TRUE", None)
        .add_option("protocolversion", "2.3", True)
    )
    tag = (
        Tag(option_set, OPTION_SET)
        .with_attribute(MustUnderstand(True))
        .with_declaration(Namespace.MS_WS_MANAGEMENT)
    )
    text = str(tag.into_element())
    assert "w:OptionSet" in text
    assert '<w:Option Name="WINRS_CONSOLEMODE_STDIN">TRUE</w:Option>' in text
    assert 'MustComply="true"' in text


def test_option_set_round_trip():
    option_set = (
        OptionSetValue()
        .add_option("WINRS_CONSOLEMODE_STDIN", "TRUE")
        .add_option("protocolversion", "2.3", True)
    )
    text = str(Tag(option_set, OPTION_SET).with_declaration(Namespace.MS_WS_MANAGEMENT).into_element())

    parsed = OptionSetValue.from_children(parse(text).root_element().children())
    assert [opt.value for opt in parsed.options] == [Text("TRUE"), Text("2.3")]
    assert parsed.options[0].attributes[0] == Name("WINRS_CONSOLEMODE_STDIN")


def test_option_set_ignores_other_children():
    doc = parse(
        f'<w:OptionSet xmlns:w="{MS_WSMAN_NAMESPACE}">'
        '<w:Other>x</w:Other><w:Option Name="a">b</w:Option>'
        "</w:OptionSet>"
    )
    parsed = OptionSetValue.from_children(doc.root_element().children())
    assert [opt.value for opt in parsed.options] == [Text("b")]


def test_enumerate_value_builder():
    value = EnumerateValue().with_optimization(True).with_max_elements(32).with_filter("f")
    assert value.optimize_enumeration is True
    assert value.max_elements == 32
    assert value.filter == Text("f")
    assert EnumerateValue().max_elements is None


def test_pull_value_children():
    element = PullValue("ctx").with_max_elements(5).append_to_element(Element("Pull"))
    context, max_elements = element.content
    assert context.name == "EnumerationContext"
    assert context.namespace == XmlNamespace(WS_ENUMERATION_NAMESPACE)
    assert context.content == "ctx"
    assert max_elements.name == "MaxElements"
    assert max_elements.namespace is None
    assert max_elements.content == "5"


def test_pull_value_without_max_elements():
    element = PullValue(Text("ctx")).append_to_element(Element("Pull"))
    assert [child.name for child in element.content] == ["EnumerationContext"]


def test_undeclared_enumeration_namespace_cannot_render_without_scope():
    element = PullValue("ctx").append_to_element(Element("Pull"))
    with pytest.raises(GenericError):
        element.format()


@pytest.mark.parametrize("kind", [ReleaseValue, GetStatusValue])
def test_context_only_values(kind):
    element = kind("ctx").append_to_element(Element("Op"))
    (child,) = element.content
    assert child.name == "EnumerationContext"
    assert child.namespace == XmlNamespace(WS_ENUMERATION_NAMESPACE)
    assert child.content == "ctx"


def test_selector_set_value():
    value = SelectorSetValue({Text("one"), Text("two"), "two"})
    assert value.selectors == {Text("one"), Text("two")}
    element = value.append_to_element(Element("SelectorSet"))
    assert {child.name for child in element.content} == {"Selector"}
    assert sorted(child.content for child in element.content) == ["one", "two"]