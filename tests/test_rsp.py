import pytest

from wsmanxml.attributes import Name, ShellId
from wsmanxml.namespaces import PWSH_NAMESPACE, Namespace
from wsmanxml.parser import parse
from wsmanxml.rsp import ShellValue
from wsmanxml.tag import Tag
from wsmanxml.tagnames import NAME, OWNER, SHELL
from wsmanxml.values import Text


def test_shell_value_builder():
    shell = ShellValue(
        name="TestShell",
        input_streams="stdin",
        output_streams="stdout stderr",
        creation_xml="test xml content",
    )

    assert shell.name is not None
    assert shell.input_streams is not None
    assert shell.output_streams is not None
    assert shell.creation_xml is not None

    assert shell.name.value == Text("TestShell")
    assert shell.input_streams.value == Text("stdin")
    assert shell.output_streams.value == Text("stdout stderr")
    assert shell.owner is None


def test_wrong_tag_name_is_rejected():
    with pytest.raises(ValueError):
        ShellValue(name=Tag("x", OWNER))


def test_matching_tag_is_kept():
    tag = Tag("Runspace1", NAME)
    assert ShellValue(name=tag).name is tag


def test_children_written_in_field_order():
    shell = ShellValue(name="Runspace1", shell_id="id-1", creation_xml="data")
    element = Tag(shell, SHELL).with_declaration(Namespace.RSP_SHELL).into_element()
    assert [child.name for child in element.content] == ["ShellId", "Name", "creationXml"]


def test_shell_tag_renders_with_attributes():
    shell = ShellValue(
        name="Runspace1",
        input_streams="stdin pr",
        output_streams="stdout",
        creation_xml="Mimic-the-base64-encoded XML content here",
    )
    tag = (
        Tag(shell, SHELL)
        .with_attribute(ShellId("2D6534D0-6B12-40E3-B773-CBA26459CFA8"))
        .with_attribute(Name("Runspace1"))
        .with_declaration(Namespace.RSP_SHELL)
    )
    text = str(tag.into_element())
    assert "rsp:Shell" in text
    assert "Runspace1" in text
    assert "2D6534D0-6B12-40E3-B773-CBA26459CFA8" in text
    assert "<creationXml>Mimic-the-base64-encoded XML content here</creationXml>" in text


def test_round_trip():
    shell = ShellValue(
        shell_id="2D6534D0-6B12-40E3-B773-CBA26459CFA8",
        name="Runspace1",
        owner="administrator",
        state="Connected",
        creation_xml="payload",
    )
    text = str(Tag(shell, SHELL).with_declaration(Namespace.RSP_SHELL).into_element())

    parsed = Tag.from_node(parse(text).root_element(), ShellValue, SHELL).value
    assert parsed.shell_id.value == Text("2D6534D0-6B12-40E3-B773-CBA26459CFA8")
    assert parsed.name.value == Text("Runspace1")
    assert parsed.owner.value == Text("administrator")
    assert parsed.state.value == Text("Connected")
    assert parsed.creation_xml.value == Text("payload")
    assert parsed.locale is None


def test_from_children_reads_response_shell():
    doc = parse(
        f'<rsp:Shell xmlns:rsp="{PWSH_NAMESPACE}">'
        "<rsp:ShellId>\n 2D6534D0-6B12-40E3-B773-CBA26459CFA8\n </rsp:ShellId>"
        "<rsp:ClientIP> 10.10.0.1 </rsp:ClientIP>"
        "<rsp:ProcessId> 5812 </rsp:ProcessId>"
        "<rsp:BufferMode> Block </rsp:BufferMode>"
        "</rsp:Shell>"
    )
    shell = ShellValue.from_children(doc.root_element().children())
    assert shell.shell_id.value == Text("2D6534D0-6B12-40E3-B773-CBA26459CFA8")
    assert shell.client_ip.value == Text("10.10.0.1")
    assert shell.process_id.value == Text("5812")
    assert shell.buffer_mode.value == Text("Block")
    assert shell.name is None