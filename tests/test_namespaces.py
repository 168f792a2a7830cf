import pytest

from wsmanxml.errors import InvalidXml
from wsmanxml.namespaces import (
    MS_WSMAN_NAMESPACE,
    POWERSHELL_NAMESPACE,
    PWSH_NAMESPACE,
    SOAP_NAMESPACE,
    WS_MANAGEMENT_NAMESPACE,
    WS_TRANSFER_NAMESPACE,
    WSA_NAMESPACE,
    Namespace,
    NamespaceDeclaration,
)
from wsmanxml.parser import parse


def test_soap_tuple():
    assert Namespace.SOAP.as_tuple() == (SOAP_NAMESPACE, "s")
    assert Namespace.SOAP.url == SOAP_NAMESPACE
    assert Namespace.SOAP.alias == "s"


def test_powershell_declares_shell_namespace():
    assert Namespace.POWER_SHELL.as_tuple() == (PWSH_NAMESPACE, "rsp")
    assert Namespace.RSP_SHELL.as_tuple() == Namespace.POWER_SHELL.as_tuple()


@pytest.mark.parametrize(
    "namespace,alias",
    [
        (Namespace.WS_ADDRESSING, "a"),
        (Namespace.MS_WS_MANAGEMENT, "w"),
        (Namespace.WS_MANAGEMENT, "wsman"),
        (Namespace.WS_TRANSFER, "x"),
    ],
)
def test_aliases(namespace, alias):
    assert namespace.alias == alias


@pytest.mark.parametrize(
    "namespace", [ns for ns in Namespace if ns is not Namespace.POWER_SHELL]
)
def test_url_round_trip(namespace):
    assert Namespace.from_url(namespace.url) is namespace


def test_powershell_url_lookup():
    assert Namespace.from_url(POWERSHELL_NAMESPACE) is Namespace.POWER_SHELL


def test_unknown_url_raises():
    with pytest.raises(InvalidXml, match="Unknown namespace"):
        Namespace.from_url("urn:example:unknown")


def test_from_node_reads_tag_namespace():
    doc = parse(f'<a:To xmlns:a="{WSA_NAMESPACE}">x</a:To>')
    assert Namespace.from_node(doc.root_element()) is Namespace.WS_ADDRESSING


def test_from_node_without_namespace_raises():
    with pytest.raises(InvalidXml, match="No namespace found"):
        Namespace.from_node(parse("<r/>").root_element())


def test_from_node_with_unknown_namespace_raises():
    with pytest.raises(InvalidXml, match="Unknown namespace"):
        Namespace.from_node(parse('<z:r xmlns:z="urn:example:unknown"/>').root_element())


def test_declaration_collects_scope():
    doc = parse(
        f'<s:Envelope xmlns:s="{SOAP_NAMESPACE}" xmlns:w="{WS_MANAGEMENT_NAMESPACE}">'
        f'<s:Header xmlns:p="{MS_WSMAN_NAMESPACE}" xmlns:x="{WS_TRANSFER_NAMESPACE}"/>'
        "</s:Envelope>"
    )
    header = next(doc.root_element().children())
    declaration = NamespaceDeclaration.from_node(header)
    assert set(declaration) == {
        Namespace.SOAP,
        Namespace.WS_MANAGEMENT,
        Namespace.MS_WS_MANAGEMENT,
        Namespace.WS_TRANSFER,
    }
    assert len(declaration) == 4


def test_declaration_without_namespaces_is_empty():
    assert NamespaceDeclaration.from_node(parse("<r/>").root_element()).namespaces == []


def test_declaration_with_unknown_namespace_raises():
    with pytest.raises(InvalidXml, match="Unknown namespace"):
        NamespaceDeclaration.from_node(
            parse('<r xmlns:z="urn:example:unknown"/>').root_element()
        )


def test_declaration_push_keeps_order():
    declaration = NamespaceDeclaration()
    declaration.push(Namespace.SOAP)
    declaration.push(Namespace.RSP_SHELL)
    assert list(declaration) == [Namespace.SOAP, Namespace.RSP_SHELL]