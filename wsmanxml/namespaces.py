"""The namespaces used by WS-Management and PowerShell remoting messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .errors import InvalidXml
from .parser import Node, XmlDeserialize, XmlVisitor

PWSH_NAMESPACE = "http://schemas.microsoft.com/wbem/wsman/1/windows/shell"
PWSH_NAMESPACE_ALIAS = "rsp"

POWERSHELL_NAMESPACE = "http://schemas.microsoft.com/powershell/Microsoft.PowerShell"

WSA_NAMESPACE = "http://schemas.xmlsoap.org/ws/2004/08/addressing"
WSA_NAMESPACE_ALIAS = "a"

SOAP_NAMESPACE = "http://www.w3.org/2003/05/soap-envelope"
SOAP_NAMESPACE_ALIAS = "s"

MS_WSMAN_NAMESPACE = "http://schemas.microsoft.com/wbem/wsman/1/wsman.xsd"
MS_WSMAN_NAMESPACE_ALIAS = "w"

WS_MANAGEMENT_NAMESPACE = "http://schemas.dmtf.org/wbem/wsman/1/wsman.xsd"
WS_MANAGEMENT_NAMESPACE_ALIAS = "wsman"

WS_TRANSFER_NAMESPACE = "http://schemas.xmlsoap.org/ws/2004/09/transfer"
WS_TRANSFER_NAMESPACE_ALIAS = "x"


class Namespace(Enum):
    """A namespace known to the protocol."""

    POWER_SHELL = "PowerShell"
    RSP_SHELL = "RspShell"
    WS_ADDRESSING = "WsAddressing"
    MS_WS_MANAGEMENT = "MsWsManagement"
    WS_MANAGEMENT = "WsManagement"
    SOAP = "Soap"
    WS_TRANSFER = "WsTransfer"

    def as_tuple(self) -> tuple[str, str]:
        """The (url, alias) pair used when declaring this namespace."""
        return _DECLARATIONS[self]

    @property
    def url(self) -> str:
        return self.as_tuple()[0]

    @property
    def alias(self) -> str:
        return self.as_tuple()[1]

    @classmethod
    def from_url(cls, url: str) -> Namespace:
        """Look up a namespace by its URL; raise InvalidXml if it is unknown."""
        try:
            return _BY_URL[url]
        except KeyError:
            raise InvalidXml(f"Unknown namespace: {url}") from None

    @classmethod
    def from_node(cls, node: Node) -> Namespace:
        """The namespace of an element's own tag name."""
        if node.namespace is None:
            raise InvalidXml("No namespace found")
        return cls.from_url(node.namespace)


_DECLARATIONS = {
    Namespace.POWER_SHELL: (PWSH_NAMESPACE, PWSH_NAMESPACE_ALIAS),
    Namespace.RSP_SHELL: (PWSH_NAMESPACE, PWSH_NAMESPACE_ALIAS),
    Namespace.WS_ADDRESSING: (WSA_NAMESPACE, WSA_NAMESPACE_ALIAS),
    Namespace.MS_WS_MANAGEMENT: (MS_WSMAN_NAMESPACE, MS_WSMAN_NAMESPACE_ALIAS),
    Namespace.WS_MANAGEMENT: (WS_MANAGEMENT_NAMESPACE, WS_MANAGEMENT_NAMESPACE_ALIAS),
    Namespace.SOAP: (SOAP_NAMESPACE, SOAP_NAMESPACE_ALIAS),
    Namespace.WS_TRANSFER: (WS_TRANSFER_NAMESPACE, WS_TRANSFER_NAMESPACE_ALIAS),
}

_BY_URL = {
    POWERSHELL_NAMESPACE: Namespace.POWER_SHELL,
    PWSH_NAMESPACE: Namespace.RSP_SHELL,
    WSA_NAMESPACE: Namespace.WS_ADDRESSING,
    MS_WSMAN_NAMESPACE: Namespace.MS_WS_MANAGEMENT,
    WS_MANAGEMENT_NAMESPACE: Namespace.WS_MANAGEMENT,
    SOAP_NAMESPACE: Namespace.SOAP,
    WS_TRANSFER_NAMESPACE: Namespace.WS_TRANSFER,
}


class _NamespaceDeclarationVisitor(XmlVisitor):
    def __init__(self) -> None:
        self._namespaces: list[Namespace] = []

    def visit_node(self, node: Node) -> None:
        self._namespaces.extend(Namespace.from_url(ns.uri) for ns in node.namespaces)

    def visit_children(self, children: Iterable[Node]) -> None:
        pass

    def finish(self) -> NamespaceDeclaration:
        return NamespaceDeclaration(self._namespaces)


@dataclass
class NamespaceDeclaration(XmlDeserialize):
    """The namespaces a tag declares, in order."""

    namespaces: list[Namespace] = field(default_factory=list)

    def push(self, namespace: Namespace) -> None:
        self.namespaces.append(namespace)

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self.namespaces)

    def __len__(self) -> int:
        return len(self.namespaces)

    @classmethod
    def visitor(cls) -> XmlVisitor:
        return _NamespaceDeclarationVisitor()

    @classmethod
    def from_node(cls, node: Node) -> NamespaceDeclaration:
        """Every namespace in scope at the node; raise InvalidXml for an unknown one."""
        return super().from_node(node)