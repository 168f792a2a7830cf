"""Build and parse XML for SOAP, WS-Addressing and WS-Management messages."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "builder",
    "parser",
    "namespaces",
    "attributes",
    "values",
    "tagnames",
    "tag",
    "anytag",
    "ws_addressing",
    "ws_management",
    "rsp",
    "soap",
    "demo",
]