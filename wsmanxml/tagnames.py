"""Names and namespaces of the tags used in WS-Management messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .namespaces import MS_WSMAN_NAMESPACE, PWSH_NAMESPACE, SOAP_NAMESPACE, WSA_NAMESPACE


@dataclass(frozen=True)
class TagName:
    """The local name of a tag and the namespace it belongs to."""

    name: str
    namespace: Optional[str] = None

    def __str__(self) -> str:
        return self.name


# PowerShell remoting shell
SHELL_ID = TagName("ShellId", PWSH_NAMESPACE)
NAME = TagName("Name", PWSH_NAMESPACE)
SHELL_RESOURCE_URI = TagName("ResourceUri", PWSH_NAMESPACE)
OWNER = TagName("Owner", PWSH_NAMESPACE)
CLIENT_IP = TagName("ClientIP", PWSH_NAMESPACE)
PROCESS_ID = TagName("ProcessId", PWSH_NAMESPACE)
IDLE_TIME_OUT = TagName("IdleTimeOut", PWSH_NAMESPACE)
INPUT_STREAMS = TagName("InputStreams", PWSH_NAMESPACE)
OUTPUT_STREAMS = TagName("OutputStreams", PWSH_NAMESPACE)
MAX_IDLE_TIME_OUT = TagName("MaxIdleTimeOut", PWSH_NAMESPACE)
LOCALE = TagName("Locale", PWSH_NAMESPACE)
DATA_LOCALE = TagName("DataLocale", PWSH_NAMESPACE)
COMPRESSION_MODE = TagName("CompressionMode", PWSH_NAMESPACE)
PROFILE_LOADED = TagName("ProfileLoaded", PWSH_NAMESPACE)
ENCODING = TagName("Encoding", PWSH_NAMESPACE)
BUFFER_MODE = TagName("BufferMode", PWSH_NAMESPACE)
STATE = TagName("State", PWSH_NAMESPACE)
SHELL_RUN_TIME = TagName("ShellRunTime", PWSH_NAMESPACE)
SHELL_INACTIVITY = TagName("ShellInactivity", PWSH_NAMESPACE)
CREATION_XML = TagName("creationXml", None)

# PowerShell remoting operations
SHELL = TagName("Shell", PWSH_NAMESPACE)
COMMAND = TagName("Command", PWSH_NAMESPACE)
RECEIVE = TagName("Receive", PWSH_NAMESPACE)
SEND = TagName("Send", PWSH_NAMESPACE)
SIGNAL = TagName("Signal", PWSH_NAMESPACE)

# WS-Addressing
ACTION = TagName("Action", WSA_NAMESPACE)
TO = TagName("To", WSA_NAMESPACE)
MESSAGE_ID = TagName("MessageID", WSA_NAMESPACE)
RELATES_TO = TagName("RelatesTo", WSA_NAMESPACE)
REPLY_TO = TagName("ReplyTo", WSA_NAMESPACE)
FAULT_TO = TagName("FaultTo", WSA_NAMESPACE)
FROM = TagName("From", WSA_NAMESPACE)
ADDRESS = TagName("Address", WSA_NAMESPACE)

# SOAP
ENVELOPE = TagName("Envelope", SOAP_NAMESPACE)
HEADER = TagName("Header", SOAP_NAMESPACE)
BODY = TagName("Body", SOAP_NAMESPACE)

# WS-Management operations
IDENTIFY = TagName("Identify", MS_WSMAN_NAMESPACE)
GET = TagName("Get", MS_WSMAN_NAMESPACE)
PUT = TagName("Put", MS_WSMAN_NAMESPACE)
CREATE = TagName("Create", MS_WSMAN_NAMESPACE)
DELETE = TagName("Delete", MS_WSMAN_NAMESPACE)
ENUMERATE = TagName("Enumerate", MS_WSMAN_NAMESPACE)
PULL = TagName("Pull", MS_WSMAN_NAMESPACE)
RELEASE = TagName("Release", MS_WSMAN_NAMESPACE)
GET_STATUS = TagName("GetStatus", MS_WSMAN_NAMESPACE)

# WS-Management headers
RESOURCE_URI = TagName("ResourceURI", MS_WSMAN_NAMESPACE)
OPERATION_TIMEOUT = TagName("OperationTimeout", MS_WSMAN_NAMESPACE)
MAX_ENVELOPE_SIZE = TagName("MaxEnvelopeSize", MS_WSMAN_NAMESPACE)
SEQUENCE_ID = TagName("SequenceId", MS_WSMAN_NAMESPACE)
OPERATION_ID = TagName("OperationID", MS_WSMAN_NAMESPACE)
FRAGMENT_TRANSFER = TagName("FragmentTransfer", MS_WSMAN_NAMESPACE)
SELECTOR_SET = TagName("SelectorSet", MS_WSMAN_NAMESPACE)
SESSION_ID = TagName("SessionId", MS_WSMAN_NAMESPACE)
COMPRESSION_TYPE = TagName("CompressionType", MS_WSMAN_NAMESPACE)
OPTION_SET = TagName("OptionSet", MS_WSMAN_NAMESPACE)
OPTION = TagName("Option", MS_WSMAN_NAMESPACE)