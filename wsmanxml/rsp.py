"""The PowerShell remoting Shell value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .tag import TagContainer
from .tagnames import (
    BUFFER_MODE,
    CLIENT_IP,
    COMPRESSION_MODE,
    CREATION_XML,
    DATA_LOCALE,
    ENCODING,
    IDLE_TIME_OUT,
    INPUT_STREAMS,
    LOCALE,
    MAX_IDLE_TIME_OUT,
    NAME,
    OUTPUT_STREAMS,
    OWNER,
    PROCESS_ID,
    PROFILE_LOADED,
    SHELL_ID,
    SHELL_INACTIVITY,
    SHELL_RESOURCE_URI,
    SHELL_RUN_TIME,
    STATE,
)
from .values import Text


@dataclass
class ShellValue(TagContainer):
    """The content of a Shell tag; each field is an optional text tag.

    Fields accept a Tag of the right name, a Text or a plain string.
    """

    TAGS = {
        "shell_id": (SHELL_ID, Text),
        "name": (NAME, Text),
        "resource_uri": (SHELL_RESOURCE_URI, Text),
        "owner": (OWNER, Text),
        "client_ip": (CLIENT_IP, Text),
        "process_id": (PROCESS_ID, Text),
        "idle_time_out": (IDLE_TIME_OUT, Text),
        "input_streams": (INPUT_STREAMS, Text),
        "output_streams": (OUTPUT_STREAMS, Text),
        "max_idle_time_out": (MAX_IDLE_TIME_OUT, Text),
        "locale": (LOCALE, Text),
        "data_locale": (DATA_LOCALE, Text),
        "compression_mode": (COMPRESSION_MODE, Text),
        "profile_loaded": (PROFILE_LOADED, Text),
        "encoding": (ENCODING, Text),
        "buffer_mode": (BUFFER_MODE, Text),
        "state": (STATE, Text),
        "shell_run_time": (SHELL_RUN_TIME, Text),
        "shell_inactivity": (SHELL_INACTIVITY, Text),
        "creation_xml": (CREATION_XML, Text),
    }

    shell_id: Optional[Any] = None
    name: Optional[Any] = None
    resource_uri: Optional[Any] = None
    owner: Optional[Any] = None
    client_ip: Optional[Any] = None
    process_id: Optional[Any] = None
    idle_time_out: Optional[Any] = None
    input_streams: Optional[Any] = None
    output_streams: Optional[Any] = None
    max_idle_time_out: Optional[Any] = None
    locale: Optional[Any] = None
    data_locale: Optional[Any] = None
    compression_mode: Optional[Any] = None
    profile_loaded: Optional[Any] = None
    encoding: Optional[Any] = None
    buffer_mode: Optional[Any] = None
    state: Optional[Any] = None
    shell_run_time: Optional[Any] = None
    shell_inactivity: Optional[Any] = None
    creation_xml: Optional[Any] = None