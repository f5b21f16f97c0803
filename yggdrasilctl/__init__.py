"""yggdrasilctl — control client for a mesh network daemon's admin socket."""

from yggdrasilctl.client import AdminClient, check_response
from yggdrasilctl.config import VERSION
from yggdrasilctl.exceptions import (
    CliError,
    ConnectError,
    DecodeError,
    EncodeError,
    MalformedResponseError,
    ProtocolError,
    UsageError,
)
from yggdrasilctl.models import Request, Response, build_request

__all__ = [
    "VERSION",
    "AdminClient",
    "CliError",
    "ConnectError",
    "DecodeError",
    "EncodeError",
    "MalformedResponseError",
    "ProtocolError",
    "Request",
    "Response",
    "UsageError",
    "build_request",
    "check_response",
]
