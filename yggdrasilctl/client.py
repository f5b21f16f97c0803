"""
AdminClient — public Python API for the mesh daemon's admin socket.

Single entry point for programmatic use and the MCP server. Each call opens
a connection, performs exactly one request/response exchange and closes it.
"""

from __future__ import annotations

from typing import Any

from yggdrasilctl import config
from yggdrasilctl.exceptions import (
    ConnectError,
    DecodeError,
    MalformedResponseError,
    ProtocolError,
)
from yggdrasilctl.models import Request, Response
from yggdrasilctl.protocol import decode, encode
from yggdrasilctl.transport import connect, log_event
from yggdrasilctl.values import to_display_string


def check_response(resp: Response) -> Response:
    """Validate the envelope of a decoded response.

    Raises ProtocolError for status "error" and MalformedResponseError when
    the request echo or the response body is missing. Any other status is
    passed through; callers decide what a non-success status means.
    """
    if resp.status == "error":
        if resp.error is not None:
            raise ProtocolError(
                f"Admin socket returned an error: {to_display_string(resp.error)}"
            )
        raise ProtocolError("Admin socket returned an error but didn't specify any error text")
    if not resp.has_request:
        raise MalformedResponseError("Missing request in response (malformed response?)")
    if not resp.has_response:
        raise MalformedResponseError("Missing response body (malformed response?)")
    return resp


class AdminClient:
    """Client for one admin endpoint.

    Usage:
        client = AdminClient("unix:///var/run/yggdrasil.sock")
        peers = client.get_peers()
        resp = client.request("addPeer", uri="tcp://1.2.3.4:5678")
    """

    def __init__(self, endpoint: str | None = None, timeout: float | None = None):
        self.endpoint = endpoint or config.ENDPOINT
        self.timeout = timeout if timeout is not None else config.TIMEOUT_SECONDS

    def send(self, req: Request) -> Response:
        """Exchange *req* with the daemon and return the validated envelope."""
        payload = encode(req)
        with connect(self.endpoint, timeout=self.timeout) as sock:
            try:
                sock.sendall(payload)
            except OSError as e:
                raise ConnectError(f"[ERROR] Could not send request to admin socket: {e}") from e
            log_event(phase="request", request=req.name, bytes=len(payload))
            try:
                resp = decode(sock)
            except OSError as e:
                log_event(phase="receive_failed", error=str(e))
                raise DecodeError(f"[ERROR] Error receiving response: {e}") from e
        return check_response(resp)

    def request(self, name: str, **params: Any) -> Response:
        return self.send(Request(name=name, params=params))

    def _body(self, name: str, **params: Any) -> Any:
        return self.request(name, **params).response

    # --- read commands ---

    def list_commands(self) -> Any:
        return self._body("list")

    def get_self(self) -> Any:
        return self._body("getSelf")

    def get_peers(self) -> Any:
        return self._body("getPeers")

    def get_switch_peers(self) -> Any:
        return self._body("getSwitchPeers")

    def get_dht(self) -> Any:
        return self._body("getDHT")

    def get_sessions(self) -> Any:
        return self._body("getSessions")

    def get_tuntap(self) -> Any:
        return self._body("getTunTap")

    def get_switch_queues(self) -> Any:
        return self._body("getSwitchQueues")

    def get_routes(self) -> Any:
        return self._body("getRoutes")

    def get_source_subnets(self) -> Any:
        return self._body("getSourceSubnets")

    def get_multicast_interfaces(self) -> Any:
        return self._body("getMulticastInterfaces")

    def get_allowed_encryption_public_keys(self) -> Any:
        return self._body("getAllowedEncryptionPublicKeys")

    def get_tunnel_routing(self) -> Any:
        return self._body("getTunnelRouting")

    # --- mutations ---

    def add_peer(self, uri: str, interface: str | None = None) -> Any:
        params: dict[str, Any] = {"uri": uri}
        if interface:
            params["interface"] = interface
        return self._body("addPeer", **params)

    def remove_peer(self, port: int) -> Any:
        return self._body("removePeer", port=port)
