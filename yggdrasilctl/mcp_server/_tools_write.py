"""Write tools: peer management and raw admin requests."""

from __future__ import annotations

from yggdrasilctl import CliError
from yggdrasilctl.mcp_server import _core
from yggdrasilctl.mcp_server._core import (
    _call,
    _contract_error,
    _finalize_tool_result,
    _validate_command,
    _validate_params,
)


def add_peer(uri: str, interface: str | None = None) -> dict:
    """Connect to a new peer.

    Args:
        uri: Peer URI, e.g. tcp://192.168.0.1:9001 or socks://proxy:1080/peer:9001.
        interface: Optional source interface name.

    Returns:
        Dict with added / not_added lists.
    """
    if not isinstance(uri, str) or "://" not in uri or any(c.isspace() for c in uri):
        return _finalize_tool_result(_contract_error(f"[ERROR] Invalid peer URI: {uri!r}"))
    return _finalize_tool_result(_call("add_peer", uri=uri, interface=interface))


def remove_peer(port: int) -> dict:
    """Disconnect the peer on switch *port* (see get_peers for port numbers)."""
    if isinstance(port, bool) or not isinstance(port, int) or port < 0:
        return _finalize_tool_result(_contract_error(f"[ERROR] Invalid peer port: {port!r}"))
    return _finalize_tool_result(_call("remove_peer", port=port))


def admin_request(command: str, params: dict | None = None) -> dict:
    """Send any admin command with flat parameters and return the response body.

    Args:
        command: Admin command name, e.g. getPeers or addRoute.
        params: Flat mapping of parameter name to string/number/boolean.

    Returns:
        Dict with the daemon's response body (non-dict bodies under "data").
    """
    try:
        command = _validate_command(command)
        params = _validate_params(params)
        resp = _core._get_client().request(command, **params)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), type(e).__name__))
    return _finalize_tool_result(resp.response)


def register(mcp):
    """Register all write tools with the FastMCP instance."""
    mcp.tool()(add_peer)
    mcp.tool()(remove_peer)
    mcp.tool()(admin_request)
